# app/database/db_connection.py

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from ..config.settings import DB_CONFIG, DB_SSL_MODE, DATABASE_URL, TIMEZONE

# Base única para todos os models
Base = declarative_base()

# Logger básico
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def montar_connection_string() -> str:
    if DATABASE_URL:
        return DATABASE_URL

    # Validação mínima de config
    missing = [k for k in ('database', 'user', 'password', 'host', 'port') if not DB_CONFIG.get(k)]
    if missing:
        raise RuntimeError(f"Configuração do banco inválida, faltando variáveis: {', '.join(missing)}")

    # Monta a URL de conexão (com SSL opcional via query)
    ssl_query = f"?sslmode={DB_SSL_MODE}" if DB_SSL_MODE else ""
    return (
        f"postgresql://{DB_CONFIG['user']}:{DB_CONFIG['password']}"
        f"@{DB_CONFIG['host']}:{DB_CONFIG['port']}/{DB_CONFIG['database']}{ssl_query}"
    )


def criar_engine(connection_string: str):
    if connection_string.startswith("sqlite"):
        # sqlite em memória precisa compartilhar a mesma conexão entre threads
        return create_engine(
            connection_string,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        connection_string,
        pool_pre_ping=True,
        connect_args={"options": f"-c timezone={TIMEZONE}"},
    )


engine = criar_engine(montar_connection_string())

# Configura o sessionmaker
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# Dependency para FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
