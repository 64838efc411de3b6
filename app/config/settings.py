import os
from dotenv import load_dotenv
from pathlib import Path

# Carrega o .env manualmente se estiver fora do Docker
if not os.getenv("RUNNING_IN_DOCKER"):
    dotenv_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(dotenv_path=dotenv_path)

# Configuração de conexão
DB_CONFIG = {
    'database': os.getenv('DB_NAME'),
    'user': os.getenv('DB_USER'),
    'password': os.getenv('DB_PASSWORD'),
    'host': os.getenv('DB_HOST'),
    'port': int(os.getenv('DB_PORT', 5432)),
}

# SSL do banco (opcional)
DB_SSL_MODE = os.getenv('DB_SSL_MODE')  # ex.: require, verify-ca, verify-full

# URL completa (sobrescreve DB_CONFIG; usada em testes com sqlite)
DATABASE_URL = os.getenv("DATABASE_URL")

TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
CORS_ALLOW_ALL = os.getenv("CORS_ALLOW_ALL", "false").lower() in ("1", "true", "yes")

# FastAPI / App
BASE_URL = os.getenv("BASE_URL", "")
ENABLE_DOCS = os.getenv("ENABLE_DOCS", "true").lower() in ("1", "true", "yes")

# Serviços externos (pagamento e produção)
URL_BASE_PAGAMENTO = os.getenv("URL_BASE_PAGAMENTO", "")
URL_BASE_PRODUCAO = os.getenv("URL_BASE_PRODUCAO", "")
HTTP_TIMEOUT_SECONDS = int(os.getenv("HTTP_TIMEOUT_SECONDS", 10))

# Dados iniciais
POPULAR_CATEGORIAS_INICIAIS = os.getenv("POPULAR_CATEGORIAS_INICIAIS", "false").lower() in ("1", "true", "yes")
