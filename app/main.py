from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import ErroNegocio
from app.core.exception_handlers import (
    erro_negocio_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from app.utils.logger import logger
from app.config.settings import CORS_ORIGINS, CORS_ALLOW_ALL, BASE_URL, ENABLE_DOCS

# ───────────────────────────
# Importar modelos antes das rotas
# Registra os domínios (e seus models) no SQLAlchemy antes de qualquer query
# ───────────────────────────
from app.database import init_db  # noqa: F401

from app.api.cadastros.router.router import api_cadastros
from app.api.catalogo.router.router import api_catalogo
from app.api.pedidos.router.router import api_pedidos
from app.integrations.servicos.dependencies import fechar_http_client

# ──────────────────────────
# Instância FastAPI
# ──────────────────────────
app = FastAPI(
    title="API Lanchonete",
    version="1.0.0",
    description="Pedidos, fila da cozinha e confirmação de pagamento do autoatendimento",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=([{"url": BASE_URL, "description": "Base URL do ambiente"}] if BASE_URL else None),
    redirect_slashes=False  # Evita redirecionamento 307 quando URL não termina com /
)

# ───────────────────────────
# Exception Handlers Globais
# ───────────────────────────
app.add_exception_handler(ErroNegocio, erro_negocio_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# CORS
# ───────────────────────────
# - CORS_ALLOW_ALL=true => allow_origins=["*"], allow_credentials=False
# - Caso contrário => allow_origins=CORS_ORIGINS (se vazio cai para ["*"]), credenciais só com origens explícitas
if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ───────────────────────────
# Startup / Shutdown
# ───────────────────────────
@app.on_event("startup")
async def startup():
    from app.database.init_db import inicializar_banco

    logger.info("Iniciando API e banco de dados...")
    inicializar_banco()
    logger.info("API iniciada com sucesso.")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Encerrando API...")
    try:
        await fechar_http_client()
    except Exception as e:
        logger.error(f"Erro ao encerrar cliente HTTP: {e}")
    logger.info("API encerrada.")


# ───────────────────────────
# Rotas
# ───────────────────────────
@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(api_cadastros)
app.include_router(api_catalogo)
app.include_router(api_pedidos)
