from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import ErroNegocio, ErroConfiguracao
from app.utils.logger import logger


async def erro_negocio_handler(request: Request, exc: ErroNegocio):
    logger.info(f"[Erro Negócio] {request.method} {request.url.path} -> {exc.codigo}")
    return JSONResponse(status_code=exc.status_code, content={"erro": exc.codigo})


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"[Validação] {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"erro": "requisicao-invalida", "detalhes": jsonable_encoder(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"erro": exc.detail})


async def general_exception_handler(request: Request, exc: Exception):
    if isinstance(exc, ErroConfiguracao):
        logger.critical(f"[Configuração] {exc}", exc_info=exc)
    else:
        logger.error(f"[Erro Interno] {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"erro": "erro-interno"},
    )
