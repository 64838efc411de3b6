# app/api/cadastros/router/router.py

from fastapi import APIRouter

from app.api.cadastros.router.router_categorias import router as router_categorias
from app.api.cadastros.router.router_clientes import router as router_clientes

api_cadastros = APIRouter()

api_cadastros.include_router(router_clientes)
api_cadastros.include_router(router_categorias)
