from fastapi import APIRouter

from app.api.catalogo.router.router_produtos import router as router_produtos

api_catalogo = APIRouter()

api_catalogo.include_router(router_produtos)
