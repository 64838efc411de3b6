from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.catalogo.adapters.produto_mapper import produto_to_out
from app.api.catalogo.schemas.schema_produto import ProdutoIn, ProdutoOut
from app.api.catalogo.services.dependencies import get_produto_service
from app.api.catalogo.services.service_produto import ProdutoService
from app.api.shared.schemas import RespostaDados
from app.utils.logger import logger

router = APIRouter(prefix="/api/produtos", tags=["Catálogo - Produtos"])


@router.post("", response_model=RespostaDados[ProdutoOut], status_code=status.HTTP_201_CREATED)
def adicionar_produto(
    body: ProdutoIn,
    svc: ProdutoService = Depends(get_produto_service),
):
    logger.info(f"[Produtos] Adicionar - nome={body.nome} categoria={body.categoria_id}")
    return RespostaDados(dados=produto_to_out(svc.adicionar_produto(body)))


@router.get("", response_model=RespostaDados[List[ProdutoOut]])
def obter_produtos(svc: ProdutoService = Depends(get_produto_service)):
    return RespostaDados(dados=[produto_to_out(p) for p in svc.obter_produtos()])


@router.get("/categoria/{categoria_id}", response_model=RespostaDados[List[ProdutoOut]])
def obter_produtos_por_categoria(
    categoria_id: str = Path(..., description="ID da categoria"),
    svc: ProdutoService = Depends(get_produto_service),
):
    produtos = svc.obter_produtos_por_categoria(categoria_id)
    return RespostaDados(dados=[produto_to_out(p) for p in produtos])


@router.get("/{produto_id}", response_model=RespostaDados[ProdutoOut])
def obter_produto_por_id(
    produto_id: str = Path(..., description="ID do produto"),
    svc: ProdutoService = Depends(get_produto_service),
):
    return RespostaDados(dados=produto_to_out(svc.obter_produto_por_id(produto_id)))


@router.put("/{produto_id}", response_model=RespostaDados[ProdutoOut])
def atualizar_produto_por_id(
    body: ProdutoIn,
    produto_id: str = Path(..., description="ID do produto"),
    svc: ProdutoService = Depends(get_produto_service),
):
    logger.info(f"[Produtos] Atualizar - id={produto_id}")
    return RespostaDados(dados=produto_to_out(svc.atualizar_produto_por_id(produto_id, body)))


@router.delete("/{produto_id}", status_code=status.HTTP_204_NO_CONTENT)
def remover_produto_por_id(
    produto_id: str = Path(..., description="ID do produto"),
    svc: ProdutoService = Depends(get_produto_service),
):
    logger.info(f"[Produtos] Remover - id={produto_id}")
    svc.remover_produto_por_id(produto_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
