from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.cadastros.adapters.cadastros_mapper import categoria_to_out
from app.api.cadastros.schemas.schema_categoria import CategoriaIn, CategoriaOut
from app.api.cadastros.services.dependencies import get_categoria_service
from app.api.cadastros.services.service_categoria import CategoriaService
from app.api.shared.schemas import RespostaDados
from app.utils.logger import logger

router = APIRouter(prefix="/api/categorias", tags=["Cadastros - Categorias"])


@router.post("", response_model=RespostaDados[CategoriaOut], status_code=status.HTTP_201_CREATED)
def adicionar_categoria(
    body: CategoriaIn,
    svc: CategoriaService = Depends(get_categoria_service),
):
    logger.info(f"[Categorias] Adicionar - descricao={body.descricao}")
    return RespostaDados(dados=categoria_to_out(svc.adicionar_categoria(body)))


@router.get("", response_model=RespostaDados[List[CategoriaOut]])
def obter_categorias(svc: CategoriaService = Depends(get_categoria_service)):
    return RespostaDados(dados=[categoria_to_out(c) for c in svc.obter_categorias()])


@router.get("/{categoria_id}", response_model=RespostaDados[CategoriaOut])
def obter_categoria_por_id(
    categoria_id: str = Path(..., description="ID da categoria"),
    svc: CategoriaService = Depends(get_categoria_service),
):
    return RespostaDados(dados=categoria_to_out(svc.obter_categoria_por_id(categoria_id)))


@router.put("/{categoria_id}", response_model=RespostaDados[CategoriaOut])
def atualizar_categoria_por_id(
    body: CategoriaIn,
    categoria_id: str = Path(..., description="ID da categoria"),
    svc: CategoriaService = Depends(get_categoria_service),
):
    logger.info(f"[Categorias] Atualizar - id={categoria_id}")
    return RespostaDados(dados=categoria_to_out(svc.atualizar_categoria_por_id(categoria_id, body)))


@router.delete("/{categoria_id}", status_code=status.HTTP_204_NO_CONTENT)
def remover_categoria_por_id(
    categoria_id: str = Path(..., description="ID da categoria"),
    svc: CategoriaService = Depends(get_categoria_service),
):
    logger.info(f"[Categorias] Remover - id={categoria_id}")
    svc.remover_categoria_por_id(categoria_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
