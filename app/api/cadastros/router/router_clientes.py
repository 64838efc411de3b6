from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.cadastros.adapters.cadastros_mapper import cliente_to_out
from app.api.cadastros.schemas.schema_cliente import ClienteCreate, ClienteOut, ClienteUpdate
from app.api.cadastros.services.dependencies import get_cliente_service
from app.api.cadastros.services.service_cliente import ClienteService
from app.api.shared.schemas import RespostaDados
from app.utils.logger import logger

router = APIRouter(prefix="/api/clientes", tags=["Cadastros - Clientes"])


@router.post("", response_model=RespostaDados[ClienteOut], status_code=status.HTTP_201_CREATED)
def adicionar_cliente(
    body: ClienteCreate,
    svc: ClienteService = Depends(get_cliente_service),
):
    logger.info(f"[Clientes] Adicionar - cpf={body.cpf}")
    return RespostaDados(dados=cliente_to_out(svc.adicionar_cliente(body)))


@router.get("", response_model=RespostaDados[List[ClienteOut]])
def obter_clientes(svc: ClienteService = Depends(get_cliente_service)):
    return RespostaDados(dados=[cliente_to_out(c) for c in svc.obter_clientes()])


@router.get("/{cpf}", response_model=RespostaDados[ClienteOut])
def obter_cliente_por_cpf(
    cpf: str = Path(..., description="CPF do cliente (com ou sem máscara)"),
    svc: ClienteService = Depends(get_cliente_service),
):
    return RespostaDados(dados=cliente_to_out(svc.obter_cliente_por_cpf(cpf)))


@router.put("/{cpf}", response_model=RespostaDados[ClienteOut])
def atualizar_cliente_por_cpf(
    body: ClienteUpdate,
    cpf: str = Path(..., description="CPF do cliente"),
    svc: ClienteService = Depends(get_cliente_service),
):
    logger.info(f"[Clientes] Atualizar - cpf={cpf}")
    return RespostaDados(dados=cliente_to_out(svc.atualizar_cliente_por_cpf(cpf, body)))


@router.delete("/{cpf}", status_code=status.HTTP_204_NO_CONTENT)
def remover_cliente_por_cpf(
    cpf: str = Path(..., description="CPF do cliente"),
    svc: ClienteService = Depends(get_cliente_service),
):
    logger.info(f"[Clientes] Remover - cpf={cpf}")
    svc.remover_cliente_por_cpf(cpf)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
