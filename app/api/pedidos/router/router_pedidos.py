from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.pedidos.adapters.pedido_mapper import pedido_to_out, pedidos_to_out
from app.api.pedidos.schemas.schema_pedido import (
    PedidoCreateRequest,
    PedidoOut,
    PedidoStatusPatchRequest,
    PedidoStatusTagOut,
    WebhookPagamentoRequest,
)
from app.api.pedidos.services.dependencies import get_pedido_service
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.shared.schemas import RespostaDados
from app.utils.logger import logger

router = APIRouter(prefix="/api/pedidos", tags=["Pedidos"])


@router.post("", response_model=RespostaDados[PedidoOut], status_code=status.HTTP_201_CREATED)
def adicionar_pedido(
    body: PedidoCreateRequest,
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(f"[Pedidos] Adicionar - cliente={body.cliente_cpf} itens={len(body.pedido_produtos)}")
    pedido = svc.adicionar_pedido(body)
    return RespostaDados(dados=pedido_to_out(pedido))


@router.get("", response_model=RespostaDados[List[PedidoOut]])
def obter_pedidos(svc: PedidoService = Depends(get_pedido_service)):
    return RespostaDados(dados=pedidos_to_out(svc.obter_pedidos()))


@router.get("/fila", response_model=RespostaDados[List[PedidoOut]])
def obter_fila_pedidos(svc: PedidoService = Depends(get_pedido_service)):
    """Pedidos na ordem de produção: prontos, em preparação, recebidos, demais."""
    return RespostaDados(dados=pedidos_to_out(svc.obter_fila_pedidos()))


@router.post("/webhook", response_model=RespostaDados[PedidoOut])
async def webhook_confirmacao_pagamento(
    body: WebhookPagamentoRequest,
    svc: PedidoService = Depends(get_pedido_service),
):
    """
    Recebe a confirmação do gateway de pagamento.

    Atualiza apenas o status de pagamento; o status de produção não muda.
    A produção é notificada em seguida, sem bloquear a resposta em caso de falha.
    """
    logger.info(f"[Pedidos] Webhook pagamento - pedido={body.id} aprovado={body.aprovado}")
    pedido = await svc.webhook_confirmacao_pagamento(body)
    return RespostaDados(dados=pedido_to_out(pedido))


@router.get("/{pedido_id}", response_model=RespostaDados[PedidoOut])
def obter_pedido_por_id(
    pedido_id: str = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    return RespostaDados(dados=pedido_to_out(svc.obter_pedido_por_id(pedido_id)))


@router.get("/{pedido_id}/status", response_model=RespostaDados[PedidoStatusTagOut])
def obter_status_pedido_por_id(
    pedido_id: str = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    tag = svc.obter_status_pedido_por_id(pedido_id)
    return RespostaDados(dados=PedidoStatusTagOut(id=pedido_id, status_tag=tag))


@router.patch("/{pedido_id}/status", response_model=RespostaDados[PedidoOut])
def atualizar_pedido_status_por_id(
    body: PedidoStatusPatchRequest,
    pedido_id: str = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(f"[Pedidos] Atualizar status - pedido={pedido_id} status={body.status_tag}")
    pedido = svc.atualizar_pedido_status_por_id(pedido_id, body.status_tag)
    return RespostaDados(dados=pedido_to_out(pedido))


@router.delete("/{pedido_id}", status_code=status.HTTP_204_NO_CONTENT)
def remover_pedido_por_id(
    pedido_id: str = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    svc.remover_pedido_por_id(pedido_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
