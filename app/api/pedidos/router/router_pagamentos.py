from fastapi import APIRouter, Depends, Path

from app.api.pedidos.adapters.pedido_mapper import pedido_to_pagamento_status
from app.api.pedidos.schemas.schema_pedido import PagamentoStatusOut, PagamentoStatusPatchRequest
from app.api.pedidos.services.dependencies import get_pedido_service
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.shared.schemas import RespostaDados
from app.utils.logger import logger

router = APIRouter(prefix="/api/pagamentos", tags=["Pagamentos"])


@router.get("/status/{pedido_id}", response_model=RespostaDados[PagamentoStatusOut])
def obter_status_pagamento(
    pedido_id: str = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    pagamento_status = svc.obter_status_pagamento(pedido_id)
    return RespostaDados(dados=PagamentoStatusOut(pedido_id=pedido_id, pagamento_status=pagamento_status))


@router.patch("/status/{pedido_id}", response_model=RespostaDados[PagamentoStatusOut])
def atualizar_status_pagamento(
    body: PagamentoStatusPatchRequest,
    pedido_id: str = Path(..., description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    """Correção manual do status de pagamento (não notifica a produção)."""
    logger.info(f"[Pagamentos] Atualizar status - pedido={pedido_id} status={body.pagamento_status}")
    pedido = svc.atualizar_status_pagamento(pedido_id, body.pagamento_status)
    return RespostaDados(dados=pedido_to_pagamento_status(pedido))
