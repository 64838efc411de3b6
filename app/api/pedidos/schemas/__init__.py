from app.api.pedidos.schemas.schema_pedido import (
    PedidoProdutoRequest,
    PedidoCreateRequest,
    PedidoStatusPatchRequest,
    WebhookPagamentoRequest,
    PagamentoStatusPatchRequest,
    PedidoOut,
    PedidoProdutoOut,
    PedidoStatusOut,
    PedidoStatusTagOut,
    PagamentoStatusOut,
)

__all__ = [
    "PedidoProdutoRequest",
    "PedidoCreateRequest",
    "PedidoStatusPatchRequest",
    "WebhookPagamentoRequest",
    "PagamentoStatusPatchRequest",
    "PedidoOut",
    "PedidoProdutoOut",
    "PedidoStatusOut",
    "PedidoStatusTagOut",
    "PagamentoStatusOut",
]
