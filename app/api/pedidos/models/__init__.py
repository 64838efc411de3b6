"""
Models do bounded context de Pedidos.
"""

# Models referenciados pelos relacionamentos precisam estar registrados no SQLAlchemy
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.catalogo.models.model_produto import ProdutoModel

from .model_pedido_status import PedidoStatusModel
from .model_pedido import PedidoModel, StatusPedido, StatusPagamento
from .model_pedido_produto import PedidoProdutoModel

__all__ = [
    "PedidoModel",
    "PedidoProdutoModel",
    "PedidoStatusModel",
    "StatusPedido",
    "StatusPagamento",
]
