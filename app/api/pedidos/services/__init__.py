"""
Services do bounded context de Pedidos.
"""

from .service_pedido import PedidoService

__all__ = [
    "PedidoService",
]
