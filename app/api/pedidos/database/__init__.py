from .initializer import PedidosInitializer

__all__ = ["PedidosInitializer"]
