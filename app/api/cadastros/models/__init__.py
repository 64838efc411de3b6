"""
Models de Cadastros
Centraliza todos os models relacionados a entidades de cadastro
"""

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.model_categoria import CategoriaModel

# Garante registro dos models relacionados (produtos e pedidos)
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.pedidos.models.model_pedido import PedidoModel

__all__ = ["ClienteModel", "CategoriaModel"]
