from app.api.cadastros.models.model_categoria import CategoriaModel

from .model_produto import ProdutoModel

__all__ = [
    "ProdutoModel",
]
