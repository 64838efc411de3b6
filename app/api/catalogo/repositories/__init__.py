from .repo_produto import ProdutoRepository

__all__ = [
    "ProdutoRepository",
]
