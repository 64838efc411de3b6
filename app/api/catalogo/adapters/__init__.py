from .produto_mapper import aplicar_produto_in, produto_to_out

__all__ = [
    "aplicar_produto_in",
    "produto_to_out",
]
