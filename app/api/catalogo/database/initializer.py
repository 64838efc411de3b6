"""
Inicializador do domínio Catálogo (produtos).
"""
from typing import List

from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

from app.api.catalogo.models.model_produto import ProdutoModel  # noqa: F401


class CatalogoInitializer(DomainInitializer):
    def get_domain_name(self) -> str:
        return "catalogo"

    def get_table_names(self) -> List[str]:
        return ["produtos"]


_catalogo_initializer = CatalogoInitializer()
register_domain(_catalogo_initializer)
