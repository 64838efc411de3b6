from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from app.api.catalogo.models.model_produto import ProdutoModel


class IProdutoRepository(ABC):
    """Contrato para acesso a produtos do contexto Catalogo."""

    @abstractmethod
    def buscar_por_id(self, produto_id: str) -> Optional[ProdutoModel]:
        raise NotImplementedError

    @abstractmethod
    def buscar_por_ids(self, produto_ids: Sequence[str]) -> List[ProdutoModel]:
        """Busca em lote. Ids inexistentes são simplesmente omitidos do resultado."""
        raise NotImplementedError

    @abstractmethod
    def buscar_por_categoria(self, categoria_id: str) -> List[ProdutoModel]:
        raise NotImplementedError

    @abstractmethod
    def listar(self) -> List[ProdutoModel]:
        raise NotImplementedError

    @abstractmethod
    def salvar(self, produto: ProdutoModel) -> ProdutoModel:
        raise NotImplementedError

    @abstractmethod
    def remover(self, produto_id: str) -> None:
        raise NotImplementedError
