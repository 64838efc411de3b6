from abc import ABC, abstractmethod
from typing import List, Optional

from app.api.cadastros.models.model_categoria import CategoriaModel


class ICategoriaRepository(ABC):
    """Contrato para acesso a categorias."""

    @abstractmethod
    def buscar_por_id(self, categoria_id: str) -> Optional[CategoriaModel]:
        raise NotImplementedError

    @abstractmethod
    def buscar_por_descricao(self, descricao: str) -> Optional[CategoriaModel]:
        raise NotImplementedError

    @abstractmethod
    def listar(self) -> List[CategoriaModel]:
        raise NotImplementedError

    @abstractmethod
    def salvar(self, categoria: CategoriaModel) -> CategoriaModel:
        raise NotImplementedError

    @abstractmethod
    def remover(self, categoria_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def popular_categorias_iniciais(self) -> None:
        """Insere as categorias base se ainda não existirem (idempotente)."""
        raise NotImplementedError
