"""
Contracts (Interfaces) de persistência do bounded context de Pedidos.

O PedidoService recebe estas interfaces no construtor; as implementações
concretas (SQLAlchemy) são ligadas em `services/dependencies.py`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.api.pedidos.models.model_pedido import PedidoModel
from app.api.pedidos.models.model_pedido_produto import PedidoProdutoModel
from app.api.pedidos.models.model_pedido_status import PedidoStatusModel


class IPedidoRepository(ABC):
    """Contrato de persistência de pedidos."""

    @abstractmethod
    def salvar(self, pedido: PedidoModel) -> PedidoModel:
        """Persiste o pedido e devolve-o com identificador preenchido."""
        raise NotImplementedError

    @abstractmethod
    def confirmar(self) -> None:
        """Efetiva as alterações pendentes (commit) antes de avisar sistemas externos."""
        raise NotImplementedError

    @abstractmethod
    def buscar_por_id(self, pedido_id: str) -> Optional[PedidoModel]:
        raise NotImplementedError

    @abstractmethod
    def listar(self) -> List[PedidoModel]:
        """Lista todos os pedidos na ordem de leitura do banco."""
        raise NotImplementedError

    @abstractmethod
    def remover_por_id(self, pedido_id: str) -> None:
        raise NotImplementedError


class IPedidoProdutoRepository(ABC):
    """Contrato de persistência das linhas de pedido."""

    @abstractmethod
    def salvar_varios(self, pedido_produtos: List[PedidoProdutoModel]) -> List[PedidoProdutoModel]:
        raise NotImplementedError

    @abstractmethod
    def buscar_por_id(self, pedido_produto_id: str) -> Optional[PedidoProdutoModel]:
        raise NotImplementedError

    @abstractmethod
    def remover_por_id(self, pedido_produto_id: str) -> None:
        raise NotImplementedError


class IPedidoStatusRepository(ABC):
    """Registro de status: única fonte das tags válidas."""

    @abstractmethod
    def buscar_por_tag(self, tag: str) -> Optional[PedidoStatusModel]:
        """Busca exata e sensível a maiúsculas/minúsculas."""
        raise NotImplementedError

    @abstractmethod
    def listar(self) -> List[PedidoStatusModel]:
        raise NotImplementedError

    @abstractmethod
    def popular_status_iniciais(self) -> None:
        """Semeia a lista fixa de status; chamadas repetidas não falham."""
        raise NotImplementedError
