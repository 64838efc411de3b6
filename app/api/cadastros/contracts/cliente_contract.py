"""
Contract (Interface) para acesso a clientes.
O motor de pedidos depende apenas deste contrato, não do repositório concreto.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.api.cadastros.models.model_cliente import ClienteModel


class IClienteRepository(ABC):

    @abstractmethod
    def buscar_por_cpf(self, cpf: str) -> Optional[ClienteModel]:
        raise NotImplementedError

    @abstractmethod
    def listar(self) -> List[ClienteModel]:
        raise NotImplementedError

    @abstractmethod
    def salvar(self, cliente: ClienteModel) -> ClienteModel:
        raise NotImplementedError

    @abstractmethod
    def remover(self, cpf: str) -> None:
        raise NotImplementedError
