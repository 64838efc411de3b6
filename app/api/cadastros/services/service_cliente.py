from typing import List

from sqlalchemy.exc import IntegrityError

from app.api.cadastros.adapters.cadastros_mapper import cliente_from_create
from app.api.cadastros.contracts.cliente_contract import IClienteRepository
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.schemas.schema_cliente import ClienteCreate, ClienteUpdate
from app.core.exceptions import ErroNegocio
from app.utils.cpf import cpf_estrutura_valida
from app.utils.logger import logger


class ClienteService:
    def __init__(self, repo: IClienteRepository):
        self.repo = repo

    def _obter(self, cpf: str) -> ClienteModel:
        cliente = self.repo.buscar_por_cpf(cpf)
        if not cliente:
            raise ErroNegocio("cliente-nao-cadastrado")
        return cliente

    def adicionar_cliente(self, data: ClienteCreate) -> ClienteModel:
        if not cpf_estrutura_valida(data.cpf):
            raise ErroNegocio("cliente-cpf-invalido")
        if self.repo.buscar_por_cpf(data.cpf):
            raise ErroNegocio("cliente-cpf-cadastrado")
        try:
            cliente = self.repo.salvar(cliente_from_create(data))
        except IntegrityError as err:
            # Corrida entre dois cadastros do mesmo CPF
            raise ErroNegocio("cliente-cpf-cadastrado") from err
        logger.info(f"[Cliente] Criado cpf={cliente.cpf}")
        return cliente

    def atualizar_cliente_por_cpf(self, cpf: str, data: ClienteUpdate) -> ClienteModel:
        campos = data.model_dump(exclude_unset=True)
        if not campos:
            raise ErroNegocio("body-vazio")
        cliente = self._obter(cpf)
        for campo, valor in campos.items():
            setattr(cliente, campo, valor)
        return self.repo.salvar(cliente)

    def remover_cliente_por_cpf(self, cpf: str) -> None:
        self._obter(cpf)
        self.repo.remover(cpf)
        logger.info(f"[Cliente] Removido cpf={cpf}")

    def obter_cliente_por_cpf(self, cpf: str) -> ClienteModel:
        return self._obter(cpf)

    def obter_clientes(self) -> List[ClienteModel]:
        return self.repo.listar()
