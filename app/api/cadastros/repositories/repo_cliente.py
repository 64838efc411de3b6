from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select

from app.api.cadastros.contracts.cliente_contract import IClienteRepository
from app.api.cadastros.models.model_cliente import ClienteModel
from app.utils.cpf import normalizar_cpf


class ClienteRepository(IClienteRepository):
    def __init__(self, db: Session):
        self.db = db

    def buscar_por_cpf(self, cpf: str) -> Optional[ClienteModel]:
        cpf = normalizar_cpf(cpf)
        if not cpf:
            return None
        return self.db.get(ClienteModel, cpf)

    def listar(self) -> List[ClienteModel]:
        stmt = select(ClienteModel).order_by(ClienteModel.nome_completo)
        return self.db.execute(stmt).scalars().all()

    def salvar(self, cliente: ClienteModel) -> ClienteModel:
        self.db.add(cliente)
        self.db.flush()
        return cliente

    def remover(self, cpf: str) -> None:
        cliente = self.buscar_por_cpf(cpf)
        if cliente is not None:
            self.db.delete(cliente)
            self.db.flush()
