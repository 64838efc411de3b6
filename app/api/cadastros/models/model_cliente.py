from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship, validates
from pydantic import ConfigDict

from app.database.db_connection import Base
from app.utils.cpf import normalizar_cpf
from app.utils.database_utils import now_trimmed


class ClienteModel(Base):
    __tablename__ = "clientes"

    cpf = Column(String(11), primary_key=True)  # identificador de negócio, imutável
    nome_completo = Column(String(150), nullable=False)
    email = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    pedidos = relationship("PedidoModel", back_populates="cliente", cascade="all, delete-orphan")

    model_config = ConfigDict(from_attributes=True)

    @validates("cpf")
    def _normalizar_cpf(self, key, value):
        if self.cpf is not None and normalizar_cpf(value) != self.cpf:
            raise ValueError("CPF do cliente é imutável")
        return normalizar_cpf(value)
