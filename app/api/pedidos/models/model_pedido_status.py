import uuid

from sqlalchemy import Column, String
from app.database.db_connection import Base


class PedidoStatusModel(Base):
    """Vocabulário fechado de status de produção (semeado no bootstrap)."""
    __tablename__ = "pedido_status"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    tag = Column(String(50), nullable=False, unique=True)
    descricao = Column(String(255), nullable=False)
