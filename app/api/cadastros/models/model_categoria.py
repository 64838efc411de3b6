import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class CategoriaModel(Base):
    __tablename__ = "categorias"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    descricao = Column(String(100), nullable=False, unique=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    produtos = relationship("ProdutoModel", back_populates="categoria", passive_deletes="all")
