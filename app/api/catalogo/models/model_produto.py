import uuid
from decimal import Decimal

from pydantic import ConfigDict
from sqlalchemy import Column, String, DateTime, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class ProdutoModel(Base):
    __tablename__ = "produtos"
    __table_args__ = (
        CheckConstraint("preco >= 0", name="chk_produto_preco_nao_negativo"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    nome = Column(String(120), nullable=False)
    descricao = Column(String(255), nullable=False)
    preco = Column(Numeric(18, 2), nullable=False)

    categoria_id = Column(String(36), ForeignKey("categorias.id", ondelete="RESTRICT"), nullable=False)
    categoria = relationship("CategoriaModel", back_populates="produtos", lazy="joined")

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    model_config = ConfigDict(from_attributes=True)

    def validar(self) -> bool:
        """
        Garante que o produto está completo antes de persistir.

        Chamado pelo service depois de resolver a categoria; uma falha aqui
        é erro de uso do código (ValueError), não erro de negócio.
        """
        if not self.nome or not self.descricao:
            raise ValueError("Produto precisa de nome e descrição")
        if self.preco is None or Decimal(str(self.preco)) <= 0:
            raise ValueError("Produto precisa de preço positivo")
        if self.categoria is None and not self.categoria_id:
            raise ValueError("Produto precisa de categoria")
        return True
