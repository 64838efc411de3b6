# app/api/pedidos/models/model_pedido_produto.py
import uuid

from sqlalchemy import Column, Integer, String, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from app.database.db_connection import Base


class PedidoProdutoModel(Base):
    """Linha do pedido: um produto e sua quantidade. Só existe junto do pedido."""
    __tablename__ = "pedido_produto"
    __table_args__ = (
        Index("idx_pedido_produto_pedido", "pedido_id"),
        CheckConstraint("quantidade > 0", name="chk_pedido_produto_quantidade_positiva"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    quantidade = Column(Integer, nullable=False)

    # ordem de entrada da linha (exibição)
    posicao = Column(Integer, nullable=False, default=0)

    pedido_id = Column(String(36), ForeignKey("pedidos.id", ondelete="CASCADE"), nullable=False)
    pedido = relationship("PedidoModel", back_populates="pedido_produtos")

    produto_id = Column(String(36), ForeignKey("produtos.id", ondelete="CASCADE"), nullable=False)
    produto = relationship("ProdutoModel", lazy="joined")
