# app/api/pedidos/models/model_pedido.py
import enum
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, Index
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class StatusPedido(str, enum.Enum):
    """Tags de status de produção usadas pelo fluxo de pedidos.

    - pedido_recebido: pedido registrado, aguardando a cozinha
    - pedido_em_preparacao: em produção
    - pedido_pronto: pronto para retirada
    - pedido_finalizado: entregue ao cliente
    - pedido_cancelado: cancelado
    """
    RECEBIDO = "pedido_recebido"
    EM_PREPARACAO = "pedido_em_preparacao"
    PRONTO = "pedido_pronto"
    FINALIZADO = "pedido_finalizado"
    CANCELADO = "pedido_cancelado"


class StatusPagamento(str, enum.Enum):
    """Visão do gateway de pagamento sobre o pedido (eixo independente do status)."""
    PENDENTE = "pagamento_pendente"
    APROVADO = "pedido_aprovado"
    NAO_APROVADO = "pedido_nao_aprovado"


class PedidoModel(Base):
    __tablename__ = "pedidos"
    __table_args__ = (
        Index("idx_pedidos_cliente", "cliente_cpf"),
        Index("idx_pedidos_status", "status_id"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    cliente_cpf = Column(String(11), ForeignKey("clientes.cpf", ondelete="CASCADE"), nullable=False)
    cliente = relationship("ClienteModel", back_populates="pedidos", lazy="joined")

    status_id = Column(String(36), ForeignKey("pedido_status.id", ondelete="RESTRICT"), nullable=False)
    status = relationship("PedidoStatusModel", lazy="joined")

    # Calculado na criação; não é recalculado em edições posteriores
    valor_total = Column(Numeric(18, 2), nullable=False, default=0)

    # Texto livre vindo do webhook de pagamento
    pagamento_status = Column(String(50), nullable=False, default=StatusPagamento.PENDENTE.value)

    data_cadastro = Column(DateTime, default=now_trimmed, nullable=False)
    data_atualizacao = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    pedido_produtos = relationship(
        "PedidoProdutoModel",
        back_populates="pedido",
        cascade="all, delete-orphan",
        order_by="PedidoProdutoModel.posicao",
    )

    @property
    def status_tag(self) -> str | None:
        return self.status.tag if self.status else None
