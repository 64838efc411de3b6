import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.pedidos.contracts.pedidos_contract import IPedidoStatusRepository
from app.api.pedidos.models.model_pedido import StatusPedido
from app.api.pedidos.models.model_pedido_status import PedidoStatusModel

logger = logging.getLogger(__name__)


STATUS_INICIAIS = [
    (StatusPedido.RECEBIDO.value, "Pedido recebido."),
    (StatusPedido.EM_PREPARACAO.value, "Pedido em preparação."),
    (StatusPedido.PRONTO.value, "Pedido pronto."),
    (StatusPedido.FINALIZADO.value, "Pedido finalizado."),
    (StatusPedido.CANCELADO.value, "Pedido cancelado."),
]


class PedidoStatusRepository(IPedidoStatusRepository):
    def __init__(self, db: Session):
        self.db = db

    def buscar_por_tag(self, tag: str) -> Optional[PedidoStatusModel]:
        return self.db.query(PedidoStatusModel).filter(PedidoStatusModel.tag == tag).first()

    def listar(self) -> List[PedidoStatusModel]:
        return self.db.query(PedidoStatusModel).order_by(PedidoStatusModel.tag).all()

    def popular_status_iniciais(self) -> None:
        criados = 0
        for tag, descricao in STATUS_INICIAIS:
            if self.buscar_por_tag(tag):
                continue
            try:
                self.db.add(PedidoStatusModel(tag=tag, descricao=descricao))
                self.db.commit()
                criados += 1
            except IntegrityError:
                # Corrida entre processos semeando ao mesmo tempo
                self.db.rollback()
                logger.info(f"  ℹ️ Status '{tag}' já existe (detectado por integridade).")

        if criados:
            logger.info(f"  ✅ {criados} status de pedido criado(s).")
        else:
            logger.info("  ℹ️ Status de pedido já existem. Pulando criação.")
