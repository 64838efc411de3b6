from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from app.api.pedidos.contracts.pedidos_contract import IPedidoRepository
from app.api.pedidos.models.model_pedido import PedidoModel
from app.api.pedidos.models.model_pedido_produto import PedidoProdutoModel


class PedidoRepository(IPedidoRepository):
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(PedidoModel).options(
            joinedload(PedidoModel.cliente),
            joinedload(PedidoModel.status),
            selectinload(PedidoModel.pedido_produtos).joinedload(PedidoProdutoModel.produto),
        )

    def salvar(self, pedido: PedidoModel) -> PedidoModel:
        self.db.add(pedido)
        self.db.flush()
        return pedido

    def confirmar(self) -> None:
        self.db.commit()

    def buscar_por_id(self, pedido_id: str) -> Optional[PedidoModel]:
        return self._query().filter(PedidoModel.id == pedido_id).first()

    def listar(self) -> List[PedidoModel]:
        # TODO: levar a ordenação da fila para a query quando o volume crescer
        return self._query().order_by(PedidoModel.data_cadastro, PedidoModel.id).all()

    def remover_por_id(self, pedido_id: str) -> None:
        pedido = self.db.get(PedidoModel, pedido_id)
        if pedido is not None:
            self.db.delete(pedido)
            self.db.flush()
