from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.pedidos.contracts.pedidos_contract import IPedidoProdutoRepository
from app.api.pedidos.models.model_pedido_produto import PedidoProdutoModel


class PedidoProdutoRepository(IPedidoProdutoRepository):
    def __init__(self, db: Session):
        self.db = db

    def salvar_varios(self, pedido_produtos: List[PedidoProdutoModel]) -> List[PedidoProdutoModel]:
        if not pedido_produtos:
            return []
        self.db.add_all(pedido_produtos)
        self.db.flush()
        return pedido_produtos

    def buscar_por_id(self, pedido_produto_id: str) -> Optional[PedidoProdutoModel]:
        return self.db.get(PedidoProdutoModel, pedido_produto_id)

    def remover_por_id(self, pedido_produto_id: str) -> None:
        obj = self.db.get(PedidoProdutoModel, pedido_produto_id)
        if obj is not None:
            self.db.delete(obj)
            self.db.flush()
