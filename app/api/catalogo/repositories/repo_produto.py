from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from app.api.catalogo.contracts.produto_contract import IProdutoRepository
from app.api.catalogo.models.model_produto import ProdutoModel


class ProdutoRepository(IProdutoRepository):
    def __init__(self, db: Session):
        self.db = db

    def buscar_por_id(self, produto_id: str) -> Optional[ProdutoModel]:
        return self.db.query(ProdutoModel).filter(ProdutoModel.id == produto_id).first()

    def buscar_por_ids(self, produto_ids: Sequence[str]) -> List[ProdutoModel]:
        ids = list(set(produto_ids))
        if not ids:
            return []
        return self.db.query(ProdutoModel).filter(ProdutoModel.id.in_(ids)).all()

    def buscar_por_categoria(self, categoria_id: str) -> List[ProdutoModel]:
        return (
            self.db.query(ProdutoModel)
            .filter(ProdutoModel.categoria_id == categoria_id)
            .order_by(ProdutoModel.nome)
            .all()
        )

    def listar(self) -> List[ProdutoModel]:
        return self.db.query(ProdutoModel).order_by(ProdutoModel.nome).all()

    def salvar(self, produto: ProdutoModel) -> ProdutoModel:
        self.db.add(produto)
        self.db.flush()
        return produto

    def remover(self, produto_id: str) -> None:
        produto = self.buscar_por_id(produto_id)
        if produto is not None:
            self.db.delete(produto)
            self.db.flush()
