import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.cadastros.contracts.categoria_contract import ICategoriaRepository
from app.api.cadastros.models.model_categoria import CategoriaModel

logger = logging.getLogger(__name__)

CATEGORIAS_INICIAIS = ["Lanches", "Bebida", "Sobremesa", "Acompanhamento"]


class CategoriaRepository(ICategoriaRepository):
    def __init__(self, db: Session):
        self.db = db

    def buscar_por_id(self, categoria_id: str) -> Optional[CategoriaModel]:
        """Busca uma categoria por ID"""
        return self.db.query(CategoriaModel).filter_by(id=categoria_id).first()

    def buscar_por_descricao(self, descricao: str) -> Optional[CategoriaModel]:
        """Busca uma categoria por descrição exata"""
        return self.db.query(CategoriaModel).filter_by(descricao=descricao).first()

    def listar(self) -> List[CategoriaModel]:
        return self.db.query(CategoriaModel).order_by(CategoriaModel.descricao).all()

    def salvar(self, categoria: CategoriaModel) -> CategoriaModel:
        self.db.add(categoria)
        self.db.flush()
        return categoria

    def remover(self, categoria_id: str) -> None:
        categoria = self.buscar_por_id(categoria_id)
        if categoria is not None:
            self.db.delete(categoria)
            self.db.flush()

    def popular_categorias_iniciais(self) -> None:
        faltantes = [d for d in CATEGORIAS_INICIAIS if not self.buscar_por_descricao(d)]
        if not faltantes:
            logger.info("  ℹ️ Categorias iniciais já existem. Pulando criação.")
            return
        try:
            self.db.add_all([CategoriaModel(descricao=d) for d in faltantes])
            self.db.commit()
            logger.info(f"  ✅ Categorias iniciais incluídas: {', '.join(faltantes)}")
        except IntegrityError:
            self.db.rollback()
            logger.info("  ℹ️ Categorias iniciais já existem (detectado por integridade).")
