from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.cadastros.repositories.repo_categorias import CategoriaRepository
from app.api.catalogo.repositories.repo_produto import ProdutoRepository
from app.api.catalogo.services.service_produto import ProdutoService


def get_produto_service(db: Session = Depends(get_db)) -> ProdutoService:
    return ProdutoService(ProdutoRepository(db), CategoriaRepository(db))
