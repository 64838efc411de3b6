from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.cadastros.repositories.repo_categorias import CategoriaRepository
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.services.service_categoria import CategoriaService
from app.api.cadastros.services.service_cliente import ClienteService
from app.api.catalogo.repositories.repo_produto import ProdutoRepository


def get_cliente_service(db: Session = Depends(get_db)) -> ClienteService:
    return ClienteService(ClienteRepository(db))


def get_categoria_service(db: Session = Depends(get_db)) -> CategoriaService:
    return CategoriaService(CategoriaRepository(db), ProdutoRepository(db))
