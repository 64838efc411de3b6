"""
Inicializador do domínio Cadastros.
Responsável por criar as tabelas de clientes e categorias e, opcionalmente,
as categorias base do cardápio.
"""
import logging
from typing import List

from app.config.settings import POPULAR_CATEGORIAS_INICIAIS
from app.database.db_connection import SessionLocal
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

# Models precisam estar no metadata antes da criação das tabelas
from app.api.cadastros.models.model_cliente import ClienteModel  # noqa: F401
from app.api.cadastros.models.model_categoria import CategoriaModel  # noqa: F401
from app.api.cadastros.repositories.repo_categorias import CategoriaRepository

logger = logging.getLogger(__name__)


class CadastrosInitializer(DomainInitializer):
    """Inicializador do domínio Cadastros."""

    def get_domain_name(self) -> str:
        return "cadastros"

    def get_table_names(self) -> List[str]:
        return ["clientes", "categorias"]

    def initialize_data(self) -> None:
        if not POPULAR_CATEGORIAS_INICIAIS:
            logger.info("  ℹ️ Carga de categorias iniciais desabilitada.")
            return
        with SessionLocal() as session:
            CategoriaRepository(session).popular_categorias_iniciais()


_cadastros_initializer = CadastrosInitializer()
register_domain(_cadastros_initializer)
