"""
Inicializador do domínio Pedidos.

Além das tabelas, semeia o registro de status de pedido. Sem essa carga
nenhum pedido pode ser criado (o status inicial "pedido_recebido" é obrigatório).
"""
import logging
from typing import List

from app.database.db_connection import SessionLocal
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

from app.api.pedidos.models import PedidoModel, PedidoProdutoModel, PedidoStatusModel  # noqa: F401
from app.api.pedidos.models.model_pedido import StatusPedido
from app.api.pedidos.repositories.repo_pedido_status import PedidoStatusRepository

logger = logging.getLogger(__name__)


class PedidosInitializer(DomainInitializer):
    """Inicializador do domínio Pedidos."""

    def get_domain_name(self) -> str:
        return "pedidos"

    def get_table_names(self) -> List[str]:
        return ["pedido_status", "pedidos", "pedido_produto"]

    def initialize_data(self) -> None:
        with SessionLocal() as session:
            PedidoStatusRepository(session).popular_status_iniciais()

    def validate(self) -> bool:
        with SessionLocal() as session:
            return PedidoStatusRepository(session).buscar_por_tag(StatusPedido.RECEBIDO.value) is not None


_pedidos_initializer = PedidosInitializer()
register_domain(_pedidos_initializer)
