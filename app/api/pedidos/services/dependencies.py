from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.catalogo.repositories.repo_produto import ProdutoRepository
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.api.pedidos.repositories.repo_pedido_produto import PedidoProdutoRepository
from app.api.pedidos.repositories.repo_pedido_status import PedidoStatusRepository
from app.api.pedidos.services.service_pedido import PedidoService
from app.integrations.servicos.client import IHttpClient
from app.integrations.servicos.dependencies import get_http_client


def get_pedido_service(
    db: Session = Depends(get_db),
    http_client: IHttpClient = Depends(get_http_client),
) -> PedidoService:
    return PedidoService(
        pedido_repo=PedidoRepository(db),
        pedido_produto_repo=PedidoProdutoRepository(db),
        pedido_status_repo=PedidoStatusRepository(db),
        cliente_repo=ClienteRepository(db),
        produto_repo=ProdutoRepository(db),
        http_client=http_client,
    )
