import asyncio
import sqlite3
from contextlib import closing
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.database.db_connection import Base
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.catalogo.repositories.repo_produto import ProdutoRepository
from app.api.pedidos.models.model_pedido import PedidoModel
from app.api.pedidos.repositories.repo_pedido_produto import PedidoProdutoRepository
from app.api.pedidos.repositories.repo_pedido_status import PedidoStatusRepository
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.api.pedidos.schemas.schema_pedido import WebhookPagamentoRequest
from app.api.pedidos.services.service_pedido import PedidoService
from app.integrations.servicos.client import IHttpClient


class ProducaoQueConsultaOBanco(IHttpClient):
    """Lê o pedido por uma conexão própria no momento em que é avisado."""

    def __init__(self, caminho: str):
        self.caminho = caminho
        self.pagamento_visto = None

    async def executar_chamada(self, api, method, path, body=None):
        with closing(sqlite3.connect(self.caminho)) as conn:
            linha = conn.execute(
                "SELECT pagamento_status FROM pedidos WHERE id = ?", (body["pedidoId"],)
            ).fetchone()
        self.pagamento_visto = linha[0]


@pytest.fixture
def sessao_arquivo(tmp_path):
    caminho = str(tmp_path / "lanchonete.db")
    engine = create_engine(f"sqlite:///{caminho}")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield caminho, session
    finally:
        session.close()
        engine.dispose()


@pytest.mark.parametrize("aprovado, esperado", [(True, "pedido_aprovado"), (False, "pedido_nao_aprovado")])
def test_producao_ve_pagamento_gravado_ao_ser_notificada(sessao_arquivo, aprovado, esperado):
    caminho, session = sessao_arquivo
    repo_status = PedidoStatusRepository(session)
    repo_status.popular_status_iniciais()
    cliente = ClienteRepository(session).salvar(ClienteModel(cpf="12345678901", nome_completo="Fulano"))
    pedido = PedidoRepository(session).salvar(
        PedidoModel(cliente=cliente, status=repo_status.buscar_por_tag("pedido_recebido"), valor_total=Decimal("0"))
    )
    session.commit()

    producao = ProducaoQueConsultaOBanco(caminho)
    servico = PedidoService(
        pedido_repo=PedidoRepository(session),
        pedido_produto_repo=PedidoProdutoRepository(session),
        pedido_status_repo=repo_status,
        cliente_repo=ClienteRepository(session),
        produto_repo=ProdutoRepository(session),
        http_client=producao,
    )

    asyncio.run(servico.webhook_confirmacao_pagamento(WebhookPagamentoRequest(id=pedido.id, aprovado=aprovado)))

    assert producao.pagamento_visto == esperado
