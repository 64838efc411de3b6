import os

# Banco sqlite em memória para os testes (precisa estar definido antes de importar o app)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["POPULAR_CATEGORIAS_INICIAIS"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database.db_connection import Base, SessionLocal, engine
from app.api.pedidos.repositories.repo_pedido_status import PedidoStatusRepository
from app.integrations.servicos.client import IHttpClient
from app.integrations.servicos.dependencies import get_http_client


class FakeHttpClient(IHttpClient):
    """Registra as chamadas feitas aos serviços externos; opcionalmente falha."""

    def __init__(self, erro: Exception | None = None):
        self.chamadas = []
        self.erro = erro

    async def executar_chamada(self, api, method, path, body=None):
        self.chamadas.append((api, method, path, body))
        if self.erro is not None:
            raise self.erro
        return None


@pytest.fixture
def banco():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db_session(banco):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def status_semeados(banco):
    with SessionLocal() as session:
        PedidoStatusRepository(session).popular_status_iniciais()


@pytest.fixture
def http_client_fake():
    return FakeHttpClient()


@pytest.fixture
def client(status_semeados, http_client_fake):
    app.dependency_overrides[get_http_client] = lambda: http_client_fake
    yield TestClient(app)
    app.dependency_overrides.clear()
