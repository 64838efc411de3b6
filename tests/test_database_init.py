from sqlalchemy import inspect

from app.database.db_connection import Base, SessionLocal, engine
from app.database.domain.registry import get_registry
from app.database.init_db import inicializar_banco, verificar_banco_inicializado
from app.api.pedidos.repositories.repo_pedido_status import PedidoStatusRepository


def test_dominios_registrados_na_ordem_das_chaves_estrangeiras():
    nomes = [i.get_domain_name() for i in get_registry().get_all()]
    assert nomes == ["cadastros", "catalogo", "pedidos"]


def test_inicializar_banco_cria_tabelas_e_semeia_status():
    try:
        inicializar_banco()
        inicializar_banco()

        assert verificar_banco_inicializado()
        assert {"clientes", "categorias", "produtos", "pedido_status", "pedidos", "pedido_produto"} <= set(
            inspect(engine).get_table_names()
        )
        with SessionLocal() as session:
            assert len(PedidoStatusRepository(session).listar()) == 5
    finally:
        Base.metadata.drop_all(engine)
