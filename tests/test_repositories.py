from decimal import Decimal

from app.api.cadastros.models.model_categoria import CategoriaModel
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.repositories.repo_categorias import CATEGORIAS_INICIAIS, CategoriaRepository
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.catalogo.repositories.repo_produto import ProdutoRepository
from app.api.pedidos.models.model_pedido import PedidoModel
from app.api.pedidos.models.model_pedido_produto import PedidoProdutoModel
from app.api.pedidos.repositories.repo_pedido_produto import PedidoProdutoRepository
from app.api.pedidos.repositories.repo_pedido_status import STATUS_INICIAIS, PedidoStatusRepository
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository


def test_popular_status_iniciais_e_idempotente(db_session):
    repo = PedidoStatusRepository(db_session)

    repo.popular_status_iniciais()
    repo.popular_status_iniciais()

    tags = sorted(s.tag for s in repo.listar())
    assert tags == sorted(tag for tag, _ in STATUS_INICIAIS)
    assert repo.buscar_por_tag("pedido_recebido").descricao == "Pedido recebido."
    assert repo.buscar_por_tag("pedido_voando") is None
    assert repo.buscar_por_tag("Pedido_Recebido") is None


def test_popular_categorias_iniciais_e_idempotente(db_session):
    repo = CategoriaRepository(db_session)

    repo.popular_categorias_iniciais()
    repo.popular_categorias_iniciais()

    assert sorted(c.descricao for c in repo.listar()) == sorted(CATEGORIAS_INICIAIS)


def test_cliente_busca_por_cpf_com_mascara(db_session):
    repo = ClienteRepository(db_session)
    repo.salvar(ClienteModel(cpf="123.456.789-01", nome_completo="Fulano"))

    assert repo.buscar_por_cpf("12345678901").nome_completo == "Fulano"
    assert repo.buscar_por_cpf("123.456.789-01") is not None
    assert repo.buscar_por_cpf("") is None


def _montar_pedido(db_session) -> PedidoModel:
    PedidoStatusRepository(db_session).popular_status_iniciais()
    status = PedidoStatusRepository(db_session).buscar_por_tag("pedido_recebido")
    cliente = ClienteRepository(db_session).salvar(ClienteModel(cpf="12345678901", nome_completo="Fulano"))
    categoria = CategoriaRepository(db_session).salvar(CategoriaModel(descricao="Lanches"))
    produto = ProdutoRepository(db_session).salvar(
        ProdutoModel(nome="X-Burger", descricao="Pão, carne e queijo", preco=Decimal("10.00"), categoria=categoria)
    )

    pedido = PedidoRepository(db_session).salvar(
        PedidoModel(cliente=cliente, status=status, valor_total=Decimal("20.00"))
    )
    linha = PedidoProdutoModel(pedido=pedido, produto=produto, quantidade=2)
    PedidoProdutoRepository(db_session).salvar_varios([linha])
    return pedido


def test_pedido_salvo_com_linhas_e_pagamento_pendente(db_session):
    pedido = _montar_pedido(db_session)
    db_session.expire_all()

    salvo = PedidoRepository(db_session).buscar_por_id(pedido.id)

    assert salvo.status_tag == "pedido_recebido"
    assert salvo.pagamento_status == "pagamento_pendente"
    assert salvo.cliente.cpf == "12345678901"
    assert [(l.produto.nome, l.quantidade) for l in salvo.pedido_produtos] == [("X-Burger", 2)]


def test_remover_pedido_remove_linhas(db_session):
    pedido = _montar_pedido(db_session)
    linha_id = pedido.pedido_produtos[0].id

    PedidoRepository(db_session).remover_por_id(pedido.id)
    db_session.expire_all()

    assert PedidoRepository(db_session).buscar_por_id(pedido.id) is None
    assert PedidoProdutoRepository(db_session).buscar_por_id(linha_id) is None


def test_salvar_varios_vazio_nao_grava(db_session):
    assert PedidoProdutoRepository(db_session).salvar_varios([]) == []


def test_produtos_por_categoria_e_por_ids(db_session):
    categorias = CategoriaRepository(db_session)
    lanches = categorias.salvar(CategoriaModel(descricao="Lanches"))
    bebidas = categorias.salvar(CategoriaModel(descricao="Bebida"))
    repo = ProdutoRepository(db_session)
    burger = repo.salvar(ProdutoModel(nome="X-Burger", descricao="Lanche", preco=Decimal("10"), categoria=lanches))
    refri = repo.salvar(ProdutoModel(nome="Refrigerante", descricao="Lata", preco=Decimal("5"), categoria=bebidas))

    assert [p.id for p in repo.buscar_por_categoria(lanches.id)] == [burger.id]
    assert {p.id for p in repo.buscar_por_ids([burger.id, refri.id, burger.id, "nao-existe"])} == {burger.id, refri.id}
    assert repo.buscar_por_ids([]) == []
