import asyncio
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.pedidos.models.model_pedido import PedidoModel, StatusPagamento
from app.api.pedidos.models.model_pedido_status import PedidoStatusModel
from app.api.pedidos.schemas.schema_pedido import PedidoCreateRequest, WebhookPagamentoRequest
from app.api.pedidos.services.service_pedido import PedidoService
from app.core.exceptions import ErroConfiguracao, ErroNegocio


def _cliente(cpf: str = "12345678901") -> ClienteModel:
    return ClienteModel(cpf=cpf, nome_completo="Fulano de Tal", email="fulano@email.com")


def _status(tag: str) -> PedidoStatusModel:
    return PedidoStatusModel(id=f"st-{tag}", tag=tag, descricao=tag)


def _produto(produto_id: str, preco: str) -> ProdutoModel:
    return ProdutoModel(id=produto_id, nome=produto_id, descricao=f"{produto_id} desc", preco=Decimal(preco), categoria_id="cat-1")


def _pedido(pedido_id: str, tag: str = "pedido_recebido") -> PedidoModel:
    status = _status(tag)
    return PedidoModel(
        id=pedido_id,
        cliente_cpf="12345678901",
        status=status,
        status_id=status.id,
        valor_total=Decimal("0"),
        pagamento_status=StatusPagamento.PENDENTE.value,
    )


def _salvar_com_id(pedido):
    if not pedido.id:
        pedido.id = "pedido-1"
    return pedido


@pytest.fixture
def mocks():
    return SimpleNamespace(
        pedido_repo=MagicMock(),
        pedido_produto_repo=MagicMock(),
        pedido_status_repo=MagicMock(),
        cliente_repo=MagicMock(),
        produto_repo=MagicMock(),
        http_client=AsyncMock(),
    )


@pytest.fixture
def servico(mocks):
    mocks.pedido_repo.salvar.side_effect = _salvar_com_id
    return PedidoService(**vars(mocks))


def _request(*itens) -> PedidoCreateRequest:
    return PedidoCreateRequest(
        cliente_cpf="12345678901",
        pedido_produtos=[{"produto_id": pid, "quantidade": qtd} for pid, qtd in itens],
    )


# ---------------- adicionar_pedido ----------------
def test_adicionar_pedido_calcula_total_e_status_inicial(mocks, servico):
    mocks.cliente_repo.buscar_por_cpf.return_value = _cliente()
    mocks.pedido_status_repo.buscar_por_tag.return_value = _status("pedido_recebido")
    mocks.produto_repo.buscar_por_ids.return_value = [_produto("produto1", "10.00"), _produto("produto2", "15.00")]

    pedido = servico.adicionar_pedido(_request(("produto1", 2), ("produto2", 3)))

    assert pedido.valor_total == Decimal("65.00")
    assert pedido.status_tag == "pedido_recebido"
    assert pedido.pagamento_status == "pagamento_pendente"
    mocks.pedido_status_repo.buscar_por_tag.assert_called_once_with("pedido_recebido")

    linhas = mocks.pedido_produto_repo.salvar_varios.call_args.args[0]
    assert [(l.produto_id, l.quantidade, l.posicao) for l in linhas] == [("produto1", 2, 0), ("produto2", 3, 1)]
    assert all(l.pedido_id == "pedido-1" for l in linhas)


def test_adicionar_pedido_salva_pedido_antes_das_linhas(mocks, servico):
    mocks.cliente_repo.buscar_por_cpf.return_value = _cliente()
    mocks.pedido_status_repo.buscar_por_tag.return_value = _status("pedido_recebido")
    mocks.produto_repo.buscar_por_ids.return_value = [_produto("produto1", "10.00")]

    gerente = MagicMock()
    gerente.attach_mock(mocks.pedido_repo.salvar, "salvar_pedido")
    gerente.attach_mock(mocks.pedido_produto_repo.salvar_varios, "salvar_linhas")

    servico.adicionar_pedido(_request(("produto1", 1)))

    assert [c[0] for c in gerente.mock_calls] == ["salvar_pedido", "salvar_linhas"]


def test_adicionar_pedido_sem_linhas_tem_total_zero(mocks, servico):
    mocks.cliente_repo.buscar_por_cpf.return_value = _cliente()
    mocks.pedido_status_repo.buscar_por_tag.return_value = _status("pedido_recebido")

    pedido = servico.adicionar_pedido(_request())

    assert pedido.valor_total == Decimal("0")
    mocks.produto_repo.buscar_por_ids.assert_not_called()


def test_adicionar_pedido_cliente_inexistente_nao_grava_nada(mocks, servico):
    mocks.cliente_repo.buscar_por_cpf.return_value = None

    with pytest.raises(ErroNegocio) as exc:
        servico.adicionar_pedido(_request(("produto1", 1)))

    assert exc.value.codigo == "cliente-nao-cadastrado"
    assert exc.value.status_code == 404
    mocks.pedido_repo.salvar.assert_not_called()
    mocks.pedido_produto_repo.salvar_varios.assert_not_called()


def test_adicionar_pedido_produto_inexistente_falha_antes_de_gravar(mocks, servico):
    mocks.cliente_repo.buscar_por_cpf.return_value = _cliente()
    mocks.pedido_status_repo.buscar_por_tag.return_value = _status("pedido_recebido")
    mocks.produto_repo.buscar_por_ids.return_value = [_produto("produto1", "10.00")]

    with pytest.raises(ErroNegocio) as exc:
        servico.adicionar_pedido(_request(("produto1", 1), ("produto3", 2)))

    assert exc.value.codigo == "produto-nao-existe"
    mocks.pedido_repo.salvar.assert_not_called()
    mocks.pedido_produto_repo.salvar_varios.assert_not_called()


def test_adicionar_pedido_sem_status_semeado_e_erro_de_configuracao(mocks, servico):
    mocks.cliente_repo.buscar_por_cpf.return_value = _cliente()
    mocks.pedido_status_repo.buscar_por_tag.return_value = None

    with pytest.raises(ErroConfiguracao):
        servico.adicionar_pedido(_request(("produto1", 1)))

    mocks.pedido_repo.salvar.assert_not_called()


# ---------------- status ----------------
def test_atualizar_status_para_tag_inexistente_nao_altera_pedido(mocks, servico):
    pedido = _pedido("1", "pedido_recebido")
    mocks.pedido_repo.buscar_por_id.return_value = pedido
    mocks.pedido_status_repo.buscar_por_tag.return_value = None

    with pytest.raises(ErroNegocio) as exc:
        servico.atualizar_pedido_status_por_id("1", "pedido_voando")

    assert exc.value.codigo == "pedido-status-nao-existe"
    assert exc.value.status_code == 404
    assert pedido.status_tag == "pedido_recebido"
    mocks.pedido_repo.salvar.assert_not_called()


def test_atualizar_status_aceita_qualquer_tag_registrada(mocks, servico):
    pedido = _pedido("1", "pedido_finalizado")
    mocks.pedido_repo.buscar_por_id.return_value = pedido
    mocks.pedido_status_repo.buscar_por_tag.return_value = _status("pedido_recebido")

    atualizado = servico.atualizar_pedido_status_por_id("1", "pedido_recebido")

    assert atualizado.status_tag == "pedido_recebido"
    assert atualizado.status_id == "st-pedido_recebido"
    mocks.pedido_repo.salvar.assert_called_once_with(pedido)


def test_atualizar_status_pedido_inexistente(mocks, servico):
    mocks.pedido_repo.buscar_por_id.return_value = None

    with pytest.raises(ErroNegocio) as exc:
        servico.atualizar_pedido_status_por_id("x", "pedido_pronto")

    assert exc.value.codigo == "pedido-nao-existe"
    mocks.pedido_status_repo.buscar_por_tag.assert_not_called()


def test_obter_status_pedido_retorna_tag(mocks, servico):
    mocks.pedido_repo.buscar_por_id.return_value = _pedido("1", "pedido_pronto")
    assert servico.obter_status_pedido_por_id("1") == "pedido_pronto"


# ---------------- webhook ----------------
@pytest.mark.parametrize(
    "aprovado, esperado",
    [(True, "pedido_aprovado"), (False, "pedido_nao_aprovado")],
)
def test_webhook_atualiza_pagamento_sem_mexer_no_status(mocks, servico, aprovado, esperado):
    pedido = _pedido("1", "pedido_em_preparacao")
    mocks.pedido_repo.buscar_por_id.return_value = pedido

    resultado = asyncio.run(servico.webhook_confirmacao_pagamento(WebhookPagamentoRequest(id="1", aprovado=aprovado)))

    assert resultado.pagamento_status == esperado
    assert resultado.status_tag == "pedido_em_preparacao"
    mocks.pedido_repo.salvar.assert_called_once_with(pedido)
    mocks.http_client.executar_chamada.assert_awaited_once_with(
        "producao", "post", "producao/cadastrar", {"pedidoId": "1"}
    )


def test_webhook_falha_na_producao_nao_desfaz_pagamento(mocks, servico):
    pedido = _pedido("1")
    mocks.pedido_repo.buscar_por_id.return_value = pedido
    mocks.http_client.executar_chamada.side_effect = httpx.ConnectError("produção fora do ar")

    resultado = asyncio.run(servico.webhook_confirmacao_pagamento(WebhookPagamentoRequest(id="1", aprovado=True)))

    assert resultado.pagamento_status == "pedido_aprovado"
    mocks.pedido_repo.salvar.assert_called_once_with(pedido)


def test_webhook_pedido_inexistente_nao_notifica(mocks, servico):
    mocks.pedido_repo.buscar_por_id.return_value = None

    with pytest.raises(ErroNegocio) as exc:
        asyncio.run(servico.webhook_confirmacao_pagamento(WebhookPagamentoRequest(id="x", aprovado=True)))

    assert exc.value.codigo == "pedido-nao-existe"
    mocks.http_client.executar_chamada.assert_not_awaited()


def test_atualizar_status_pagamento_manual_nao_notifica(mocks, servico):
    pedido = _pedido("1")
    mocks.pedido_repo.buscar_por_id.return_value = pedido

    servico.atualizar_status_pagamento("1", "pedido_aprovado")

    assert pedido.pagamento_status == "pedido_aprovado"
    assert servico.obter_status_pagamento("1") == "pedido_aprovado"
    mocks.http_client.executar_chamada.assert_not_awaited()


# ---------------- remoção ----------------
def test_remover_pedido_inexistente_nao_chama_delete(mocks, servico):
    mocks.pedido_repo.buscar_por_id.return_value = None

    with pytest.raises(ErroNegocio) as exc:
        servico.remover_pedido_por_id("nao-existe")

    assert exc.value.codigo == "pedido-nao-existe"
    mocks.pedido_repo.remover_por_id.assert_not_called()


def test_remover_pedido_existente(mocks, servico):
    mocks.pedido_repo.buscar_por_id.return_value = _pedido("1")
    servico.remover_pedido_por_id("1")
    mocks.pedido_repo.remover_por_id.assert_called_once_with("1")


# ---------------- fila ----------------
def test_fila_ja_ordenada_permanece_igual(mocks, servico):
    mocks.pedido_repo.listar.return_value = [
        _pedido("1", "pedido_pronto"),
        _pedido("2", "pedido_em_preparacao"),
        _pedido("3", "pedido_recebido"),
    ]
    assert [p.id for p in servico.obter_fila_pedidos()] == ["1", "2", "3"]


def test_fila_em_ordem_inversa_e_reordenada(mocks, servico):
    mocks.pedido_repo.listar.return_value = [
        _pedido("3", "pedido_recebido"),
        _pedido("2", "pedido_em_preparacao"),
        _pedido("1", "pedido_pronto"),
    ]
    assert [p.id for p in servico.obter_fila_pedidos()] == ["1", "2", "3"]


def test_webhook_confirma_pagamento_antes_de_notificar(mocks, servico):
    mocks.pedido_repo.buscar_por_id.return_value = _pedido("1")
    gerente = MagicMock()
    gerente.attach_mock(mocks.pedido_repo.confirmar, "confirmar")
    gerente.attach_mock(mocks.http_client.executar_chamada, "notificar")

    asyncio.run(servico.webhook_confirmacao_pagamento(WebhookPagamentoRequest(id="1", aprovado=True)))

    assert [c[0] for c in gerente.mock_calls] == ["confirmar", "notificar"]
