from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List

from app.api.pedidos.models.model_pedido import PedidoModel, StatusPedido
from app.api.pedidos.models.model_pedido_produto import PedidoProdutoModel


# Menor valor = atendido primeiro na fila da cozinha
PRIORIDADE_FILA = {
    StatusPedido.PRONTO.value: 0,
    StatusPedido.EM_PREPARACAO.value: 1,
    StatusPedido.RECEBIDO.value: 2,
}
PRIORIDADE_PADRAO = 3


def _dec(value: float | Decimal | int) -> Decimal:
    """Converte valor para Decimal com precisão de 2 casas decimais."""
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def calcular_valor_total(pedido_produtos: Iterable[PedidoProdutoModel]) -> Decimal:
    """
    Soma quantidade × preço do produto de cada linha.

    Lista vazia resulta em 0. O valor é calculado na criação do pedido e não
    é recalculado automaticamente depois.
    """
    total = Decimal("0")
    for linha in pedido_produtos:
        total += Decimal(str(linha.produto.preco)) * (linha.quantidade or 0)
    return _dec(total)


def prioridade_fila(status_tag: str | None) -> int:
    return PRIORIDADE_FILA.get(status_tag, PRIORIDADE_PADRAO)


def ordenar_fila(pedidos: Iterable[PedidoModel]) -> List[PedidoModel]:
    """
    Ordena pedidos pela prioridade de produção: pronto, em preparação, recebido,
    depois os demais. `sorted` é estável, então empates mantêm a ordem de leitura.
    """
    return sorted(pedidos, key=lambda p: prioridade_fila(p.status_tag))
