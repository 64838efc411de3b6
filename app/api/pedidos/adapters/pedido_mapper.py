"""
Conversões explícitas de Pedido (e partes) para os schemas de resposta.
"""
from decimal import Decimal
from typing import List

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.pedidos.models.model_pedido import PedidoModel
from app.api.pedidos.models.model_pedido_produto import PedidoProdutoModel
from app.api.pedidos.models.model_pedido_status import PedidoStatusModel
from app.api.pedidos.schemas.schema_pedido import (
    ClienteResumoOut,
    PagamentoStatusOut,
    PedidoOut,
    PedidoProdutoOut,
    PedidoStatusOut,
    ProdutoResumoOut,
)

def cliente_to_resumo(cliente: ClienteModel) -> ClienteResumoOut:
    return ClienteResumoOut(
        cpf=cliente.cpf,
        nome_completo=cliente.nome_completo,
        email=cliente.email,
    )

def status_to_out(status: PedidoStatusModel) -> PedidoStatusOut:
    return PedidoStatusOut(tag=status.tag, descricao=status.descricao)

def produto_to_resumo(produto: ProdutoModel) -> ProdutoResumoOut:
    return ProdutoResumoOut(
        id=produto.id,
        nome=produto.nome,
        descricao=produto.descricao,
        preco=produto.preco,
        categoria_id=produto.categoria_id,
    )

def pedido_produto_to_out(linha: PedidoProdutoModel) -> PedidoProdutoOut:
    return PedidoProdutoOut(
        id=linha.id,
        quantidade=linha.quantidade,
        produto=produto_to_resumo(linha.produto),
    )

def pedido_to_out(pedido: PedidoModel) -> PedidoOut:
    return PedidoOut(
        id=pedido.id,
        cliente=cliente_to_resumo(pedido.cliente) if pedido.cliente else None,
        status=status_to_out(pedido.status) if pedido.status else None,
        pedido_produtos=[pedido_produto_to_out(linha) for linha in pedido.pedido_produtos or []],
        valor_total=Decimal(str(pedido.valor_total or 0)),
        pagamento_status=pedido.pagamento_status,
        data_cadastro=pedido.data_cadastro,
        data_atualizacao=pedido.data_atualizacao,
    )

def pedidos_to_out(pedidos: List[PedidoModel]) -> List[PedidoOut]:
    return [pedido_to_out(p) for p in pedidos]

def pedido_to_pagamento_status(pedido: PedidoModel) -> PagamentoStatusOut:
    return PagamentoStatusOut(pedido_id=pedido.id, pagamento_status=pedido.pagamento_status)
