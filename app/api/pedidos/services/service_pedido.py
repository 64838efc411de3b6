from __future__ import annotations

from typing import Dict, List, Sequence

from app.api.cadastros.contracts.cliente_contract import IClienteRepository
from app.api.catalogo.contracts.produto_contract import IProdutoRepository
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.pedidos.contracts.pedidos_contract import (
    IPedidoProdutoRepository,
    IPedidoRepository,
    IPedidoStatusRepository,
)
from app.api.pedidos.models.model_pedido import PedidoModel, StatusPagamento, StatusPedido
from app.api.pedidos.models.model_pedido_produto import PedidoProdutoModel
from app.api.pedidos.models.model_pedido_status import PedidoStatusModel
from app.api.pedidos.schemas.schema_pedido import PedidoCreateRequest, WebhookPagamentoRequest
from app.api.pedidos.services.service_pedido_helpers import calcular_valor_total, ordenar_fila
from app.core.exceptions import ErroConfiguracao, ErroNegocio
from app.integrations.servicos.client import IHttpClient
from app.utils.logger import logger


class PedidoService:
    """
    Ciclo de vida do pedido: criação, troca de status, confirmação de
    pagamento via webhook e fila da cozinha.

    Não existe grafo de transições: qualquer tag registrada pode ser aplicada
    a partir de qualquer status. Atualizações concorrentes no mesmo pedido
    seguem "última escrita vence".
    """

    def __init__(
        self,
        *,
        pedido_repo: IPedidoRepository,
        pedido_produto_repo: IPedidoProdutoRepository,
        pedido_status_repo: IPedidoStatusRepository,
        cliente_repo: IClienteRepository,
        produto_repo: IProdutoRepository,
        http_client: IHttpClient,
    ) -> None:
        self.repo = pedido_repo
        self.repo_pedido_produto = pedido_produto_repo
        self.repo_status = pedido_status_repo
        self.repo_cliente = cliente_repo
        self.repo_produto = produto_repo
        self.http_client = http_client

    # ---------------- Helpers -----------------
    def _obter_pedido(self, pedido_id: str) -> PedidoModel:
        pedido = self.repo.buscar_por_id(pedido_id)
        if not pedido:
            raise ErroNegocio("pedido-nao-existe")
        return pedido

    def _status_obrigatorio(self, tag: str) -> PedidoStatusModel:
        status = self.repo_status.buscar_por_tag(tag)
        if not status:
            raise ErroConfiguracao(
                f"Status de pedido '{tag}' não cadastrado. A carga inicial de status não foi executada."
            )
        return status

    def _resolver_produtos(self, produto_ids: Sequence[str]) -> Dict[str, ProdutoModel]:
        if not produto_ids:
            return {}
        produtos = {p.id: p for p in self.repo_produto.buscar_por_ids(list(produto_ids))}
        faltantes = [pid for pid in produto_ids if pid not in produtos]
        if faltantes:
            logger.info(f"[Pedidos] Produtos inexistentes no pedido: {faltantes}")
            raise ErroNegocio("produto-nao-existe")
        return produtos

    # ---------------- Commands ---------------
    def adicionar_pedido(self, data: PedidoCreateRequest) -> PedidoModel:
        cliente = self.repo_cliente.buscar_por_cpf(data.cliente_cpf)
        if not cliente:
            raise ErroNegocio("cliente-nao-cadastrado")

        status_inicial = self._status_obrigatorio(StatusPedido.RECEBIDO.value)
        produtos = self._resolver_produtos([item.produto_id for item in data.pedido_produtos])

        linhas = [
            PedidoProdutoModel(
                quantidade=item.quantidade,
                produto=produtos[item.produto_id],
                produto_id=item.produto_id,
                posicao=posicao,
            )
            for posicao, item in enumerate(data.pedido_produtos)
        ]

        pedido = PedidoModel(
            cliente=cliente,
            cliente_cpf=cliente.cpf,
            status=status_inicial,
            status_id=status_inicial.id,
            valor_total=calcular_valor_total(linhas),
            pagamento_status=StatusPagamento.PENDENTE.value,
        )

        # Pedido primeiro (gera o id), depois as linhas que apontam para ele
        pedido = self.repo.salvar(pedido)
        for linha in linhas:
            linha.pedido = pedido
            linha.pedido_id = pedido.id
        self.repo_pedido_produto.salvar_varios(linhas)

        logger.info(
            f"[Pedidos] Pedido criado id={pedido.id} cliente={cliente.cpf} "
            f"itens={len(linhas)} total={pedido.valor_total}"
        )
        return pedido

    def remover_pedido_por_id(self, pedido_id: str) -> None:
        self._obter_pedido(pedido_id)
        self.repo.remover_por_id(pedido_id)
        logger.info(f"[Pedidos] Pedido removido id={pedido_id}")

    def atualizar_pedido_status_por_id(self, pedido_id: str, status_tag: str) -> PedidoModel:
        pedido = self._obter_pedido(pedido_id)

        status = self.repo_status.buscar_por_tag(status_tag)
        if not status:
            raise ErroNegocio("pedido-status-nao-existe")

        status_anterior = pedido.status_tag
        pedido.status = status
        pedido.status_id = status.id
        pedido = self.repo.salvar(pedido)

        logger.info(f"[Pedidos] Status id={pedido_id}: {status_anterior} -> {status.tag}")
        return pedido

    async def webhook_confirmacao_pagamento(self, data: WebhookPagamentoRequest) -> PedidoModel:
        pedido = self._obter_pedido(data.id)

        pedido.pagamento_status = (
            StatusPagamento.APROVADO.value if data.aprovado else StatusPagamento.NAO_APROVADO.value
        )
        pedido = self.repo.salvar(pedido)
        # Pagamento gravado antes do aviso à produção
        self.repo.confirmar()
        logger.info(f"[Pagamentos] Webhook pedido={pedido.id} pagamento_status={pedido.pagamento_status}")

        # Chamado nos dois casos (aprovado ou não)
        await self._notificar_producao(pedido.id)
        return pedido

    async def _notificar_producao(self, pedido_id: str) -> None:
        try:
            await self.http_client.executar_chamada(
                "producao", "post", "producao/cadastrar", {"pedidoId": pedido_id}
            )
            logger.info(f"[Produção] Pedido {pedido_id} enviado para produção")
        except Exception as e:
            # Falha na produção não desfaz a atualização do pagamento
            logger.error(f"[Produção] Erro ao notificar produção do pedido {pedido_id}: {e}", exc_info=True)

    def atualizar_status_pagamento(self, pedido_id: str, pagamento_status: str) -> PedidoModel:
        pedido = self._obter_pedido(pedido_id)
        pedido.pagamento_status = pagamento_status
        pedido = self.repo.salvar(pedido)
        logger.info(f"[Pagamentos] Status de pagamento pedido={pedido_id} -> {pagamento_status}")
        return pedido

    # ---------------- Queries ----------------
    def obter_pedido_por_id(self, pedido_id: str) -> PedidoModel:
        return self._obter_pedido(pedido_id)

    def obter_pedidos(self) -> List[PedidoModel]:
        return self.repo.listar()

    def obter_status_pedido_por_id(self, pedido_id: str) -> str:
        return self._obter_pedido(pedido_id).status_tag

    def obter_status_pagamento(self, pedido_id: str) -> str:
        return self._obter_pedido(pedido_id).pagamento_status

    def obter_fila_pedidos(self) -> List[PedidoModel]:
        return ordenar_fila(self.repo.listar())
