from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, conint, constr


# ---------------- Requests ----------------
class PedidoProdutoRequest(BaseModel):
    produto_id: constr(min_length=1)
    quantidade: conint(gt=0)


class PedidoCreateRequest(BaseModel):
    cliente_cpf: constr(min_length=1, max_length=14)
    pedido_produtos: List[PedidoProdutoRequest] = Field(default_factory=list)


class PedidoStatusPatchRequest(BaseModel):
    status_tag: constr(min_length=1)


class WebhookPagamentoRequest(BaseModel):
    """Payload do gateway; campos além de id/aprovado são aceitos e ignorados."""
    id: constr(min_length=1)
    aprovado: bool

    model_config = ConfigDict(extra="allow")


class PagamentoStatusPatchRequest(BaseModel):
    pagamento_status: constr(min_length=1, max_length=50)


# ---------------- Responses ----------------
class ClienteResumoOut(BaseModel):
    cpf: str
    nome_completo: str
    email: Optional[str] = None


class PedidoStatusOut(BaseModel):
    tag: str
    descricao: str


class ProdutoResumoOut(BaseModel):
    id: str
    nome: str
    descricao: str
    preco: Decimal
    categoria_id: Optional[str] = None


class PedidoProdutoOut(BaseModel):
    id: Optional[str] = None
    quantidade: int
    produto: ProdutoResumoOut


class PedidoOut(BaseModel):
    id: str
    cliente: Optional[ClienteResumoOut] = None
    status: Optional[PedidoStatusOut] = None
    pedido_produtos: List[PedidoProdutoOut] = Field(default_factory=list)
    valor_total: Decimal
    pagamento_status: str
    data_cadastro: Optional[datetime] = None
    data_atualizacao: Optional[datetime] = None


class PedidoStatusTagOut(BaseModel):
    id: str
    status_tag: str


class PagamentoStatusOut(BaseModel):
    pedido_id: str
    pagamento_status: str
