from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, condecimal, constr

from app.api.cadastros.schemas.schema_categoria import CategoriaOut


class ProdutoIn(BaseModel):
    nome: constr(min_length=1, max_length=120)
    descricao: constr(min_length=1, max_length=255)
    preco: condecimal(gt=0, max_digits=18, decimal_places=2)
    categoria_id: Optional[str] = None


class ProdutoOut(BaseModel):
    id: str
    nome: str
    descricao: str
    preco: Decimal
    categoria: Optional[CategoriaOut] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
