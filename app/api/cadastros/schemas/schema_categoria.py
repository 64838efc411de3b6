from datetime import datetime
from typing import Optional

from pydantic import BaseModel, constr


class CategoriaIn(BaseModel):
    descricao: constr(min_length=1, max_length=100)


class CategoriaOut(BaseModel):
    id: str
    descricao: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
