from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, constr, field_validator


def _vazio_para_none(value):
    if isinstance(value, str):
        value = value.strip()
        if value == "" or value.lower() in {"null", "none", "undefined"}:
            return None
    return value


class ClienteCreate(BaseModel):
    cpf: constr(min_length=1, max_length=14)
    nome_completo: constr(min_length=1, max_length=150)
    email: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalizar_email(cls, v):
        return _vazio_para_none(v)


class ClienteUpdate(BaseModel):
    """Todos os campos opcionais; corpo sem nenhum campo vira erro 'body-vazio'."""
    nome_completo: Optional[constr(min_length=1, max_length=150)] = None
    email: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("email", mode="before")
    @classmethod
    def normalizar_email(cls, v):
        return _vazio_para_none(v)


class ClienteOut(BaseModel):
    cpf: str
    nome_completo: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
