from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class RespostaDados(BaseModel, Generic[T]):
    """Envelope padrão das respostas de sucesso: {"dados": ...}"""
    dados: T
