"""
Schemas compartilhados entre diferentes domínios
"""

from app.api.shared.schemas.schema_resposta import RespostaDados

__all__ = [
    "RespostaDados",
]
