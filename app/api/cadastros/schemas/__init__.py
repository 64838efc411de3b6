"""
Schemas de Cadastros:
- Clientes
- Categorias
"""

from app.api.cadastros.schemas.schema_cliente import *
from app.api.cadastros.schemas.schema_categoria import *
