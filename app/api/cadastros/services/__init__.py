"""
Services de Cadastros
"""

from app.api.cadastros.services.service_cliente import ClienteService
from app.api.cadastros.services.service_categoria import CategoriaService
