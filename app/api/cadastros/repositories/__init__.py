"""
Repositories de Cadastros
"""

from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.repositories.repo_categorias import CategoriaRepository
