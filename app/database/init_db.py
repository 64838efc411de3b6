"""
Ponto de entrada da inicialização do banco.

Importar este módulo registra os domínios, na ordem exigida pelas chaves estrangeiras.
"""
from app.api.cadastros.database import CadastrosInitializer  # noqa: F401
from app.api.catalogo.database import CatalogoInitializer  # noqa: F401
from app.api.pedidos.database import PedidosInitializer  # noqa: F401

from app.database.domain.orchestrator import DatabaseOrchestrator, inicializar_banco


def verificar_banco_inicializado() -> bool:
    return DatabaseOrchestrator().verificar_banco_inicializado()


if __name__ == "__main__":
    inicializar_banco()
