"""
Orquestrador central de inicialização do banco de dados.
"""
import logging

from sqlalchemy import inspect

from .registry import get_registry
from ..db_connection import engine

logger = logging.getLogger(__name__)

TABELAS_PRINCIPAIS = {"clientes", "categorias", "produtos", "pedido_status", "pedidos", "pedido_produto"}


class DatabaseOrchestrator:
    """
    Coordena a inicialização completa do banco.

    Fluxo:
    1. Inicializa todos os domínios registrados (tabelas + dados iniciais)
    2. Valida que as tabelas principais existem
    """

    def __init__(self):
        self.registry = get_registry()

    def verificar_banco_inicializado(self) -> bool:
        try:
            existentes = set(inspect(engine).get_table_names())
        except Exception as e:
            logger.warning(f"⚠️ Erro ao verificar status de inicialização: {e}")
            return False
        return TABELAS_PRINCIPAIS.issubset(existentes)

    def inicializar_dominios(self) -> None:
        initializers = self.registry.get_all()

        if not initializers:
            logger.warning("⚠️ Nenhum domínio registrado para inicialização.")
            return

        logger.info(f"📦 Inicializando {len(initializers)} domínio(s)...")

        for initializer in initializers:
            try:
                initializer.initialize()
            except Exception as e:
                logger.error(
                    f"❌ Erro ao inicializar domínio {initializer.get_domain_name()}: {e}",
                    exc_info=True
                )
                raise

    def initialize(self) -> None:
        logger.info("🚀 Iniciando processo de inicialização do banco de dados...")
        self.inicializar_dominios()

        if self.verificar_banco_inicializado():
            logger.info("✅ Banco de dados inicializado com sucesso.")
        else:
            logger.warning("⚠️ Inicialização concluída, mas há tabelas principais ausentes.")


def inicializar_banco():
    orchestrator = DatabaseOrchestrator()
    orchestrator.initialize()
