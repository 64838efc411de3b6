"""
Classe base abstrata para inicializadores de domínio.
"""
from abc import ABC, abstractmethod
from typing import List
import logging

logger = logging.getLogger(__name__)


class DomainInitializer(ABC):
    """
    Classe base para inicializadores de domínio.

    Cada domínio cria uma subclasse informando seu nome e as tabelas que possui.
    """

    @abstractmethod
    def get_domain_name(self) -> str:
        """Nome do domínio (para logging e identificação), ex.: "pedidos"."""

    @abstractmethod
    def get_table_names(self) -> List[str]:
        """Nomes das tabelas do domínio, na ordem em que devem ser criadas."""

    def initialize_tables(self) -> None:
        """
        Cria as tabelas do domínio.

        Os models precisam ter sido importados antes, para estarem em Base.metadata.
        """
        from app.database.db_connection import engine, Base

        tables_to_create = []
        for nome in self.get_table_names():
            table = Base.metadata.tables.get(nome)
            if table is None:
                logger.warning(f"⚠️ Tabela '{nome}' não encontrada no metadata. Verifique se os models foram importados.")
                continue
            tables_to_create.append(table)

        if not tables_to_create:
            logger.warning(f"⚠️ Nenhuma tabela encontrada para o domínio '{self.get_domain_name()}'.")
            return

        logger.info(f"📋 Criando {len(tables_to_create)} tabela(s) do domínio {self.get_domain_name()}...")
        for table in tables_to_create:
            try:
                table.create(engine, checkfirst=True)
                logger.info(f"  ✅ Tabela {table.name} criada/verificada")
            except Exception as e:
                logger.error(f"  ❌ Erro ao criar tabela {table.name}: {e}")
                raise

    def initialize_data(self) -> None:
        """
        Popula dados iniciais do domínio (opcional).

        Implementação padrão: não faz nada.
        """

    def validate(self) -> bool:
        return True

    def initialize(self) -> None:
        """Chamado pelo orquestrador: cria tabelas e popula dados iniciais."""
        logger.info(f"🏗️ Inicializando domínio {self.get_domain_name()}...")

        try:
            self.initialize_tables()
            self.initialize_data()

            if self.validate():
                logger.info(f"✅ Domínio {self.get_domain_name()} inicializado com sucesso.")
            else:
                logger.warning(f"⚠️ Domínio {self.get_domain_name()} inicializado, mas validação falhou.")
        except Exception as e:
            logger.error(f"❌ Erro ao inicializar domínio {self.get_domain_name()}: {e}", exc_info=True)
            raise
