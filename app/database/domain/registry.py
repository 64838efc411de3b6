"""
Registry de inicializadores de domínio.
"""
from typing import List, Dict, Optional
import logging

from .base import DomainInitializer

logger = logging.getLogger(__name__)


class DomainRegistry:
    """
    Registry central para inicializadores de domínio (singleton).

    A ordem de registro é a ordem de inicialização; domínios com chaves
    estrangeiras para outros devem ser registrados depois deles.
    """
    _instance: Optional['DomainRegistry'] = None
    _initializers: Dict[str, DomainInitializer] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def register(self, initializer: DomainInitializer) -> None:
        domain_name = initializer.get_domain_name()

        if domain_name in self._initializers:
            logger.warning(f"⚠️ Domínio '{domain_name}' já está registrado. Substituindo...")

        self._initializers[domain_name] = initializer
        logger.debug(f"📝 Domínio '{domain_name}' registrado no registry")

    def get_all(self) -> List[DomainInitializer]:
        """Inicializadores na ordem de registro."""
        return list(self._initializers.values())


_registry = DomainRegistry()


def register_domain(initializer: DomainInitializer) -> None:
    _registry.register(initializer)


def get_registry() -> DomainRegistry:
    return _registry
