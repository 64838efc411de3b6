from .initializer import CatalogoInitializer

__all__ = ["CatalogoInitializer"]
