from .initializer import CadastrosInitializer

__all__ = ["CadastrosInitializer"]
