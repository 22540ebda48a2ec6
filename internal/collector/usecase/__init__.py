from .new import New

__all__ = ["New"]
