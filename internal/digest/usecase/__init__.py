from .usecase import DigestUseCase
from .new import New

__all__ = ["DigestUseCase", "New"]
