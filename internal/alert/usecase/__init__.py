from .usecase import AlertUseCase
from .new import New

__all__ = ["AlertUseCase", "New"]
