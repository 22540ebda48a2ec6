from .usecase import InsightUseCase
from .new import New

__all__ = ["InsightUseCase", "New"]
