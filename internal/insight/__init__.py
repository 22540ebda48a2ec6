from .interface import IInsightUseCase
from .usecase.new import New as NewInsightUseCase

__all__ = ["IInsightUseCase", "NewInsightUseCase"]
