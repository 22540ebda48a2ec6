from .usecase import AnalysisUseCase
from .new import New

__all__ = ["AnalysisUseCase", "New"]
