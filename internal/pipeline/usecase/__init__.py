from .usecase import PipelineUseCase
from .new import New

__all__ = ["PipelineUseCase", "New"]
