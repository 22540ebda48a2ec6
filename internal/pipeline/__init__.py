from .interface import IPipelineUseCase
from .type import PipelineResult
from .usecase.new import New as NewPipelineUseCase

__all__ = ["IPipelineUseCase", "PipelineResult", "NewPipelineUseCase"]
