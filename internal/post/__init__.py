from .interface import IPostUseCase
from .type import SaveOutput, PostSummary
from .errors import ErrInvalidInput
from .usecase.new import New as NewPostUseCase

__all__ = [
    "IPostUseCase",
    "SaveOutput",
    "PostSummary",
    "ErrInvalidInput",
    "NewPostUseCase",
]
