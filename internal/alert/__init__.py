from .interface import IAlertUseCase
from .type import AlertCandidate
from .errors import ErrInvalidInput
from .rule import evaluate
from .usecase.new import New as NewAlertUseCase

__all__ = [
    "IAlertUseCase",
    "AlertCandidate",
    "ErrInvalidInput",
    "evaluate",
    "NewAlertUseCase",
]
