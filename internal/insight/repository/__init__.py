from .interface import IInsightRepository
from .new import New
from .option import (
    CreateBatchOptions,
    CreateManyOptions,
    CreateSnapshotOptions,
    ListWindowOptions,
)
from .errors import RepositoryError, ErrFailedToCreate, ErrFailedToGet

__all__ = [
    "IInsightRepository",
    "New",
    "CreateBatchOptions",
    "CreateManyOptions",
    "CreateSnapshotOptions",
    "ListWindowOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
]
