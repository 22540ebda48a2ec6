from .interface import IAlertRepository
from .new import New
from .option import CreateManyOptions, ListActiveOptions, AcknowledgeOptions
from .errors import RepositoryError, ErrFailedToCreate, ErrFailedToGet, ErrFailedToUpdate

__all__ = [
    "IAlertRepository",
    "New",
    "CreateManyOptions",
    "ListActiveOptions",
    "AcknowledgeOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToUpdate",
]
