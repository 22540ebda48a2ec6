from .interface import IDigestRepository
from .new import New
from .option import CreateOptions, LatestByTypeOptions
from .errors import RepositoryError, ErrFailedToCreate, ErrFailedToGet

__all__ = [
    "IDigestRepository",
    "New",
    "CreateOptions",
    "LatestByTypeOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
]
