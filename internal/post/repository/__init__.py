"""Post Repository.

Exports:
- IPostRepository: Repository interface
- Options: All option structs
- Errors: Domain repository errors
- New: Factory function
"""

from .interface import IPostRepository
from .new import New
from .option import (
    UpsertOptions,
    ListRecentOptions,
    ListByIdsOptions,
    CountByPlatformOptions,
)
from .errors import RepositoryError, ErrFailedToGet, ErrFailedToUpsert, ErrInvalidData

__all__ = [
    "IPostRepository",
    "New",
    "UpsertOptions",
    "ListRecentOptions",
    "ListByIdsOptions",
    "CountByPlatformOptions",
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
    "ErrInvalidData",
]
