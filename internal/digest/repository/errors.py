class RepositoryError(Exception):
    pass


class ErrFailedToCreate(RepositoryError):
    pass


class ErrFailedToGet(RepositoryError):
    pass


__all__ = ["RepositoryError", "ErrFailedToCreate", "ErrFailedToGet"]
