from .digest import DigestPostgresRepository
from .new import New

__all__ = ["DigestPostgresRepository", "New"]
