from .post import PostPostgresRepository
from .new import New

__all__ = ["PostPostgresRepository", "New"]
