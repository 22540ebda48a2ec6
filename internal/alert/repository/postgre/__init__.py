from .alert import AlertPostgresRepository
from .new import New

__all__ = ["AlertPostgresRepository", "New"]
