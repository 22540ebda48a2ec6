from .insight import InsightPostgresRepository
from .new import New

__all__ = ["InsightPostgresRepository", "New"]
