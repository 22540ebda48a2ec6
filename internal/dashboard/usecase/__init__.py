from .usecase import DashboardUseCase
from .new import New

__all__ = ["DashboardUseCase", "New"]
