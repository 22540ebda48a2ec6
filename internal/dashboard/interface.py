from typing import Protocol, runtime_checkable

from .type import DashboardData


@runtime_checkable
class IDashboardUseCase(Protocol):
    async def get_dashboard_data(self) -> DashboardData: ...


__all__ = ["IDashboardUseCase"]
