from typing import List, Optional, Sequence

from pkg.logger.logger import Logger
from internal.model.alert import Alert
from ..repository.interface import IAlertRepository
from ..interface import IAlertUseCase
from ..type import AlertCandidate
from .save import save as _save
from .list_active import list_active as _list_active
from .acknowledge import acknowledge as _acknowledge


class AlertUseCase(IAlertUseCase):
    def __init__(self, repository: IAlertRepository, logger: Logger) -> None:
        self.repository = repository
        self.logger = logger

    async def save(
        self, candidates: Sequence[AlertCandidate], batch_id: Optional[str] = None
    ) -> int:
        return await _save(self, candidates, batch_id)

    async def list_active(self, limit: Optional[int] = None) -> List[Alert]:
        return await _list_active(self, limit)

    async def acknowledge(self, alert_id: str) -> bool:
        return await _acknowledge(self, alert_id)
