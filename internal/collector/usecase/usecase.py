from typing import List, Sequence

from pkg.logger.logger import Logger
from ..interface import ICollector, ICollectorUseCase
from ..type import CollectedPost
from .collect_all import collect_all as _collect_all


class CollectorUseCase(ICollectorUseCase):
    def __init__(self, collectors: Sequence[ICollector], logger: Logger) -> None:
        self.collectors = list(collectors)
        self.logger = logger

    async def collect_all(self) -> List[CollectedPost]:
        return await _collect_all(self)
