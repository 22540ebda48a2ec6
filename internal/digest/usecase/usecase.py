from typing import Optional

from pkg.llm.interface import ITextGeneration
from pkg.logger.logger import Logger
from internal.dashboard.interface import IDashboardUseCase
from ..interface import IDigestUseCase
from ..repository.interface import IDigestRepository
from ..type import DigestView
from .generate import generate as _generate
from .latest import latest as _latest


class DigestUseCase(IDigestUseCase):
    def __init__(
        self,
        repository: IDigestRepository,
        dashboard_usecase: IDashboardUseCase,
        llm: ITextGeneration,
        logger: Logger,
    ) -> None:
        self.repository = repository
        self.dashboard_usecase = dashboard_usecase
        self.llm = llm
        self.logger = logger

    async def generate(self, digest_type: str) -> str:
        return await _generate(self, digest_type)

    async def latest(self, digest_type: str) -> Optional[DigestView]:
        return await _latest(self, digest_type)
