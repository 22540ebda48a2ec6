from internal.model.constant import DIGEST_DAILY, DIGEST_WEEKLY


async def run_daily_digest(self) -> str:
    return await self.digest_usecase.generate(DIGEST_DAILY)


async def run_weekly_digest(self) -> str:
    return await self.digest_usecase.generate(DIGEST_WEEKLY)
