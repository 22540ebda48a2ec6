from datetime import datetime
from typing import Optional


async def latest_post_at(self) -> Optional[datetime]:
    return await self.repository.latest_posted_at()
