from typing import Optional

from internal.model.timestamp import utc_now
from ..helpers import period_for
from ..repository.option import LatestByTypeOptions
from ..type import DigestView


async def latest(self, digest_type: str) -> Optional[DigestView]:
    period_for(digest_type, utc_now())

    row = await self.repository.latest_by_type(LatestByTypeOptions(digest_type=digest_type))
    if row is None:
        return None

    return DigestView(
        id=str(row.id),
        type=row.digest_type,
        content=row.content or "",
        summary=row.summary or "",
        key_insights=list(row.key_insights or []),
        created_at=row.generated_at or row.period_end,
    )
