from typing import Optional, Sequence

from ..type import AlertCandidate
from ..repository.option import CreateManyOptions


async def save(
    self, candidates: Sequence[AlertCandidate], batch_id: Optional[str] = None
) -> int:
    if not candidates:
        return 0

    count = await self.repository.create_many(
        CreateManyOptions(data=[c.to_dict() for c in candidates], batch_id=batch_id)
    )
    self.logger.info(f"internal.alert.usecase.save: stored {count} alerts (batch={batch_id})")
    return count
