from typing import List, Optional

from internal.model.alert import Alert
from ..errors import ErrInvalidInput
from ..repository.option import ListActiveOptions


async def list_active(self, limit: Optional[int] = None) -> List[Alert]:
    """Unacknowledged alerts, highest severity first, newest first within a severity."""
    if limit is not None and limit <= 0:
        raise ErrInvalidInput("limit must be > 0")

    return await self.repository.list_active(ListActiveOptions(limit=limit or 0))
