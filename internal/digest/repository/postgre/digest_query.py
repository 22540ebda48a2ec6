from sqlalchemy import func, select

from internal.model.digest import Digest
from ..option import LatestByTypeOptions


def build_latest_by_type_query(opt: LatestByTypeOptions):
    return (
        select(Digest)
        .where(Digest.digest_type == opt.digest_type)
        .order_by(func.coalesce(Digest.generated_at, Digest.period_end).desc())
        .limit(1)
    )


__all__ = ["build_latest_by_type_query"]
