import uuid

from sqlalchemy import case, func, select, update

from internal.model.alert import Alert
from internal.model.constant import SEVERITY_RANK
from ..option import ListActiveOptions

# Severity text is not ordered lexicographically; sort on an explicit rank.
severity_rank = case(SEVERITY_RANK, value=Alert.severity, else_=-1)


def build_list_active_query(opt: ListActiveOptions):
    stmt = (
        select(Alert)
        .where(Alert.is_acknowledged.is_(False))
        .order_by(severity_rank.desc(), Alert.created_at.desc())
    )

    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_acknowledge_query(alert_id: uuid.UUID):
    # Only unacknowledged rows match, so a second call updates nothing
    return (
        update(Alert)
        .where(Alert.id == alert_id, Alert.is_acknowledged.is_(False))
        .values(is_acknowledged=True, acknowledged_at=func.now())
    )


__all__ = [
    "severity_rank",
    "build_list_active_query",
    "build_acknowledge_query",
]
