from sqlalchemy import func, literal_column, select
from sqlalchemy.dialects.postgresql import insert

from internal.model.post import Post
from ..option import ListRecentOptions, ListByIdsOptions, CountByPlatformOptions
from .helpers import IDENTITY_COLUMNS, parse_uuids


def build_upsert_query(values: dict):
    table = Post.__table__
    stmt = insert(table).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.platform_id, table.c.external_id],
        set_={
            key: stmt.excluded[key] for key in values if key not in IDENTITY_COLUMNS
        },
    )
    # xmax is zero only for rows created by this statement
    return stmt.returning(table.c.id, literal_column("(xmax = 0)").label("inserted"))


def build_list_recent_query(opt: ListRecentOptions):
    stmt = select(Post)

    if opt.since is not None:
        stmt = stmt.where(Post.collected_at >= opt.since)

    stmt = stmt.order_by(Post.collected_at.desc())

    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_list_by_ids_query(opt: ListByIdsOptions):
    return select(Post).where(Post.id.in_(parse_uuids(opt.ids)))


def build_count_by_platform_query(opt: CountByPlatformOptions):
    stmt = select(Post.platform_id, func.count(Post.id)).group_by(Post.platform_id)

    if opt.since is not None:
        stmt = stmt.where(Post.collected_at >= opt.since)

    return stmt


def build_latest_posted_at_query():
    return select(func.max(Post.posted_at))


__all__ = [
    "build_upsert_query",
    "build_list_recent_query",
    "build_list_by_ids_query",
    "build_count_by_platform_query",
    "build_latest_posted_at_query",
]
