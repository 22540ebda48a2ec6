from sqlalchemy import func, select

from internal.model import SentimentSnapshot, Theme, CompetitorMention, Community
from ..option import ListWindowOptions


def _window(stmt, column, opt: ListWindowOptions):
    if opt.since is not None:
        stmt = stmt.where(column >= opt.since)
    if opt.until is not None:
        stmt = stmt.where(column < opt.until)
    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)
    return stmt


def build_list_snapshots_query(opt: ListWindowOptions):
    stmt = select(SentimentSnapshot).order_by(SentimentSnapshot.timestamp.asc())
    return _window(stmt, SentimentSnapshot.timestamp, opt)


def build_list_themes_query(opt: ListWindowOptions):
    stmt = select(Theme).order_by(Theme.frequency.desc(), Theme.last_seen_at.desc())
    return _window(stmt, Theme.last_seen_at, opt)


def build_list_competitor_mentions_query(opt: ListWindowOptions):
    stmt = select(CompetitorMention).order_by(CompetitorMention.mentioned_at.asc())
    return _window(stmt, CompetitorMention.mentioned_at, opt)


def build_list_communities_query(opt: ListWindowOptions):
    stmt = select(Community).order_by(Community.last_activity_at.desc())
    return _window(stmt, Community.last_activity_at, opt)


def build_count_communities_by_name_query(opt: ListWindowOptions):
    key = func.lower(func.trim(Community.name))
    stmt = select(key.label("key"), func.count(Community.id)).group_by(key)
    return _window(stmt, Community.last_activity_at, opt)


__all__ = [
    "build_list_snapshots_query",
    "build_list_themes_query",
    "build_list_competitor_mentions_query",
    "build_list_communities_query",
    "build_count_communities_by_name_query",
]
