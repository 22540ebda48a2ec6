from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from ..type import CollectedPost


def matches_keywords(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match against any tracked keyword."""
    haystack = (text or "").lower()
    return any(kw.lower() in haystack for kw in keywords if kw)


def dedupe_by_external_id(posts: Iterable[CollectedPost]) -> List[CollectedPost]:
    seen = set()
    unique: List[CollectedPost] = []
    for post in posts:
        if post.external_id in seen:
            continue
        seen.add(post.external_id)
        unique.append(post)
    return unique


def from_unix(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def parse_iso(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def join_text(*parts: Optional[str]) -> str:
    return "\n\n".join(p or "" for p in parts).strip()


__all__ = [
    "matches_keywords",
    "dedupe_by_external_id",
    "from_unix",
    "parse_iso",
    "join_text",
]
