import json
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from internal.model.post import Post
from internal.model.timestamp import parse_timestamp
from .constant import ANALYSIS_USER_PROMPT, JSON_FENCE_PATTERN, POSTS_PLACEHOLDER
from .errors import ErrMalformedAnalysisPayload
from .type import AnalysisPayload


def extract_json_payload(text: str) -> str:
    """Return the fenced block if there is one, otherwise the text itself."""
    match = JSON_FENCE_PATTERN.search(text or "")
    if match:
        return match.group(1).strip()
    return (text or "").strip()


def parse_analysis_payload(text: str) -> AnalysisPayload:
    raw = extract_json_payload(text)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ErrMalformedAnalysisPayload(f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ErrMalformedAnalysisPayload("expected a JSON object")

    try:
        return AnalysisPayload.model_validate(data)
    except ValidationError as exc:
        raise ErrMalformedAnalysisPayload(
            f"schema mismatch: {exc.error_count()} error(s): {exc}"
        ) from exc


def serialize_posts(posts: Sequence[Post], char_budget: int) -> List[Dict[str, Any]]:
    serialized = []
    for post in posts:
        posted_at = parse_timestamp(post.posted_at)
        serialized.append(
            {
                "id": str(post.id),
                "platform": post.platform_id,
                "content": (post.content or "")[:char_budget],
                "author": post.author,
                "engagement": post.engagement_score,
                "posted_at": posted_at.isoformat() if posted_at else None,
                "metadata": post.post_metadata or {},
            }
        )
    return serialized


def build_user_prompt(posts: Sequence[Post], char_budget: int) -> str:
    posts_json = json.dumps(
        serialize_posts(posts, char_budget), indent=2, ensure_ascii=False, default=str
    )
    return ANALYSIS_USER_PROMPT.replace(POSTS_PLACEHOLDER, posts_json)


__all__ = [
    "extract_json_payload",
    "parse_analysis_payload",
    "serialize_posts",
    "build_user_prompt",
]
