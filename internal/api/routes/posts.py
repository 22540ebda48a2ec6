"""Posts lookup route.

GET /api/posts?ids=a,b,c - summaries for the given post ids (max 50)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from internal.api.dependencies import get_pipeline
from internal.api.schemas import error_body
from internal.model.timestamp import utc_now
from internal.pipeline.interface import IPipelineUseCase
from internal.post.constant import DEFAULT_MAX_IDS

router = APIRouter()


@router.get("/api/posts")
async def get_posts(
    ids: Optional[str] = Query(default=None),
    pipeline: IPipelineUseCase = Depends(get_pipeline),
):
    if ids is None:
        return JSONResponse(
            status_code=400,
            content=error_body("ids query parameter required (comma-separated UUIDs)"),
        )

    wanted = [i.strip() for i in ids.split(",") if i.strip()][:DEFAULT_MAX_IDS]
    if not wanted:
        return []

    posts = await pipeline.get_posts_by_ids(wanted)
    now = utc_now()
    return [post.to_dict(now) for post in posts]
