"""Digest API routes.

GET  /api/digests?type=daily|weekly          - latest digest or null
POST /api/digests/generate?type=daily|weekly - generate one now
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from internal.api.dependencies import get_pipeline, verify_cron_strict
from internal.api.schemas import error_body
from internal.model.constant import DIGEST_DAILY, DIGEST_TYPES, DIGEST_WEEKLY
from internal.pipeline.interface import IPipelineUseCase

router = APIRouter()


def _invalid_type(digest_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_body(
            f"type must be one of {', '.join(DIGEST_TYPES)}, got {digest_type!r}"
        ),
    )


@router.get("/api/digests")
async def get_latest_digest(
    digest_type: str = Query(default=DIGEST_DAILY, alias="type"),
    pipeline: IPipelineUseCase = Depends(get_pipeline),
):
    if digest_type not in DIGEST_TYPES:
        return _invalid_type(digest_type)

    digest = await pipeline.get_latest_digest(digest_type)
    return digest.to_dict() if digest is not None else None


@router.post("/api/digests/generate", dependencies=[Depends(verify_cron_strict)])
async def generate_digest(
    digest_type: str = Query(default=DIGEST_DAILY, alias="type"),
    pipeline: IPipelineUseCase = Depends(get_pipeline),
):
    if digest_type not in DIGEST_TYPES:
        return _invalid_type(digest_type)

    if digest_type == DIGEST_WEEKLY:
        digest_id = await pipeline.run_weekly_digest()
    else:
        digest_id = await pipeline.run_daily_digest()

    return {"success": True, "digestId": digest_id, "type": digest_type}
