"""Pipeline trigger route.

POST /api/pipeline/run runs one collection + analysis cycle. GET is accepted
for manual triggering.
"""

from fastapi import APIRouter, Depends

from internal.api.dependencies import get_pipeline, verify_cron_lenient
from internal.pipeline.interface import IPipelineUseCase

router = APIRouter()


@router.api_route(
    "/api/pipeline/run",
    methods=["GET", "POST"],
    dependencies=[Depends(verify_cron_lenient)],
)
async def run_pipeline(pipeline: IPipelineUseCase = Depends(get_pipeline)):
    result = await pipeline.run()
    return {"success": True, **result.to_dict()}
