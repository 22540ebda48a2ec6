"""Dashboard snapshot route."""

from fastapi import APIRouter, Depends

from internal.api.dependencies import get_pipeline
from internal.pipeline.interface import IPipelineUseCase

router = APIRouter()


@router.get("/api/dashboard")
async def get_dashboard(pipeline: IPipelineUseCase = Depends(get_pipeline)):
    data = await pipeline.get_dashboard_data()
    return data.to_dict()
