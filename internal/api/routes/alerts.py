"""Alerts API routes.

GET  /api/alerts - active alerts, most severe first
POST /api/alerts - acknowledge an alert by id
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from internal.api.dependencies import get_pipeline
from internal.api.schemas import AcknowledgeAlertRequest, alert_to_dict, error_body
from internal.model.timestamp import utc_now
from internal.pipeline.interface import IPipelineUseCase

router = APIRouter()


@router.get("/api/alerts")
async def get_alerts(pipeline: IPipelineUseCase = Depends(get_pipeline)):
    alerts = await pipeline.get_active_alerts()
    now = utc_now()
    return {"success": True, "alerts": [alert_to_dict(a, now) for a in alerts]}


@router.post("/api/alerts")
async def acknowledge_alert(
    body: AcknowledgeAlertRequest,
    pipeline: IPipelineUseCase = Depends(get_pipeline),
):
    if not body.alert_id:
        return JSONResponse(status_code=400, content=error_body("alertId required"))

    # Acknowledging an unknown or already-acknowledged alert is not an error
    await pipeline.acknowledge_alert(body.alert_id)
    return {"success": True}
