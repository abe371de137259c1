from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from demo_app.config import Settings
from demo_app.models.schemas import MetricsSnapshot
from demo_app.observability.metrics import get_metrics
from demo_app.services.dependencies import get_app_settings

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics", response_model=MetricsSnapshot)
async def metrics(settings: Settings = Depends(get_app_settings)) -> MetricsSnapshot:
    if not settings.enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Not Found")
    return MetricsSnapshot.model_validate(get_metrics().snapshot())
