from __future__ import annotations

from fastapi import APIRouter, Depends

from demo_app.models.schemas import HealthResponse
from demo_app.services.clock import ProcessClock
from demo_app.services.dependencies import get_clock

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(clock: ProcessClock = Depends(get_clock)) -> HealthResponse:
    return HealthResponse(uptime=clock.uptime())
