from __future__ import annotations

from fastapi import APIRouter, Depends

from demo_app.models.schemas import WelcomeResponse
from demo_app.services.clock import ProcessClock
from demo_app.services.dependencies import get_clock

router = APIRouter(tags=["welcome"])


@router.get("/", response_model=WelcomeResponse)
async def welcome(clock: ProcessClock = Depends(get_clock)) -> WelcomeResponse:
    return WelcomeResponse(timestamp=clock.timestamp())
