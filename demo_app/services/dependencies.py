from __future__ import annotations

from fastapi import Request

from demo_app.config import Settings
from demo_app.services.clock import ProcessClock


def get_clock(request: Request) -> ProcessClock:
    clock = getattr(request.app.state, "clock", None)
    if clock is None:
        raise RuntimeError("ProcessClock was not attached to app.state; build the app with create_app()")
    return clock


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
