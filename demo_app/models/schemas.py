from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

WELCOME_MESSAGE = "Welcome to Node.js Demo App!"


class WelcomeResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: Literal["Welcome to Node.js Demo App!"] = WELCOME_MESSAGE
    status: Literal["success"] = "success"
    timestamp: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["healthy"] = "healthy"
    uptime: float = Field(ge=0.0)


class LatencySnapshot(BaseModel):
    count: int
    sum_ms: float
    max_ms: float


class MetricsSnapshot(BaseModel):
    counters: dict[str, int]
    latency_ms: dict[str, LatencySnapshot]
