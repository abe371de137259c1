from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from demo_app.config import Settings, get_settings
from demo_app.main import create_app
from demo_app.observability.metrics import reset_metrics
from demo_app.services.clock import ProcessClock


class ManualTime:
    """Drivable wall + monotonic time source pair."""

    def __init__(self, start: datetime | None = None) -> None:
        self._wall = start or datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)
        self._monotonic = 1000.0

    def wall(self) -> datetime:
        return self._wall

    def monotonic(self) -> float:
        return self._monotonic

    def advance(self, seconds: float) -> None:
        self._wall += timedelta(seconds=seconds)
        self._monotonic += seconds


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("PORT", "HOST", "LOG_LEVEL", "APP_NAME", "ENABLE_METRICS_ENDPOINT", "UNMETERED_PATHS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_metrics()

    yield

    reset_metrics()
    get_settings.cache_clear()


@pytest.fixture
def manual_time() -> ManualTime:
    return ManualTime()


@pytest.fixture
def app() -> FastAPI:
    return create_app(Settings())


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def manual_client(manual_time: ManualTime) -> AsyncIterator[AsyncClient]:
    clock = ProcessClock.start(wall=manual_time.wall, monotonic=manual_time.monotonic)
    transport = ASGITransport(app=create_app(Settings(), clock=clock))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
