from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as ISO-8601 UTC with milliseconds, e.g. 2026-10-18T12:00:00.123Z."""

    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ProcessClock:
    """Process start instant plus the time sources used to measure against it.

    Built once during app construction and read-only afterwards. Uptime is
    measured on the monotonic source so it never goes backwards when the
    wall clock is adjusted.
    """

    started_at: datetime
    started_monotonic: float
    wall: Callable[[], datetime] = field(default=utc_now, repr=False, compare=False)
    monotonic: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    @classmethod
    def start(
        cls,
        wall: Callable[[], datetime] = utc_now,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> ProcessClock:
        # Sampling both sources here surfaces a broken time source at startup.
        return cls(started_at=wall(), started_monotonic=monotonic(), wall=wall, monotonic=monotonic)

    def now(self) -> datetime:
        return self.wall()

    def timestamp(self) -> str:
        return format_timestamp(self.now())

    def uptime(self) -> float:
        return max(0.0, self.monotonic() - self.started_monotonic)
