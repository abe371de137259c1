"""Observability helpers for the demo service.

Request IDs + structlog contextvars for JSON access logs, plus an in-memory
metrics snapshot that can be exposed for local debugging.
"""

from demo_app.observability.logging import configure_logging
from demo_app.observability.metrics import get_metrics, reset_metrics
from demo_app.observability.middleware import RequestContextMiddleware

__all__ = ["RequestContextMiddleware", "configure_logging", "get_metrics", "reset_metrics"]
