"""Structured Logging — JSON formatter, setup, and the per-dispatch invocation record.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (route, outcome, status_code, duration_ms, error_code) surfaced when present
    - JSON format in production, human-readable in development
    - Exactly one invocation record per dispatched request

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
    - Invocation logging lives here, not in handlers: handlers stay free of tracing
"""

import json
import logging
import time
from datetime import datetime, timezone

from app.core.domain_types import RouteRequest, RouteResponse, outcome_for_status

_EXTRA_KEYS = (
    "route", "method", "path", "query", "outcome",
    "status_code", "duration_ms", "error_code",
)

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application. Safe to call more than once."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def elapsed_ms(started: float) -> float:
    """Milliseconds since *started* (a time.perf_counter() reading)."""
    return round((time.perf_counter() - started) * 1000, 3)


def log_invocation(
    logger: logging.Logger,
    route: str,
    request: RouteRequest,
    response: RouteResponse,
    duration_ms: float,
) -> None:
    """Emit the single structured record describing one handler invocation."""
    outcome = outcome_for_status(response.status_code)
    level = logging.ERROR if response.status_code >= 500 else logging.INFO
    logger.log(
        level,
        f"{request.method} {request.path} {response.status_code} in {duration_ms}ms",
        extra={
            "route": route,
            "method": request.method,
            "path": request.path,
            "query": dict(request.query_params) or None,
            "outcome": outcome.value,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
