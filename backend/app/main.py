"""Maryland Civic API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CivicApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Missing optional secrets logged as warnings at startup, never fatal:
      every endpoint serves stubbed data without them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import gateway
from app.config import Settings, get_settings, missing_optional_settings
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def report_missing_settings(settings: Settings) -> list[str]:
    """Log one warning per optional secret that is not set. Returns their names."""
    missing = missing_optional_settings(settings)
    for name in missing:
        logger.warning(f"Optional: {name} is not set")
    return missing


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    report_missing_settings(settings)
    logger.info("Maryland Civic API started")
    yield
    logger.info("Maryland Civic API shutting down")


app = FastAPI(
    title="Maryland Civic API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(gateway.router)
