"""Serverless entry point — Mangum adapter exposing the ASGI app to Lambda.

Mangum translates API Gateway / function-URL events into ASGI requests, so the
serverless deployment runs the exact same gateway route and Dispatcher.
"""

from mangum import Mangum

from app.config import get_settings
from app.infrastructure.observability import setup_logging
from app.main import app, report_missing_settings

# lifespan="off" skips the FastAPI lifespan, so its startup work runs here
_settings = get_settings()
setup_logging(_settings.log_level, _settings.log_format)
report_missing_settings(_settings)

handler = Mangum(app, lifespan="off")
