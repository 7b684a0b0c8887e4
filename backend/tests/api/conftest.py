"""API test fixtures — FastAPI app over an in-process ASGI transport.

Invariants:
    - No network: httpx talks to the app through ASGITransport
    - Lifespan is not run, so tests never reconfigure root logging
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
