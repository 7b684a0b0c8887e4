"""Global error handlers — faults raised outside the Dispatcher keep the structured shape.

Invariants:
    - CivicApiError renders its own body and status
    - Unexpected exceptions become a 500 with the fault message
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.api.error_handlers import register_error_handlers
from app.core.errors import InvalidZipcodeError


@pytest.fixture
async def faulty_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/domain")
    async def domain():
        raise InvalidZipcodeError("abc")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("disk on fire")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_domain_error_uses_its_own_body(faulty_client):
    res = await faulty_client.get("/domain")
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid zipcode format", "supported": False}


async def test_unexpected_exception_becomes_structured_500(faulty_client):
    res = await faulty_client.get("/crash")
    assert res.status_code == 500
    assert res.json() == {
        "error": "Internal Server Error", "message": "disk on fire",
    }


async def test_unmatched_route_uses_not_found_body(faulty_client):
    res = await faulty_client.get("/missing")
    assert res.status_code == 404
    assert res.json()["message"] == "Route /missing not found"
