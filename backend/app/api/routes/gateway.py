"""Gateway Route — the single FastAPI binding that hands every request to the Dispatcher.

Invariants:
    - Every path reaches the Dispatcher (catch-all route)
    - The route contains no business logic: build RouteRequest, dispatch, serialize
    - raw_url is the path plus the query string, as the platform delivered it
    - Every method reaches the Dispatcher, HEAD and OPTIONS included
    - A repeated query key arrives as a list, never silently truncated

Design Decisions:
    - One catch-all binding over one FastAPI route per endpoint: the Dispatcher
      stays the only route table, so HTTP and serverless callers cannot drift
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.domain_types import RouteRequest
from app.services.dispatcher import build_dispatcher

logger = logging.getLogger(__name__)
router = APIRouter(tags=["gateway"])

dispatcher = build_dispatcher()

_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def collect_query_params(request: Request) -> dict[str, str | list[str]]:
    """Flatten query params; a key given more than once keeps every value as a list."""
    params: dict[str, str | list[str]] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        params[key] = values[0] if len(values) == 1 else values
    return params


def to_route_request(request: Request) -> RouteRequest:
    """Translate a Starlette request into the dispatcher's boundary type."""
    raw_url = request.url.path
    if request.url.query:
        raw_url = f"{raw_url}?{request.url.query}"
    return RouteRequest(
        path=request.url.path,
        method=request.method,
        query_params=collect_query_params(request),
        raw_url=raw_url,
    )


@router.api_route("/{full_path:path}", methods=_METHODS, include_in_schema=False)
def gateway(full_path: str, request: Request) -> JSONResponse:
    response = dispatcher.dispatch(to_route_request(request))
    return JSONResponse(status_code=response.status_code, content=response.body)
