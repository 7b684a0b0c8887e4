"""Dispatcher — maps a request path to exactly one handler.

Invariants:
    - Routing looks at the URL path only; the method never changes the winner
    - First matching route wins; unmatched paths get a structured 404
    - dispatch() is total: it returns a RouteResponse for every input, never raises
    - One structured log record per dispatch (route, outcome, status, duration)

Design Decisions:
    - Explicit route table over decorator registration (no auto-discovery)
    - Templates compile to anchored regexes; a {name} slot matches one
      non-empty path segment
    - Handlers are already guarded, but dispatch() keeps its own catch-all so
      a custom handler plugged in by a caller cannot break totality
"""

import logging
import re
import time
from dataclasses import dataclass, field

from app.core.domain_types import RouteRequest, RouteResponse
from app.core.errors import HandlerFaultError, RouteNotFoundError
from app.infrastructure.observability import elapsed_ms, log_invocation
from app.services.handlers import (
    Handler, lookup_zipcode, ping, report_health, report_stats,
)

logger = logging.getLogger(__name__)

HEALTH_PATH = "/health"
NOT_FOUND_ROUTE = "not_found"

_SLOT = re.compile(r"\{(\w+)\}")


def compile_template(template: str) -> re.Pattern:
    """Compile '/a/{b}' into an anchored pattern; slots match one segment."""
    parts = []
    last = 0
    for slot in _SLOT.finditer(template):
        parts.append(re.escape(template[last:slot.start()]))
        parts.append(f"(?P<{slot.group(1)}>[^/]+)")
        last = slot.end()
    parts.append(re.escape(template[last:]))
    return re.compile("".join(parts))


@dataclass(frozen=True)
class Route:
    """A named binding from a path template to a handler."""
    name: str
    template: str
    handler: Handler
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "pattern", compile_template(self.template))

    def matches(self, path: str) -> bool:
        return self.pattern.fullmatch(path) is not None


class Dispatcher:
    """Selects and runs the handler bound to a request path."""

    def __init__(self, routes: list[Route]):
        self.routes = list(routes)

    def resolve(self, path: str) -> Route | None:
        """Return the first route matching *path*, or None."""
        for route in self.routes:
            if route.matches(path):
                return route
        return None

    def dispatch(self, request: RouteRequest) -> RouteResponse:
        """Route *request* to its handler and return the handler's response."""
        started = time.perf_counter()
        route = self.resolve(request.path)
        route_name = route.name if route else NOT_FOUND_ROUTE

        if route is None:
            response = not_found(request.path)
        else:
            try:
                response = route.handler(request)
            except Exception as exc:
                fault = HandlerFaultError("Internal Server Error", exc)
                logger.error(
                    f"Route {route.name} raised past its guard: {fault.message}",
                    extra={"error_code": fault.code, "path": request.path},
                    exc_info=True,
                )
                response = RouteResponse(fault.http_status, fault.to_response())

        log_invocation(
            logger, route_name, request, response, elapsed_ms(started),
        )
        return response


def not_found(path: str) -> RouteResponse:
    error = RouteNotFoundError(path)
    return RouteResponse(error.http_status, error.to_response())


def default_routes() -> list[Route]:
    """The production route table."""
    return [
        Route("health", HEALTH_PATH, report_health),
        Route("zipcode_lookup", "/zipcode-lookup", lookup_zipcode),
        Route("zipcode_lookup_by_path", "/zipcodes/lookup/{zipcode}", lookup_zipcode),
        Route("stats", "/stats", report_stats),
        Route("ping", "/ping", ping),
    ]


def build_dispatcher() -> Dispatcher:
    return Dispatcher(default_routes())
