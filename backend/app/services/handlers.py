"""Route Handlers — one function per capability, each guarded by the fault convention.

Invariants:
    - Every handler takes a RouteRequest and returns a RouteResponse
    - Handlers never raise: CivicApiError -> its own body, anything else -> 500
    - The zipcode handler is the single implementation behind both lookup routes
    - Health reports configuration presence only (booleans), never values

Design Decisions:
    - guarded() decorator over per-handler try/except: one copy of the
      fault-to-500 wrapper instead of one per handler
    - Pure core (validate_zipcode, civic_stats) called from this thin imperative
      shell; settings read here, not in core
"""

import functools
import logging
from typing import Callable

from app.config import configuration_presence, get_settings
from app.core.civic_stats import stats_snapshot
from app.core.domain_types import LookupOutcome, RouteRequest, RouteResponse
from app.core.errors import CivicApiError, HandlerFaultError, InvalidZipcodeError
from app.core.timestamps import iso_timestamp
from app.core.validate_zipcode import classify_zipcode, extract_candidate
from app.schemas.lookup import LookupAccepted
from app.schemas.system import (
    EnvPresence, LivenessPayload, PingPayload, StatsSnapshot,
)

logger = logging.getLogger(__name__)

Handler = Callable[[RouteRequest], RouteResponse]


def guarded(failure_label: str) -> Callable[[Handler], Handler]:
    """Convert errors raised by a handler into structured responses."""

    def decorate(fn: Handler) -> Handler:
        @functools.wraps(fn)
        def wrapper(request: RouteRequest) -> RouteResponse:
            try:
                return fn(request)
            except CivicApiError as exc:
                return RouteResponse(exc.http_status, exc.to_response())
            except Exception as exc:
                fault = HandlerFaultError(failure_label, exc)
                logger.error(
                    f"{fn.__name__} failed: {fault.message}",
                    extra={"error_code": fault.code, "path": request.path},
                    exc_info=True,
                )
                return RouteResponse(fault.http_status, fault.to_response())

        return wrapper

    return decorate


@guarded("Failed to lookup zipcode")
def lookup_zipcode(request: RouteRequest) -> RouteResponse:
    """Validate the zipcode candidate and answer Accepted or Rejected."""
    lookup = extract_candidate(request.query_params, request.raw_url)
    outcome, zipcode = classify_zipcode(lookup)
    if outcome is not LookupOutcome.ACCEPTED:
        raise InvalidZipcodeError(lookup.raw_input)
    return RouteResponse(200, LookupAccepted(zipcode=zipcode).to_body())


@guarded("Health check failed")
def report_health(request: RouteRequest) -> RouteResponse:
    settings = get_settings()
    presence = configuration_presence(settings)
    payload = LivenessPayload(
        timestamp=iso_timestamp(),
        env=EnvPresence(
            node_env=settings.node_env,
            has_open_states_key=presence["OPENSTATES_API_KEY"],
            has_legi_scan_key=presence["LEGISCAN_API_KEY"],
            has_database_url=presence["DATABASE_URL"],
        ),
    )
    return RouteResponse(200, payload.to_body())


@guarded("Failed to fetch stats")
def report_stats(request: RouteRequest) -> RouteResponse:
    return RouteResponse(200, StatsSnapshot(**stats_snapshot()).to_body())


@guarded("Failed to ping")
def ping(request: RouteRequest) -> RouteResponse:
    return RouteResponse(200, PingPayload(time=iso_timestamp()).to_body())
