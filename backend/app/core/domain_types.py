"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Zipcode only ever wraps a string already matching five ASCII digits
    - SUPPORTED_STATE is the single jurisdiction every accepted lookup reports
    - RouteRequest/RouteResponse are the only shapes crossing the transport boundary
    - All outcome kinds encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses for request/response: built per request, never mutated
    - str Enums: serialize to JSON without custom encoders (log records, bodies)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, NewType


# ─── Value Types ─────────────────────────────────────────────────

Zipcode = NewType("Zipcode", str)


# ─── Constants ───────────────────────────────────────────────────

SUPPORTED_STATE = "MD"

LOOKUP_MESSAGE = (
    "Showing Maryland state legislation. "
    "Enter any Maryland ZIP code to explore bills."
)

ZIPCODE_QUERY_PARAM = "zipcode"


# ─── Enums ───────────────────────────────────────────────────────

class LookupOutcome(str, Enum):
    """The three outcome kinds a handler invocation can end in."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FAILED = "failed"


def outcome_for_status(status_code: int) -> LookupOutcome:
    """Classify a response status: 5xx failed, 4xx rejected, otherwise accepted."""
    if status_code >= 500:
        return LookupOutcome.FAILED
    if status_code >= 400:
        return LookupOutcome.REJECTED
    return LookupOutcome.ACCEPTED


# ─── Transport Boundary ──────────────────────────────────────────

@dataclass(frozen=True)
class LookupRequest:
    """A zipcode candidate as extracted from the request, or None if absent."""
    raw_input: str | list[str] | None


@dataclass(frozen=True)
class RouteRequest:
    """Inbound request as seen by the dispatcher."""
    path: str
    method: str = "GET"
    query_params: Mapping[str, str | list[str]] = field(default_factory=dict)
    raw_url: str = ""

    def __post_init__(self):
        if not self.raw_url:
            object.__setattr__(self, "raw_url", self.path)


@dataclass(frozen=True)
class RouteResponse:
    """Outbound response: status code plus a JSON-serializable body."""
    status_code: int
    body: Any
