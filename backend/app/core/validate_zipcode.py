"""Zipcode Validation — candidate extraction and shape check for the lookup routes.

Invariants:
    - Query parameter wins over the trailing URL segment
    - A query key given several times is a list and never valid
    - A candidate is valid iff it is exactly five ASCII digits, nothing around it
    - No real-world zipcode table is consulted (shape only)
    - Pure and deterministic: same input -> same output

Design Decisions:
    - [0-9] with fullmatch over \\d with ^...$: \\d accepts Unicode digits and
      $ tolerates a trailing newline, both of which must be rejected
    - Trailing segment taken from the URL path only, never the query string
"""

import re
from typing import Mapping
from urllib.parse import urlsplit

from app.core.domain_types import (
    LookupOutcome, LookupRequest, Zipcode, ZIPCODE_QUERY_PARAM,
)

ZIPCODE_PATTERN = re.compile(r"[0-9]{5}")


def extract_candidate(
    query_params: Mapping[str, str | list[str]], raw_url: str,
) -> LookupRequest:
    """Pick the zipcode candidate from the query string, else the last path segment."""
    from_query = query_params.get(ZIPCODE_QUERY_PARAM)
    if from_query:
        return LookupRequest(raw_input=from_query)

    path = urlsplit(raw_url or "").path
    segment = path.rsplit("/", 1)[-1]
    return LookupRequest(raw_input=segment or None)


def is_valid_zipcode(candidate: str | list[str] | None) -> bool:
    """True when *candidate* is a single string of exactly five ASCII digits."""
    if not isinstance(candidate, str):
        return False
    return ZIPCODE_PATTERN.fullmatch(candidate) is not None


def classify_zipcode(request: LookupRequest) -> tuple[LookupOutcome, Zipcode | None]:
    """Classify a lookup request. Returns (outcome, zipcode-or-None)."""
    if is_valid_zipcode(request.raw_input):
        return LookupOutcome.ACCEPTED, Zipcode(request.raw_input)
    return LookupOutcome.REJECTED, None
