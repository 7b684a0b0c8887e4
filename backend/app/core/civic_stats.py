"""Civic Stats — fixed aggregate counters for the Maryland legislature dashboard.

Invariants:
    - Values are constants; no source is queried
    - Returns a fresh dict on every call (callers may mutate their copy)
"""

# councilMembers counts House districts, neighborhoodsActive counts counties
_SNAPSHOT: dict[str, int] = {
    "totalBills": 50,
    "councilMembers": 47,
    "neighborhoodsActive": 24,
    "totalVotes": 2340,
    "neighborsEngaged": 1638,
}


def stats_snapshot() -> dict[str, int]:
    """Return the counter snapshot. Pure, no IO."""
    return dict(_SNAPSHOT)
