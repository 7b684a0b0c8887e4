"""Timestamps — ISO-8601 rendering shared by every time-bearing payload."""

from datetime import datetime, timezone


def iso_timestamp(moment: datetime | None = None) -> str:
    """Render *moment* (default: now) as UTC ISO-8601 with millisecond precision.

    Matches the ``2026-01-31T12:00:00.000Z`` form browsers emit, so clients
    can parse it with ``Date``.
    """
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
