"""
Sponsor input handling that sits between the router and the repository.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from fastapi import HTTPException, status

# RFC 3339 date-time: full date, a time part, and an optional offset.
_DATE_TIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})?$"
)

INVALID_EXPIRY = "expiry must be an RFC 3339 date-time, e.g. 2025-01-31T00:00:00Z."


def parse_expiry(value: str) -> int:
    """
    Convert an RFC 3339 date-time into unix seconds.

    A value without a UTC offset is read as UTC. Bare dates and anything
    unparsable are rejected with a 400 rather than stored as the epoch.
    """
    raw = (value or "").strip()
    if not raw:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="expiry is required.")
    if not _DATE_TIME.match(raw):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_EXPIRY)
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_EXPIRY) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())
