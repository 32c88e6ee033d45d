"""Browser timestamp conversion.

Each browser counts visit times from its own epoch:
- Chrome: microseconds since 1601-01-01 00:00:00 UTC (WebKit time)
- Firefox: microseconds since 1970-01-01 00:00:00 UTC (PRTime)
- Safari: seconds since 2001-01-01 00:00:00 UTC (Core Data), stored as REAL
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from history_export.exceptions import EpochOverflowError

CHROME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)
FIREFOX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
SAFARI_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)


def _offset(epoch: datetime, unit: str, amount: int, raw: int | float) -> datetime:
    try:
        return epoch + timedelta(**{unit: amount})
    except OverflowError as e:
        raise EpochOverflowError(
            f"Timestamp {raw!r} overflows when added to epoch {epoch.isoformat()}"
        ) from e


def chrome_to_utc(raw: int) -> datetime:
    """Convert a Chrome ``visits.visit_time`` value to a UTC datetime."""
    return _offset(CHROME_EPOCH, "microseconds", raw, raw)


def firefox_to_utc(raw: int) -> datetime:
    """Convert a Firefox ``moz_historyvisits.visit_date`` value to a UTC datetime."""
    return _offset(FIREFOX_EPOCH, "microseconds", raw, raw)


def safari_to_utc(raw: float) -> datetime:
    """Convert a Safari ``history_visits.visit_time`` value to a UTC datetime.

    Sub-second precision is dropped: the value is truncated toward zero,
    not rounded.
    """
    if math.isnan(raw):
        raise ValueError(f"Safari timestamp is not a number: {raw!r}")
    if math.isinf(raw):
        raise EpochOverflowError(
            f"Timestamp {raw!r} overflows when added to epoch {SAFARI_EPOCH.isoformat()}"
        )
    return _offset(SAFARI_EPOCH, "seconds", math.trunc(raw), raw)
