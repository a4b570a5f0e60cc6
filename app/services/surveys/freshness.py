"""Cache freshness policy."""

from datetime import UTC, datetime

STALE_AFTER = 3600


def is_stale(last_updated: datetime, now: datetime, threshold_seconds: float = STALE_AFTER) -> bool:
    """True iff more than ``threshold_seconds`` passed since ``last_updated``."""
    return (now - last_updated).total_seconds() > threshold_seconds


def utc_now() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(UTC)
