from datetime import datetime, timezone


def now_utc() -> datetime:
    """Aktualny czas UTC (timezone-aware)."""
    return datetime.now(timezone.utc)
