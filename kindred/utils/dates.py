from datetime import datetime

SECONDS_PER_DAY = 24 * 60 * 60

def iso(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return dt.replace(microsecond=0).isoformat() + "Z"

def whole_days_between(earlier: datetime | None, later: datetime) -> int:
    """Floor of the elapsed days; 0 when ``earlier`` is unknown."""
    if earlier is None:
        return 0
    return int((later - earlier).total_seconds() // SECONDS_PER_DAY)
