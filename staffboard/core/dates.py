# staffboard/core/dates.py
from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Наивные даты считаются UTC, остальные переводятся в UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
