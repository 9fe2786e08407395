"""Reference clock and day/night classification for display."""

from datetime import date, datetime, timezone
from typing import Optional

# Every runner resolves "today" in this zone so all jobs agree on the date.
REFERENCE_TIMEZONE = timezone.utc

DAY_START_HOUR = 6
DAY_END_HOUR = 18  # exclusive


def reference_now() -> datetime:
    """Current time in the reference timezone."""
    return datetime.now(REFERENCE_TIMEZONE)


def reference_today(now: Optional[datetime] = None) -> date:
    """Calendar date of `now` (default: current time) in the reference timezone."""
    if now is None:
        return reference_now().date()
    if now.tzinfo is not None:
        now = now.astimezone(REFERENCE_TIMEZONE)
    return now.date()


def reference_hour(now: datetime) -> int:
    """Hour of `now` in the reference timezone; naive times are taken as already there."""
    if now.tzinfo is not None:
        now = now.astimezone(REFERENCE_TIMEZONE)
    return now.hour


def is_day_hour(hour: int) -> bool:
    """True for hours in [DAY_START_HOUR, DAY_END_HOUR)."""
    return DAY_START_HOUR <= hour < DAY_END_HOUR


def is_night_hour(hour: int) -> bool:
    return not is_day_hour(hour)
