"""Week identity helpers."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Kolkata"


def week_start_for(day: date, offset_weeks: int = 0) -> str:
    """Return the ISO date of the Monday of ``day``'s week, shifted by weeks.

    Sunday belongs to the week that started the previous Monday.
    """
    monday = day - timedelta(days=day.weekday())
    return (monday + timedelta(weeks=offset_weeks)).isoformat()


def current_week_start(
    timezone_name: str = DEFAULT_TIMEZONE,
    offset_weeks: int = 0,
    now: datetime | None = None,
) -> str:
    """Return the Monday of the current week in the planner timezone."""
    tz = ZoneInfo(timezone_name)
    moment = now or datetime.now(tz=UTC)
    return week_start_for(moment.astimezone(tz).date(), offset_weeks)
