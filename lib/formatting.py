# =============================================================================
# lib/formatting.py - Display Labels for Times, Durations and Dates
# =============================================================================
# Pure, stateless helpers used by the schedule builder and the call sheet.
# Nothing here touches the record store.
#
# Usage:
#   from lib.formatting import format_time_label, format_duration_label
#   format_time_label("13:05")                 # "1:05 PM"
#   format_duration_label("09:00", "11:30")    # "2.5h"
# =============================================================================

from datetime import date, datetime, time

# Nominal calendar day both times are placed on when computing a duration
_NOMINAL_DAY = date(2000, 1, 1)


def parse_time(value: str | time) -> time:
    """
    Parse a stored time-of-day value.

    Accepts "HH:MM" and "HH:MM:SS" (the backend's time column format)
    or an existing time object.

    Raises:
        ValueError: If the string is not a valid time of day
    """
    if isinstance(value, time):
        return value
    return time.fromisoformat(value.strip())


def format_time_label(value: str | time) -> str:
    """
    Render a time of day on a 12-hour clock.

    Example:
        format_time_label("13:05")  # "1:05 PM"
        format_time_label("00:30")  # "12:30 AM"
    """
    parsed = parse_time(value)
    hour = parsed.hour % 12 or 12
    suffix = "AM" if parsed.hour < 12 else "PM"
    return f"{hour}:{parsed.minute:02d} {suffix}"


def format_duration_label(start: str | time, end: str | time | None) -> str:
    """
    Render the elapsed time between two times on the same day.

    Under one hour the label is whole minutes ("30min"); otherwise hours
    with one decimal place ("2.5h"). No end time gives "".
    """
    if not end:
        return ""

    start_dt = datetime.combine(_NOMINAL_DAY, parse_time(start))
    end_dt = datetime.combine(_NOMINAL_DAY, parse_time(end))
    diff_seconds = (end_dt - start_dt).total_seconds()
    diff_hours = diff_seconds / 3600

    if diff_hours < 1:
        return f"{round(diff_seconds / 60)}min"
    return f"{diff_hours:.1f}h"


def format_date_label(value: str | date | None) -> str | None:
    """
    Render a calendar date as M/D/YYYY, or None when absent.

    Example:
        format_date_label("2025-03-07")  # "3/7/2025"
    """
    if not value:
        return None
    parsed = value if isinstance(value, date) else date.fromisoformat(value)
    return f"{parsed.month}/{parsed.day}/{parsed.year}"
