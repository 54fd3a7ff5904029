"""Parse, validate and format reminder times."""

import re
from datetime import datetime

from domains.errors import ScheduleValidationError

MISSING_FIELDS_MESSAGE = "Please provide both time and title for the event."

_TIME_RE = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*$')


def parse_time(time_str: str) -> tuple[int, int]:
    """Parse a 24-hour ``H:MM`` or ``HH:MM`` string to (hour, minute).

    Raises:
        ScheduleValidationError: if the string is not a valid time of day
    """
    match = _TIME_RE.match(time_str or "")
    if not match:
        raise ScheduleValidationError(f"Invalid time '{time_str}' - use HH:MM (24-hour).")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ScheduleValidationError(f"Invalid time '{time_str}' - hour must be 0-23 and minute 0-59.")

    return hour, minute


def normalize_time(time_str: str) -> str:
    """Return the canonical zero-padded ``HH:MM`` form."""
    hour, minute = parse_time(time_str)
    return f"{hour:02d}:{minute:02d}"


def validate_event_input(time_str: str | None, title: str | None,
                         description: str | None = None) -> tuple[str, str, str]:
    """Validate user input for a new or edited event.

    Args:
        time_str: Trigger time, ``HH:MM``
        title: Event title (must not be blank)
        description: Optional description

    Returns:
        Tuple of (time, title, description), normalized and trimmed

    Raises:
        ScheduleValidationError: on missing or malformed input
    """
    if not time_str or not (title or "").strip():
        raise ScheduleValidationError(MISSING_FIELDS_MESSAGE)

    return normalize_time(time_str), title.strip(), (description or "").strip()


def format_time_12h(time_str: str) -> str:
    """Format ``HH:MM`` for display, e.g. "13:05" -> "1:05 PM"."""
    hours, minutes = time_str.split(":")
    hour = int(hours)
    ampm = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minutes} {ampm}"


def current_time_key(now: datetime) -> str:
    """The ``HH:MM`` key an event time is compared against."""
    return now.strftime("%H:%M")


def time_options(start_hour: int = 6, step_minutes: int = 30) -> list[str]:
    """Selectable times for the schedule picker (06:00 to 23:30 by default)."""
    return [
        f"{hour:02d}:{minute:02d}"
        for hour in range(start_hour, 24)
        for minute in range(0, 60, step_minutes)
    ]
