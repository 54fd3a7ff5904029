"""Persistence for the schedule event list and notification preferences."""

import time

from domains import store
from domains.base import NotificationPermission
from domains.errors import ScheduleValidationError
from logger import logger
from .parser import normalize_time
from .types import ScheduleEvent

SCHEDULE_EVENTS_KEY = "scheduleEvents"
SOUND_ENABLED_KEY = "scheduleSound"
NOTIFICATION_PERMISSION_KEY = "notificationPermission"


def default_events() -> list[ScheduleEvent]:
    """Starter schedule for a fresh install."""
    now_ms = int(time.time() * 1000)
    return [
        ScheduleEvent(1, "09:00", "Morning Meditation", "Start the day with mindfulness", now_ms),
        ScheduleEvent(2, "13:00", "Project Planning", "Review and plan upcoming tasks", now_ms),
        ScheduleEvent(3, "18:00", "Evening Exercise", "30 minutes of physical activity", now_ms),
    ]


def load_events() -> list[ScheduleEvent]:
    """Load the saved event list, seeding the defaults on first run.

    Entries with a malformed time are skipped. The result is sorted by time.
    """
    if not store.has_key(SCHEDULE_EVENTS_KEY):
        events = default_events()
        save_events(events)
        logger.info(f"Seeded {len(events)} default schedule events")
        return events

    saved = store.get_value(SCHEDULE_EVENTS_KEY, default=[])
    if saved is None:
        saved = []
    if not isinstance(saved, list):
        logger.warning(f"Ignoring saved schedule events: expected a list, got {type(saved).__name__}")
        return []

    events = []
    for raw in saved:
        try:
            event = ScheduleEvent.from_dict(raw)
            event.time = normalize_time(event.time)
        except (KeyError, TypeError, ValueError, ScheduleValidationError) as e:
            logger.warning(f"Skipping malformed schedule event {raw!r}: {e}")
            continue
        events.append(event)

    events.sort(key=lambda e: e.time)
    return events


def save_events(events: list[ScheduleEvent]) -> None:
    """Persist the event list."""
    store.set_value(SCHEDULE_EVENTS_KEY, [e.to_dict() for e in events])


def get_sound_enabled() -> bool:
    """Sound preference (default on)."""
    return bool(store.get_value(SOUND_ENABLED_KEY, default=True))


def set_sound_enabled(enabled: bool) -> None:
    store.set_value(SOUND_ENABLED_KEY, bool(enabled))


def get_notification_permission() -> NotificationPermission:
    """Last recorded notification permission (default: not yet asked)."""
    raw = store.get_value(NOTIFICATION_PERMISSION_KEY, default=NotificationPermission.DEFAULT.value)
    try:
        return NotificationPermission(raw)
    except ValueError:
        return NotificationPermission.DEFAULT


def set_notification_permission(permission: NotificationPermission) -> None:
    store.set_value(NOTIFICATION_PERMISSION_KEY, NotificationPermission(permission).value)
