"""Schedule reminders: a daily list of time-of-day events checked every minute.

Events live in the local key-value store; firing goes out through the
capability sinks in ``domains.base``.
"""

from .types import ScheduleEvent, DispatchReport
from .parser import (
    parse_time,
    normalize_time,
    validate_event_input,
    format_time_12h,
    time_options,
)
from .store import load_events, save_events, get_sound_enabled, set_sound_enabled
from .channels import PlyerNotificationSink, InAppFeed
from .notifier import ReminderNotifier
from .handler import (
    save_event,
    remove_event,
    toggle_sound,
    set_sound_toast,
    apply_permission_result,
    status_summary,
)

__all__ = [
    "ScheduleEvent",
    "DispatchReport",
    "parse_time",
    "normalize_time",
    "validate_event_input",
    "format_time_12h",
    "time_options",
    "load_events",
    "save_events",
    "get_sound_enabled",
    "set_sound_enabled",
    "PlyerNotificationSink",
    "InAppFeed",
    "ReminderNotifier",
    "save_event",
    "remove_event",
    "toggle_sound",
    "set_sound_toast",
    "apply_permission_result",
    "status_summary",
]
