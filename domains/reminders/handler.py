"""User-facing schedule actions: each returns the toast the UI should show."""

from domains.base import NotificationPermission
from domains.errors import ScheduleValidationError
from .notifier import ReminderNotifier


def _toast(title: str, description: str, variant: str = "default") -> dict:
    return {"title": title, "description": description, "variant": variant}


def save_event(notifier: ReminderNotifier, time_str: str, title: str,
               description: str = "", event_id: int | None = None) -> dict:
    """Add a new event, or update ``event_id`` if given.

    Returns:
        Dict with the saved ``event`` (None on validation failure) and ``toast``
    """
    try:
        if event_id is None:
            event = notifier.add_event(time_str, title, description)
            toast = _toast("Event Added", "New event has been added to your schedule.")
        else:
            event = notifier.update_event(event_id, time_str, title, description)
            toast = _toast("Event Updated", "Your schedule event has been updated successfully.")
    except ScheduleValidationError as e:
        return {"event": None, "toast": _toast("Missing Information", str(e), "destructive")}

    return {"event": event, "toast": toast}


def remove_event(notifier: ReminderNotifier, event_id: int) -> dict:
    """Delete an event. Raises KeyError if it doesn't exist."""
    event = notifier.delete_event(event_id)
    return _toast("Event Deleted", f'"{event.title}" has been removed from your schedule.')


def toggle_sound(notifier: ReminderNotifier) -> dict:
    """Flip the sound preference (plays a test chime when turning on)."""
    notifier.set_sound_enabled(not notifier.sound_enabled)
    return set_sound_toast(notifier.sound_enabled)


def set_sound_toast(enabled: bool) -> dict:
    if enabled:
        return _toast("Sound Enabled", "You'll now hear alerts for scheduled events.")
    return _toast("Sound Disabled", "Event alerts will be silent.")


def apply_permission_result(notifier: ReminderNotifier, permission: NotificationPermission) -> dict:
    """Record the answer to the notification permission prompt."""
    notifier.set_notification_permission(permission)
    if NotificationPermission(permission) == NotificationPermission.GRANTED:
        return _toast("Notifications Enabled", "You'll receive pop-up alerts for scheduled events.")
    return _toast(
        "Notifications Denied",
        "You can enable them later in your system settings.",
        "destructive",
    )


def status_summary(notifier: ReminderNotifier) -> dict:
    """Which alert channels are on, with the hint line shown under the list."""
    notifications_on = notifier.notifications.permission == NotificationPermission.GRANTED
    sound_on = notifier.sound_enabled

    if notifications_on and sound_on:
        hint = "You'll receive pop-up and sound alerts for events"
    elif notifications_on:
        hint = "You'll receive pop-up alerts for events"
    elif sound_on:
        hint = "You'll receive sound alerts for events"
    else:
        hint = "Click the icons above to enable notifications"

    return {
        "notifications": notifications_on,
        "sound": sound_on,
        "audio_output": notifier.chime.supported,
        "running": notifier.running,
        "event_count": len(notifier.events),
        "active_notifications": sorted(notifier.active_notifications),
        "hint": hint,
    }
