"""Schedule reminder notifier.

Owns the day's event list and checks it against the wall clock every
minute. An event whose ``HH:MM`` equals the current minute fires once, on four
independent channels (chime, desktop notification, in-app signal, toast),
then sits in a cooldown set for 60 seconds so the same minute can't fire it
twice.

Matching is exact wall-clock equality: a minute that passes while the
process is suspended is not fired late.
"""

from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

import config
from domains.base import NotificationPermission, NotificationSink, ToastSink, ToneSynthesizer
from domains.errors import CapabilityUnavailableError, PermissionDeniedError
from domains.signals import EventBus, MARK_EVENT_COMPLETE, SCHEDULE_NOTIFICATION
from logger import logger
from . import store
from .parser import current_time_key, format_time_12h, validate_event_input
from .types import DispatchReport, ScheduleEvent

CHECK_JOB_ID = "reminder_check"
COOLDOWN_JOB_PREFIX = "reminder_cooldown:"
DEFAULT_BODY = "It's time for your scheduled event!"


class ReminderNotifier:
    """Minute-by-minute reminder checker with a per-event cooldown.

    Usage:
        notifier = ReminderNotifier(bus, chime, notifications, toasts)
        notifier.start(scheduler)   # loads events, ticks now and every 60s
        ...
        notifier.stop()
    """

    def __init__(
        self,
        bus: EventBus,
        chime: ToneSynthesizer,
        notifications: NotificationSink,
        toasts: ToastSink,
        clock: Optional[Callable[[], datetime]] = None,
        check_interval: int = config.REMINDER_CHECK_INTERVAL,
        cooldown_seconds: int = config.REMINDER_COOLDOWN_SECONDS,
        notification_timeout: int = config.NOTIFICATION_TIMEOUT,
        toast_duration: int = config.TOAST_DURATION,
    ):
        self.bus = bus
        self.chime = chime
        self.notifications = notifications
        self.toasts = toasts
        self.check_interval = check_interval
        self.cooldown_seconds = cooldown_seconds
        self.notification_timeout = notification_timeout
        self.toast_duration = toast_duration
        self._clock = clock

        self.events: list[ScheduleEvent] = []
        self.sound_enabled = True
        self._loaded = False

        # event id -> when its cooldown ends
        self._active: dict[int, datetime] = {}
        self._scheduler: Optional[AsyncIOScheduler] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def _now(self) -> datetime:
        return self._clock() if self._clock is not None else datetime.now()

    @property
    def active_notifications(self) -> frozenset[int]:
        """Event ids currently inside their post-fire cooldown."""
        return frozenset(self._active)

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    def load(self) -> None:
        """Load events and preferences from the store."""
        self.events = store.load_events()
        self.sound_enabled = store.get_sound_enabled()
        self.notifications.set_permission(store.get_notification_permission())
        self._loaded = True
        logger.info(f"Loaded {len(self.events)} schedule events (sound {'on' if self.sound_enabled else 'off'})")

    def get_event(self, event_id: int) -> ScheduleEvent:
        for event in self.events:
            if event.id == event_id:
                return event
        raise KeyError(event_id)

    # ------------------------------------------------------------------
    # Event list
    # ------------------------------------------------------------------

    def add_event(self, time_str: str, title: str, description: str = "") -> ScheduleEvent:
        """Validate and add an event, keeping the list sorted by time.

        Raises:
            ScheduleValidationError: on missing title/time or a malformed time
        """
        time_str, title, description = validate_event_input(time_str, title, description)

        now_ms = int(self._now().timestamp() * 1000)
        existing_ids = {e.id for e in self.events}
        event_id = now_ms
        while event_id in existing_ids:
            event_id += 1

        event = ScheduleEvent(event_id, time_str, title, description, now_ms)
        self.events = sorted([*self.events, event], key=lambda e: e.time)
        store.save_events(self.events)

        logger.info(f"Added schedule event {event.id}: '{title}' at {time_str}")
        return event

    def update_event(self, event_id: int, time_str: str, title: str, description: str = "") -> ScheduleEvent:
        """Replace an event's time/title/description.

        Raises:
            ScheduleValidationError: on invalid input (nothing is changed)
            KeyError: if no event has this id
        """
        time_str, title, description = validate_event_input(time_str, title, description)
        event = self.get_event(event_id)

        event.time, event.title, event.description = time_str, title, description
        self.events.sort(key=lambda e: e.time)
        store.save_events(self.events)

        logger.info(f"Updated schedule event {event_id}: '{title}' at {time_str}")
        return event

    def delete_event(self, event_id: int) -> ScheduleEvent:
        """Remove an event. Raises KeyError if it doesn't exist."""
        event = self.get_event(event_id)
        self.events = [e for e in self.events if e.id != event_id]
        store.save_events(self.events)
        self.release(event_id)

        logger.info(f"Deleted schedule event {event_id}: '{event.title}'")
        return event

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    def set_sound_enabled(self, enabled: bool) -> None:
        """Persist the sound preference; turning it on plays a test chime."""
        self.sound_enabled = bool(enabled)
        store.set_sound_enabled(self.sound_enabled)
        if self.sound_enabled:
            self._dispatch(DispatchReport(event_id=0), "sound", self._play_sound)

    def set_notification_permission(self, permission: NotificationPermission) -> None:
        """Record a permission prompt result."""
        permission = NotificationPermission(permission)
        self.notifications.set_permission(permission)
        store.set_notification_permission(permission)
        logger.info(f"Notification permission: {permission.value}")

    # ------------------------------------------------------------------
    # Checking and firing
    # ------------------------------------------------------------------

    def tick(self, now: Optional[datetime] = None) -> list[ScheduleEvent]:
        """Fire every event due this minute that isn't cooling down.

        Returns:
            Events fired during this check
        """
        now = now or self._now()
        self._expire_cooldowns(now)
        current_time = current_time_key(now)

        fired = []
        for event in list(self.events):
            if event.time != current_time or event.id in self._active:
                continue

            try:
                self.fire(event)
            except Exception as e:
                logger.error(f"Failed to fire reminder {event.id}: {e}")

            self._start_cooldown(event.id, now)
            fired.append(event)

        if fired:
            logger.info(f"Reminder check {current_time}: fired {len(fired)} event(s)")
        return fired

    def fire(self, event: ScheduleEvent) -> DispatchReport:
        """Dispatch one event on every channel. Channels fail independently."""
        title = f"⏰ {event.title}"
        body = event.description or DEFAULT_BODY
        payload = {
            "id": event.id,
            "title": event.title,
            "description": event.description,
            "time": format_time_12h(event.time),
        }

        report = DispatchReport(event_id=event.id)
        report.sound = self._dispatch(report, "sound", self._play_sound)
        report.notification = self._dispatch(
            report, "notification",
            self.notifications.show, title, body, f"event-{event.id}", self.notification_timeout
        )
        report.in_app = self._dispatch(report, "in_app", self.bus.publish, SCHEDULE_NOTIFICATION, payload)
        report.toast = self._dispatch(report, "toast", self.toasts.show, title, body, self.toast_duration)

        logger.info(
            f"Fired reminder {event.id} '{event.title}' "
            f"(sound={report.sound}, notification={report.notification}, "
            f"in_app={report.in_app}, toast={report.toast})"
        )
        return report

    def mark_complete(self, event_id: int) -> int:
        """Signal that the user acknowledged an event's banner.

        Returns:
            Number of subscribers that handled the signal
        """
        return self.bus.publish(MARK_EVENT_COMPLETE, {"id": event_id})

    def _on_mark_complete(self, payload: dict) -> None:
        # No completion state is kept for schedule events
        logger.info(f"Schedule event {payload.get('id')} marked complete")
        self.toasts.show("Event Completed", "Great job staying on schedule!", self.toast_duration)

    def _play_sound(self) -> bool:
        if not self.sound_enabled:
            return False
        self.chime.play_chime()
        return True

    def _dispatch(self, report: DispatchReport, channel: str, func: Callable[..., Any], *args) -> bool:
        """Run one channel; record and swallow its failure."""
        try:
            result = func(*args)
        except (PermissionDeniedError, CapabilityUnavailableError) as e:
            logger.debug(f"Skipping {channel} for event {report.event_id}: {e}")
            report.errors[channel] = str(e)
            return False
        except Exception as e:
            logger.error(f"{channel} dispatch failed for event {report.event_id}: {e}")
            report.errors[channel] = str(e)
            return False
        return result is not False

    # ------------------------------------------------------------------
    # Cooldown
    # ------------------------------------------------------------------

    def _start_cooldown(self, event_id: int, now: datetime) -> None:
        expires_at = now + timedelta(seconds=self.cooldown_seconds)
        self._active[event_id] = expires_at

        if self._scheduler is not None:
            self._scheduler.add_job(
                self._release_job,
                trigger=DateTrigger(run_date=expires_at),
                args=[event_id, expires_at],
                id=f"{COOLDOWN_JOB_PREFIX}{event_id}",
                name=f"Release reminder cooldown {event_id}",
                replace_existing=True
            )

    def _expire_cooldowns(self, now: datetime) -> None:
        for event_id, expires_at in list(self._active.items()):
            if expires_at <= now:
                del self._active[event_id]

    def release(self, event_id: int) -> bool:
        """End an event's cooldown early. Returns True if it was cooling down."""
        if self._active.pop(event_id, None) is None:
            return False

        if self._scheduler is not None:
            try:
                self._scheduler.remove_job(f"{COOLDOWN_JOB_PREFIX}{event_id}")
            except JobLookupError:
                pass
        return True

    async def _release_job(self, event_id: int, expires_at: datetime) -> None:
        # A newer cooldown for the same event wins over this one
        if self._active.get(event_id) == expires_at:
            del self._active[event_id]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def _tick_job(self) -> None:
        self.tick()

    def start(self, scheduler: AsyncIOScheduler) -> None:
        """Register the periodic check and run one check immediately."""
        if not self._loaded:
            self.load()

        self._scheduler = scheduler
        self.bus.subscribe(MARK_EVENT_COMPLETE, self._on_mark_complete)

        scheduler.add_job(
            self._tick_job,
            trigger=IntervalTrigger(seconds=self.check_interval),
            id=CHECK_JOB_ID,
            name="Check schedule reminders",
            replace_existing=True
        )
        logger.info(f"Started reminder checks (every {self.check_interval}s)")

        self.tick()

    def stop(self) -> None:
        """Remove the periodic check and any pending cooldown releases."""
        if self._scheduler is None:
            return

        job_ids = [CHECK_JOB_ID] + [f"{COOLDOWN_JOB_PREFIX}{event_id}" for event_id in self._active]
        for job_id in job_ids:
            try:
                self._scheduler.remove_job(job_id)
            except JobLookupError:
                pass

        self.bus.unsubscribe(MARK_EVENT_COMPLETE, self._on_mark_complete)
        self._scheduler = None
        logger.info("Stopped reminder checks")
