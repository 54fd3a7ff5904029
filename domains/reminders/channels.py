"""Dispatch channels for fired reminders: desktop notifications and the
in-app banner/toast feed."""

import time
from collections import deque
from dataclasses import dataclass, asdict
from typing import Callable, Optional

from plyer import notification as plyer_notification

import config
from domains.base import NotificationPermission, NotificationSink, ToastSink
from domains.errors import NotificationUnavailableError, PermissionDeniedError
from domains.signals import EventBus, SCHEDULE_NOTIFICATION
from logger import logger


class PlyerNotificationSink(NotificationSink):
    """Desktop notifications via plyer.

    Permission is whatever the user last answered; plyer itself never asks.
    """

    def __init__(
        self,
        permission: NotificationPermission = NotificationPermission.DEFAULT,
        app_name: str = config.APP_NAME,
        app_icon: str = "",
    ):
        self._permission = NotificationPermission(permission)
        self.app_name = app_name
        self.app_icon = app_icon

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    def set_permission(self, permission: NotificationPermission) -> None:
        self._permission = NotificationPermission(permission)

    def show(self, title: str, body: str, tag: str, timeout: int) -> None:
        if self._permission != NotificationPermission.GRANTED:
            raise PermissionDeniedError(f"Notification permission is '{self._permission.value}'")

        try:
            plyer_notification.notify(
                title=title,
                message=body,
                app_name=self.app_name,
                app_icon=self.app_icon,
                timeout=timeout,
                ticker=tag,
            )
        except NotImplementedError as e:
            raise NotificationUnavailableError("No desktop notification backend on this platform") from e


@dataclass
class FeedItem:
    """A banner or toast waiting to be shown by the UI."""
    kind: str  # "banner" or "toast"
    title: str
    description: str
    created_at: float
    expires_at: float
    event_id: Optional[int] = None
    time: Optional[str] = None
    variant: str = "default"

    def to_dict(self) -> dict:
        return asdict(self)


class InAppFeed(ToastSink):
    """Collects in-app banners and toasts for the UI to poll.

    Banners come from the ``scheduleNotification`` signal and auto-dismiss
    after ``banner_duration`` seconds; toasts expire after their own duration.
    """

    def __init__(
        self,
        banner_duration: int = config.BANNER_DURATION,
        max_items: int = 50,
        clock: Callable[[], float] = time.time,
    ):
        self.banner_duration = banner_duration
        self._clock = clock
        self._items: deque[FeedItem] = deque(maxlen=max_items)

    def attach(self, bus: EventBus) -> None:
        bus.subscribe(SCHEDULE_NOTIFICATION, self.on_schedule_notification)

    def detach(self, bus: EventBus) -> None:
        bus.unsubscribe(SCHEDULE_NOTIFICATION, self.on_schedule_notification)

    def on_schedule_notification(self, payload: dict) -> None:
        now = self._clock()
        self._items.append(FeedItem(
            kind="banner",
            title=payload["title"],
            description=payload.get("description") or "",
            created_at=now,
            expires_at=now + self.banner_duration,
            event_id=payload["id"],
            time=payload.get("time"),
        ))

    def show(self, title: str, description: str, duration: int, variant: str = "default") -> None:
        now = self._clock()
        self._items.append(FeedItem(
            kind="toast",
            title=title,
            description=description,
            created_at=now,
            expires_at=now + duration,
            variant=variant,
        ))
        logger.info(f"Toast: {title} - {description}")

    def items(self, kind: Optional[str] = None) -> list[FeedItem]:
        """Unexpired items, oldest first, optionally filtered by kind."""
        now = self._clock()
        live = [item for item in self._items if item.expires_at > now]
        if len(live) != len(self._items):
            self._items = deque(live, maxlen=self._items.maxlen)
        return [item for item in live if kind is None or item.kind == kind]

    def dismiss(self, event_id: int) -> int:
        """Drop the banners for an event. Returns how many were removed."""
        before = len(self._items)
        self._items = deque(
            (i for i in self._items if not (i.kind == "banner" and i.event_id == event_id)),
            maxlen=self._items.maxlen,
        )
        return before - len(self._items)
