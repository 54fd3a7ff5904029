"""In-app publish/subscribe signals.

The notifier publishes ``scheduleNotification`` when an event fires; the
banner layer publishes ``markEventComplete`` when the user acknowledges one.
Handlers run synchronously, in subscription order, on the caller's thread.
"""

from collections import defaultdict
from typing import Any, Callable

from logger import logger

SCHEDULE_NOTIFICATION = "scheduleNotification"
MARK_EVENT_COMPLETE = "markEventComplete"

Handler = Callable[[dict], Any]


class EventBus:
    """Named-signal dispatcher.

    Usage:
        bus = EventBus()
        bus.subscribe(SCHEDULE_NOTIFICATION, show_banner)
        bus.publish(SCHEDULE_NOTIFICATION, {"id": 1, "title": "Stretch"})
    """

    def __init__(self):
        self._subscribers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, signal: str, handler: Handler) -> None:
        """Register ``handler`` for ``signal`` (no duplicates)."""
        if handler not in self._subscribers[signal]:
            self._subscribers[signal].append(handler)

    def unsubscribe(self, signal: str, handler: Handler) -> bool:
        """Remove ``handler``. Returns True if it was registered."""
        handlers = self._subscribers.get(signal, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def subscriber_count(self, signal: str) -> int:
        return len(self._subscribers.get(signal, []))

    def publish(self, signal: str, payload: dict) -> int:
        """Deliver ``payload`` to every subscriber of ``signal``.

        A failing handler is logged and skipped; the rest still run.

        Returns:
            Number of handlers that completed without raising
        """
        delivered = 0
        for handler in list(self._subscribers.get(signal, [])):
            try:
                handler(payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Signal handler for '{signal}' failed: {e}")
        return delivered
