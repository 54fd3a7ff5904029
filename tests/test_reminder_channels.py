"""Tests for the desktop notification sink and the in-app feed."""

from unittest.mock import patch

import pytest

from domains.base import NotificationPermission
from domains.errors import NotificationUnavailableError, PermissionDeniedError
from domains.reminders.channels import InAppFeed, PlyerNotificationSink
from domains.signals import EventBus, SCHEDULE_NOTIFICATION


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestPlyerNotificationSink:

    def test_requires_granted_permission(self):
        sink = PlyerNotificationSink(NotificationPermission.DEFAULT)
        with patch("domains.reminders.channels.plyer_notification") as plyer:
            with pytest.raises(PermissionDeniedError):
                sink.show("⏰ Stretch", "Time", "event-1", 10)
            plyer.notify.assert_not_called()

    def test_shows_when_granted(self):
        sink = PlyerNotificationSink(NotificationPermission.DEFAULT, app_name="MotivateMe")
        sink.set_permission(NotificationPermission.GRANTED)

        with patch("domains.reminders.channels.plyer_notification") as plyer:
            sink.show("⏰ Stretch", "Time", "event-1", 10)

        plyer.notify.assert_called_once_with(
            title="⏰ Stretch",
            message="Time",
            app_name="MotivateMe",
            app_icon="",
            timeout=10,
            ticker="event-1",
        )

    def test_missing_backend(self):
        sink = PlyerNotificationSink(NotificationPermission.GRANTED)
        with patch("domains.reminders.channels.plyer_notification") as plyer:
            plyer.notify.side_effect = NotImplementedError()
            with pytest.raises(NotificationUnavailableError):
                sink.show("⏰ Stretch", "Time", "event-1", 10)


class TestInAppFeed:

    def test_banner_from_signal_expires_after_thirty_seconds(self):
        clock = FakeClock()
        feed = InAppFeed(banner_duration=30, clock=clock)
        bus = EventBus()
        feed.attach(bus)

        bus.publish(SCHEDULE_NOTIFICATION, {"id": 1, "title": "Stretch", "description": "", "time": "9:00 AM"})

        banners = feed.items("banner")
        assert len(banners) == 1
        assert banners[0].event_id == 1
        assert banners[0].time == "9:00 AM"

        clock.now += 30
        assert feed.items() == []

    def test_toast_expires_after_its_duration(self):
        clock = FakeClock()
        feed = InAppFeed(clock=clock)

        feed.show("Event Added", "New event", 10)
        assert [t.title for t in feed.items("toast")] == ["Event Added"]

        clock.now += 10
        assert feed.items("toast") == []

    def test_dismiss_removes_banners_for_event(self):
        feed = InAppFeed(clock=FakeClock())
        feed.on_schedule_notification({"id": 1, "title": "A"})
        feed.on_schedule_notification({"id": 2, "title": "B"})
        feed.show("Toast", "stays", 10)

        assert feed.dismiss(1) == 1
        assert [i.title for i in feed.items()] == ["B", "Toast"]

    def test_detach(self):
        feed = InAppFeed(clock=FakeClock())
        bus = EventBus()
        feed.attach(bus)
        feed.detach(bus)

        bus.publish(SCHEDULE_NOTIFICATION, {"id": 1, "title": "A"})
        assert feed.items() == []

    def test_bounded(self):
        feed = InAppFeed(max_items=3, clock=FakeClock())
        for i in range(5):
            feed.show(f"t{i}", "", 10)
        assert [t.title for t in feed.items()] == ["t2", "t3", "t4"]
