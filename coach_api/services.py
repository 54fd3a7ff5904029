"""Long-lived objects shared by the API routes.

Built once in the app lifespan and kept on ``app.state.services``.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from domains.audio import Pyttsx3SpeechSink, SoundDeviceSynthesizer
from domains.base import NotificationSink, SpeechSink, ToneSynthesizer
from domains.coaching import AudioFallbackChain
from domains.reminders import InAppFeed, PlyerNotificationSink, ReminderNotifier
from domains.signals import EventBus


@dataclass
class Services:
    bus: EventBus
    feed: InAppFeed
    notifier: ReminderNotifier
    chain: AudioFallbackChain


def build_services(
    notifications: Optional[NotificationSink] = None,
    synth: Optional[ToneSynthesizer] = None,
    speech: Optional[SpeechSink] = None,
) -> Services:
    """Wire the notifier and audio chain to the platform capabilities.

    Any capability can be passed in to replace the platform default.
    """
    bus = EventBus()
    feed = InAppFeed()
    feed.attach(bus)

    synth = synth or SoundDeviceSynthesizer()
    notifier = ReminderNotifier(
        bus=bus,
        chime=synth,
        notifications=notifications or PlyerNotificationSink(),
        toasts=feed,
    )
    chain = AudioFallbackChain(speech=speech or Pyttsx3SpeechSink(), synth=synth)

    return Services(bus=bus, feed=feed, notifier=notifier, chain=chain)


def get_services(request: Request) -> Services:
    return request.app.state.services
