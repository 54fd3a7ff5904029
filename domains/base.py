"""Capability interfaces for the platform channels a reminder or coaching
message can go out on.

Concrete implementations live next to the domain that owns the platform
library (``domains.audio`` for sound and speech, ``domains.reminders.channels``
for desktop notifications and toasts). Tests substitute recording fakes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class NotificationPermission(str, Enum):
    """Notification permission states, as reported by a permission prompt."""
    GRANTED = "granted"
    DENIED = "denied"
    DEFAULT = "default"


@dataclass
class VoiceInfo:
    """A voice offered by a local speech engine."""

    id: str
    name: str
    lang: str = ""


@dataclass
class SpeechProfile:
    """Delivery settings for one utterance.

    ``rate`` and ``pitch`` are multipliers around 1.0; ``volume`` is 0-1.
    """

    rate: float = 1.0
    pitch: float = 1.0
    volume: float = 1.0
    voice: VoiceInfo | None = None


class NotificationSink(ABC):
    """OS-level notification display."""

    @property
    @abstractmethod
    def permission(self) -> NotificationPermission:
        """Current permission state."""
        pass

    @abstractmethod
    def set_permission(self, permission: NotificationPermission) -> None:
        """Record the result of a permission prompt."""
        pass

    @abstractmethod
    def show(self, title: str, body: str, tag: str, timeout: int) -> None:
        """Display a notification.

        Raises:
            PermissionDeniedError: permission is not granted
            NotificationUnavailableError: no backend on this platform
        """
        pass


class ToneSynthesizer(ABC):
    """Oscillator-style sound output."""

    @property
    @abstractmethod
    def supported(self) -> bool:
        """Whether an audio output is available."""
        pass

    @abstractmethod
    def play_chime(self) -> None:
        """Play the short reminder chime (non-blocking).

        Raises:
            AudioUnavailableError: no audio output
        """
        pass

    @abstractmethod
    def play_pcm(self, pcm: bytes, sample_rate: int) -> None:
        """Play 16-bit mono little-endian PCM (non-blocking).

        Raises:
            AudioUnavailableError: no audio output
        """
        pass


class SpeechSink(ABC):
    """Local text-to-speech."""

    @abstractmethod
    def voices(self) -> list[VoiceInfo]:
        """Voices the engine offers."""
        pass

    @abstractmethod
    def speak(self, text: str, profile: SpeechProfile) -> None:
        """Speak text, blocking until done.

        Raises:
            SpeechUnavailableError: no engine available
        """
        pass


class ToastSink(ABC):
    """In-app toast messages."""

    @abstractmethod
    def show(self, title: str, description: str, duration: int, variant: str = "default") -> None:
        """Show a toast for ``duration`` seconds."""
        pass
