"""Error taxonomy shared by the reminder and audio domains.

Nothing here is fatal: callers catch these at the channel or stage they
belong to and degrade to a simpler channel.
"""

from typing import Optional


class MotivateError(Exception):
    """Base class for all MotivateMe errors."""


class PermissionDeniedError(MotivateError):
    """The user has not granted permission for a dispatch channel."""


class CapabilityUnavailableError(MotivateError):
    """A platform capability (audio, speech, notifications) is missing."""


class AudioUnavailableError(CapabilityUnavailableError):
    """No audio output device or backend."""


class SpeechUnavailableError(CapabilityUnavailableError):
    """No local speech synthesis engine."""


class NotificationUnavailableError(CapabilityUnavailableError):
    """No desktop notification backend on this platform."""


class RemoteServiceError(MotivateError):
    """Remote text-to-speech failure, with the HTTP status to answer with."""

    def __init__(self, message: str, status: int = 500, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details


class ScheduleValidationError(MotivateError, ValueError):
    """Malformed or missing schedule input. The message is user-visible."""
