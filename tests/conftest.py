"""Pytest configuration and fixtures."""

import os
import sys

import pytest
from unittest.mock import AsyncMock, Mock, patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from domains import store
from domains.base import (
    NotificationPermission,
    NotificationSink,
    SpeechSink,
    ToastSink,
    ToneSynthesizer,
    VoiceInfo,
)
from domains.errors import AudioUnavailableError, PermissionDeniedError, SpeechUnavailableError


class RecordingChime(ToneSynthesizer):
    """Counts chimes and keeps played buffers; ``fail`` makes every call raise."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.chimes = 0
        self.played = []

    @property
    def supported(self) -> bool:
        return not self.fail

    def play_chime(self) -> None:
        if self.fail:
            raise AudioUnavailableError("no output device")
        self.chimes += 1

    def play_pcm(self, pcm: bytes, sample_rate: int) -> None:
        if self.fail:
            raise AudioUnavailableError("no output device")
        self.played.append((pcm, sample_rate))


class RecordingNotifications(NotificationSink):
    def __init__(self, permission=NotificationPermission.GRANTED):
        self._permission = NotificationPermission(permission)
        self.shown = []

    @property
    def permission(self):
        return self._permission

    def set_permission(self, permission) -> None:
        self._permission = NotificationPermission(permission)

    def show(self, title, body, tag, timeout) -> None:
        if self._permission != NotificationPermission.GRANTED:
            raise PermissionDeniedError("denied")
        self.shown.append({"title": title, "body": body, "tag": tag, "timeout": timeout})


class RecordingToasts(ToastSink):
    def __init__(self):
        self.shown = []

    def show(self, title, description, duration, variant="default") -> None:
        self.shown.append({"title": title, "description": description, "duration": duration, "variant": variant})


class RecordingSpeech(SpeechSink):
    def __init__(self, voices=None, fail: bool = False):
        self._voices = voices or []
        self.fail = fail
        self.spoken = []

    def voices(self):
        if self.fail:
            raise SpeechUnavailableError("no speech engine")
        return list(self._voices)

    def speak(self, text, profile) -> None:
        if self.fail:
            raise SpeechUnavailableError("no speech engine")
        self.spoken.append((text, profile))


@pytest.fixture(autouse=True)
def temp_store(monkeypatch, tmp_path):
    """Fresh key-value store per test, and no ElevenLabs key from the environment."""
    monkeypatch.setattr(config, "STORE_DB", str(tmp_path / "store.db"))
    monkeypatch.setattr(config, "ELEVENLABS_API_KEY", None)

    store.close()
    store._connection = None

    yield store

    store.close()


@pytest.fixture
def chime():
    return RecordingChime()


@pytest.fixture
def notifications():
    return RecordingNotifications()


@pytest.fixture
def toasts():
    return RecordingToasts()


@pytest.fixture
def speech():
    return RecordingSpeech(voices=[
        VoiceInfo(id="v1", name="Daniel", lang="en-GB"),
        VoiceInfo(id="v2", name="Karen", lang="en-AU"),
    ])


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client


def make_response(status_code: int = 200, content: bytes = b"", text: str = "") -> Mock:
    """A stand-in for ``httpx.Response``."""
    response = Mock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.content = content
    response.text = text
    return response
