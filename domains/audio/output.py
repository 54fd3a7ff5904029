"""Speaker output through sounddevice (PortAudio)."""

import numpy as np

from config import SAMPLE_RATE
from domains.base import ToneSynthesizer
from domains.errors import AudioUnavailableError
from logger import logger
from .tone import render_chime


class SoundDeviceSynthesizer(ToneSynthesizer):
    """Plays PCM buffers on the default output device.

    sounddevice is loaded on first use; a host without PortAudio or without
    an output device reports ``supported = False`` instead of failing.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE):
        self.sample_rate = sample_rate
        self._sd = None
        self._load_error: str | None = None
        self._chime: bytes | None = None

    def _backend(self):
        """Import sounddevice once, remembering why it failed."""
        if self._sd is None and self._load_error is None:
            try:
                import sounddevice
                self._sd = sounddevice
            except OSError as e:
                # PortAudio shared library missing
                self._load_error = str(e)
                logger.warning(f"Audio output unavailable: {e}")

        if self._sd is None:
            raise AudioUnavailableError(f"No audio backend: {self._load_error}")
        return self._sd

    @property
    def supported(self) -> bool:
        try:
            sd = self._backend()
            sd.query_devices(kind="output")
            return True
        except Exception as e:
            logger.debug(f"No audio output device: {e}")
            return False

    def play_pcm(self, pcm: bytes, sample_rate: int) -> None:
        sd = self._backend()
        samples = np.frombuffer(pcm, dtype="<i2")
        try:
            sd.play(samples, samplerate=sample_rate)
        except Exception as e:
            raise AudioUnavailableError(f"Playback failed: {e}") from e

    def play_chime(self) -> None:
        if self._chime is None:
            self._chime = render_chime(self.sample_rate)
        self.play_pcm(self._chime, self.sample_rate)
