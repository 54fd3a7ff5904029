"""Procedural audio: the fallback "voice" tone and the reminder chime.

All buffers are 16-bit mono little-endian PCM.
"""

from dataclasses import dataclass

import numpy as np

from config import SAMPLE_RATE

# Chime: three steps of an oscillator, 0.1s apart, with exponential decay
CHIME_STEPS = ((0.0, 800.0), (0.1, 600.0), (0.2, 800.0))
CHIME_DURATION = 0.5
CHIME_START_GAIN = 0.3
CHIME_END_GAIN = 0.01


@dataclass
class ToneSettings:
    """Tone parameters for one coaching style."""
    base_frequency: float
    duration: float
    volume: float


def tone_settings_for(style: str, text: str) -> ToneSettings:
    """Derive tone frequency/duration/volume from style and text length.

    Unknown styles use the calm settings.
    """
    length = len(text or "")
    if style == "energetic":
        return ToneSettings(330.0, max(2.0, length * 0.05), 0.9)
    if style == "wise":
        return ToneSettings(200.0, max(4.0, length * 0.12), 0.8)
    return ToneSettings(220.0, max(3.0, length * 0.1), 0.7)


def _to_pcm16(wave: np.ndarray) -> bytes:
    """Scale a [-1, 1] float wave to little-endian int16 bytes."""
    samples = np.clip(wave * 32767, -32767, 32767)
    return samples.astype("<i2").tobytes()


def generate_natural_tone(frequency: float, duration: float, volume: float,
                          sample_rate: int = SAMPLE_RATE) -> bytes:
    """Generate a soft multi-harmonic tone.

    Fundamental plus 2nd and 3rd harmonics, a gentle 5 Hz vibrato and a
    natural exponential decay.

    Returns:
        PCM bytes, exactly ``int(sample_rate * duration) * 2`` long
    """
    n_samples = int(sample_rate * duration)
    t = np.arange(n_samples) / sample_rate

    fundamental = np.sin(2 * np.pi * frequency * t)
    harmonic2 = 0.3 * np.sin(2 * np.pi * frequency * 2 * t)
    harmonic3 = 0.1 * np.sin(2 * np.pi * frequency * 3 * t)

    vibrato = 1 + 0.02 * np.sin(2 * np.pi * 5 * t)
    envelope = np.exp(-t * 0.5)

    wave = (fundamental + harmonic2 + harmonic3) * vibrato * envelope * volume * 0.3
    return _to_pcm16(wave)


def render_chime(sample_rate: int = SAMPLE_RATE) -> bytes:
    """Render the 800 -> 600 -> 800 Hz reminder chime (0.5s)."""
    n_samples = int(sample_rate * CHIME_DURATION)
    t = np.arange(n_samples) / sample_rate

    frequency = np.empty(n_samples)
    for start, freq in CHIME_STEPS:
        frequency[t >= start] = freq

    # Integrate frequency so the steps don't click
    phase = 2 * np.pi * np.cumsum(frequency) / sample_rate
    gain = CHIME_START_GAIN * (CHIME_END_GAIN / CHIME_START_GAIN) ** (t / CHIME_DURATION)

    return _to_pcm16(np.sin(phase) * gain)
