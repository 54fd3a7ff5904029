"""Audio output: procedural tones, the reminder chime and local speech."""

from .tone import generate_natural_tone, render_chime, tone_settings_for, ToneSettings
from .output import SoundDeviceSynthesizer
from .speech import Pyttsx3SpeechSink, profile_for, select_voice

__all__ = [
    "generate_natural_tone",
    "render_chime",
    "tone_settings_for",
    "ToneSettings",
    "SoundDeviceSynthesizer",
    "Pyttsx3SpeechSink",
    "profile_for",
    "select_voice",
]
