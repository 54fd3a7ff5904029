"""Local speech synthesis with per-style delivery heuristics."""

import threading

import pyttsx3

from domains.base import SpeechProfile, SpeechSink, VoiceInfo
from domains.errors import SpeechUnavailableError
from logger import logger

# pyttsx3 rate is words per minute; profiles use a multiplier of this
BASE_RATE_WPM = 200

# rate/pitch multipliers and volume per style
SPEECH_PROFILES = {
    "calm": {"rate": 0.9, "pitch": 1.0, "volume": 0.8},
    "energetic": {"rate": 0.9, "pitch": 1.0, "volume": 0.8},
    "wise": {"rate": 0.9, "pitch": 1.0, "volume": 0.8},
    # Slower and lower for contemplative delivery
    "inspiration": {"rate": 0.85, "pitch": 0.9, "volume": 0.8},
    "quote": {"rate": 0.9, "pitch": 2.0, "volume": 1.0},
}


def select_voice(voices: list[VoiceInfo], style: str) -> VoiceInfo | None:
    """Pick a voice for a style, or None to keep the engine default.

    - inspiration: an English female voice (or "Karen"), else the first voice
    - quote: an English male voice, else a Google en-GB voice
    """
    def matches(voice: VoiceInfo, *, lang: str, names: tuple[str, ...]) -> bool:
        name = voice.name.lower()
        return lang in voice.lang.lower() and any(n in name for n in names)

    if style == "inspiration":
        for voice in voices:
            if matches(voice, lang="en", names=("female", "karen")):
                return voice
        return voices[0] if voices else None

    if style == "quote":
        for voice in voices:
            name = voice.name.lower()
            if "english" in name and "male" in name and "en" in voice.lang.lower():
                return voice
        for voice in voices:
            if matches(voice, lang="en-gb", names=("google",)):
                return voice

    return None


def profile_for(style: str, voices: list[VoiceInfo], volume: float | None = None) -> SpeechProfile:
    """Build the delivery profile for a style. Unknown styles speak like calm."""
    settings = SPEECH_PROFILES.get(style, SPEECH_PROFILES["calm"])
    return SpeechProfile(
        rate=settings["rate"],
        pitch=settings["pitch"],
        volume=settings["volume"] if volume is None else volume,
        voice=select_voice(voices, style),
    )


def _voice_lang(voice) -> str:
    """First language tag of a pyttsx3 voice (drivers report str or bytes)."""
    languages = getattr(voice, "languages", None) or []
    if not languages:
        return ""
    lang = languages[0]
    if isinstance(lang, bytes):
        # espeak prefixes the tag with a priority byte
        lang = lang.decode("utf-8", errors="ignore").lstrip("\x00\x01\x02\x03\x04\x05")
    return str(lang)


class Pyttsx3SpeechSink(SpeechSink):
    """Offline speech through pyttsx3 (SAPI5, NSSpeechSynthesizer or espeak)."""

    def __init__(self, driver_name: str | None = None):
        self._driver_name = driver_name
        self._engine = None
        # The engine is shared and its run loop is not re-entrant
        self._lock = threading.RLock()

    def _get_engine(self):
        with self._lock:
            if self._engine is None:
                try:
                    self._engine = pyttsx3.init(self._driver_name)
                except Exception as e:
                    raise SpeechUnavailableError(f"No speech engine: {e}") from e
            return self._engine

    def voices(self) -> list[VoiceInfo]:
        with self._lock:
            engine = self._get_engine()
            return [
                VoiceInfo(id=v.id, name=v.name or "", lang=_voice_lang(v))
                for v in engine.getProperty("voices") or []
            ]

    def speak(self, text: str, profile: SpeechProfile) -> None:
        with self._lock:
            engine = self._get_engine()
            # pyttsx3 has no pitch control; profile.pitch is ignored here
            engine.setProperty("rate", int(BASE_RATE_WPM * profile.rate))
            engine.setProperty("volume", profile.volume)
            if profile.voice is not None:
                engine.setProperty("voice", profile.voice.id)

            logger.debug(f"Speaking {len(text)} chars at rate {profile.rate}")
            engine.say(text)
            engine.runAndWait()
