"""Coaching domain - motivational messages and the spoken-audio fallback chain."""

from .circuit_breaker import CircuitBreaker, CircuitState
from .config import COACHING_STYLES
from .elevenlabs import (
    disable_premium_voice,
    generate_speech,
    synthesize,
    get_premium_api_key,
    setup_premium_voice,
)
from .messages import (
    build_inspiration_plain,
    build_inspiration_script,
    generate_coaching_message,
    generate_daily_message,
    mood_category,
    personalize,
)
from .playback import AudioFallbackChain, SpeechOutcome

__all__ = [
    "AudioFallbackChain",
    "COACHING_STYLES",
    "CircuitBreaker",
    "CircuitState",
    "SpeechOutcome",
    "build_inspiration_plain",
    "build_inspiration_script",
    "disable_premium_voice",
    "generate_coaching_message",
    "generate_daily_message",
    "generate_speech",
    "get_premium_api_key",
    "mood_category",
    "personalize",
    "setup_premium_voice",
    "synthesize",
]
