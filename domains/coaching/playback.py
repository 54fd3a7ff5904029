"""Speak coaching text through the audio fallback chain.

Stages, each tried only after the one before signals failure:
1. ElevenLabs premium voice (needs an API key)
2. Local speech synthesis with per-style delivery
3. A generated tone shaped by style and text length

No stage is retried. Premium failures leave an advisory on the outcome for
the UI to show.
"""

import asyncio
import base64
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

from config import SAMPLE_RATE
from domains.audio.speech import profile_for
from domains.audio.tone import generate_natural_tone, tone_settings_for
from domains.base import SpeechSink, ToneSynthesizer
from domains.errors import CapabilityUnavailableError
from logger import logger
from .circuit_breaker import CircuitBreaker
from .elevenlabs import FALLBACK_MESSAGE, generate_speech, get_premium_api_key
from .messages import build_inspiration_plain, build_inspiration_script

RemoteTTS = Callable[[str, str, Optional[str]], Awaitable[dict]]

TONE_CONTENT_TYPE = "audio/pcm"


@dataclass
class SpeechOutcome:
    """What the chain ended up doing with one piece of text."""
    stage: str  # "premium", "speech" or "tone"
    style: str
    text: str
    audio_data: Optional[bytes] = None
    content_type: Optional[str] = None
    sample_rate: Optional[int] = None
    duration: Optional[float] = None
    advisories: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "stage": self.stage,
            "style": self.style,
            "audioData": base64.b64encode(self.audio_data).decode("ascii") if self.audio_data else None,
            "contentType": self.content_type,
            "sampleRate": self.sample_rate,
            "duration": self.duration,
            "advisories": list(self.advisories),
        }


class AudioFallbackChain:
    """Premium voice → local speech → generated tone."""

    def __init__(
        self,
        speech: SpeechSink,
        synth: ToneSynthesizer,
        breaker: Optional[CircuitBreaker] = None,
        remote: RemoteTTS = generate_speech,
        key_provider: Callable[[], Optional[str]] = get_premium_api_key,
        sample_rate: int = SAMPLE_RATE,
    ):
        self.speech = speech
        self.synth = synth
        self.breaker = breaker or CircuitBreaker(name="elevenlabs")
        self._remote = remote
        self._key_provider = key_provider
        self.sample_rate = sample_rate

    async def speak(
        self,
        text: str,
        style: str = "calm",
        api_key: Optional[str] = None,
        volume: Optional[float] = None,
        fallback_text: Optional[str] = None,
    ) -> SpeechOutcome:
        """Speak ``text``, falling back stage by stage.

        Args:
            text: Text for the premium voice
            style: Coaching style driving voice, delivery and tone
            api_key: ElevenLabs key (defaults to the saved/configured key)
            volume: Local speech volume 0-1 (style default if None)
            fallback_text: Text for stages 2 and 3 if it should differ

        Returns:
            SpeechOutcome; ``stage`` says which stage produced the audio
        """
        outcome = SpeechOutcome(stage="premium", style=style, text=text)
        if await self._try_premium(text, style, api_key, outcome):
            return outcome

        local_text = fallback_text or text
        if await self._try_speech(local_text, style, volume, outcome):
            return outcome

        self._play_tone(local_text, style, outcome)
        return outcome

    async def _try_premium(self, text: str, style: str, api_key: Optional[str],
                           outcome: SpeechOutcome) -> bool:
        api_key = api_key or self._key_provider()
        if not api_key:
            logger.debug("No premium voice key, using local speech")
            return False

        if not self.breaker.allow_request():
            outcome.advisories.append("Premium voice temporarily unavailable. Using local speech.")
            return False

        try:
            result = await self._remote(text, style, api_key)
        except Exception as e:
            logger.error(f"Premium voice error: {e}")
            result = {"error": str(e), "fallback": True,
                      "message": "Failed to generate ElevenLabs audio. Using fallback."}

        if result.get("success") and result.get("audioData"):
            self.breaker.record_success()
            outcome.stage = "premium"
            outcome.audio_data = base64.b64decode(result["audioData"])
            outcome.content_type = result.get("contentType", "audio/mpeg")
            return True

        self.breaker.record_failure()
        outcome.advisories.append(result.get("message") or result.get("error") or FALLBACK_MESSAGE)
        logger.info(f"Premium voice unavailable ({result.get('error')}), falling back")
        return False

    async def _try_speech(self, text: str, style: str, volume: Optional[float],
                          outcome: SpeechOutcome) -> bool:
        try:
            await asyncio.to_thread(self._speak_local, text, style, volume)
        except Exception as e:
            logger.warning(f"Local speech failed, using tone: {e}")
            return False

        outcome.stage = "speech"
        return True

    def _speak_local(self, text: str, style: str, volume: Optional[float]) -> None:
        voices = self.speech.voices()
        self.speech.speak(text, profile_for(style, voices, volume))

    def _play_tone(self, text: str, style: str, outcome: SpeechOutcome) -> None:
        settings = tone_settings_for(style, text)
        pcm = generate_natural_tone(settings.base_frequency, settings.duration, settings.volume,
                                    sample_rate=self.sample_rate)

        outcome.stage = "tone"
        outcome.audio_data = pcm
        outcome.content_type = TONE_CONTENT_TYPE
        outcome.sample_rate = self.sample_rate
        outcome.duration = settings.duration

        try:
            self.synth.play_pcm(pcm, self.sample_rate)
        except CapabilityUnavailableError as e:
            logger.debug(f"Tone not played locally: {e}")

    async def speak_coaching(self, coaching: dict, volume: Optional[float] = None) -> SpeechOutcome:
        """Speak a coaching message (greeting, then message)."""
        text = f"{coaching['greeting']}. {coaching['message']}"
        return await self.speak(text, coaching.get("style", "calm"), volume=volume)

    async def speak_inspiration(self, daily: Optional[dict] = None,
                                api_key: Optional[str] = None) -> SpeechOutcome:
        """Speak the daily inspiration: paced script for the premium voice,
        plain text for local speech."""
        return await self.speak(
            build_inspiration_script(daily),
            "inspiration",
            api_key=api_key,
            fallback_text=build_inspiration_plain(daily),
        )
