"""ElevenLabs premium text-to-speech.

``synthesize`` is the raw request and raises ``RemoteServiceError``.
``generate_speech`` returns a response dict instead, so callers can fall back
on ``fallback: True``:

    success: {"audioData": <base64>, "contentType", "voiceId", "style", "success": True}
    failure: {"error", "fallback": True, "message", "status", ["details"]}
"""

import base64
from typing import Optional

import httpx

import config
from domains import store
from domains.errors import RemoteServiceError
from logger import logger
from .config import VOICE_IDS, VOICE_SETTINGS

API_KEY_STORE_KEY = "elevenLabsApiKey"
USE_PREMIUM_STORE_KEY = "useElevenLabs"

FALLBACK_MESSAGE = "Using local speech synthesis as fallback"

STATUS_ERRORS = {
    401: "Invalid API key - please check your ElevenLabs API key",
    402: "Insufficient credits - please check your ElevenLabs account",
    429: "Rate limit exceeded - please try again later",
}

SETUP_ERRORS = {
    401: "Invalid API key. Please verify your key from ElevenLabs dashboard.",
    402: "Insufficient credits. Please check your ElevenLabs account balance.",
    429: "Rate limit exceeded. Please try again in a moment.",
}


def _failure(error: str, status: int, message: str = FALLBACK_MESSAGE, **extra) -> dict:
    return {"error": error, "fallback": True, "message": message, "status": status, **extra}


async def synthesize(text: str, style: str, api_key: str) -> bytes:
    """POST ``text`` to the voice for ``style`` and return the MP3 bytes.

    Raises:
        RemoteServiceError: on a network error or non-2xx response
    """
    voice_id = VOICE_IDS.get(style, VOICE_IDS["calm"])
    settings = VOICE_SETTINGS.get(style, VOICE_SETTINGS["calm"])

    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{config.ELEVENLABS_API_URL}/text-to-speech/{voice_id}",
                headers={
                    "Accept": "audio/mpeg",
                    "Content-Type": "application/json",
                    "xi-api-key": api_key,
                },
                json={
                    "text": text,
                    "model_id": config.ELEVENLABS_MODEL,
                    "voice_settings": settings,
                },
                timeout=config.ELEVENLABS_TIMEOUT
            )
    except httpx.HTTPError as e:
        logger.error(f"ElevenLabs request failed: {e}")
        raise RemoteServiceError("Failed to generate ElevenLabs audio", 500) from e

    if not response.is_success:
        status = response.status_code
        logger.error(f"ElevenLabs API error {status}: {response.text[:200]}")
        raise RemoteServiceError(
            STATUS_ERRORS.get(status, "ElevenLabs API failed"), status, details=response.text
        )

    return response.content


async def generate_speech(text: str, style: str, api_key: Optional[str] = None) -> dict:
    """Render ``text`` with the premium voice for ``style``.

    Args:
        text: Text to speak
        style: Coaching style (unknown styles use the calm voice)
        api_key: ElevenLabs key (defaults to ELEVENLABS_API_KEY)

    Returns:
        Response dict (see module docstring); ``status`` mirrors the HTTP
        status the API route should answer with
    """
    api_key = api_key or config.ELEVENLABS_API_KEY
    if not api_key:
        return _failure(
            "ElevenLabs API key required", 400,
            message="Please provide an ElevenLabs API key to use premium voices",
        )

    try:
        audio = await synthesize(text, style, api_key)
    except RemoteServiceError as e:
        extra = {"details": e.details} if e.details is not None else {}
        return _failure(e.message, e.status, **extra)

    logger.info(f"Generated ElevenLabs audio ({len(audio)} bytes, style={style})")
    return {
        "audioData": base64.b64encode(audio).decode("ascii"),
        "contentType": "audio/mpeg",
        "voiceId": VOICE_IDS.get(style, VOICE_IDS["calm"]),
        "style": style,
        "success": True,
    }


def get_premium_api_key() -> Optional[str]:
    """Key for premium voices: the saved one if premium is switched on,
    otherwise ELEVENLABS_API_KEY from the environment."""
    saved = store.get_value(API_KEY_STORE_KEY)
    if saved and saved.strip() and store.get_value(USE_PREMIUM_STORE_KEY) is True:
        return saved
    return config.ELEVENLABS_API_KEY


async def setup_premium_voice(api_key: str) -> dict:
    """Check a user-supplied key with a short test phrase and save it.

    Returns:
        {"success": bool, "message": str}
    """
    api_key = (api_key or "").strip()
    if not api_key:
        return {"success": False, "message": "Please enter your ElevenLabs API key"}
    if not api_key.startswith("sk-"):
        return {"success": False, "message": "ElevenLabs API keys should start with 'sk-'. Please check your key."}

    result = await generate_speech("Testing ElevenLabs integration", "calm", api_key=api_key)
    if not result.get("success"):
        message = SETUP_ERRORS.get(result.get("status"), "Invalid API key. Please check and try again.")
        return {"success": False, "message": message}

    store.set_value(API_KEY_STORE_KEY, api_key)
    store.set_value(USE_PREMIUM_STORE_KEY, True)
    logger.info("Premium voice enabled")
    return {"success": True, "message": "Premium voices enabled"}


def disable_premium_voice() -> None:
    """Switch premium voices off (the saved key is kept)."""
    store.set_value(USE_PREMIUM_STORE_KEY, False)
