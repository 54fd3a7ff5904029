"""Coaching and Voice API Routes.

- POST /api/elevenlabs: premium TTS (answers with the upstream status on failure)
- POST /api/elevenlabs/setup, DELETE /api/elevenlabs/setup: premium key management
- POST /api/voice: generated tone for a style
- POST /api/coaching, POST /api/daily-message: message generation
- POST /api/speak, POST /api/speak/inspiration: the full audio fallback chain
- GET /api/speak/status: premium circuit breaker state
"""

import base64
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from domains.audio import generate_natural_tone, tone_settings_for
from domains.coaching import (
    disable_premium_voice,
    generate_coaching_message,
    generate_daily_message,
    generate_speech,
    setup_premium_voice,
)
from logger import logger
from .services import Services, get_services

router = APIRouter(prefix="/api", tags=["Coaching"])


# ============================================================
# Pydantic Models
# ============================================================

class SpeechIn(BaseModel):
    text: str = Field(..., min_length=1)
    style: str = "calm"
    apiKey: Optional[str] = None


class SpeakIn(SpeechIn):
    volume: Optional[float] = Field(default=None, ge=0, le=1)


class CoachingIn(BaseModel):
    style: str
    mood: float = Field(..., ge=0, le=100)
    userName: Optional[str] = None


class DailyMessageIn(BaseModel):
    userName: Optional[str] = None
    mood: float = Field(50, ge=0, le=100)


class InspirationIn(BaseModel):
    """A daily message to read out; omit for the default one."""
    message: Optional[str] = None
    quote: Optional[str] = None
    author: Optional[str] = None
    apiKey: Optional[str] = None


class PremiumKeyIn(BaseModel):
    apiKey: str = ""


# ============================================================
# Premium voice
# ============================================================

@router.post("/elevenlabs")
async def elevenlabs(body: SpeechIn):
    """Render text with the premium voice for a style."""
    result = await generate_speech(body.text, body.style, api_key=body.apiKey)
    if not result.get("success"):
        status = result.pop("status", 500)
        return JSONResponse(status_code=status, content=result)
    return result


@router.post("/elevenlabs/setup")
async def elevenlabs_setup(body: PremiumKeyIn, services: Services = Depends(get_services)):
    """Check and save a premium voice key."""
    result = await setup_premium_voice(body.apiKey)
    if result["success"]:
        services.chain.breaker.reset()
    return result


@router.delete("/elevenlabs/setup")
async def elevenlabs_disable():
    disable_premium_voice()
    return {"success": True, "message": "Premium voices disabled"}


# ============================================================
# Tone and messages
# ============================================================

@router.post("/voice")
async def voice(body: SpeechIn):
    """Generate the fallback tone for a style as base64 16-bit PCM."""
    settings = tone_settings_for(body.style, body.text)
    try:
        pcm = generate_natural_tone(settings.base_frequency, settings.duration, settings.volume)
    except Exception as e:
        logger.error(f"Voice tone generation failed: {e}")
        raise HTTPException(500, "Failed to generate voice audio")

    return {
        "audioData": base64.b64encode(pcm).decode("ascii"),
        "duration": settings.duration,
        "style": body.style,
        "message": "Audio generated successfully",
    }


@router.post("/coaching")
async def coaching(body: CoachingIn):
    try:
        return generate_coaching_message(body.style, body.mood, body.userName)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.post("/daily-message")
async def daily_message(body: DailyMessageIn):
    return generate_daily_message(body.userName, body.mood)


# ============================================================
# Fallback chain
# ============================================================

@router.post("/speak")
async def speak(body: SpeakIn, services: Services = Depends(get_services)):
    """Speak text on this machine: premium voice, then local speech, then a tone."""
    outcome = await services.chain.speak(body.text, body.style, api_key=body.apiKey, volume=body.volume)
    return outcome.to_dict()


@router.post("/speak/inspiration")
async def speak_inspiration(body: InspirationIn, services: Services = Depends(get_services)):
    daily = None
    if body.message and body.quote and body.author:
        daily = {"message": body.message, "quote": body.quote, "author": body.author}
    outcome = await services.chain.speak_inspiration(daily, api_key=body.apiKey)
    return outcome.to_dict()


@router.get("/speak/status")
async def speak_status(services: Services = Depends(get_services)):
    return services.chain.breaker.get_stats()
