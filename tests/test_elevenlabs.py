"""Tests for the ElevenLabs premium voice client."""

import base64

import httpx
import pytest

import config
from conftest import make_response
from domains import store
from domains.coaching.config import VOICE_IDS
from domains.coaching.elevenlabs import (
    API_KEY_STORE_KEY,
    USE_PREMIUM_STORE_KEY,
    disable_premium_voice,
    generate_speech,
    get_premium_api_key,
    setup_premium_voice,
)


class TestGenerateSpeech:

    @pytest.mark.asyncio
    async def test_missing_key(self, mock_httpx_client):
        result = await generate_speech("Hello", "calm")

        assert result["fallback"] is True
        assert result["status"] == 400
        mock_httpx_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_success(self, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, content=b"ID3mp3")

        result = await generate_speech("Hello", "energetic", api_key="sk-test")

        assert result["success"] is True
        assert base64.b64decode(result["audioData"]) == b"ID3mp3"
        assert result["contentType"] == "audio/mpeg"
        assert result["voiceId"] == VOICE_IDS["energetic"]

        args, kwargs = mock_httpx_client.post.call_args
        assert args[0] == f"{config.ELEVENLABS_API_URL}/text-to-speech/{VOICE_IDS['energetic']}"
        assert kwargs["headers"]["xi-api-key"] == "sk-test"
        assert kwargs["json"]["text"] == "Hello"
        assert kwargs["json"]["model_id"] == config.ELEVENLABS_MODEL

    @pytest.mark.asyncio
    async def test_unknown_style_uses_calm_voice(self, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, content=b"x")

        result = await generate_speech("Hello", "sleepy", api_key="sk-test")
        assert result["voiceId"] == VOICE_IDS["calm"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,fragment", [
        (401, "Invalid API key"),
        (402, "Insufficient credits"),
        (429, "Rate limit exceeded"),
        (503, "ElevenLabs API failed"),
    ])
    async def test_error_status_mapping(self, mock_httpx_client, status, fragment):
        mock_httpx_client.post.return_value = make_response(status, text="upstream says no")

        result = await generate_speech("Hello", "calm", api_key="sk-test")

        assert result["fallback"] is True
        assert result["status"] == status
        assert fragment in result["error"]
        assert result["details"] == "upstream says no"

    @pytest.mark.asyncio
    async def test_network_error(self, mock_httpx_client):
        mock_httpx_client.post.side_effect = httpx.ConnectError("offline")

        result = await generate_speech("Hello", "calm", api_key="sk-test")

        assert result["fallback"] is True
        assert result["status"] == 500
        assert result["error"] == "Failed to generate ElevenLabs audio"

    @pytest.mark.asyncio
    async def test_env_key_used_by_default(self, mock_httpx_client, monkeypatch):
        monkeypatch.setattr(config, "ELEVENLABS_API_KEY", "sk-env")
        mock_httpx_client.post.return_value = make_response(200, content=b"x")

        await generate_speech("Hello", "calm")

        assert mock_httpx_client.post.call_args.kwargs["headers"]["xi-api-key"] == "sk-env"


class TestPremiumSetup:

    @pytest.mark.asyncio
    async def test_rejects_empty_key(self, mock_httpx_client):
        result = await setup_premium_voice("  ")
        assert result["success"] is False
        mock_httpx_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_key_without_prefix(self, mock_httpx_client):
        result = await setup_premium_voice("abc123")
        assert result["success"] is False
        assert "sk-" in result["message"]
        mock_httpx_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_saves_working_key(self, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, content=b"x")

        result = await setup_premium_voice("sk-good")

        assert result["success"] is True
        assert store.get_value(API_KEY_STORE_KEY) == "sk-good"
        assert store.get_value(USE_PREMIUM_STORE_KEY) is True
        assert get_premium_api_key() == "sk-good"

    @pytest.mark.asyncio
    async def test_rejected_key_not_saved(self, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(402)

        result = await setup_premium_voice("sk-broke")

        assert result["success"] is False
        assert "Insufficient credits" in result["message"]
        assert store.has_key(API_KEY_STORE_KEY) is False

    def test_disable_falls_back_to_env_key(self, monkeypatch):
        monkeypatch.setattr(config, "ELEVENLABS_API_KEY", "sk-env")
        store.set_value(API_KEY_STORE_KEY, "sk-saved")
        store.set_value(USE_PREMIUM_STORE_KEY, True)
        assert get_premium_api_key() == "sk-saved"

        disable_premium_voice()
        assert get_premium_api_key() == "sk-env"
