"""Global configuration for MotivateMe."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

APP_NAME = "MotivateMe"

# ElevenLabs premium voices (optional - falls back to local speech without a key)
ELEVENLABS_API_KEY = os.getenv("ELEVENLABS_API_KEY")
ELEVENLABS_API_URL = os.getenv("ELEVENLABS_API_URL", "https://api.elevenlabs.io/v1")
ELEVENLABS_MODEL = os.getenv("ELEVENLABS_MODEL", "eleven_turbo_v2_5")
ELEVENLABS_TIMEOUT = float(os.getenv("ELEVENLABS_TIMEOUT", "30"))

# Remote TTS circuit breaker
TTS_CIRCUIT_FAILURE_THRESHOLD = int(os.getenv("TTS_CIRCUIT_FAILURE_THRESHOLD", "3"))
TTS_CIRCUIT_RECOVERY_TIMEOUT = int(os.getenv("TTS_CIRCUIT_RECOVERY_TIMEOUT", "300"))

# Reminder checks
REMINDER_CHECK_INTERVAL = int(os.getenv("REMINDER_CHECK_INTERVAL", "60"))
REMINDER_COOLDOWN_SECONDS = int(os.getenv("REMINDER_COOLDOWN_SECONDS", "60"))
NOTIFICATION_TIMEOUT = int(os.getenv("NOTIFICATION_TIMEOUT", "10"))
TOAST_DURATION = int(os.getenv("TOAST_DURATION", "10"))
BANNER_DURATION = int(os.getenv("BANNER_DURATION", "30"))

# Audio
SAMPLE_RATE = 44100

# Local key-value store (events and preferences)
DATA_DIR = Path(os.getenv("MOTIVATE_DATA_DIR", Path(os.getenv("LOCALAPPDATA", ".")) / "motivateme"))
STORE_DB = str(DATA_DIR / "store.db")

# Logging
LOG_DIR = DATA_DIR / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API server
API_HOST = os.getenv("MOTIVATE_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("MOTIVATE_API_PORT", "8100"))
