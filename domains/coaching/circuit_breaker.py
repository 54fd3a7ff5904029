"""Circuit breaker for the premium text-to-speech service.

Stops the audio chain from calling ElevenLabs over and over once the key is
bad, the credit is gone or the service is down. While open, the premium stage
is skipped straight to local speech.

States:
- CLOSED: premium requests go out
- OPEN: premium stage skipped, no network call
- HALF_OPEN: one premium request allowed to test recovery

Transitions:
- CLOSED → OPEN: after ``failure_threshold`` consecutive failures
- OPEN → HALF_OPEN: after ``recovery_timeout`` seconds
- HALF_OPEN → CLOSED: on success
- HALF_OPEN → OPEN: on failure
"""

import time
from enum import Enum
from typing import Callable, Optional

import config
from logger import logger


class CircuitState(Enum):
    """Circuit breaker states."""
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreaker:
    """Consecutive-failure breaker. Used from the event loop only.

    Usage:
        if breaker.allow_request():
            result = await generate_speech(...)
            if result.get("success"):
                breaker.record_success()
            else:
                breaker.record_failure()
    """

    def __init__(
        self,
        failure_threshold: Optional[int] = None,
        recovery_timeout: Optional[float] = None,
        name: str = "tts",
        clock: Callable[[], float] = time.monotonic,
    ):
        self.failure_threshold = failure_threshold or config.TTS_CIRCUIT_FAILURE_THRESHOLD
        self.recovery_timeout = recovery_timeout or config.TTS_CIRCUIT_RECOVERY_TIMEOUT
        self.name = name
        self._clock = clock

        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._opened_at: Optional[float] = None
        self._times_opened = 0

    @property
    def state(self) -> CircuitState:
        """Current state, moving OPEN → HALF_OPEN once the timeout has passed."""
        if self._state == CircuitState.OPEN and self._opened_at is not None:
            if self._clock() - self._opened_at >= self.recovery_timeout:
                self._state = CircuitState.HALF_OPEN
                logger.info(f"Circuit breaker [{self.name}]: OPEN → HALF_OPEN (testing recovery)")
        return self._state

    def allow_request(self) -> bool:
        return self.state != CircuitState.OPEN

    def record_success(self) -> None:
        if self._state == CircuitState.HALF_OPEN:
            logger.info(f"Circuit breaker [{self.name}]: HALF_OPEN → CLOSED (service recovered)")
        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._opened_at = None

    def record_failure(self) -> None:
        self._failure_count += 1

        if self._state == CircuitState.HALF_OPEN:
            self._open()
            logger.warning(f"Circuit breaker [{self.name}]: HALF_OPEN → OPEN (recovery failed)")
        elif self._state == CircuitState.CLOSED and self._failure_count >= self.failure_threshold:
            self._open()
            logger.warning(
                f"Circuit breaker [{self.name}]: CLOSED → OPEN "
                f"(after {self._failure_count} consecutive failures)"
            )

    def _open(self) -> None:
        self._state = CircuitState.OPEN
        self._opened_at = self._clock()
        self._times_opened += 1

    def reset(self) -> None:
        """Back to CLOSED with no history (e.g. after a new API key is saved)."""
        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._opened_at = None
        self._times_opened = 0

    def get_stats(self) -> dict:
        return {
            "state": self.state.value,
            "failure_count": self._failure_count,
            "failure_threshold": self.failure_threshold,
            "times_opened": self._times_opened,
            "recovery_timeout": self.recovery_timeout,
        }
