# 📄 File: ecopilot/shared/infrastructure/external_apis/circuit_breaker.py
# 🧭 Purpose (Layman Explanation):
# Acts like an electrical circuit breaker for weather, search and map calls: when one of
# those services keeps failing, EcoPilot stops calling it for a while and uses its local data.
# 🧪 Purpose (Technical Summary):
# Circuit Breaker pattern (CLOSED -> OPEN -> HALF_OPEN -> CLOSED) driven by consecutive
# failures and a recovery timeout, plus a manager holding one breaker per external API.
# 🔗 Dependencies:
# asyncio, time, enum, dataclasses, logging
# 🔄 Connected Modules / Calls From:
# api_client.APIClient, OpenWeatherClient, TavilyClient, NominatimClient, health endpoint

import time
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Type
import logging

from ecopilot.shared.core.exceptions import CircuitBreakerError, is_client_error

logger = logging.getLogger(__name__)


class CircuitState(Enum):
    """Circuit breaker states"""
    CLOSED = "closed"        # Normal operation, requests flow through
    OPEN = "open"            # Circuit tripped, requests fail fast
    HALF_OPEN = "half_open"  # Testing if service recovered


@dataclass
class CircuitBreakerConfig:
    """Configuration for circuit breaker behavior"""
    failure_threshold: int = 5
    recovery_timeout_seconds: float = 60.0
    half_open_max_calls: int = 1
    # Client errors (4xx) are the caller's fault and never trip the circuit
    ignored_exceptions: Tuple[Type[BaseException], ...] = ()


class CircuitBreaker:
    """
    Circuit breaker for one external API.

    Counts consecutive failures; once ``failure_threshold`` is reached the
    circuit opens and calls fail fast with ``CircuitBreakerError`` until
    ``recovery_timeout_seconds`` have passed. The next call is then let through
    as a probe: success closes the circuit, failure re-opens it.
    """

    def __init__(
        self,
        name: str,
        config: Optional[CircuitBreakerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.name = name
        self.config = config or CircuitBreakerConfig()
        self._clock = clock
        self.state = CircuitState.CLOSED
        self.consecutive_failures = 0
        self.half_open_successes = 0
        self.opened_at = 0.0
        self.total_calls = 0
        self.total_failures = 0
        self._lock = Lock()

        logger.debug(f"Circuit breaker '{name}' initialized in CLOSED state")

    def _transition_to_state(self, new_state: CircuitState, reason: str) -> None:
        old_state = self.state
        self.state = new_state
        if new_state == CircuitState.OPEN:
            self.opened_at = self._clock()
        if new_state == CircuitState.HALF_OPEN:
            self.half_open_successes = 0
        if new_state == CircuitState.CLOSED:
            self.consecutive_failures = 0

        logger.info(
            f"⚡ Circuit breaker '{self.name}' transitioned from {old_state.value} to {new_state.value}: {reason}"
        )

    def reset_in_seconds(self) -> float:
        """Seconds left before an open circuit lets a probe call through."""
        if self.state != CircuitState.OPEN:
            return 0.0
        elapsed = self._clock() - self.opened_at
        return max(0.0, self.config.recovery_timeout_seconds - elapsed)

    def before_call(self) -> None:
        """
        Gate a call.

        Raises:
            CircuitBreakerError: When the circuit is open
        """
        with self._lock:
            self.total_calls += 1
            if self.state == CircuitState.OPEN:
                if self.reset_in_seconds() > 0:
                    raise CircuitBreakerError(self.name, self.reset_in_seconds())
                self._transition_to_state(CircuitState.HALF_OPEN, "Attempting recovery")

    def record_success(self) -> None:
        with self._lock:
            self.consecutive_failures = 0
            if self.state == CircuitState.HALF_OPEN:
                self.half_open_successes += 1
                if self.half_open_successes >= self.config.half_open_max_calls:
                    self._transition_to_state(CircuitState.CLOSED, "Successful recovery verified")

    def record_failure(self, error: BaseException) -> None:
        if isinstance(error, self.config.ignored_exceptions) or is_client_error(error):
            return

        with self._lock:
            self.total_failures += 1
            self.consecutive_failures += 1
            if self.state == CircuitState.HALF_OPEN:
                self._transition_to_state(CircuitState.OPEN, f"Failure during recovery test: {error}")
            elif (
                self.state == CircuitState.CLOSED
                and self.consecutive_failures >= self.config.failure_threshold
            ):
                self._transition_to_state(
                    CircuitState.OPEN, f"{self.consecutive_failures} consecutive failures"
                )

    async def call(self, func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> Any:
        """
        Execute a function call through the circuit breaker

        Args:
            func: Async function to call
            *args: Function arguments
            **kwargs: Function keyword arguments

        Returns:
            Function result

        Raises:
            CircuitBreakerError: When circuit is open
            Original exception: When call fails
        """
        self.before_call()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            self.record_failure(e)
            raise
        self.record_success()
        return result

    def reset(self) -> None:
        """Force the circuit back to CLOSED."""
        with self._lock:
            self._transition_to_state(CircuitState.CLOSED, "Manual reset")

    def get_status(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "state": self.state.value,
            "consecutive_failures": self.consecutive_failures,
            "total_calls": self.total_calls,
            "total_failures": self.total_failures,
            "reset_in_seconds": round(self.reset_in_seconds(), 1),
        }


class CircuitBreakerManager:
    """Holds one circuit breaker per external API name."""

    def __init__(self, default_config: Optional[CircuitBreakerConfig] = None):
        self.default_config = default_config or CircuitBreakerConfig()
        self.circuit_breakers: Dict[str, CircuitBreaker] = {}
        self._lock = Lock()

    def get_circuit_breaker(self, name: str, config: Optional[CircuitBreakerConfig] = None) -> CircuitBreaker:
        """Get or create circuit breaker for a service"""
        with self._lock:
            if name not in self.circuit_breakers:
                self.circuit_breakers[name] = CircuitBreaker(name, config or self.default_config)
            return self.circuit_breakers[name]

    def get_all_status(self) -> Dict[str, Dict[str, Any]]:
        return {name: breaker.get_status() for name, breaker in self.circuit_breakers.items()}

    def reset_all(self) -> None:
        for breaker in self.circuit_breakers.values():
            breaker.reset()


# Global circuit breaker manager instance
circuit_breaker_manager = CircuitBreakerManager()
