"""Tests for the external API circuit breaker."""

import pytest

from ecopilot.shared.core.exceptions import CircuitBreakerError, ExternalAPIError, ValidationError
from ecopilot.shared.infrastructure.external_apis.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitState,
)


class ManualClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def monotonic():
    return ManualClock()


@pytest.fixture
def breaker(monotonic):
    config = CircuitBreakerConfig(failure_threshold=3, recovery_timeout_seconds=30)
    return CircuitBreaker("openweather", config=config, clock=monotonic)


def fail(breaker: CircuitBreaker, times: int) -> None:
    for _ in range(times):
        breaker.before_call()
        breaker.record_failure(ExternalAPIError("boom", api_name=breaker.name))


class TestCircuitBreaker:
    def test_opens_after_consecutive_failures(self, breaker):
        fail(breaker, 2)
        assert breaker.state is CircuitState.CLOSED

        fail(breaker, 1)
        assert breaker.state is CircuitState.OPEN

        with pytest.raises(CircuitBreakerError) as exc_info:
            breaker.before_call()
        assert exc_info.value.status_code == 503
        assert exc_info.value.details["reset_in_seconds"] == 30.0

    def test_success_resets_failure_count(self, breaker):
        fail(breaker, 2)
        breaker.record_success()
        fail(breaker, 2)
        assert breaker.state is CircuitState.CLOSED

    def test_client_errors_do_not_count(self, breaker):
        for _ in range(5):
            breaker.record_failure(ValidationError("bad input"))
        assert breaker.state is CircuitState.CLOSED
        assert breaker.total_failures == 0

    def test_probe_after_recovery_timeout(self, breaker, monotonic):
        fail(breaker, 3)
        monotonic.now += 31

        breaker.before_call()
        assert breaker.state is CircuitState.HALF_OPEN

        breaker.record_success()
        assert breaker.state is CircuitState.CLOSED

    def test_failed_probe_reopens(self, breaker, monotonic):
        fail(breaker, 3)
        monotonic.now += 31

        fail(breaker, 1)
        assert breaker.state is CircuitState.OPEN
        assert breaker.reset_in_seconds() == 30.0

    async def test_call_wraps_coroutines(self, breaker):
        async def ok(value):
            return value * 2

        async def broken():
            raise ExternalAPIError("boom")

        assert await breaker.call(ok, 21) == 42
        with pytest.raises(ExternalAPIError):
            await breaker.call(broken)
        assert breaker.get_status()["consecutive_failures"] == 1
