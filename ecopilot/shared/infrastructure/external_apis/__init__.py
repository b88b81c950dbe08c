# 📄 File: ecopilot/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# Sets up the foundation for talking to the weather, plant search and map services
# in a reliable and organized way.

# 🧪 Purpose (Technical Summary):
# Exports the generic aiohttp API client and the circuit breaker registry used by
# every third-party integration.

# 🔗 Dependencies:
# - api_client: Generic HTTP client with retry logic
# - circuit_breaker: Circuit breaker for API resilience

# 🔄 Connected Modules / Calls From:
# Used by: weather, care_advice and location_tracking infrastructure clients

from .api_client import APIClient
from .circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitState,
    circuit_breaker_manager,
)

__all__ = [
    "APIClient",
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitState",
    "circuit_breaker_manager",
]
