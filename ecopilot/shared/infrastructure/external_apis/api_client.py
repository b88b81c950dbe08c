# 📄 File: ecopilot/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A careful messenger that EcoPilot uses to talk to the weather, plant search and map
# services, retrying when the network hiccups and giving up cleanly when a service is down.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client on aiohttp with tenacity retries for transport errors,
# status-code to exception mapping, per-API circuit breaker and request statistics.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies
# - circuit_breaker: per-API failure isolation

# 🔄 Connected Modules / Calls From:
# Used by: OpenWeatherClient, TavilyClient, NominatimClient

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ecopilot.shared.core.exceptions import (
    APIAuthenticationError,
    APITimeoutError,
    ExternalAPIError,
    RateLimitError,
)
from ecopilot.shared.infrastructure.external_apis.circuit_breaker import (
    CircuitBreaker,
    circuit_breaker_manager,
)

logger = logging.getLogger(__name__)

USER_AGENT = "EcoPilot/1.0 (plant-care-assistant)"


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Automatic retry with exponential backoff on transport errors
    - Circuit breaker per API
    - Status code to exception mapping
    - Request statistics
    """

    def __init__(
        self,
        base_url: str,
        api_name: str,
        timeout: int = 10,
        max_retries: int = 3,
        default_headers: Optional[Dict[str, str]] = None,
        circuit_breaker: Optional[CircuitBreaker] = None,
        session: Optional[ClientSession] = None,
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip("/")
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.default_headers = default_headers or {}
        self.circuit_breaker = circuit_breaker or circuit_breaker_manager.get_circuit_breaker(api_name)
        self.session = session
        self._owns_session = session is None

        self.stats = {
            "total_requests": 0,
            "successful_requests": 0,
            "failed_requests": 0,
            "average_response_time": 0.0,
            "last_request_time": None,
        }

    def _get_default_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        headers.update(self.default_headers)
        return headers

    async def _get_session(self) -> ClientSession:
        if self.session is None or self.session.closed:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.timeout),
                headers=self._get_default_headers(),
            )
            self._owns_session = True
            logger.debug(f"HTTP session opened for {self.api_name}")
        return self.session

    async def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]],
        json_body: Optional[Dict[str, Any]],
        headers: Optional[Dict[str, str]],
    ) -> Any:
        session = await self._get_session()
        async with session.request(method, url, params=params, json=json_body, headers=headers) as response:
            await self._handle_response_status(response)
            return await response.json(content_type=None)

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make HTTP request through the circuit breaker with retry logic."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}" if endpoint else self.base_url

        self.circuit_breaker.before_call()

        start_time = time.monotonic()
        self.stats["total_requests"] += 1
        self.stats["last_request_time"] = datetime.now(timezone.utc).isoformat()

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
                retry=retry_if_exception_type((aiohttp.ClientConnectionError, asyncio.TimeoutError)),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    data = await self._send(method, url, params, json_body, headers)
        except Exception as e:
            self.stats["failed_requests"] += 1
            error = self._transform_exception(e)
            self.circuit_breaker.record_failure(error)
            logger.warning(f"⚠️ {self.api_name} API request failed: {method} {url} - {error}")
            if error is e:
                raise
            raise error from e

        response_time = time.monotonic() - start_time
        self.circuit_breaker.record_success()
        self.stats["successful_requests"] += 1
        if self.stats["average_response_time"] == 0:
            self.stats["average_response_time"] = response_time
        else:
            self.stats["average_response_time"] = (
                self.stats["average_response_time"] * 0.7 + response_time * 0.3
            )

        logger.info(f"🌐 {self.api_name} API request successful: {method} {url} - {response_time:.2f}s")
        return data

    async def _handle_response_status(self, response: aiohttp.ClientResponse) -> None:
        """Handle HTTP response status codes."""
        if 200 <= response.status < 300:
            return
        if response.status in (401, 403):
            raise APIAuthenticationError(self.api_name)
        if response.status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                f"Rate limit exceeded for {self.api_name}",
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )

        response_text = await response.text()
        kind = "Client" if response.status < 500 else "Server"
        raise ExternalAPIError(
            f"{kind} error for {self.api_name} ({response.status}): {response_text[:200]}",
            api_name=self.api_name,
            api_status_code=response.status,
        )

    def _transform_exception(self, exception: Exception) -> Exception:
        """Transform transport exceptions to API exceptions."""
        if isinstance(exception, (ExternalAPIError, RateLimitError)):
            return exception
        if isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(self.api_name, self.timeout)
        if isinstance(exception, (aiohttp.ClientError, ValueError)):
            return ExternalAPIError(f"Client error for {self.api_name}: {exception}", api_name=self.api_name)
        return exception

    async def get(
        self,
        endpoint: str = "",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make GET request."""
        return await self._make_request("GET", endpoint, params=params, headers=headers)

    async def post(
        self,
        endpoint: str = "",
        json_body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make POST request."""
        return await self._make_request("POST", endpoint, params=params, json_body=json_body, headers=headers)

    def get_stats(self) -> Dict[str, Any]:
        """Get client performance statistics."""
        return {
            **self.stats,
            "api_name": self.api_name,
            "circuit": self.circuit_breaker.get_status(),
            "error_rate": (
                self.stats["failed_requests"] / max(self.stats["total_requests"], 1)
            ) * 100,
        }

    async def close(self) -> None:
        """Close the client session and cleanup resources."""
        if self.session and self._owns_session and not self.session.closed:
            await self.session.close()
        self.session = None
        logger.debug(f"API client closed for {self.api_name}")
