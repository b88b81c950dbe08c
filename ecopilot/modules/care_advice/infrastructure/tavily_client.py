# 📄 File: ecopilot/modules/care_advice/infrastructure/tavily_client.py
# 🧭 Purpose (Layman Explanation):
# Asks the Tavily search engine for plant care articles from trusted gardening sites.
# 🧪 Purpose (Technical Summary):
# SearchProvider implementation posting to the Tavily /search endpoint (basic depth,
# answer included, five results, gardening domain allow list and social deny list).
# 🔗 Dependencies:
# APIClient (aiohttp + tenacity + circuit breaker), settings
# 🔄 Connected Modules / Calls From:
# care_advice presentation dependencies

import logging
from typing import Any, Dict, Optional

from ecopilot.shared.config.settings import Settings, get_settings
from ecopilot.shared.infrastructure.external_apis import APIClient

from ..domain.repositories.search_provider import SearchProvider

logger = logging.getLogger(__name__)

INCLUDE_DOMAINS = ["gardeningknowhow.com", "thespruce.com", "plantnet.org", "jardiland.com"]
EXCLUDE_DOMAINS = ["pinterest.com", "reddit.com"]
MAX_RESULTS = 5


class TavilyClient(SearchProvider):
    """Tavily web search client."""

    def __init__(self, api_key: str, settings: Optional[Settings] = None, api_client: Optional[APIClient] = None):
        settings = settings or get_settings()
        self.api_key = api_key
        self.api_client = api_client or APIClient(
            base_url=settings.TAVILY_API_URL,
            api_name="tavily",
            timeout=settings.EXTERNAL_API_TIMEOUT,
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
        )

    def build_request(self, query: str) -> Dict[str, Any]:
        return {
            "api_key": self.api_key,
            "query": query,
            "search_depth": "basic",
            "include_answer": True,
            "max_results": MAX_RESULTS,
            "include_domains": INCLUDE_DOMAINS,
            "exclude_domains": EXCLUDE_DOMAINS,
        }

    async def search(self, query: str) -> Dict[str, Any]:
        data = await self.api_client.post("search", json_body=self.build_request(query))
        return data if isinstance(data, dict) else {}

    async def close(self) -> None:
        await self.api_client.close()
