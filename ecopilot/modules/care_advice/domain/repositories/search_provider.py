# 📄 File: ecopilot/modules/care_advice/domain/repositories/search_provider.py
# 🧭 Purpose (Layman Explanation):
# The contract a web search service must follow to answer plant questions.
# 🧪 Purpose (Technical Summary):
# Abstract web search provider returning the raw ``{answer, results}`` payload.
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# TavilyClient (implementation), CareAdviceService, tests (fakes)

from abc import ABC, abstractmethod
from typing import Any, Dict


class SearchProvider(ABC):
    """Abstract web search source."""

    @abstractmethod
    async def search(self, query: str) -> Dict[str, Any]:
        """
        Run a search.

        Returns:
            Payload with an optional ``answer`` and a ``results`` list of
            ``{title, url, content, score}`` entries

        Raises:
            ExternalAPIError: When the provider cannot answer
        """
        pass
