# 📄 File: ecopilot/modules/care_advice/domain/services/care_advice_service.py
# 🧭 Purpose (Layman Explanation):
# Answers "how do I take care of this plant?" by searching the web, and falls back
# to the built-in plant encyclopedia whenever the search comes back empty or fails.
# 🧪 Purpose (Technical Summary):
# Domain service building language-specific search queries, mapping provider
# payloads to CareAdviceResult and producing knowledge base fallbacks.
# 🔗 Dependencies:
# SearchProvider, knowledge_base, care_extraction, shared i18n and exceptions
# 🔄 Connected Modules / Calls From:
# tavily endpoints, tests

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from ecopilot.shared.core.exceptions import ExternalAPIError, RateLimitError, ValidationError
from ecopilot.shared.core.i18n import resolve_locale, translate

from ..models.care import AdviceSource, CareAdviceResult, KnowledgeEntry, PlantCareInfo, SearchSource
from ..repositories.search_provider import SearchProvider
from .care_extraction import extract_plant_care
from .knowledge_base import find_plant

logger = logging.getLogger(__name__)

LOCAL_SOURCE_URL = "#local-database"
LOCAL_RELEVANCE_SCORE = 0.9
DEFAULT_RELEVANCE_SCORE = 0.8

_QUERY_SUFFIXES = {
    "en": "plant care watering frequency tips problems",
    "fr": "soin plante arrosage fréquence conseils problèmes",
}
_SPECIES_TEMPLATES = {
    "en": "{species} houseplant care guide watering light humidity",
    "fr": "{species} plante intérieur soin guide arrosage lumière humidité",
}


def build_search_query(query: str, locale: str) -> str:
    return f"{query} {_QUERY_SUFFIXES[resolve_locale(locale)]}"


def build_species_query(species: str, locale: str) -> str:
    return _SPECIES_TEMPLATES[resolve_locale(locale)].format(species=species)


class CareAdviceService:
    """
    Domain service for plant care advice.

    Without a provider (no API key), when the provider returns no results or
    when it fails, the answer comes from the local knowledge base and is
    flagged ``is_fallback``.
    """

    def __init__(
        self,
        provider: Optional[SearchProvider] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.provider = provider
        self._clock = clock

    async def search(self, query: Optional[str], locale: Optional[str] = None) -> CareAdviceResult:
        """
        Care advice for a free-text plant question.

        Raises:
            ValidationError: When the query is empty
        """
        query = self._require_query(query)
        locale = resolve_locale(locale)
        return await self._search(query, build_search_query(query, locale), locale)

    async def species(self, species: str, locale: Optional[str] = None) -> CareAdviceResult:
        """Care guide for a species name."""
        species = self._require_query(species)
        locale = resolve_locale(locale)
        return await self._search(species, build_species_query(species, locale), locale)

    @staticmethod
    def _require_query(query: Optional[str]) -> str:
        query = (query or "").strip()
        if not query:
            raise ValidationError(
                message="Search query is required",
                field="query",
                translation_key="search.query_required",
            )
        return query

    async def _search(self, query: str, search_query: str, locale: str) -> CareAdviceResult:
        if self.provider is None:
            return self.local_result(query, locale)

        try:
            payload = await self.provider.search(search_query)
        except (ExternalAPIError, RateLimitError) as e:
            logger.warning(f"⚠️ Care search failed for '{query}', using local knowledge base: {e}")
            return self.local_result(query, locale)

        results = payload.get("results") or []
        if not results:
            logger.info(f"🔍 No search results for '{query}', using local knowledge base")
            return self.local_result(query, locale)

        return self._search_result(query, payload, locale)

    def _search_result(self, query: str, payload: Dict[str, Any], locale: str) -> CareAdviceResult:
        results = payload["results"]
        answer = payload.get("answer")
        logger.info(f"🔍 Care search '{query}' returned {len(results)} source(s)")
        return CareAdviceResult(
            query=query,
            language=locale,
            answer=answer,
            # Answers are only available in the language of the search
            answer_fr=answer,
            answer_en=answer,
            sources=[
                SearchSource(
                    title=result.get("title") or "",
                    url=result.get("url") or "",
                    snippet=result.get("content") or "",
                    relevance_score=result.get("score") or DEFAULT_RELEVANCE_SCORE,
                )
                for result in results
            ],
            plant_care=extract_plant_care(results, locale),
            timestamp=self._clock(),
            source=AdviceSource.TAVILY,
        )

    def local_result(self, query: str, locale: str) -> CareAdviceResult:
        entry = find_plant(query)
        return self._entry_result(query, entry, locale)

    def _entry_result(self, query: str, entry: KnowledgeEntry, locale: str) -> CareAdviceResult:
        sheet = entry.sheet(locale)
        fr, en = entry.sheet("fr"), entry.sheet("en")
        return CareAdviceResult(
            query=query,
            language=locale,
            answer=sheet.care,
            answer_fr=fr.care,
            answer_en=en.care,
            sources=[
                SearchSource(
                    title=f"{sheet.name} - {translate('search.care_guide', locale)}",
                    url=LOCAL_SOURCE_URL,
                    snippet=sheet.care,
                    relevance_score=LOCAL_RELEVANCE_SCORE,
                )
            ],
            plant_care=PlantCareInfo(
                name=sheet.name,
                name_fr=fr.name,
                name_en=en.name,
                watering_frequency=sheet.frequency,
                care_instructions=sheet.care,
                care_instructions_fr=fr.care,
                care_instructions_en=en.care,
                tips=[sheet.tips],
                tips_fr=[fr.tips],
                tips_en=[en.tips],
                common_problems=sheet.problems,
                common_problems_fr=fr.problems,
                common_problems_en=en.problems,
            ),
            timestamp=self._clock(),
            source=AdviceSource.LOCAL_DATABASE,
            is_fallback=True,
        )
