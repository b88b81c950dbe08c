"""Tests for CareAdviceService (search provider and knowledge base fallback)."""

import pytest

from ecopilot.modules.care_advice.domain.models.care import AdviceSource
from ecopilot.modules.care_advice.domain.services.care_advice_service import (
    CareAdviceService,
    build_search_query,
    build_species_query,
)
from ecopilot.shared.core.exceptions import ExternalAPIError, RateLimitError, ValidationError

TAVILY_PAYLOAD = {
    "answer": "Water your monstera every 7-10 days and keep it in bright indirect light.",
    "results": [
        {
            "title": "Monstera care guide",
            "url": "https://www.thespruce.com/monstera",
            "content": "Water every 7-10 days. Bright indirect light is best.",
            "score": 0.93,
        },
        {
            "title": "Swiss cheese plant",
            "url": "https://www.gardeningknowhow.com/monstera",
            "content": "Keep humidity high.",
        },
    ],
}


class TestQueries:
    def test_search_query_suffix_depends_on_language(self):
        assert build_search_query("monstera", "en") == "monstera plant care watering frequency tips problems"
        assert build_search_query("monstera", "fr") == "monstera soin plante arrosage fréquence conseils problèmes"

    def test_species_query(self):
        assert build_species_query("Ficus lyrata", "en") == "Ficus lyrata houseplant care guide watering light humidity"
        assert build_species_query("Ficus lyrata", "fr").startswith("Ficus lyrata plante intérieur")


class TestSearch:
    @pytest.mark.parametrize("query", [None, "", "   "])
    async def test_empty_query_rejected(self, care_service, query):
        with pytest.raises(ValidationError) as exc_info:
            await care_service.search(query, "en")
        assert exc_info.value.translation_key == "search.query_required"

    async def test_search_results_are_mapped(self, care_service, search_provider, clock):
        search_provider.payload = TAVILY_PAYLOAD

        result = await care_service.search("monstera", "en")

        assert search_provider.queries == ["monstera plant care watering frequency tips problems"]
        assert result.source is AdviceSource.TAVILY
        assert result.is_fallback is False
        assert result.answer == TAVILY_PAYLOAD["answer"]
        assert [source.relevance_score for source in result.sources] == [0.93, 0.8]
        assert result.sources[0].snippet.startswith("Water every")
        assert result.plant_care.watering_frequency == "7-10 jours / days"
        assert result.plant_care.light_requirements == "indirect light"
        assert result.timestamp == clock()

    async def test_no_results_fall_back_to_knowledge_base(self, care_service, search_provider):
        search_provider.payload = {"answer": None, "results": []}

        result = await care_service.search("pothos", "fr")

        assert result.source is AdviceSource.LOCAL_DATABASE
        assert result.is_fallback is True
        assert result.answer == result.answer_fr
        assert result.answer_en == "Very easy, tolerates neglect, low to medium light"

    @pytest.mark.parametrize(
        "error",
        [ExternalAPIError("boom", api_name="tavily"), RateLimitError("slow down")],
    )
    async def test_provider_errors_fall_back(self, care_service, search_provider, error):
        search_provider.error = error

        result = await care_service.search("monstera", "en")

        assert result.is_fallback is True
        assert result.plant_care.name == "Monstera Deliciosa"

    async def test_without_provider_uses_knowledge_base(self):
        service = CareAdviceService()
        result = await service.search("snake plant", "en")

        assert result.source is AdviceSource.LOCAL_DATABASE
        assert result.plant_care.watering_frequency == "14-21 days"
        assert result.plant_care.tips == ["Perfect for beginners, air purifying"]
        assert result.plant_care.name_fr == "Sansevieria (Langue de Belle-Mère)"

    async def test_local_source_entry(self):
        result = CareAdviceService().local_result("cactus", "en")
        source = result.sources[0]

        assert source.title == "Generic houseplant - Care guide"
        assert source.url == "#local-database"
        assert source.relevance_score == 0.9


class TestSpecies:
    async def test_species_uses_species_query(self, care_service, search_provider):
        search_provider.payload = TAVILY_PAYLOAD

        result = await care_service.species("Monstera deliciosa", "fr")

        assert search_provider.queries == [
            "Monstera deliciosa plante intérieur soin guide arrosage lumière humidité"
        ]
        assert result.query == "Monstera deliciosa"
        assert result.language == "fr"
