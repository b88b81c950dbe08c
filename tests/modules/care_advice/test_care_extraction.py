"""Tests for the knowledge base lookup and care text extraction."""

import pytest

from ecopilot.modules.care_advice.domain.services.care_extraction import (
    DEFAULT_WATERING_FREQUENCY,
    extract_light_requirements,
    extract_plant_care,
    extract_watering_frequency,
)
from ecopilot.modules.care_advice.domain.services.knowledge_base import GENERIC_PLANT, find_plant


class TestFindPlant:
    @pytest.mark.parametrize(
        "query,key",
        [
            ("monstera", "monstera"),
            ("How do I care for my Monstera?", "monstera"),
            ("golden pothos", "pothos"),
            ("snake plant watering", "snake plant"),
            ("sansevieria", "snake plant"),
            ("belle-mère", "snake plant"),
        ],
    )
    def test_known_plants(self, query, key):
        assert find_plant(query).key == key

    def test_unknown_plant_is_generic(self):
        assert find_plant("cactus") is GENERIC_PLANT
        assert find_plant("") is GENERIC_PLANT


class TestWateringFrequency:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("water every 7-10 days in summer", "7-10 jours / days"),
            ("Water every 5 days", "5 jours / days"),
            ("allow 14 days between watering", "14 jours / days"),
            ("arroser tous les 10 jours", "10 jours / days"),
        ],
    )
    def test_patterns(self, text, expected):
        assert extract_watering_frequency(text) == expected

    def test_default_when_nothing_matches(self):
        assert extract_watering_frequency("keep the soil moist") == DEFAULT_WATERING_FREQUENCY


class TestLightRequirements:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("bright indirect light", "indirect light"),
            ("needs bright light", "bright light"),
            ("tolerates low light", "low light"),
            ("no mention", "indirect light"),
        ],
    )
    def test_english(self, text, expected):
        assert extract_light_requirements(text, "en") == expected

    def test_french(self):
        assert extract_light_requirements("tolerates low light", "fr") == "faible luminosité"


class TestExtractPlantCare:
    def test_combines_result_contents(self):
        results = [
            {"content": "Pothos likes bright light."},
            {"content": "Water every 10 days."},
            {"content": None},
        ]
        info = extract_plant_care(results, "en")

        assert info.watering_frequency == "10 jours / days"
        assert info.light_requirements == "bright light"
        assert info.tips[0] == "Maintain high humidity"
        assert info.tips_fr[0] == "Maintenir l'humidité élevée"
        assert info.extracted_from_sources is True
