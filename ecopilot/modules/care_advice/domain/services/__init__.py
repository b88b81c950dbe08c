from .care_advice_service import CareAdviceService, build_search_query, build_species_query
from .care_extraction import (
    extract_light_requirements,
    extract_plant_care,
    extract_tips,
    extract_watering_frequency,
)
from .knowledge_base import GENERIC_PLANT, KNOWLEDGE_BASE, find_plant

__all__ = [
    "CareAdviceService",
    "GENERIC_PLANT",
    "KNOWLEDGE_BASE",
    "build_search_query",
    "build_species_query",
    "extract_light_requirements",
    "extract_plant_care",
    "extract_tips",
    "extract_watering_frequency",
    "find_plant",
]
