# 📄 File: ecopilot/modules/care_advice/domain/services/care_extraction.py
# 🧭 Purpose (Layman Explanation):
# Skims web articles about a plant to pull out the useful bits: how often to water
# and what kind of light it needs.
# 🧪 Purpose (Technical Summary):
# Keyword and regular expression extraction of watering frequency, light
# requirements and general tips from search result texts.
# 🔗 Dependencies:
# re, shared i18n, care models
# 🔄 Connected Modules / Calls From:
# care_advice_service.py, tests

import re
from typing import Any, Dict, List, Sequence

from ecopilot.shared.core.i18n import resolve_locale, translate

from ..models.care import PlantCareInfo

DEFAULT_WATERING_FREQUENCY = "7-10 jours / days"

_WATERING_PATTERNS = (
    re.compile(r"water\s+every\s+(\d+[-\s]*\d*)\s*days?", re.IGNORECASE),
    re.compile(r"(\d+[-\s]*\d*)\s*days?\s+between\s+watering", re.IGNORECASE),
    re.compile(r"arroser\s+tous\s+les\s+(\d+[-\s]*\d*)\s*jours?", re.IGNORECASE),
)

GENERAL_TIPS: Dict[str, List[str]] = {
    "fr": [
        "Maintenir l'humidité élevée",
        "Éviter les courants d'air",
        "Nettoyer les feuilles régulièrement",
        "Fertiliser au printemps",
    ],
    "en": [
        "Maintain high humidity",
        "Avoid drafts",
        "Clean leaves regularly",
        "Fertilize in spring",
    ],
}


def extract_watering_frequency(text: str) -> str:
    for pattern in _WATERING_PATTERNS:
        match = pattern.search(text)
        if match:
            return f"{match.group(1).strip()} jours / days"
    return DEFAULT_WATERING_FREQUENCY


def extract_light_requirements(text: str, locale: str) -> str:
    text = text.lower()
    if "indirect" in text:
        kind = "indirect"
    elif "bright" in text:
        kind = "bright"
    elif "low light" in text:
        kind = "low"
    else:
        kind = "indirect"
    return translate(f"care.light.{kind}", locale)


def extract_tips(locale: str) -> List[str]:
    return list(GENERAL_TIPS[resolve_locale(locale)])


def extract_plant_care(results: Sequence[Dict[str, Any]], locale: str) -> PlantCareInfo:
    """Build care information from the combined text of search results."""
    combined_text = " ".join(result.get("content") or "" for result in results).lower()
    return PlantCareInfo(
        watering_frequency=extract_watering_frequency(combined_text),
        light_requirements=extract_light_requirements(combined_text, locale),
        tips=extract_tips(locale),
        tips_fr=extract_tips("fr"),
        tips_en=extract_tips("en"),
        extracted_from_sources=True,
    )
