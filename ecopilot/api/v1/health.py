# 📄 File: ecopilot/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Tells anyone asking that EcoPilot is up, describes the app for its welcome screen,
# and lets the app switch between French and English.
# 🧪 Purpose (Technical Summary):
# Health check, application info and language switch endpoints with bilingual payloads.
# 🔗 Dependencies:
# FastAPI, pydantic, ecopilot.shared.config.settings, ecopilot.shared.core.i18n
# 🔄 Connected Modules / Calls From:
# ecopilot.api.v1.router, monitoring systems, load balancers, frontend welcome screen

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ecopilot.shared.config.settings import Settings
from ecopilot.shared.core.dependencies import get_app_settings, get_request_locale
from ecopilot.shared.core.exceptions import UnsupportedLanguageError
from ecopilot.shared.core.i18n import SUPPORTED_LOCALES, localized_payload, translate

logger = logging.getLogger(__name__)

health_router = APIRouter()

APP_INFO: Dict[str, Any] = {
    "name": "EcoPilot",
    "tagline": {
        "fr": "Réalisez votre main verte",
        "en": "Discover your green thumb",
    },
    "description": {
        "fr": "Assistant intelligent pour le soin des plantes avec géolocalisation prédictive",
        "en": "Smart plant care assistant with predictive geolocation",
    },
    "features": {
        "fr": [
            "Géolocalisation prédictive",
            "Données météo en temps réel",
            "Conseils personnalisés via IA",
            "Interface bilingue",
            "Notifications intelligentes",
        ],
        "en": [
            "Predictive geolocation",
            "Real-time weather data",
            "AI-powered personalized tips",
            "Bilingual interface",
            "Smart notifications",
        ],
    },
    "stats": {
        "fr": {
            "fact1": "Plus de 2 Canadiens sur 3 possèdent au moins une plante",
            "fact2": '70% des millennials se considèrent comme "plant parents"',
            "fact3": "Près de 50% des plantes meurent prématurément",
        },
        "en": {
            "fact1": "Over 2 out of 3 Canadians own at least one houseplant",
            "fact2": '70% of millennials identify as "plant parents"',
            "fact3": "Nearly 50% of plants die prematurely",
        },
    },
}

API_FEATURES = ["plants", "weather", "tavily", "location", "geocoding"]


class LanguageChangeRequest(BaseModel):
    language: str = Field(..., description="Target language (fr or en)")


class LanguageChangeResponse(BaseModel):
    message: str
    message_fr: str
    message_en: str
    currentLanguage: str


@health_router.get(
    "/health",
    summary="Basic Health Check",
    description="Basic health check endpoint for load balancers and monitoring",
    tags=["Health Check"],
)
async def health_check(
    locale: str = Depends(get_request_locale),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """
    Basic health check endpoint

    Returns the OK status with the running message in both languages.
    """
    return {
        "status": "OK",
        **localized_payload("api.running", locale),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "language": locale,
        "version": settings.APP_VERSION,
        "features": {
            "bilingual": True,
            "apis": API_FEATURES,
            "supportedLanguages": list(SUPPORTED_LOCALES),
        },
    }


@health_router.get("/app-info", summary="Application information", tags=["Health Check"])
async def app_info(
    locale: str = Depends(get_request_locale),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    return {**APP_INFO, "currentLanguage": locale, "version": settings.APP_VERSION}


def _language_changed_messages(language: str) -> Dict[str, str]:
    return {
        locale: translate(
            "api.language_changed",
            locale,
            language_name=translate(f"languages.{language}", locale),
        )
        for locale in SUPPORTED_LOCALES
    }


@health_router.post(
    "/language",
    response_model=LanguageChangeResponse,
    summary="Change the preferred language",
    responses={400: {"description": "Unsupported language"}},
    tags=["Health Check"],
)
async def change_language(request: LanguageChangeRequest) -> LanguageChangeResponse:
    """
    Confirm a language switch.

    The preference itself is kept by the client; the confirmation is written
    in the newly selected language.
    """
    language = request.language.strip().lower()
    if language not in SUPPORTED_LOCALES:
        raise UnsupportedLanguageError(request.language)

    messages = _language_changed_messages(language)
    logger.info(f"🌍 Language switched to {language}")
    return LanguageChangeResponse(
        message=messages[language],
        message_fr=messages["fr"],
        message_en=messages["en"],
        currentLanguage=language,
    )
