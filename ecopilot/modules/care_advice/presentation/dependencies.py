# 📄 File: ecopilot/modules/care_advice/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Sets up the plant advice service once, with web search when a Tavily key is
# configured and the built-in encyclopedia otherwise.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the Tavily client and CareAdviceService singletons.
# 🔗 Dependencies:
# functools.lru_cache, settings, TavilyClient, CareAdviceService
# 🔄 Connected Modules / Calls From:
# tavily endpoints, ecopilot.main (shutdown)

import logging
from functools import lru_cache
from typing import Optional

from ecopilot.shared.config.settings import get_settings

from ..domain.services.care_advice_service import CareAdviceService
from ..infrastructure.tavily_client import TavilyClient

logger = logging.getLogger(__name__)


@lru_cache()
def get_tavily_client() -> Optional[TavilyClient]:
    settings = get_settings()
    if not settings.has_tavily_api_key:
        logger.info("🔍 No Tavily API key configured, care advice will use the local knowledge base")
        return None
    return TavilyClient(settings.TAVILY_API_KEY, settings)


@lru_cache()
def get_care_advice_service() -> CareAdviceService:
    return CareAdviceService(provider=get_tavily_client())
