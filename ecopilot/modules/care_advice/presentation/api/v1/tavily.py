# 📄 File: ecopilot/modules/care_advice/presentation/api/v1/tavily.py
# 🧭 Purpose (Layman Explanation):
# The web doors for plant questions: search any plant topic, or ask for the care
# guide of a species.
# 🧪 Purpose (Technical Summary):
# FastAPI care advice endpoints wrapping CareAdviceService results in the bilingual
# success message envelope.
# 🔗 Dependencies:
# FastAPI router, CareAdviceService, care schemas, shared i18n
# 🔄 Connected Modules / Calls From:
# ecopilot.api.v1.router (mounted under /api/v1/tavily)

import logging

from fastapi import APIRouter, Depends

from ecopilot.shared.core.dependencies import get_request_locale
from ecopilot.shared.core.exceptions import UnsupportedLanguageError
from ecopilot.shared.core.i18n import localized_payload, normalize_locale

from ecopilot.modules.care_advice.domain.services.care_advice_service import CareAdviceService
from ...dependencies import get_care_advice_service
from ..schemas.care_schemas import CareSearchRequest, CareSearchResponse

logger = logging.getLogger(__name__)

tavily_router = APIRouter()

@tavily_router.post(
    "/search",
    response_model=CareSearchResponse,
    summary="Search plant care information",
    responses={400: {"description": "Missing query or unsupported language"}},
)
async def search_care(
    request: CareSearchRequest,
    locale: str = Depends(get_request_locale),
    care_service: CareAdviceService = Depends(get_care_advice_service),
) -> CareSearchResponse:
    if request.lang is not None:
        locale = normalize_locale(request.lang)
        if locale is None:
            raise UnsupportedLanguageError(request.lang)

    result = await care_service.search(request.query, locale)
    return CareSearchResponse(**localized_payload("search.success", locale), data=result)


@tavily_router.get(
    "/species/{species}",
    response_model=CareSearchResponse,
    summary="Care guide for a species",
)
async def species_care(
    species: str,
    locale: str = Depends(get_request_locale),
    care_service: CareAdviceService = Depends(get_care_advice_service),
) -> CareSearchResponse:
    result = await care_service.species(species, locale)
    return CareSearchResponse(**localized_payload("search.success", locale), data=result)
