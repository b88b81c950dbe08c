# 📄 File: ecopilot/modules/geocoding/presentation/api/v1/geocoding.py
# 🧭 Purpose (Layman Explanation):
# Lets the settings page suggest addresses while you type your home address, and
# describe where a pair of coordinates is.
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints for forward (address search) and reverse geocoding.
# 🔗 Dependencies:
# FastAPI router, GeocodingService, shared locale dependency
# 🔄 Connected Modules / Calls From:
# ecopilot.api.v1.router (mounted under /api/v1/geocoding)

import logging

from fastapi import APIRouter, Depends, Query

from ecopilot.shared.core.dependencies import get_request_locale

from ecopilot.modules.geocoding.domain.models.address import ReverseGeocodeResult
from ecopilot.modules.geocoding.domain.services.geocoding_service import GeocodingService
from ...dependencies import get_geocoding_service
from ..schemas.geocoding_schemas import AddressSearchResponse

logger = logging.getLogger(__name__)

geocoding_router = APIRouter()

@geocoding_router.get(
    "/search",
    response_model=AddressSearchResponse,
    summary="Search addresses",
    description="Address suggestions (Canada, up to 5). Queries shorter than 5 characters return no results.",
)
async def search_addresses(
    q: str = Query(..., max_length=200, description="Address typed by the user"),
    locale: str = Depends(get_request_locale),
    geocoding_service: GeocodingService = Depends(get_geocoding_service),
) -> AddressSearchResponse:
    results = await geocoding_service.search(q, locale)
    return AddressSearchResponse(query=q, results=results, count=len(results), language=locale)


@geocoding_router.get(
    "/reverse",
    response_model=ReverseGeocodeResult,
    summary="Reverse geocode coordinates",
)
async def reverse_geocode(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    locale: str = Depends(get_request_locale),
    geocoding_service: GeocodingService = Depends(get_geocoding_service),
) -> ReverseGeocodeResult:
    return await geocoding_service.reverse(lat, lon, locale)
