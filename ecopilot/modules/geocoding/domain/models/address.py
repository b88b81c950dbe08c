# 📄 File: ecopilot/modules/geocoding/domain/models/address.py
# 🧭 Purpose (Layman Explanation):
# Describes an address found on the map: the full text, its coordinates and the
# city and province it belongs to.
# 🧪 Purpose (Technical Summary):
# Pydantic models for forward geocoding suggestions and reverse geocoding results.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# geocoding_service.py, geocoding endpoints, location_service.py

from typing import Optional

from pydantic import BaseModel, Field


class AddressSuggestion(BaseModel):
    """One candidate returned by an address search."""

    address: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    city: str = ""
    province: str = ""


class ReverseGeocodeResult(BaseModel):
    """
    Human readable description of a coordinate pair.

    ``is_fallback`` is set when the provider could not be reached and the
    localized placeholders were returned instead.
    """

    address: str
    city: str
    country: str
    formatted: str
    latitude: float
    longitude: float
    is_fallback: bool = False
    locale: Optional[str] = None
