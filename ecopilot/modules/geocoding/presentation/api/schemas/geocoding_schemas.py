# 📄 File: ecopilot/modules/geocoding/presentation/api/schemas/geocoding_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of address search answers sent back to the app.
# 🧪 Purpose (Technical Summary):
# Response schemas for the geocoding endpoints.
# 🔗 Dependencies:
# pydantic, geocoding domain models
# 🔄 Connected Modules / Calls From:
# ecopilot.modules.geocoding.presentation.api.v1.geocoding

from typing import List

from pydantic import BaseModel

from ecopilot.modules.geocoding.domain.models.address import AddressSuggestion


class AddressSearchResponse(BaseModel):
    query: str
    results: List[AddressSuggestion]
    count: int
    language: str
