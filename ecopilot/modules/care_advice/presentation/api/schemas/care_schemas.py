# 📄 File: ecopilot/modules/care_advice/presentation/api/schemas/care_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of plant questions sent by the app and of the answers sent back.
# 🧪 Purpose (Technical Summary):
# Request/response schemas for the care advice search endpoints.
# 🔗 Dependencies:
# pydantic, care models
# 🔄 Connected Modules / Calls From:
# ecopilot.modules.care_advice.presentation.api.v1.tavily

from typing import Optional

from pydantic import BaseModel, Field

from ecopilot.modules.care_advice.domain.models.care import CareAdviceResult


class CareSearchRequest(BaseModel):
    """Free-text plant care question; an empty query is rejected with a bilingual 400."""

    query: Optional[str] = Field(None, max_length=300)
    lang: Optional[str] = Field(None, description="Overrides the request language (fr or en)")

    model_config = {"json_schema_extra": {"example": {"query": "monstera", "lang": "fr"}}}


class CareSearchResponse(BaseModel):
    message: str
    message_fr: str
    message_en: str
    data: CareAdviceResult
