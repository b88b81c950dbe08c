# 📄 File: ecopilot/modules/care_advice/domain/models/care.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant care answer: how often to water, what light it likes, tips,
# common problems and where the information came from.
# 🧪 Purpose (Technical Summary):
# Pydantic models for knowledge base care sheets, search sources, extracted care
# information and the complete bilingual care advice result.
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# knowledge_base.py, care_extraction.py, care_advice_service.py, tavily endpoints

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class AdviceSource(str, Enum):
    TAVILY = "tavily"
    LOCAL_DATABASE = "local-database"


class CareSheet(BaseModel):
    """Care sheet of one plant in one language."""

    name: str
    care: str
    tips: str
    frequency: str
    problems: str


class KnowledgeEntry(BaseModel):
    """Knowledge base entry: a care sheet per supported language."""

    key: str
    sheets: Dict[str, CareSheet]

    def sheet(self, locale: str) -> CareSheet:
        return self.sheets.get(locale) or self.sheets["fr"]


class SearchSource(BaseModel):
    title: str
    url: str
    snippet: str = ""
    relevance_score: float = 0.8


class PlantCareInfo(BaseModel):
    """
    Care information attached to a result.

    Knowledge base answers fill the bilingual name, instructions and problems;
    search answers carry what could be extracted from the source texts.
    """

    name: Optional[str] = None
    name_fr: Optional[str] = None
    name_en: Optional[str] = None
    watering_frequency: str
    light_requirements: Optional[str] = None
    care_instructions: Optional[str] = None
    care_instructions_fr: Optional[str] = None
    care_instructions_en: Optional[str] = None
    tips: List[str] = Field(default_factory=list)
    tips_fr: List[str] = Field(default_factory=list)
    tips_en: List[str] = Field(default_factory=list)
    common_problems: Optional[str] = None
    common_problems_fr: Optional[str] = None
    common_problems_en: Optional[str] = None
    extracted_from_sources: bool = False


class CareAdviceResult(BaseModel):
    query: str
    language: str
    answer: Optional[str] = None
    answer_fr: Optional[str] = None
    answer_en: Optional[str] = None
    sources: List[SearchSource] = Field(default_factory=list)
    plant_care: PlantCareInfo
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    source: AdviceSource
    success: bool = True
    is_fallback: bool = False
