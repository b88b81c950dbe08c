from .care import (
    AdviceSource,
    CareAdviceResult,
    CareSheet,
    KnowledgeEntry,
    PlantCareInfo,
    SearchSource,
)

__all__ = [
    "AdviceSource",
    "CareAdviceResult",
    "CareSheet",
    "KnowledgeEntry",
    "PlantCareInfo",
    "SearchSource",
]
