from .care_schemas import CareSearchRequest, CareSearchResponse

__all__ = ["CareSearchRequest", "CareSearchResponse"]
