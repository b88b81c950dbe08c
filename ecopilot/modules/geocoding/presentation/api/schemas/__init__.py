from .geocoding_schemas import AddressSearchResponse

__all__ = ["AddressSearchResponse"]
