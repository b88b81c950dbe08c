from .address import AddressSuggestion, ReverseGeocodeResult

__all__ = ["AddressSuggestion", "ReverseGeocodeResult"]
