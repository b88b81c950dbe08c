from .plant import DEFAULT_WATERING_FREQUENCY_DAYS, Plant

__all__ = ["DEFAULT_WATERING_FREQUENCY_DAYS", "Plant"]
