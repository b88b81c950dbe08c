"""
Weather Module

Current conditions and forecasts turned into plant-care advice, with
simulated data whenever the weather provider is unavailable.
"""
