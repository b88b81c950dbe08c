"""
Geocoding Module

Address search and reverse geocoding backed by OpenStreetMap Nominatim.
"""
