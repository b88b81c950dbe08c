"""
Infrastructure layer package for EcoPilot.
Provides the in-memory cache and the external API clients.
"""
