# 📄 File: ecopilot/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell EcoPilot how to reach weather, search and
# map services, and how the location reminders should behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - ecopilot.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- External API credentials and settings
- Location tracking defaults
"""

from .settings import get_settings, Settings, SUPPORTED_LANGUAGES

__all__ = [
    "get_settings",
    "Settings",
    "SUPPORTED_LANGUAGES",
]
