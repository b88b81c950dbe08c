# 📄 File: ecopilot/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'ecopilot' folder holds the EcoPilot plant care assistant
# and records its version information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the EcoPilot FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - /api/v1/app-info endpoint

"""
EcoPilot - Smart Plant Care Assistant

A bilingual (French/English) backend API that keeps track of houseplants,
reminds their owners to water them when they come home, and adapts its
advice to the local weather.
"""

__version__ = "1.0.0"
__title__ = "EcoPilot API"
__description__ = "Smart plant care assistant with predictive geolocation"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
