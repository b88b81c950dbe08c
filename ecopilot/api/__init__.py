# 📄 File: ecopilot/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package so the app can load its web routes and middleware.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (versioned routers and middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# ecopilot.main

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
