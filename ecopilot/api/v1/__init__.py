# 📄 File: ecopilot/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups version 1 of the EcoPilot API so a future version can live beside it.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# ecopilot.main

"""
EcoPilot API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health, app info and language endpoints

Module routers live with their module under
``ecopilot/modules/<module>/presentation/api/v1``.
"""

__api_version__ = "v1"
