# 📄 File: ecopilot/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A small toolbox of helpers, such as logging setup, that other parts of EcoPilot use.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: ecopilot.main, API middleware

from .logging import (
    log_context,
    request_id_var,
    session_id_var,
    setup_logging,
)

__all__ = [
    "log_context",
    "request_id_var",
    "session_id_var",
    "setup_logging",
]
