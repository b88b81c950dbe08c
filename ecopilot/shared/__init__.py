# 📄 File: ecopilot/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that all
# parts of EcoPilot use, like settings, translations and error types.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, i18n, exceptions,
# logging and external API infrastructure used by every feature module.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All feature modules under ecopilot.modules
# - ecopilot.api middleware and routers
