"""
EcoPilot feature modules.

Each module follows the same layout: domain (models, services, repository
interfaces), infrastructure (adapters) and presentation (FastAPI routers,
schemas and dependency providers).
"""
