from .memory_plant_repository import InMemoryPlantRepository, demo_plants

__all__ = ["InMemoryPlantRepository", "demo_plants"]
