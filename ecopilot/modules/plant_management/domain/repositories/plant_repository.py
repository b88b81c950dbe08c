# 📄 File: ecopilot/modules/plant_management/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update and delete plants.
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for Plant entities
# following the Repository pattern.
# 🔗 Dependencies:
# Domain models (Plant), typing, abc
# 🔄 Connected Modules / Calls From:
# plant_service.py, infrastructure/memory_plant_repository.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """
    Repository interface for Plant entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (Plant)
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def list_all(self) -> List[Plant]:
        """Return every plant in insertion order."""
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        """
        Get plant by ID.

        Args:
            plant_id: Plant ID to find

        Returns:
            Plant entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        pass

    @abstractmethod
    async def update(self, plant: Plant) -> Plant:
        """
        Update existing plant.

        Raises:
            PlantNotFoundError: If plant not found
        """
        pass

    @abstractmethod
    async def delete(self, plant_id: str) -> bool:
        """
        Delete plant by ID.

        Returns:
            True if deleted, False if not found
        """
        pass
