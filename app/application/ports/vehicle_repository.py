"""Vehicle repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.vehicle import Vehicle


class DuplicateKeyError(Exception):
    """The store rejected a write that would break a uniqueness constraint."""

    def __init__(self, key: str) -> None:
        # Store-level identifier of the conflicting field (e.g. "chassis_code")
        self.key = key
        super().__init__(f"duplicate value for unique key {key!r}")


class RecordStoreError(Exception):
    """Unexpected failure of the underlying record store."""


class VehicleRepository(ABC):
    """
    Port interface for the vehicle record store.

    Implementations must enforce uniqueness of plate and chassis_code inside
    the store itself and report violations as DuplicateKeyError.
    """

    @abstractmethod
    async def insert(self, vehicle: Vehicle) -> Vehicle:
        """
        Insert a new vehicle.

        Args:
            vehicle: Vehicle entity without id

        Returns:
            Stored vehicle with its store-assigned id

        Raises:
            DuplicateKeyError: If plate or chassis_code is already taken
            RecordStoreError: On any other store failure
        """
        pass

    @abstractmethod
    async def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Get a vehicle by id.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Vehicle entity, or None if not found
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Vehicle]:
        """
        List all vehicles.

        Returns:
            Vehicles ordered by created_at, newest first
        """
        pass

    @abstractmethod
    async def update(self, vehicle: Vehicle) -> Optional[Vehicle]:
        """
        Replace the stored fields of an existing vehicle.

        Args:
            vehicle: Vehicle entity carrying the id to update

        Returns:
            Updated vehicle, or None if no vehicle has that id

        Raises:
            DuplicateKeyError: If plate or chassis_code is already taken
            RecordStoreError: On any other store failure
        """
        pass

    @abstractmethod
    async def delete(self, vehicle_id: str) -> bool:
        """
        Hard-delete a vehicle.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            True if a vehicle was removed, False if none existed
        """
        pass
