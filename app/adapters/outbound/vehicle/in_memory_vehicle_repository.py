"""In-memory vehicle repository adapter."""

from dataclasses import replace
from typing import Optional
from uuid import uuid4

from app.application.ports.vehicle_repository import DuplicateKeyError, VehicleRepository
from app.domain.entities.vehicle import Vehicle


class InMemoryVehicleRepository(VehicleRepository):
    """
    In-memory implementation of vehicle repository.

    Non-durable; meant for development and tests. Methods never await, so a
    uniqueness check and the write that follows run without interleaving on
    the event loop, which makes them behave like a unique index.
    """

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[str, Vehicle] = {}

    def _check_unique(self, vehicle: Vehicle) -> None:
        for existing in self._storage.values():
            if existing.id == vehicle.id:
                continue
            if existing.plate == vehicle.plate:
                raise DuplicateKeyError("plate")
            if existing.chassis_code == vehicle.chassis_code:
                raise DuplicateKeyError("chassis_code")

    async def insert(self, vehicle: Vehicle) -> Vehicle:
        """
        Insert a new vehicle, assigning its id.

        Args:
            vehicle: Vehicle entity without id

        Returns:
            Stored copy of the vehicle
        """
        stored = replace(vehicle, id=str(uuid4()), images=list(vehicle.images))
        self._check_unique(stored)
        self._storage[stored.id] = stored
        return replace(stored, images=list(stored.images))

    async def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Get a vehicle by id.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Copy of the stored vehicle, or None if not found
        """
        stored = self._storage.get(vehicle_id)
        if stored is None:
            return None
        return replace(stored, images=list(stored.images))

    async def find_all(self) -> list[Vehicle]:
        """
        List all vehicles.

        Returns:
            Copies of all vehicles, newest first
        """
        vehicles = [replace(v, images=list(v.images)) for v in self._storage.values()]
        return sorted(vehicles, key=lambda v: v.created_at, reverse=True)

    async def update(self, vehicle: Vehicle) -> Optional[Vehicle]:
        """
        Replace an existing vehicle.

        Args:
            vehicle: Vehicle entity carrying its id

        Returns:
            Stored copy, or None if the id is unknown
        """
        if vehicle.id not in self._storage:
            return None
        self._check_unique(vehicle)
        stored = replace(vehicle, images=list(vehicle.images))
        self._storage[stored.id] = stored
        return replace(stored, images=list(stored.images))

    async def delete(self, vehicle_id: str) -> bool:
        """
        Remove a vehicle.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            True if removed, False if not found
        """
        return self._storage.pop(vehicle_id, None) is not None
