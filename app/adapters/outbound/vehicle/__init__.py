"""Vehicle repository adapters."""

from app.adapters.outbound.vehicle.in_memory_vehicle_repository import InMemoryVehicleRepository
from app.adapters.outbound.vehicle.postgres_vehicle_repository import PostgresVehicleRepository

__all__ = [
    "InMemoryVehicleRepository",
    "PostgresVehicleRepository",
]
