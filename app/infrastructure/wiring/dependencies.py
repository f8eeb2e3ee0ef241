"""Dependency injection factory functions."""

from functools import lru_cache

from app.adapters.outbound.vehicle import (
    InMemoryVehicleRepository,
    PostgresVehicleRepository,
)
from app.application.ports.vehicle_repository import VehicleRepository
from app.application.use_cases.validate_vehicle_payload import ValidateVehiclePayload
from app.application.use_cases.vehicle_service import VehicleService
from app.infrastructure.config.settings import settings


def create_vehicle_repository() -> VehicleRepository:
    """
    Factory function to create vehicle repository.

    Returns:
        VehicleRepository instance

    Raises:
        ValueError: If the repository kind is unknown or DATABASE_URL is missing
    """
    if settings.vehicle_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when VEHICLE_REPOSITORY=postgres")
        return PostgresVehicleRepository()
    if settings.vehicle_repository == "in_memory":
        return InMemoryVehicleRepository()
    raise ValueError(
        f"Unknown VEHICLE_REPOSITORY {settings.vehicle_repository!r} (expected postgres or in_memory)"
    )


def create_vehicle_payload_validator() -> ValidateVehiclePayload:
    """
    Factory function to create the vehicle payload validator.

    Returns:
        ValidateVehiclePayload instance
    """
    return ValidateVehiclePayload(chassis_code_length=settings.chassis_code_length)


def create_vehicle_service() -> VehicleService:
    """
    Factory function to create VehicleService with dependencies.

    Returns:
        VehicleService instance
    """
    return VehicleService(
        create_vehicle_repository(),
        create_vehicle_payload_validator(),
        price_required_on_create=settings.price_required_on_create,
        price_required_on_update=settings.price_required_on_update,
    )


@lru_cache(maxsize=1)
def get_vehicle_service() -> VehicleService:
    """
    FastAPI dependency returning the process-wide VehicleService.

    Returns:
        VehicleService instance
    """
    return create_vehicle_service()
