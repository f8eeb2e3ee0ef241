"""Vehicle service: CRUD operations over the vehicle repository."""

from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from app.application.dtos.vehicle import NormalizedVehicle
from app.application.ports.vehicle_repository import (
    DuplicateKeyError,
    RecordStoreError,
    VehicleRepository,
)
from app.application.use_cases.validate_vehicle_payload import (
    ValidateVehiclePayload,
    pick_editable_fields,
)
from app.domain.entities.vehicle import Vehicle
from app.domain.errors import (
    DuplicateFieldError,
    InvalidVehicleIdError,
    PersistenceError,
    VehicleNotFoundError,
    VehicleValidationError,
)
from app.infrastructure.logging.logger import log_rejection, log_vehicle_change, logger

# Store-level unique key -> public field name
_STORE_KEY_TO_FIELD = {
    "plate": "plate",
    "chassis_code": "chassisCode",
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_raw(vehicle: Vehicle) -> dict[str, Any]:
    """Express a stored vehicle as a camelCase payload, for partial updates."""
    return {
        "name": vehicle.name,
        "plate": vehicle.plate,
        "chassisCode": vehicle.chassis_code,
        "specification": vehicle.specification,
        "year": vehicle.year,
        "odometerKm": vehicle.odometer_km,
        "price": vehicle.price,
        "images": list(vehicle.images),
    }


class VehicleService:
    """Create, read, update and delete vehicles with validation."""

    def __init__(
        self,
        repository: VehicleRepository,
        validator: ValidateVehiclePayload,
        price_required_on_create: bool = True,
        price_required_on_update: bool = True,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Initialize service.

        Args:
            repository: Vehicle record store
            validator: Payload validator
            price_required_on_create: Whether create requires a price
            price_required_on_update: Whether update requires a price
            clock: Source of the current UTC time
        """
        self._repository = repository
        self._validator = validator
        self._price_required_on_create = price_required_on_create
        self._price_required_on_update = price_required_on_update
        self._clock = clock

    def validate(self, raw: Mapping[str, Any]) -> NormalizedVehicle:
        """
        Validate a create payload without writing anything.

        Args:
            raw: Raw field-value mapping

        Returns:
            NormalizedVehicle

        Raises:
            VehicleValidationError: For the first invalid field
        """
        return self._validator.validate_and_normalize(
            raw,
            price_required=self._price_required_on_create,
            today=self._clock().date(),
        )

    async def create(self, raw: Mapping[str, Any]) -> Vehicle:
        """
        Validate and insert a new vehicle.

        Args:
            raw: Raw field-value mapping

        Returns:
            Stored vehicle with id and timestamps

        Raises:
            VehicleValidationError: If the payload is invalid
            DuplicateFieldError: If plate or chassisCode is already registered
            PersistenceError: On unexpected store failure
        """
        try:
            normalized = self.validate(raw)
        except VehicleValidationError as e:
            log_rejection("validation_failed", e.field, e.message, operation="create")
            raise

        now = self._clock()
        vehicle = Vehicle(
            name=normalized.name,
            plate=normalized.plate,
            chassis_code=normalized.chassis_code,
            specification=normalized.specification,
            year=normalized.year,
            odometer_km=normalized.odometer_km,
            price=normalized.price,
            images=list(normalized.images),
            created_at=now,
            updated_at=now,
        )

        created = await self._write(self._repository.insert, vehicle, operation="create")
        log_vehicle_change("vehicle_created", created.id, plate=created.plate)
        return created

    async def get(self, vehicle_id: str) -> Vehicle:
        """
        Get a vehicle by id.

        Raises:
            InvalidVehicleIdError: If the id is malformed
            VehicleNotFoundError: If no vehicle has that id
            PersistenceError: On unexpected store failure
        """
        vehicle_id = self._check_id(vehicle_id)
        try:
            vehicle = await self._repository.find_by_id(vehicle_id)
        except RecordStoreError as e:
            logger.error(f"Record store error while getting vehicle {vehicle_id}: {e}")
            raise PersistenceError("could not read vehicle") from e
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)
        return vehicle

    async def list(self) -> list[Vehicle]:
        """
        List all vehicles, newest first.

        Raises:
            PersistenceError: On unexpected store failure
        """
        try:
            vehicles = await self._repository.find_all()
        except RecordStoreError as e:
            logger.error(f"Record store error while listing vehicles: {e}")
            raise PersistenceError("could not list vehicles") from e
        # Ordering is part of the contract, not left to the store
        return sorted(vehicles, key=lambda v: v.created_at, reverse=True)

    async def update(self, vehicle_id: str, raw: Mapping[str, Any]) -> Vehicle:
        """
        Update a vehicle; fields omitted from raw keep their stored values.

        Args:
            vehicle_id: Vehicle identifier
            raw: Raw field-value mapping (partial or full)

        Returns:
            Updated vehicle

        Raises:
            InvalidVehicleIdError: If the id is malformed
            VehicleNotFoundError: If no vehicle has that id
            VehicleValidationError: If the merged payload is invalid
            DuplicateFieldError: If plate or chassisCode is already registered
            PersistenceError: On unexpected store failure
        """
        existing = await self.get(vehicle_id)

        merged = {**_to_raw(existing), **pick_editable_fields(raw)}
        try:
            normalized = self._validator.validate_and_normalize(
                merged,
                price_required=self._price_required_on_update,
                today=self._clock().date(),
            )
        except VehicleValidationError as e:
            log_rejection(
                "validation_failed", e.field, e.message, operation="update", vehicle_id=vehicle_id
            )
            raise

        candidate = replace(
            existing,
            name=normalized.name,
            plate=normalized.plate,
            chassis_code=normalized.chassis_code,
            specification=normalized.specification,
            year=normalized.year,
            odometer_km=normalized.odometer_km,
            price=normalized.price,
            images=list(normalized.images),
        )
        candidate.touch(self._clock())

        updated = await self._write(self._repository.update, candidate, operation="update")
        if updated is None:
            # Removed between read and write
            raise VehicleNotFoundError(vehicle_id)
        log_vehicle_change("vehicle_updated", updated.id)
        return updated

    async def delete(self, vehicle_id: str) -> None:
        """
        Hard-delete a vehicle.

        Raises:
            InvalidVehicleIdError: If the id is malformed
            VehicleNotFoundError: If no vehicle has that id
            PersistenceError: On unexpected store failure
        """
        vehicle_id = self._check_id(vehicle_id)
        try:
            removed = await self._repository.delete(vehicle_id)
        except RecordStoreError as e:
            logger.error(f"Record store error while deleting vehicle {vehicle_id}: {e}")
            raise PersistenceError("could not delete vehicle") from e
        if not removed:
            raise VehicleNotFoundError(vehicle_id)
        log_vehicle_change("vehicle_deleted", vehicle_id)

    async def _write(self, operation_func, vehicle: Vehicle, operation: str) -> Optional[Vehicle]:
        """Run a repository write, translating store errors into domain errors."""
        try:
            return await operation_func(vehicle)
        except DuplicateKeyError as e:
            field = _STORE_KEY_TO_FIELD.get(e.key, e.key)
            error = DuplicateFieldError(field)
            log_rejection(
                "duplicate_field", field, error.message, operation=operation, vehicle_id=vehicle.id
            )
            raise error from e
        except RecordStoreError as e:
            logger.error(f"Record store error during vehicle {operation}: {e}")
            raise PersistenceError(f"could not {operation} vehicle") from e

    @staticmethod
    def _check_id(vehicle_id: str) -> str:
        """Return the canonical (lowercase, hyphenated) form of a vehicle id."""
        try:
            return str(UUID(vehicle_id))
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidVehicleIdError(vehicle_id) from e
