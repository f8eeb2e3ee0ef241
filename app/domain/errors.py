"""Domain error hierarchy for the vehicle inventory."""

from typing import Optional

# Public field name -> noun used in user-facing messages
_FIELD_NOUNS = {
    "plate": "plate",
    "chassisCode": "chassis code",
}


class VehicleInventoryError(Exception):
    """Base exception for all vehicle inventory errors."""


class VehicleValidationError(VehicleInventoryError):
    """A vehicle payload field failed validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(message)


class DuplicateFieldError(VehicleInventoryError):
    """Another vehicle already holds the value of a unique field."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        self.field = field
        noun = _FIELD_NOUNS.get(field, field)
        self.message = message or f"A vehicle with this {noun} is already registered."
        super().__init__(self.message)


class VehicleNotFoundError(VehicleInventoryError):
    """No vehicle exists with the requested id."""

    def __init__(self, vehicle_id: str) -> None:
        self.vehicle_id = vehicle_id
        super().__init__("not found")


class InvalidVehicleIdError(VehicleInventoryError):
    """The requested id is not a well-formed vehicle identifier."""

    def __init__(self, vehicle_id: str) -> None:
        self.vehicle_id = vehicle_id
        super().__init__("invalid vehicle id")


class PersistenceError(VehicleInventoryError):
    """Unexpected record store failure."""
