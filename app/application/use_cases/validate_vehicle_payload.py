"""Validate and normalize vehicle payloads."""

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from app.application.dtos.vehicle import NormalizedVehicle
from app.domain.validation.vehicle_fields import (
    parse_chassis_code,
    parse_image_urls,
    parse_name,
    parse_odometer_km,
    parse_plate,
    parse_price,
    parse_specification,
    parse_year,
)
from app.domain.value_objects.chassis_code import MAX_LENGTH as MAX_CHASSIS_CODE_LENGTH

# Public (camelCase) field name -> accepted snake_case spelling
EDITABLE_FIELDS = {
    "name": "name",
    "plate": "plate",
    "chassisCode": "chassis_code",
    "specification": "specification",
    "year": "year",
    "odometerKm": "odometer_km",
    "price": "price",
    "images": "images",
}


def pick_editable_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    """
    Extract the client-editable fields of a raw payload, keyed in camelCase.

    Server-managed keys (id, createdAt, updatedAt) and unknown keys are dropped.
    When both spellings of a field are present, camelCase wins.

    Args:
        raw: Raw payload

    Returns:
        Dictionary of editable fields present in the payload
    """
    fields = {}
    for public_name, snake_name in EDITABLE_FIELDS.items():
        if public_name in raw:
            fields[public_name] = raw[public_name]
        elif snake_name in raw:
            fields[public_name] = raw[snake_name]
    return fields


class ValidateVehiclePayload:
    """Use case for turning a raw vehicle payload into a NormalizedVehicle."""

    def __init__(self, chassis_code_length: int = 17) -> None:
        """
        Initialize validator.

        Args:
            chassis_code_length: Exact number of characters of a chassis code
        """
        if not 0 < chassis_code_length <= MAX_CHASSIS_CODE_LENGTH:
            raise ValueError(
                f"chassis_code_length must be between 1 and {MAX_CHASSIS_CODE_LENGTH}"
            )
        self._chassis_code_length = chassis_code_length

    @property
    def chassis_code_length(self) -> int:
        """Configured chassis code length."""
        return self._chassis_code_length

    def validate_and_normalize(
        self,
        raw: Mapping[str, Any],
        *,
        price_required: bool = True,
        today: Optional[date] = None,
    ) -> NormalizedVehicle:
        """
        Validate a raw payload, stopping at the first invalid field.

        Fields are checked in form order: name, plate, chassisCode,
        specification, year, odometerKm, price, images.

        Args:
            raw: Raw field-value mapping (camelCase or snake_case keys)
            price_required: Whether a missing price is an error
            today: Reference date for the model-year upper bound

        Returns:
            Normalized vehicle payload

        Raises:
            VehicleValidationError: For the first field that fails
        """
        fields = pick_editable_fields(raw)

        name = parse_name(fields.get("name"))
        plate = parse_plate(fields.get("plate"))
        chassis_code = parse_chassis_code(fields.get("chassisCode"), self._chassis_code_length)
        specification = parse_specification(fields.get("specification"))
        year = parse_year(fields.get("year"), today=today)
        odometer_km = parse_odometer_km(fields.get("odometerKm"))
        price = parse_price(fields.get("price"), required=price_required)
        images = parse_image_urls(fields.get("images"))

        return NormalizedVehicle(
            name=name,
            plate=plate,
            chassis_code=chassis_code,
            specification=specification,
            year=year,
            odometer_km=odometer_km,
            price=price,
            images=images,
        )
