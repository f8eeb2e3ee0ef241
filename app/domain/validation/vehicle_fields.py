"""
Per-field parsing rules for vehicle payloads.

Each function takes the raw value a client sent for one field and returns the
normalized value, or raises VehicleValidationError naming the field. The
functions are pure, so the same rules back the API and interactive form
validation alike.
"""

import math
import re
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from app.domain.errors import VehicleValidationError
from app.domain.value_objects.chassis_code import ChassisCode
from app.domain.value_objects.image_url import ImageUrl
from app.domain.value_objects.model_year import ModelYear
from app.domain.value_objects.odometer_km import OdometerKm
from app.domain.value_objects.price import Price

FIELD_LABELS = {
    "name": "Name",
    "plate": "Plate",
    "chassisCode": "Chassis code",
    "specification": "Specification",
    "year": "Year",
    "odometerKm": "Odometer (km)",
    "price": "Price",
    "images": "Images",
}

# Longest accepted text per field
MAX_TEXT_LENGTHS = {
    "name": 255,
    "plate": 20,
}

_FOUR_DIGITS = re.compile(r"^\d{4}$")
_DIGITS = re.compile(r"^\d+$")
_DIGITS_WITH_FRACTION = re.compile(r"^(\d+)\.(\d+)$")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _required(field: str) -> VehicleValidationError:
    return VehicleValidationError(field, f"{FIELD_LABELS[field]} is required.")


def _required_text(field: str, value: Any) -> str:
    if _is_blank(value):
        raise _required(field)
    if not isinstance(value, str):
        raise VehicleValidationError(field, f"{FIELD_LABELS[field]} must be text.")
    text = value.strip()
    max_length = MAX_TEXT_LENGTHS.get(field)
    if max_length is not None and len(text) > max_length:
        raise VehicleValidationError(
            field, f"{FIELD_LABELS[field]} can have at most {max_length} characters."
        )
    return text


def parse_name(value: Any) -> str:
    """Name/model of the vehicle: required, trimmed."""
    return _required_text("name", value)


def parse_plate(value: Any) -> str:
    """License plate: required, trimmed, uppercased."""
    return _required_text("plate", value).upper()


def parse_chassis_code(value: Any, length: int = 17) -> str:
    """
    Chassis code: required, trimmed, uppercased, fixed length.

    Args:
        value: Raw chassis code
        length: Expected number of characters

    Returns:
        Normalized chassis code

    Raises:
        VehicleValidationError: If missing or not matching the pattern
    """
    text = _required_text("chassisCode", value)
    try:
        return ChassisCode.parse(text, length=length).value
    except ValueError as err:
        raise VehicleValidationError("chassisCode", str(err)) from err


def parse_specification(value: Any) -> Optional[str]:
    """Optional free text; blank becomes None."""
    if _is_blank(value):
        return None
    if not isinstance(value, str):
        raise VehicleValidationError("specification", "Specification must be text.")
    return value.strip()


def parse_year(value: Any, today: Optional[date] = None) -> int:
    """
    Model year: 4 digits in [1900, current year + 1].

    Args:
        value: Raw year (int or digit string)
        today: Reference date for the upper bound (defaults to today)

    Returns:
        Year as int

    Raises:
        VehicleValidationError: If missing, malformed or out of range
    """
    current_year = (today or date.today()).year
    if _is_blank(value):
        raise _required("year")

    bounds_error = VehicleValidationError("year", ModelYear.bounds_message(current_year))
    if isinstance(value, bool):
        raise bounds_error
    if isinstance(value, int):
        year = value
    elif isinstance(value, float) and value.is_integer():
        year = int(value)
    elif isinstance(value, str) and _FOUR_DIGITS.match(value.strip()):
        year = int(value.strip())
    else:
        raise bounds_error

    try:
        return ModelYear(year=year, current_year=current_year).year
    except ValueError as err:
        raise VehicleValidationError("year", str(err)) from err


def parse_odometer_km(value: Any) -> int:
    """
    Odometer reading in whole kilometers.

    Strings may use '.' as thousands separator ("50.000"); a zero decimal
    part ("50.000,0") is accepted.

    Raises:
        VehicleValidationError: If missing, negative, fractional, too large or malformed
    """
    if _is_blank(value):
        raise _required("odometerKm")

    invalid = VehicleValidationError(
        "odometerKm",
        "Odometer (km) must be a valid number. Use '.' for thousands (e.g. 50.000).",
    )
    fractional = VehicleValidationError("odometerKm", "Odometer (km) must be a whole number.")

    if isinstance(value, bool):
        raise invalid
    if isinstance(value, int):
        km = value
    elif isinstance(value, (float, Decimal)):
        if not math.isfinite(value):
            raise invalid
        if value != int(value):
            raise fractional
        km = int(value)
    elif isinstance(value, str):
        cleaned = value.strip().replace(".", "").replace(",", ".", 1)
        with_fraction = _DIGITS_WITH_FRACTION.match(cleaned)
        if with_fraction:
            # "50.000,0" is still a whole number
            if with_fraction.group(2).strip("0"):
                raise fractional
            cleaned = with_fraction.group(1)
        if not _DIGITS.match(cleaned):
            raise invalid
        km = int(cleaned)
    else:
        raise invalid

    try:
        return OdometerKm(km).km
    except ValueError as err:
        raise VehicleValidationError("odometerKm", str(err)) from err


def parse_price(value: Any, required: bool = True) -> Optional[Decimal]:
    """
    Price with at most 2 decimal places.

    Strings use '.' for thousands and ',' for decimals ("85.000,50").

    Args:
        value: Raw price
        required: Whether a missing price is an error

    Returns:
        Canonical Decimal value, or None when optional and absent

    Raises:
        VehicleValidationError: If missing (when required), out of range or malformed
    """
    if _is_blank(value):
        if required:
            raise _required("price")
        return None

    try:
        if isinstance(value, bool):
            raise ValueError("Price must be a valid number.")
        if isinstance(value, str):
            return Price.parse_localized(value).amount
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError("Price must be a valid number.")
            # repr() gives the shortest decimal that round-trips the float
            return Price(Decimal(repr(value))).amount
        if isinstance(value, (int, Decimal)):
            return Price(Decimal(value)).amount
        raise ValueError("Price must be a valid number.")
    except ValueError as err:
        raise VehicleValidationError("price", str(err)) from err


def parse_image_urls(value: Any) -> list[str]:
    """
    Image URLs, either a list or one URL per line.

    Entries are trimmed and blank entries dropped; order is preserved.

    Raises:
        VehicleValidationError: Naming the first URL that is not an image link
    """
    if value is None:
        return []
    if isinstance(value, str):
        entries = value.splitlines()
    elif isinstance(value, (list, tuple)):
        entries = list(value)
    else:
        raise VehicleValidationError("images", "Images must be a list of URLs.")

    urls = []
    for entry in entries:
        if not isinstance(entry, str):
            raise VehicleValidationError("images", "Images must be a list of URLs.")
        url = entry.strip()
        if not url:
            continue
        try:
            urls.append(ImageUrl(url).url)
        except ValueError as err:
            raise VehicleValidationError("images", str(err)) from err
    return urls
