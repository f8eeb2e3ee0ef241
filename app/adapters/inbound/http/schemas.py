"""HTTP adapter schemas for the vehicle API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str
    field: Optional[str] = None  # Offending field for validation/duplicate errors

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Chassis code must be exactly 17 alphanumeric characters "
                "(letters I, O and Q are not allowed).",
                "field": "chassisCode",
            }
        }
    )


class MessageResponse(BaseModel):
    """Confirmation body."""

    message: str

    model_config = ConfigDict(json_schema_extra={"example": {"message": "removed"}})


class ValidationResponse(BaseModel):
    """Result of a successful dry-run validation."""

    valid: bool
    vehicle: dict[str, Any]
