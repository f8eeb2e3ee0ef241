"""Vehicle DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, field_serializer

from app.application.dtos.base import DTO
from app.domain.entities.vehicle import Vehicle


class NormalizedVehicle(DTO):
    """Validated, normalized vehicle payload ready for persistence."""

    name: str
    plate: str
    chassis_code: str
    specification: Optional[str] = None
    year: int
    odometer_km: int
    price: Optional[Decimal] = None
    images: list[str] = []

    @field_serializer("price")
    def _serialize_price(self, price: Optional[Decimal]) -> Optional[float]:
        return float(price) if price is not None else None


class VehicleResponse(DTO):
    """Vehicle as exposed over the API (camelCase keys)."""

    id: str
    name: str
    plate: str
    chassis_code: str
    specification: Optional[str] = None
    year: int
    odometer_km: int
    price: Optional[float] = None
    images: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "7d3f0c1e-2a8b-4c55-9f1e-0b6c2d9a4e10",
                "name": "Civic",
                "plate": "ABC1234",
                "chassisCode": "9BWZZZ377VT004251",
                "specification": "2.0 EX AT",
                "year": 2020,
                "odometerKm": 50000,
                "price": 85000.0,
                "images": ["https://example.com/civic.jpg"],
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> "VehicleResponse":
        """
        Build the API representation of a vehicle entity.

        Args:
            vehicle: Persisted vehicle (must have an id)

        Returns:
            VehicleResponse DTO
        """
        return cls(
            id=vehicle.id,
            name=vehicle.name,
            plate=vehicle.plate,
            chassis_code=vehicle.chassis_code,
            specification=vehicle.specification,
            year=vehicle.year,
            odometer_km=vehicle.odometer_km,
            price=float(vehicle.price) if vehicle.price is not None else None,
            images=list(vehicle.images),
            created_at=vehicle.created_at,
            updated_at=vehicle.updated_at,
        )
