"""SQLAlchemy ORM models for vehicles."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

from app.domain.validation.vehicle_fields import MAX_TEXT_LENGTHS
from app.domain.value_objects.chassis_code import MAX_LENGTH as MAX_CHASSIS_CODE_LENGTH

Base = declarative_base()

# Constraint names double as the store-level key reported on conflicts
UNIQUE_CONSTRAINT_KEYS = {
    "uq_vehicles_plate": "plate",
    "uq_vehicles_chassis_code": "chassis_code",
}


class VehicleModel(Base):
    """SQLAlchemy model for vehicles table."""

    __tablename__ = "vehicles"
    __table_args__ = (
        UniqueConstraint("plate", name="uq_vehicles_plate"),
        UniqueConstraint("chassis_code", name="uq_vehicles_chassis_code"),
    )

    id = Column(String(36), primary_key=True)
    name = Column(String(MAX_TEXT_LENGTHS["name"]), nullable=False)
    plate = Column(String(MAX_TEXT_LENGTHS["plate"]), nullable=False)
    chassis_code = Column(String(MAX_CHASSIS_CODE_LENGTH), nullable=False)
    specification = Column(Text, nullable=True)
    year = Column(Integer, nullable=False)
    odometer_km = Column(Integer, nullable=False)
    # Holds up to 999999999999.99, the largest accepted price
    price = Column(Numeric(14, 2), nullable=True)
    images = Column(JSON, nullable=False, default=list)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
