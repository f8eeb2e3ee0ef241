"""Vehicle entity."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

_MIN_TIMESTAMP_STEP = timedelta(microseconds=1)


@dataclass
class Vehicle:
    """Vehicle entity: one car in the inventory."""

    name: str
    plate: str
    chassis_code: str
    year: int
    odometer_km: int
    specification: Optional[str] = None
    price: Optional[Decimal] = None
    images: list[str] = field(default_factory=list)
    id: Optional[str] = None  # Assigned by the record store on insert
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self, now: Optional[datetime] = None) -> None:
        """
        Advance the updated_at timestamp.

        The new value is always strictly later than the previous one, even when
        the clock has not moved since the last write.

        Args:
            now: Current time (defaults to UTC now)
        """
        now = now or datetime.now(timezone.utc)
        if now <= self.updated_at:
            now = self.updated_at + _MIN_TIMESTAMP_STEP
        self.updated_at = now
