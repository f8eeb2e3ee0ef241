"""Odometer reading value object."""

from dataclasses import dataclass

# Largest value of a 32-bit signed integer column
MAX_KM = 2_147_483_647


@dataclass(frozen=True)
class OdometerKm:
    """Odometer reading in whole kilometers."""

    km: int

    def __post_init__(self) -> None:
        """Validate odometer reading."""
        if self.km < 0:
            raise ValueError("Odometer (km) must be a positive number.")
        if self.km > MAX_KM:
            raise ValueError(f"Odometer (km) must be at most {MAX_KM:,}.".replace(",", "."))
