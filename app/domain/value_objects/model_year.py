"""Model year value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelYear:
    """Model year of a vehicle, bounded by the current calendar year."""

    MIN_YEAR = 1900

    year: int
    current_year: int

    def __post_init__(self) -> None:
        """Validate the year lies in [1900, current_year + 1]."""
        if not self.MIN_YEAR <= self.year <= self.max_year:
            raise ValueError(self.bounds_message(self.current_year))

    @property
    def max_year(self) -> int:
        """Latest accepted model year (next year's models are sold early)."""
        return self.current_year + 1

    @classmethod
    def bounds_message(cls, current_year: int) -> str:
        """User-facing message stating the accepted range."""
        return f"Year must be a 4-digit number between {cls.MIN_YEAR} and {current_year + 1}."
