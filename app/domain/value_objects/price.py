"""Price value object."""

import re
from dataclasses import dataclass
from decimal import Decimal

MAX_DECIMAL_PLACES = 2
MAX_AMOUNT = Decimal("999999999999.99")

_LOCALIZED_NUMBER_PATTERN = re.compile(r"^\d+(\.\d+)?$")


@dataclass(frozen=True)
class Price:
    """Non-negative price with at most two decimal places."""

    amount: Decimal

    def __post_init__(self) -> None:
        """Validate price amount."""
        if not self.amount.is_finite():
            raise ValueError("Price must be a valid number.")
        if self.amount < 0:
            raise ValueError("Price must be a positive number.")
        if self.amount > MAX_AMOUNT:
            raise ValueError("Price must be at most 999.999.999.999,99.")
        if self.amount.normalize().as_tuple().exponent < -MAX_DECIMAL_PLACES:
            raise ValueError(f"Price can have at most {MAX_DECIMAL_PLACES} decimal places.")

    @classmethod
    def parse_localized(cls, text: str) -> "Price":
        """
        Parse a price written with '.' as thousands and ',' as decimal separator.

        Args:
            text: Price as typed, e.g. "85.000,50"

        Returns:
            Price value object

        Raises:
            ValueError: If the text is not a valid price
        """
        cleaned = text.strip().replace(".", "").replace(",", ".", 1)
        if not _LOCALIZED_NUMBER_PATTERN.match(cleaned):
            raise ValueError(
                "Price must be a valid number. Use a comma for decimals (e.g. 50.000,50)."
            )
        return cls(Decimal(cleaned))
