"""Chassis code value object."""

import re
from dataclasses import dataclass

# Alphanumeric, excluding the ambiguous letters I, O and Q
_ALLOWED_CHARACTERS = "[A-HJ-NPR-Z0-9]"

MAX_LENGTH = 32


@dataclass(frozen=True)
class ChassisCode:
    """Chassis code (VIN analog) value object, always uppercase."""

    value: str
    length: int = 17

    def __post_init__(self) -> None:
        """Validate chassis code against the configured length."""
        if not 0 < self.length <= MAX_LENGTH:
            raise ValueError(f"Chassis code length must be positive and at most {MAX_LENGTH}")
        if not re.fullmatch(f"{_ALLOWED_CHARACTERS}{{{self.length}}}", self.value):
            raise ValueError(
                f"Chassis code must be exactly {self.length} alphanumeric characters "
                "(letters I, O and Q are not allowed)."
            )

    @classmethod
    def parse(cls, raw: str, length: int = 17) -> "ChassisCode":
        """Trim and uppercase raw input before validating it."""
        return cls(value=raw.strip().upper(), length=length)

    def __str__(self) -> str:
        return self.value
