"""Image URL value object."""

import re
from dataclasses import dataclass

IMAGE_EXTENSIONS = ("jpeg", "jpg", "gif", "png", "webp", "svg")
_IMAGE_URL_PATTERN = re.compile(r"\.(" + "|".join(IMAGE_EXTENSIONS) + r")$", re.IGNORECASE)


@dataclass(frozen=True)
class ImageUrl:
    """URL pointing directly at an image file."""

    url: str

    def __post_init__(self) -> None:
        """Validate the URL ends in a recognized image extension."""
        if not _IMAGE_URL_PATTERN.search(self.url):
            raise ValueError(f"Image URL '{self.url}' does not look like a direct image link.")
