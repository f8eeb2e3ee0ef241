"""Base DTO class."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DTO(BaseModel):
    """
    Base class for application DTOs.

    Fields are snake_case in Python and camelCase on the wire; either spelling
    is accepted on input.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
