from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from cloudinary_lite.exceptions import InvalidValue


def _describe(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        message = item.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return f"{error.title}: " + "; ".join(messages)


class BaseValue(BaseModel):
    """
    Immutable value object.

    Equality is structural. Any validation failure raised by pydantic is
    re-raised as :class:`InvalidValue` so callers only deal with one error type.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as error:
            raise InvalidValue(_describe(error)) from error

    def replace(self, **changes: Any):
        """Return a validated copy with the given fields changed."""
        return type(self)(**{**dict(self), **changes})
