"""
Aspect ratio qualifiers (`ar_16:9`, `ar_0.5`, `fl_ignore_aspect_ratio`).
"""

from decimal import Decimal
from typing import Tuple, Union

from pydantic import Field, PositiveInt

from cloudinary_lite.domain.types.base import BaseValue
from cloudinary_lite.exceptions import InvalidValue


class Sides(BaseValue):
    """The usual colon notation, e.g. 4:3."""

    width: PositiveInt = Field(..., description="Numerator of the ratio")
    height: PositiveInt = Field(..., description="Denominator of the ratio, never zero")

    def __init__(self, width: int, height: int, **data):
        super().__init__(width=width, height=height, **data)

    def option(self) -> Tuple[str, str]:
        return "ar", f"{self.width}:{self.height}"

    def token(self) -> str:
        return "_".join(self.option())


class Ratio(BaseValue):
    """A decimal value representing the width divided by the height (e.g. 0.5)."""

    value: float = Field(..., gt=0, allow_inf_nan=False)

    def __init__(self, value: float, **data):
        super().__init__(value=value, **data)

    def option(self) -> Tuple[str, str]:
        # shortest decimal that reads back as the same float, never in exponent form
        value = format(Decimal(repr(self.value)), "f")
        if value.endswith(".0"):
            value = value[:-2]
        return "ar", value

    def token(self) -> str:
        return "_".join(self.option())


class IgnoreAspectRatio(BaseValue):
    """Stretch to exactly the given width or height, ignoring the input's aspect ratio."""

    def option(self) -> Tuple[str, str]:
        return "fl", "ignore_aspect_ratio"

    def token(self) -> str:
        return "_".join(self.option())


AspectRatio = Union[Sides, Ratio, IgnoreAspectRatio]


def parse_aspect_ratio(code: str, value: str) -> AspectRatio:
    """Inverse of ``option()``; raises :class:`InvalidValue` on anything else."""
    if code == "fl":
        if value != "ignore_aspect_ratio":
            raise InvalidValue(f"Unsupported flag: {value!r}")
        return IgnoreAspectRatio()
    if code != "ar":
        raise InvalidValue(f"Not an aspect ratio option: {code!r}")
    if ":" in value:
        width, _, height = value.partition(":")
        try:
            return Sides(int(width), int(height))
        except ValueError as exc:
            raise InvalidValue(f"Malformed aspect ratio: {value!r}") from exc
    try:
        return Ratio(float(value))
    except ValueError as exc:
        raise InvalidValue(f"Malformed aspect ratio: {value!r}") from exc
