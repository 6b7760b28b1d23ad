"""
Background qualifiers applied to padded or transparent areas (`b_<value>`).
"""

import enum
import re
from typing import Literal, Optional, Tuple, Union

from pydantic import Field, field_validator

from cloudinary_lite.domain.types.base import BaseValue
from cloudinary_lite.exceptions import InvalidValue

_HEX_RE = re.compile(r"^[0-9a-f]{6}([0-9a-f]{2})?$")


class NamedColor(str, enum.Enum):
    BLACK = "black"
    WHITE = "white"
    GRAY = "gray"
    GREY = "grey"
    SILVER = "silver"
    RED = "red"
    MAROON = "maroon"
    ORANGE = "orange"
    GOLD = "gold"
    YELLOW = "yellow"
    OLIVE = "olive"
    LIME = "lime"
    GREEN = "green"
    TEAL = "teal"
    AQUA = "aqua"
    BLUE = "blue"
    NAVY = "navy"
    PURPLE = "purple"
    FUCHSIA = "fuchsia"
    PINK = "pink"
    BROWN = "brown"
    TRANSPARENT = "transparent"

    def serialize(self) -> str:
        return self.value

    def token(self) -> str:
        return f"b_{self.value}"


class RgbColor(BaseValue):
    """RGB or RGBA color given as 6 or 8 hex digits (`rgb:020aff`)."""

    hex: str = Field(..., description="Lower-case hex digits without the leading '#'")

    def __init__(self, hex: str, **data):
        super().__init__(hex=hex, **data)

    @field_validator("hex", mode="before")
    def validate_hex(cls, v):
        if not isinstance(v, str):
            raise ValueError("hex color must be a string")
        v = v.lstrip("#").lower()
        if not _HEX_RE.match(v):
            raise ValueError(f"expected 6 or 8 hex digits, got {v!r}")
        return v

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: Optional[int] = None) -> "RgbColor":
        channels = [r, g, b] if a is None else [r, g, b, a]
        for channel in channels:
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidValue(f"Color channel out of range 0..255: {channel!r}")
        return cls("".join(f"{channel:02x}" for channel in channels))

    def serialize(self) -> str:
        return f"rgb:{self.hex}"

    def token(self) -> str:
        return f"b_{self.serialize()}"


Color = Union[NamedColor, RgbColor]


class AutoMode(str, enum.Enum):
    """How the automatic background color is picked."""

    BORDER = "border"
    PREDOMINANT = "predominant"
    BORDER_CONTRAST = "border_contrast"
    PREDOMINANT_CONTRAST = "predominant_contrast"
    PREDOMINANT_GRADIENT = "predominant_gradient"
    PREDOMINANT_GRADIENT_CONTRAST = "predominant_gradient_contrast"
    BORDER_GRADIENT = "border_gradient"
    BORDER_GRADIENT_CONTRAST = "border_gradient_contrast"


class Direction(str, enum.Enum):
    """Blend direction for two-color gradient modes."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DESC = "diagonal_desc"
    DIAGONAL_ASC = "diagonal_asc"


class AutoBackground(BaseValue):
    """
    Let the service pick the background color (`b_auto[:mode][:number][:direction][:palette_...]`).

    `number` and `direction` only matter for the gradient modes; they are passed
    through without local interpretation.
    """

    mode: Optional[AutoMode] = None
    number: Optional[Literal[2, 4]] = Field(
        default=None, description="Number of predominant colors for gradient modes"
    )
    direction: Optional[Direction] = None
    palette: Optional[Tuple[Color, ...]] = None

    @field_validator("palette")
    def validate_palette(cls, v):
        if v is not None and len(v) == 0:
            raise ValueError("palette must contain at least one color")
        return v

    def serialize(self) -> str:
        params = ["auto"]
        if self.mode is not None:
            params.append(self.mode.value)
        if self.number is not None:
            params.append(str(self.number))
        if self.direction is not None:
            params.append(self.direction.value)
        if self.palette is not None:
            params.append("palette_" + "_".join(color.serialize() for color in self.palette))
        return ":".join(params)

    def token(self) -> str:
        return f"b_{self.serialize()}"


Background = Union[NamedColor, RgbColor, AutoBackground]


def parse_color(value: str) -> Color:
    if value.startswith("rgb:"):
        return RgbColor(value[len("rgb:") :])
    try:
        return NamedColor(value)
    except ValueError as exc:
        raise InvalidValue(f"Unknown color: {value!r}") from exc


def parse_background(value: str) -> Background:
    """Inverse of ``serialize()`` for every background kind."""
    if value != "auto" and not value.startswith("auto:"):
        return parse_color(value)

    fields = {}
    parts = value.split(":")[1:]
    for idx, part in enumerate(parts):
        if part.startswith("palette_"):
            # rgb colors inside the palette contain ':' themselves
            palette = ":".join(parts[idx:])[len("palette_") :]
            fields["palette"] = tuple(parse_color(color) for color in palette.split("_"))
            break
        if part in ("2", "4"):
            fields["number"] = int(part)
            continue
        try:
            fields["mode"] = AutoMode(part)
            continue
        except ValueError:
            pass
        try:
            fields["direction"] = Direction(part)
        except ValueError as exc:
            raise InvalidValue(f"Unknown auto background parameter: {part!r}") from exc
    return AutoBackground(**fields)


def background_value(value: Background) -> str:
    return value.serialize()
