"""
Transformation steps and the serializer for the transformation part of a delivery URL.
"""

from typing import Iterable, Union

from pydantic import Field, field_validator

from cloudinary_lite.domain.types.base import BaseValue
from cloudinary_lite.domain.types.crop_mode import CropMode
from cloudinary_lite.domain.types.pad_mode import PadMode
from cloudinary_lite.domain.types.resize_mode import ResizeMode


class Resize(BaseValue):
    """Change the size of the image without cropping out any of it."""

    mode: ResizeMode

    def __init__(self, mode: ResizeMode, **data):
        super().__init__(mode=mode, **data)

    def token(self) -> str:
        return self.mode.token()

    def __str__(self) -> str:
        return self.token()


class Crop(BaseValue):
    """Keep only part of the image."""

    mode: CropMode

    def __init__(self, mode: CropMode, **data):
        super().__init__(mode=mode, **data)

    def token(self) -> str:
        return self.mode.token()

    def __str__(self) -> str:
        return self.token()


class Pad(BaseValue):
    """Fit the whole image into the target size and pad the remainder."""

    mode: PadMode

    def __init__(self, mode: PadMode, **data):
        super().__init__(mode=mode, **data)

    def token(self) -> str:
        return self.mode.token()

    def __str__(self) -> str:
        return self.token()


class RawTransformation(BaseValue):
    """
    A transformation segment taken verbatim from a parsed URL.

    Used for segments outside the typed vocabulary (e.g. `q_auto`), so that
    re-serializing a parsed image gives back the same URL.
    """

    segment: str = Field(..., description="Comma-joined option tokens, without '/'")

    def __init__(self, segment: str, **data):
        super().__init__(segment=segment, **data)

    @field_validator("segment")
    def validate_segment(cls, v: str) -> str:
        if not v or "/" in v:
            raise ValueError("segment must be non-empty and must not contain '/'")
        return v

    def token(self) -> str:
        return self.segment

    def __str__(self) -> str:
        return self.token()


Transformation = Union[Resize, Crop, Pad, RawTransformation]


def serialize_transformations(transformations: Iterable[Transformation]) -> str:
    """
    Join transformation steps with '/' in the order they were added.

    An empty sequence gives an empty string.
    """
    return "/".join(step.token() for step in transformations)
