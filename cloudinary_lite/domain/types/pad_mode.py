"""
Pad modes: fit the whole asset into the requested size and pad the rest.

Padding is added when the proportions of the original do not match the target;
`gravity` places the asset (center by default) and `background` colors the padding.
"""

from typing import ClassVar, Optional, Union

from pydantic import Field, PositiveInt

from cloudinary_lite.domain.types.aspect_ratio import AspectRatio
from cloudinary_lite.domain.types.background import Background
from cloudinary_lite.domain.types.gravity import GravityValue
from cloudinary_lite.domain.types.mode import TransformationMode


class PadByWidth(TransformationMode):
    crop_mode: ClassVar[str] = "pad"

    width: PositiveInt
    aspect_ratio: Optional[AspectRatio] = Field(default=None, alias="ar")
    gravity: Optional[GravityValue] = None
    background: Optional[Background] = None


class PadByHeight(TransformationMode):
    crop_mode: ClassVar[str] = "pad"

    height: PositiveInt
    aspect_ratio: Optional[AspectRatio] = Field(default=None, alias="ar")
    gravity: Optional[GravityValue] = None
    background: Optional[Background] = None


class PadToSize(TransformationMode):
    crop_mode: ClassVar[str] = "pad"

    width: PositiveInt
    height: PositiveInt
    gravity: Optional[GravityValue] = None
    background: Optional[Background] = None


PadMode = Union[PadByWidth, PadByHeight, PadToSize]
