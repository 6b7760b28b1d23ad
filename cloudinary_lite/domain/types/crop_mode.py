"""
Crop modes: keep only part of the original asset.
"""

from typing import ClassVar, Optional, Union

from pydantic import Field, PositiveInt

from cloudinary_lite.domain.types.aspect_ratio import AspectRatio
from cloudinary_lite.domain.types.coordinates import Coordinates
from cloudinary_lite.domain.types.gravity import GravityValue
from cloudinary_lite.domain.types.mode import TransformationMode


class FillByWidth(TransformationMode):
    """
    Fill the given width and aspect ratio without distorting the asset.

    The asset is scaled as much as needed, then the dimension that exceeds the
    requested size is cropped. `gravity` picks the part to keep (center by default).
    """

    crop_mode: ClassVar[str] = "fill"

    width: PositiveInt
    aspect_ratio: Optional[AspectRatio] = Field(default=None, alias="ar")
    gravity: Optional[GravityValue] = None


class FillByHeight(TransformationMode):
    """Same as :class:`FillByWidth`, driven by the height."""

    crop_mode: ClassVar[str] = "fill"

    height: PositiveInt
    aspect_ratio: Optional[AspectRatio] = Field(default=None, alias="ar")
    gravity: Optional[GravityValue] = None


class Fill(TransformationMode):
    """Fill exactly `width` x `height`, cropping whatever does not fit."""

    crop_mode: ClassVar[str] = "fill"

    width: PositiveInt
    height: PositiveInt
    gravity: Optional[GravityValue] = None


class Region(TransformationMode):
    """Extract a `width` x `height` region at `coordinates` (or around `gravity`)."""

    crop_mode: ClassVar[str] = "crop"

    width: PositiveInt
    height: PositiveInt
    coordinates: Optional[Coordinates] = None
    gravity: Optional[GravityValue] = None


CropMode = Union[FillByWidth, FillByHeight, Fill, Region]
