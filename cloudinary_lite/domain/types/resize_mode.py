"""
Resize modes: change the size of the delivered image without cropping anything out.
"""

from typing import ClassVar, Optional, Union

from pydantic import Field, PositiveInt

from cloudinary_lite.domain.types.aspect_ratio import AspectRatio
from cloudinary_lite.domain.types.mode import TransformationMode


class ScaleByWidth(TransformationMode):
    """Resize to the given width; the original aspect ratio is kept unless `aspect_ratio` is set."""

    crop_mode: ClassVar[str] = "scale"

    width: PositiveInt
    aspect_ratio: Optional[AspectRatio] = Field(default=None, alias="ar")
    liquid: bool = Field(
        default=False,
        description="Content-aware liquid rescaling (seam carving)",
    )


class ScaleByHeight(TransformationMode):
    """Resize to the given height; the original aspect ratio is kept unless `aspect_ratio` is set."""

    crop_mode: ClassVar[str] = "scale"

    height: PositiveInt
    aspect_ratio: Optional[AspectRatio] = Field(default=None, alias="ar")
    liquid: bool = False


class Scale(TransformationMode):
    """Resize to exact dimensions without retaining the original aspect ratio."""

    crop_mode: ClassVar[str] = "scale"

    width: PositiveInt
    height: PositiveInt
    liquid: bool = False


ResizeMode = Union[ScaleByWidth, ScaleByHeight, Scale]
