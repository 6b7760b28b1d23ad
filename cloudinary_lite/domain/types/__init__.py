"""
Value types of the delivery URL builder (modes, options, transformations, image).
"""

from cloudinary_lite.domain.types.aspect_ratio import (
    AspectRatio,
    IgnoreAspectRatio,
    Ratio,
    Sides,
)
from cloudinary_lite.domain.types.background import (
    AutoBackground,
    AutoMode,
    Background,
    Color,
    Direction,
    NamedColor,
    RgbColor,
)
from cloudinary_lite.domain.types.coordinates import Coordinates
from cloudinary_lite.domain.types.crop_mode import (
    CropMode,
    Fill,
    FillByHeight,
    FillByWidth,
    Region,
)
from cloudinary_lite.domain.types.gravity import Gravity
from cloudinary_lite.domain.types.image import Image
from cloudinary_lite.domain.types.pad_mode import PadByHeight, PadByWidth, PadMode, PadToSize
from cloudinary_lite.domain.types.resize_mode import (
    ResizeMode,
    Scale,
    ScaleByHeight,
    ScaleByWidth,
)
from cloudinary_lite.domain.types.transformation import (
    Crop,
    Pad,
    RawTransformation,
    Resize,
    Transformation,
    serialize_transformations,
)
