"""
Public package interface.

Exposes the delivery URL builder and parser (`Image` and the transformation
value types) and a small upload client (`Api`).
"""

from __future__ import annotations

from cloudinary_lite.api.api import Api
from cloudinary_lite.domain.types import (
    AutoBackground,
    AutoMode,
    Coordinates,
    Crop,
    Direction,
    Fill,
    FillByHeight,
    FillByWidth,
    Gravity,
    IgnoreAspectRatio,
    Image,
    NamedColor,
    Pad,
    PadByHeight,
    PadByWidth,
    PadToSize,
    Ratio,
    RawTransformation,
    Region,
    Resize,
    RgbColor,
    Scale,
    ScaleByHeight,
    ScaleByWidth,
    Sides,
    serialize_transformations,
)
from cloudinary_lite.dto.tags import Tag, TagList
from cloudinary_lite.dto.upload import (
    AccessMode,
    DeliveryType,
    DestroyResult,
    ResourceType,
    Source,
    UploadOptions,
    UploadResult,
)
from cloudinary_lite.exceptions import (
    InvalidValue,
    MissingPath,
    NotAUrl,
    ParseError,
    UnexpectedShape,
    UploadError,
)
from cloudinary_lite.io.credentials import CloudinaryCredentials
from cloudinary_lite.io.url import parse_image_url
