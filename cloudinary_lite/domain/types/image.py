"""
Image entity: cloud name, asset path, version and a chain of transformations.
"""

from typing import Optional, Sequence, Tuple
from urllib.parse import quote

from pydantic import Field, NonNegativeInt, field_validator

from cloudinary_lite.domain.types.base import BaseValue
from cloudinary_lite.domain.types.transformation import (
    Transformation,
    serialize_transformations,
)
from cloudinary_lite.exceptions import InvalidValue

DELIVERY_HOST = "res.cloudinary.com"
RESOURCE_TYPE = "image"
DELIVERY_TYPE = "upload"
# characters allowed unescaped in a URL path segment, besides letters and digits
PATH_SAFE_CHARS = "/:@!$&'()*+,;=-._~"


class Image(BaseValue):
    """
    Delivery URL of an uploaded image.

    Instances are immutable: :meth:`add_transformation`, :meth:`with_version`
    and :meth:`with_format` return new images.

    :Usage example:

     .. code-block:: python

        from cloudinary_lite import Image, Resize, ScaleByWidth

        image = Image("test", "path/name.png").add_transformation(
            Resize(ScaleByWidth(width=100))
        )
        print(image)
        # Output:
        # https://res.cloudinary.com/test/image/upload/c_scale,w_100/path/name.png
    """

    cloud_name: str = Field(..., description="Cloud the asset belongs to")
    path: str = Field(..., description="Public path of the asset, including folders and extension")
    version: Optional[NonNegativeInt] = Field(
        default=None, description="Asset version, rendered as `v<number>`"
    )
    transformations: Tuple[Transformation, ...] = Field(default_factory=tuple)

    def __init__(
        self,
        cloud_name: str,
        path: str,
        version: Optional[int] = None,
        transformations: Sequence[Transformation] = (),
        **data,
    ):
        super().__init__(
            cloud_name=cloud_name,
            path=path,
            version=version,
            transformations=tuple(transformations),
            **data,
        )

    @field_validator("cloud_name")
    def validate_cloud_name(cls, v: str) -> str:
        if not v or "/" in v:
            raise ValueError("cloud_name must be non-empty and must not contain '/'")
        return v

    @field_validator("path")
    def validate_path(cls, v: str) -> str:
        if not v or v.startswith("/") or v.endswith("/"):
            raise ValueError("path must be non-empty and must not start or end with '/'")
        return v

    @classmethod
    def new(cls, cloud_name: str, path: str) -> "Image":
        return cls(cloud_name, path)

    @classmethod
    def parse(cls, url: str) -> "Image":
        """Rebuild an image from a delivery URL. Unofficial, may break with service changes."""
        from cloudinary_lite.io.url import parse_image_url

        return parse_image_url(url)

    def add_transformation(self, transformation: Transformation) -> "Image":
        return self.replace(transformations=self.transformations + (transformation,))

    def with_version(self, version: Optional[int]) -> "Image":
        return self.replace(version=version)

    @property
    def format(self) -> Optional[str]:
        """Extension of the last path component, if any."""
        file_name = self.path.rsplit("/", 1)[-1]
        if "." not in file_name:
            return None
        return file_name.rsplit(".", 1)[1] or None

    def with_format(self, format: str) -> "Image":
        """Return an image whose path ends with the given extension."""
        format = format.lstrip(".")
        if not format or "/" in format:
            raise InvalidValue(f"Invalid format: {format!r}")
        head, sep, file_name = self.path.rpartition("/")
        stem = file_name.rsplit(".", 1)[0] if "." in file_name else file_name
        return self.replace(path=f"{head}{sep}{stem}.{format}")

    def build(self) -> str:
        """Delivery URL; characters not allowed in a URL path are percent-encoded."""
        parts = [f"https://{DELIVERY_HOST}", self.cloud_name, RESOURCE_TYPE, DELIVERY_TYPE]
        if self.version is not None:
            parts.append(f"v{self.version}")
        transformations = serialize_transformations(self.transformations)
        if transformations:
            parts.append(transformations)
        parts.append(quote(self.path, safe=PATH_SAFE_CHARS))
        return "/".join(parts)

    def to_string(self) -> str:
        return self.build()

    def __str__(self) -> str:
        return self.build()
