import enum
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Set, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cloudinary_lite.domain.types.transformation import (
    Transformation,
    serialize_transformations,
)

DATA_URL_PREFIX = "data:"


class ResourceType(str, enum.Enum):
    IMAGE = "image"
    RAW = "raw"
    VIDEO = "video"
    AUTO = "auto"


class DeliveryType(str, enum.Enum):
    UPLOAD = "upload"
    PRIVATE = "private"
    AUTHENTICATED = "authenticated"


class AccessMode(str, enum.Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


class SourceType(str, enum.Enum):
    PATH = "path"
    URL = "url"
    DATA_URL = "data_url"


class Source(BaseModel):
    """What to upload: a local file, a remote URL or an inline data URL (RFC 2397)."""

    type: SourceType
    value: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def path(cls, path: Union[str, Path]) -> "Source":
        return cls(type=SourceType.PATH, value=str(path))

    @classmethod
    def url(cls, url: str) -> "Source":
        if not url.startswith(("http://", "https://", "s3://", "gs://", "ftp://")):
            raise ValueError(f"Unsupported remote URL: {url!r}")
        return cls(type=SourceType.URL, value=url)

    @classmethod
    def data_url(cls, data_url: str) -> "Source":
        if not data_url.startswith(DATA_URL_PREFIX) or "," not in data_url:
            raise ValueError("Data URL must look like 'data:[<mediatype>][;base64],<data>'")
        return cls(type=SourceType.DATA_URL, value=data_url)


def _format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, (set, frozenset)):
        return ",".join(sorted(value))
    if isinstance(value, dict):
        return "|".join(f"{key}={val}" for key, val in sorted(value.items()))
    return str(value)


class UploadOptions(BaseModel):
    """
    Optional upload parameters.

    Only options that are set are sent. Everything except `resource_type` is
    part of the signed payload.
    """

    public_id: Optional[str] = None
    folder: Optional[str] = None
    asset_folder: Optional[str] = None
    display_name: Optional[str] = None
    use_filename: Optional[bool] = None
    unique_filename: Optional[bool] = None
    filename_override: Optional[str] = None
    overwrite: Optional[bool] = None
    invalidate: Optional[bool] = None
    backup: Optional[bool] = None
    tags: Optional[Set[str]] = None
    context: Optional[Dict[str, str]] = None
    metadata: Optional[Dict[str, str]] = None
    type: Optional[DeliveryType] = None
    access_mode: Optional[AccessMode] = None
    resource_type: Optional[ResourceType] = None
    format: Optional[str] = None
    transformation: Optional[List[Transformation]] = Field(
        default=None, description="Incoming transformation applied before storing"
    )
    eager: Optional[List[List[Transformation]]] = Field(
        default=None, description="Derived versions generated right after upload"
    )
    eager_async: Optional[bool] = None
    eager_notification_url: Optional[str] = None
    notification_url: Optional[str] = None
    image_metadata: Optional[bool] = None
    colors: Optional[bool] = None
    faces: Optional[bool] = None
    phash: Optional[bool] = None
    auto_tagging: Optional[float] = Field(
        default=None, description="Confidence threshold for automatic tagging, 0..1"
    )

    @field_validator("auto_tagging")
    def clamp_auto_tagging(cls, v: Optional[float]) -> Optional[float]:
        if v is None:
            return v
        return min(max(v, 0.0), 1.0)

    def add_tags(self, tags: Sequence[str]) -> "UploadOptions":
        return self.model_copy(update={"tags": (self.tags or set()) | set(tags)})

    def remove_tags(self, tags: Sequence[str]) -> "UploadOptions":
        remaining = (self.tags or set()) - set(tags)
        return self.model_copy(update={"tags": remaining or None})

    def to_params(self) -> Dict[str, str]:
        """Set options as form fields, sorted by name."""
        params = {}
        for name, value in self:
            if value is None:
                continue
            if name == "transformation":
                value = serialize_transformations(value)
            elif name == "eager":
                value = "|".join(serialize_transformations(chain) for chain in value)
            params[name] = _format_param(value)
        return dict(sorted(params.items()))


class UploadResult(BaseModel):
    """Response of a successful upload. Fields the service adds later are kept as extras."""

    asset_id: Optional[str] = None
    public_id: str
    version: int
    version_id: Optional[str] = None
    signature: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None
    resource_type: Optional[str] = None
    created_at: Optional[datetime] = None
    tags: List[str] = Field(default_factory=list)
    bytes: Optional[int] = None
    type: Optional[str] = None
    etag: Optional[str] = None
    placeholder: Optional[bool] = None
    url: Optional[str] = None
    secure_url: Optional[str] = None
    folder: Optional[str] = None
    asset_folder: Optional[str] = None
    display_name: Optional[str] = None
    overwritten: Optional[bool] = None
    original_filename: Optional[str] = None
    original_extension: Optional[str] = None
    image_metadata: Optional[Dict[str, Any]] = None
    api_key: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class DestroyResult(BaseModel):
    result: str = Field(..., description="`ok` or `not found`")
