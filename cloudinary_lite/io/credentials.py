"""
Credential models and helpers used by the upload client.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloudinary_lite.io.env import CLOUDINARY_ENV_FILENAME


class CloudinaryCredentials(BaseSettings):
    """
    Settings model for account credentials via environment variables
    or other settings sources supported by `pydantic-settings`.
    """

    CLOUDINARY_CLOUD_NAME: Optional[str] = None
    CLOUDINARY_API_KEY: Optional[SecretStr] = None
    CLOUDINARY_API_SECRET: Optional[SecretStr] = None

    # transport settings
    CLOUDINARY_API_RETRY_COUNT: int = Field(default=10, ge=1)
    CLOUDINARY_API_RETRY_SLEEP_SEC: float = Field(default=1, ge=0)
    CLOUDINARY_API_TIMEOUT: float = Field(default=60, gt=0)

    model_config = SettingsConfigDict(
        env_file=CLOUDINARY_ENV_FILENAME,
        extra="ignore",
    )

    def validate_credentials(self) -> None:
        """Validate that all required credentials are present."""
        missing = [
            name
            for name in ("CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(f"Credentials are missing: {', '.join(missing)}.")
