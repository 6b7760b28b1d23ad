from pathlib import Path
from typing import Optional, Union

from cloudinary_lite.api._api import _Api
from cloudinary_lite.api.tags_api import TagsApi
from cloudinary_lite.api.upload_api import UploadApi
from cloudinary_lite.domain.types.image import Image
from cloudinary_lite.io.credentials import CloudinaryCredentials
from cloudinary_lite.io.env import find_env_file


class Api(_Api):

    def __init__(
        self,
        cloud_name: str,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        retry_count: Optional[int] = 10,
        retry_sleep_sec: Optional[float] = 1,
        timeout: Optional[float] = 60,
        server_address: Optional[str] = None,
    ):
        super().__init__(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            retry_count=retry_count,
            retry_sleep_sec=retry_sleep_sec,
            timeout=timeout,
            server_address=server_address,
        )

        self.upload = UploadApi(self)
        self.tags = TagsApi(self)

    def image(self, path: str) -> Image:
        """Delivery URL builder for an image of this account."""
        return Image(self.cloud_name, path)

    @classmethod
    def from_credentials(cls, credentials: CloudinaryCredentials) -> "Api":
        credentials.validate_credentials()
        return cls(
            cloud_name=credentials.CLOUDINARY_CLOUD_NAME,
            api_key=credentials.CLOUDINARY_API_KEY.get_secret_value(),
            api_secret=credentials.CLOUDINARY_API_SECRET.get_secret_value(),
            retry_count=credentials.CLOUDINARY_API_RETRY_COUNT,
            retry_sleep_sec=credentials.CLOUDINARY_API_RETRY_SLEEP_SEC,
            timeout=credentials.CLOUDINARY_API_TIMEOUT,
        )

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "Api":
        """Create API client from environment variables and `cloudinary.env`."""
        from dotenv import load_dotenv

        env_path = find_env_file(Path(env_file) if env_file is not None else None)
        if env_path is not None:
            load_dotenv(env_path)
        return cls.from_credentials(CloudinaryCredentials())
