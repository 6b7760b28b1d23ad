"""
Signed uploads and deletions of images.
"""

from __future__ import annotations

import hashlib
import logging
import time
from typing import TYPE_CHECKING, Dict, Mapping, Optional, Tuple

import httpx
import requests

from cloudinary_lite.dto.upload import (
    DestroyResult,
    ResourceType,
    Source,
    SourceType,
    UploadOptions,
    UploadResult,
)
from cloudinary_lite.exceptions import UploadError
from cloudinary_lite.io.fs import read_file_part

if TYPE_CHECKING:
    from cloudinary_lite.api.api import Api

logger = logging.getLogger(__name__)

# sent with the request but not part of the signed payload
UNSIGNED_PARAMS = {"file", "api_key", "resource_type", "cloud_name", "signature"}


def api_sign_request(params: Mapping[str, str], api_secret: str) -> str:
    """
    Sign request parameters.

    Parameters are sorted by name and joined as ``k=v`` pairs with ``&``;
    the secret is appended and the result hashed with SHA-1.

    :param params: Request parameters, including ``timestamp``.
    :param api_secret: Account API secret.
    :return: Hex digest
    """
    to_sign = "&".join(
        f"{key}={value}"
        for key, value in sorted(params.items())
        if key not in UNSIGNED_PARAMS and value not in (None, "")
    )
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class UploadApi:
    """
    Upload API client.

    :Usage example:

     .. code-block:: python

        from cloudinary_lite import Api, Source, UploadOptions

        api = Api.from_env()
        result = api.upload.image(
            Source.path("./image.jpg"), UploadOptions(public_id="file", tags={"cats"})
        )
        print(result.secure_url)
    """

    def __init__(self, api: "Api"):
        self._api = api

    def _signed_params(self, params: Dict[str, str]) -> Dict[str, str]:
        if not self._api.api_key or not self._api.api_secret:
            raise ValueError("api_key and api_secret are required for signed requests")
        params = {**params, "timestamp": str(int(time.time()))}
        params["signature"] = api_sign_request(params, self._api.api_secret)
        params["api_key"] = self._api.api_key
        return params

    def _prepare_upload(
        self, source: Source, options: Optional[UploadOptions]
    ) -> Tuple[str, Dict[str, str], Dict[str, Tuple[str, bytes, str]]]:
        options = options or UploadOptions()
        params = options.to_params()
        resource_type = params.pop("resource_type", ResourceType.IMAGE.value)
        data = self._signed_params(params)

        files = {}
        if source.type == SourceType.PATH:
            files["file"] = read_file_part(source.value)
        else:
            data["file"] = source.value
        return f"{resource_type}/upload", data, files

    def _result(self, response, result_cls):
        payload = response.json()
        if isinstance(payload, dict) and "error" in payload:
            raise UploadError(self._api.parse_error(response), response.status_code)
        return result_cls.model_validate(payload)

    def _raise_upload_error(self, exc: Exception) -> None:
        response = exc.response
        message = self._api.parse_error(response, default_message=str(exc))
        logger.error(f"Request to {response.url} failed: {message}")
        raise UploadError(message, response.status_code) from exc

    def image(self, source: Source, options: Optional[UploadOptions] = None) -> UploadResult:
        """
        Upload an image.

        :param source: Local file, remote URL or data URL.
        :type source: :class:`Source`
        :param options: Upload options.
        :type options: :class:`UploadOptions`, optional
        :raises UploadError: if the service rejects the upload.
        :return: Upload result
        :rtype: :class:`UploadResult`
        """
        method, data, files = self._prepare_upload(source, options)
        try:
            response = self._api.post(method, data=data, files=files)
        except requests.exceptions.HTTPError as exc:
            self._raise_upload_error(exc)
        return self._result(response, UploadResult)

    async def image_async(
        self, source: Source, options: Optional[UploadOptions] = None
    ) -> UploadResult:
        """Same as :meth:`image`, using the async client."""
        method, data, files = self._prepare_upload(source, options)
        try:
            response = await self._api.post_async(method, data=data, files=files)
        except httpx.HTTPStatusError as exc:
            self._raise_upload_error(exc)
        return self._result(response, UploadResult)

    def _prepare_destroy(
        self, public_id: str, invalidate: Optional[bool]
    ) -> Tuple[str, Dict[str, str]]:
        if not public_id:
            raise ValueError("public_id must be set")
        params = {"public_id": public_id}
        if invalidate is not None:
            params["invalidate"] = "true" if invalidate else "false"
        return f"{ResourceType.IMAGE.value}/destroy", self._signed_params(params)

    def destroy(self, public_id: str, invalidate: Optional[bool] = None) -> DestroyResult:
        """
        Delete an uploaded image.

        The service answers ``not found`` for unknown ids instead of failing.

        :param public_id: Public id of the image.
        :type public_id: str
        :param invalidate: Invalidate cached copies on the CDN.
        :type invalidate: bool, optional
        :return: Destroy result
        :rtype: :class:`DestroyResult`
        """
        method, data = self._prepare_destroy(public_id, invalidate)
        try:
            response = self._api.post(method, data=data)
        except requests.exceptions.HTTPError as exc:
            self._raise_upload_error(exc)
        return self._result(response, DestroyResult)

    async def destroy_async(
        self, public_id: str, invalidate: Optional[bool] = None
    ) -> DestroyResult:
        method, data = self._prepare_destroy(public_id, invalidate)
        try:
            response = await self._api.post_async(method, data=data)
        except httpx.HTTPStatusError as exc:
            self._raise_upload_error(exc)
        return self._result(response, DestroyResult)
