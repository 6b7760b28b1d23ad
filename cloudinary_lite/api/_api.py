# coding: utf-8
"""Connection to the upload and delivery endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import httpx
import requests
from requests_toolbelt import MultipartEncoder

from cloudinary_lite.io.network_exceptions import (
    process_requests_exception,
    process_requests_exception_async,
    process_unhandled_request,
)

API_SERVER_ADDRESS = "https://api.cloudinary.com"
API_VERSION = "v1_1"

logger = logging.getLogger(__name__)


class _Api:
    """
    Account connection: holds credentials, retry settings and the HTTP clients.
    """

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
        if not cloud_name:
            raise ValueError("cloud_name must be set")

        # authorization
        self.cloud_name = cloud_name
        self._api_key = api_key
        self._api_secret = api_secret
        self._server_address = server_address or API_SERVER_ADDRESS
        self._headers = {}

        # logger
        self.logger = logger

        # retry settings
        self._retry_count = retry_count if retry_count is not None else 10
        self._retry_sleep_sec = retry_sleep_sec if retry_sleep_sec is not None else 1
        self._timeout = timeout

        # httpx client
        self._async_httpx_client: Optional[httpx.AsyncClient] = None

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def api_secret(self) -> Optional[str]:
        return self._api_secret

    def post(
        self,
        method: str,
        data: Dict[str, Any],
        files: Optional[Mapping[str, Tuple[str, bytes, str]]] = None,
        retries: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """
        Performs POST request to server with given parameters.

        With `files` the body is sent as multipart form data, otherwise as JSON.
        The multipart encoder is rebuilt for every attempt, as it can only be read once.

        :param method: API method, e.g. ``image/upload``, or an absolute URL.
        :type method: str
        :param data: Form fields or JSON body.
        :type data: dict
        :param files: Files as ``{field: (file name, content, mime type)}``.
        :type files: dict, optional
        :param retries: The number of attempts to connect to the server.
        :type retries: int, optional
        :return: Response object
        :rtype: :class:`Response<Response>`
        """
        if retries is None:
            retries = self._retry_count

        url = self._prepare_url(method)
        logger.info(f"POST {url}")
        headers = {**self._headers, **(headers or {})}

        for retry_idx in range(retries):
            response = None
            try:
                if files:
                    encoder = MultipartEncoder(fields={**data, **files})
                    response = requests.post(
                        url,
                        data=encoder,
                        headers={"Content-Type": encoder.content_type, **headers},
                        timeout=self._timeout,
                    )
                else:
                    response = requests.post(
                        url, json=data, headers=headers, timeout=self._timeout
                    )

                if response.status_code != requests.codes.ok:  # pylint: disable=no-member
                    _Api._raise_for_status(response)
                return response
            except requests.RequestException as exc:
                process_requests_exception(
                    self.logger,
                    exc,
                    method,
                    url,
                    verbose=True,
                    swallow_exc=True,
                    sleep_sec=min(self._retry_sleep_sec * (2**retry_idx), 60),
                    response=response,
                    retry_info={"retry_idx": retry_idx + 1, "retry_limit": retries},
                )
            except Exception as exc:
                process_unhandled_request(self.logger, exc)
        raise requests.exceptions.RetryError("Retry limit exceeded ({!r})".format(url))

    def get(
        self,
        method: str,
        params: Optional[Dict[str, Any]] = None,
        retries: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """
        Performs GET request to server with given parameters.

        :param method: API method or an absolute URL.
        :type method: str
        :param params: URL query parameters.
        :type params: dict, optional
        :param retries: The number of attempts to connect to the server.
        :type retries: int, optional
        :return: Response object
        :rtype: :class:`Response<Response>`
        """
        if retries is None:
            retries = self._retry_count

        url = self._prepare_url(method)
        logger.info(f"GET {url}")
        headers = {**self._headers, **(headers or {})}

        for retry_idx in range(retries):
            response = None
            try:
                response = requests.get(
                    url, params=params, headers=headers, timeout=self._timeout
                )

                if response.status_code != requests.codes.ok:  # pylint: disable=no-member
                    _Api._raise_for_status(response)
                return response
            except requests.RequestException as exc:
                process_requests_exception(
                    self.logger,
                    exc,
                    method,
                    url,
                    verbose=True,
                    swallow_exc=True,
                    sleep_sec=min(self._retry_sleep_sec * (2**retry_idx), 60),
                    response=response,
                    retry_info={"retry_idx": retry_idx + 1, "retry_limit": retries},
                )
            except Exception as exc:
                process_unhandled_request(self.logger, exc)
        raise requests.exceptions.RetryError("Retry limit exceeded ({!r})".format(url))

    async def post_async(
        self,
        method: str,
        data: Dict[str, Any],
        files: Optional[Mapping[str, Tuple[str, bytes, str]]] = None,
        retries: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Performs POST request to server with given parameters using httpx.

        Same body rules as :meth:`post`.

        :return: Response object
        :rtype: :class:`httpx.Response`
        """
        self._set_async_client()

        if retries is None:
            retries = self._retry_count

        url = self._prepare_url(method)
        logger.info(f"POST {url}")
        headers = {**self._headers, **(headers or {})}

        for retry_idx in range(retries):
            response = None
            try:
                if files:
                    response = await self._async_httpx_client.post(
                        url, data=data, files=files, headers=headers, timeout=self._timeout
                    )
                else:
                    response = await self._async_httpx_client.post(
                        url, json=data, headers=headers, timeout=self._timeout
                    )
                if response.status_code != httpx.codes.OK:
                    _Api._raise_for_status_httpx(response)
                return response
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                await process_requests_exception_async(
                    self.logger,
                    exc,
                    method,
                    url,
                    verbose=True,
                    swallow_exc=True,
                    sleep_sec=min(self._retry_sleep_sec * (2**retry_idx), 60),
                    response=response,
                    retry_info={"retry_idx": retry_idx + 1, "retry_limit": retries},
                )
            except Exception as exc:
                process_unhandled_request(self.logger, exc)
        raise httpx.RequestError(
            f"Retry limit exceeded ({url})",
            request=getattr(response, "request", None),
        )

    async def get_async(
        self,
        method: str,
        params: Optional[Dict[str, Any]] = None,
        retries: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Performs GET request to server with given parameters using httpx."""
        self._set_async_client()

        if retries is None:
            retries = self._retry_count

        url = self._prepare_url(method)
        logger.info(f"GET {url}")
        headers = {**self._headers, **(headers or {})}

        for retry_idx in range(retries):
            response = None
            try:
                response = await self._async_httpx_client.get(
                    url, params=params, headers=headers, timeout=self._timeout
                )
                if response.status_code != httpx.codes.OK:
                    _Api._raise_for_status_httpx(response)
                return response
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                await process_requests_exception_async(
                    self.logger,
                    exc,
                    method,
                    url,
                    verbose=True,
                    swallow_exc=True,
                    sleep_sec=min(self._retry_sleep_sec * (2**retry_idx), 60),
                    response=response,
                    retry_info={"retry_idx": retry_idx + 1, "retry_limit": retries},
                )
            except Exception as exc:
                process_unhandled_request(self.logger, exc)
        raise httpx.RequestError(
            f"Retry limit exceeded ({url})",
            request=getattr(response, "request", None),
        )

    def _prepare_url(self, method: str) -> str:
        """
        Prepares the API endpoint URL. Absolute URLs are used as is.
        """
        if method.startswith(("http://", "https://")):
            return method
        return f"{self.api_server_address}/{method.lstrip('/')}"

    @property
    def api_server_address(self) -> str:
        """
        Get API server address of the account.

        :return: API server address.
        :rtype: :class:`str`
        :Usage example:

         .. code-block:: python

            from cloudinary_lite import Api

            api = Api(cloud_name="demo", api_key="1234", api_secret="abcd")
            print(api.api_server_address)
            # Output:
            # 'https://api.cloudinary.com/v1_1/demo'
        """
        return f"{self._server_address.rstrip('/')}/{API_VERSION}/{self.cloud_name}"

    @staticmethod
    def _raise_for_status(response: requests.Response):
        """
        Raise error and show message with error code if given response can not connect to server.
        :param response: Request class object
        """
        http_error_msg = ""
        if isinstance(response.reason, bytes):
            try:
                reason = response.reason.decode("utf-8")
            except UnicodeDecodeError:
                reason = response.reason.decode("iso-8859-1")
        else:
            reason = response.reason

        if 400 <= response.status_code < 500:
            kind = "Client"
        elif 500 <= response.status_code < 600:
            kind = "Server"
        else:
            return
        http_error_msg = "%s %s Error: %s for url: %s (%s)" % (
            response.status_code,
            kind,
            reason,
            response.url,
            response.content.decode("utf-8", errors="replace"),
        )
        raise requests.exceptions.HTTPError(http_error_msg, response=response)

    @staticmethod
    def _raise_for_status_httpx(response: httpx.Response):
        """
        Raise error and show message with error code if given response can not connect to server.
        :param response: Response class object
        """
        if 400 <= response.status_code < 500:
            kind = "Client"
        elif 500 <= response.status_code < 600:
            kind = "Server"
        else:
            return
        http_error_msg = "%s %s Error: %s for url: %s (%s)" % (
            response.status_code,
            kind,
            response.reason_phrase,
            response.url,
            response.content.decode("utf-8", errors="replace"),
        )
        raise httpx.HTTPStatusError(
            message=http_error_msg, response=response, request=response.request
        )

    @staticmethod
    def parse_error(
        response: Union[requests.Response, httpx.Response],
        default_message: Optional[str] = "Unknown error",
    ) -> str:
        """
        Extracts the error message from a service response.

        Error payloads look like ``{"error": {"message": "..."}}``.

        :param response: Response of the failed request.
        :type response: Response
        :param default_message: Message used when the payload has no message.
        :type default_message: str, optional
        :return: Error message
        :rtype: :class:`str`
        """
        ERROR_FIELD = "error"
        MESSAGE_FIELD = "message"

        try:
            data = json.loads(response.content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            return default_message
        if not isinstance(data, dict):
            return default_message
        error = data.get(ERROR_FIELD)
        if isinstance(error, dict):
            return error.get(MESSAGE_FIELD) or default_message
        if isinstance(error, str) and error:
            return error
        return default_message

    def _set_async_client(self):
        """
        Set async httpx client with HTTP/2 if it is not set yet.
        """
        if self._async_httpx_client is None:
            self._async_httpx_client = httpx.AsyncClient(http2=True)

    async def aclose(self) -> None:
        """Close the async client; a later async call opens a new one."""
        if self._async_httpx_client is not None:
            await self._async_httpx_client.aclose()
            self._async_httpx_client = None
