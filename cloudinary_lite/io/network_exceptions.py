"""
Retry policy for failed HTTP requests.

The transport calls :func:`process_requests_exception` for every failed
attempt: retryable failures are logged and slept on, everything else is
re-raised immediately.
"""

import asyncio
import logging
import time
from typing import Dict, Optional, Union

import httpx
import requests

RETRY_STATUS_CODES = {408, 420, 429, 500, 502, 503, 504}

RETRYABLE_EXCEPTIONS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
    requests.exceptions.ChunkedEncodingError,
    httpx.TransportError,
)


def _status_code(response: Optional[Union[requests.Response, httpx.Response]]) -> Optional[int]:
    return getattr(response, "status_code", None)


def is_retryable(
    exc: Exception,
    response: Optional[Union[requests.Response, httpx.Response]] = None,
) -> bool:
    if isinstance(exc, RETRYABLE_EXCEPTIONS):
        return True
    return _status_code(response) in RETRY_STATUS_CODES


def _handle(
    logger: logging.Logger,
    exc: Exception,
    method: str,
    url: str,
    verbose: bool,
    swallow_exc: bool,
    response,
    retry_info: Optional[Dict[str, int]],
) -> None:
    if not is_retryable(exc, response):
        if verbose:
            logger.error(
                f"Request {method} {url} failed with status {_status_code(response)}: {exc}"
            )
        raise exc
    if retry_info is not None and retry_info["retry_idx"] >= retry_info["retry_limit"]:
        logger.error(f"Request {method} {url} failed, retry limit reached: {exc}")
        raise exc
    if verbose:
        attempt = ""
        if retry_info is not None:
            attempt = f" ({retry_info['retry_idx']}/{retry_info['retry_limit']})"
        logger.warning(f"Retrying {method} {url}{attempt}: {exc!r}")
    if not swallow_exc:
        raise exc


def process_requests_exception(
    logger: logging.Logger,
    exc: Exception,
    method: str,
    url: str,
    verbose: bool = True,
    swallow_exc: bool = False,
    sleep_sec: Optional[float] = None,
    response=None,
    retry_info: Optional[Dict[str, int]] = None,
) -> None:
    """
    Decide what to do with a failed attempt.

    :param logger: Logger for retry messages.
    :param exc: Exception raised by the attempt.
    :param method: API method or URL path, for messages only.
    :param url: Full request URL.
    :param swallow_exc: If True, a retryable error is logged and swallowed so the caller retries.
    :param sleep_sec: Seconds to wait before the next attempt.
    :param response: Response of the failed attempt, if any.
    :param retry_info: ``{"retry_idx": ..., "retry_limit": ...}`` of the current attempt.
    :raises Exception: `exc` itself when it is not retryable or the retry limit is reached.
    """
    _handle(logger, exc, method, url, verbose, swallow_exc, response, retry_info)
    if sleep_sec:
        time.sleep(sleep_sec)


async def process_requests_exception_async(
    logger: logging.Logger,
    exc: Exception,
    method: str,
    url: str,
    verbose: bool = True,
    swallow_exc: bool = False,
    sleep_sec: Optional[float] = None,
    response=None,
    retry_info: Optional[Dict[str, int]] = None,
) -> None:
    """Same as :func:`process_requests_exception`, sleeping without blocking the loop."""
    _handle(logger, exc, method, url, verbose, swallow_exc, response, retry_info)
    if sleep_sec:
        await asyncio.sleep(sleep_sec)


def process_unhandled_request(logger: logging.Logger, exc: Exception) -> None:
    logger.error(f"Request failed with unexpected error: {exc!r}")
    raise exc
