"""
Tests for credentials, env file lookup, file helpers and the retry policy.
"""

import logging
import os
from unittest import mock

import pytest
import requests

from cloudinary_lite import Api, CloudinaryCredentials
from cloudinary_lite.io.env import CLOUDINARY_ENV_FILENAME, find_env_file
from cloudinary_lite.io.fs import get_file_name_with_ext, read_file_part
from cloudinary_lite.io.network_exceptions import is_retryable, process_requests_exception

CREDENTIAL_VARS = ("CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET")


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    with mock.patch.dict(os.environ):
        for name in CREDENTIAL_VARS:
            os.environ.pop(name, None)
        yield tmp_path


def test_credentials_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "demo")
    monkeypatch.setenv("CLOUDINARY_API_KEY", "1234")
    monkeypatch.setenv("CLOUDINARY_API_SECRET", "abcd")
    monkeypatch.setenv("CLOUDINARY_API_RETRY_COUNT", "3")

    api = Api.from_credentials(CloudinaryCredentials())
    assert api.cloud_name == "demo"
    assert api.api_key == "1234"
    assert api.api_secret == "abcd"
    assert api._retry_count == 3


def test_missing_credentials(clean_env, monkeypatch):
    monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "demo")
    with pytest.raises(ValueError, match="CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET"):
        CloudinaryCredentials().validate_credentials()


def test_secret_is_masked(clean_env, monkeypatch):
    monkeypatch.setenv("CLOUDINARY_API_SECRET", "abcd")
    assert "abcd" not in repr(CloudinaryCredentials())


def test_from_env_file(clean_env):
    env_file = clean_env / CLOUDINARY_ENV_FILENAME
    env_file.write_text(
        "CLOUDINARY_CLOUD_NAME=demo\nCLOUDINARY_API_KEY=1234\nCLOUDINARY_API_SECRET=abcd\n"
    )
    assert find_env_file() == env_file

    api = Api.from_env(env_file)
    assert api.cloud_name == "demo"
    assert api.api_secret == "abcd"


def test_find_env_file_none(clean_env):
    assert find_env_file() is None
    assert find_env_file(clean_env / "missing.env") is None


def test_file_helpers(tmp_path):
    image_path = tmp_path / "photo.jpeg"
    image_path.write_bytes(b"jpeg")
    assert get_file_name_with_ext(image_path) == "photo.jpeg"
    assert read_file_part(image_path) == ("photo.jpeg", b"jpeg", "image/jpeg")
    with pytest.raises(FileNotFoundError):
        read_file_part(tmp_path / "missing.png")
    with pytest.raises(IsADirectoryError):
        read_file_part(tmp_path)


def _http_error(status_code):
    response = requests.Response()
    response.status_code = status_code
    return requests.exceptions.HTTPError(f"{status_code}", response=response), response


def test_retry_policy():
    assert is_retryable(requests.exceptions.ConnectionError())
    assert is_retryable(*_http_error(503))
    assert not is_retryable(*_http_error(400))


def test_non_retryable_error_is_raised():
    logger = logging.getLogger("test")
    exc, response = _http_error(404)
    with pytest.raises(requests.exceptions.HTTPError):
        process_requests_exception(
            logger, exc, "image/upload", "https://example.com", swallow_exc=True, response=response
        )


def test_retryable_error_is_swallowed_until_limit():
    logger = logging.getLogger("test")
    exc, response = _http_error(502)
    process_requests_exception(
        logger,
        exc,
        "image/upload",
        "https://example.com",
        swallow_exc=True,
        response=response,
        retry_info={"retry_idx": 1, "retry_limit": 3},
    )
    with pytest.raises(requests.exceptions.HTTPError):
        process_requests_exception(
            logger,
            exc,
            "image/upload",
            "https://example.com",
            swallow_exc=True,
            response=response,
            retry_info={"retry_idx": 3, "retry_limit": 3},
        )


if __name__ == "__main__":
    pytest.main()
