"""
Tests for upload options, sources and request signing.
"""

import hashlib

import pytest

from cloudinary_lite import (
    Crop,
    DeliveryType,
    Fill,
    Resize,
    ResourceType,
    ScaleByWidth,
    Source,
    UploadOptions,
)
from cloudinary_lite.api.upload_api import api_sign_request


def test_to_params_formats_and_sorts():
    options = UploadOptions(
        public_id="sample",
        overwrite=True,
        unique_filename=False,
        tags={"b", "a"},
        context={"caption": "hi", "alt": "cat"},
        resource_type=ResourceType.IMAGE,
        type=DeliveryType.PRIVATE,
        transformation=[Resize(ScaleByWidth(width=100))],
    )
    params = options.to_params()
    assert params == {
        "context": "alt=cat|caption=hi",
        "overwrite": "true",
        "public_id": "sample",
        "resource_type": "image",
        "tags": "a,b",
        "transformation": "c_scale,w_100",
        "type": "private",
        "unique_filename": "false",
    }
    assert list(params) == sorted(params)


def test_unset_options_are_not_sent():
    assert UploadOptions().to_params() == {}


def test_eager_chains():
    options = UploadOptions(
        eager=[[Resize(ScaleByWidth(width=100))], [Crop(Fill(width=10, height=10))]]
    )
    assert options.to_params() == {"eager": "c_scale,w_100|c_fill,w_10,h_10"}


@pytest.mark.parametrize("value, expected", [(1.5, 1.0), (-0.2, 0.0), (0.5, 0.5)])
def test_auto_tagging_clamped(value, expected):
    assert UploadOptions(auto_tagging=value).auto_tagging == expected


def test_tags_helpers():
    options = UploadOptions().add_tags(["cats"]).add_tags(["dogs", "cats"])
    assert options.tags == {"cats", "dogs"}
    assert options.remove_tags(["cats"]).tags == {"dogs"}
    assert options.remove_tags(["cats", "dogs"]).tags is None


def test_sources():
    assert Source.path("./image.jpg").value == "./image.jpg"
    assert Source.url("https://example.com/cat.jpg").value == "https://example.com/cat.jpg"
    data_url = "data:image/png;base64,iVBORw0KGgo="
    assert Source.data_url(data_url).value == data_url
    with pytest.raises(ValueError):
        Source.data_url("image/png;base64,iVBORw0KGgo=")
    with pytest.raises(ValueError):
        Source.url("cat.jpg")


def test_sign_request_sorts_and_skips_unsigned():
    params = {
        "timestamp": "1315060510",
        "public_id": "sample_image",
        "eager": "w_400,h_300,c_pad|w_260,h_200,c_crop",
        "api_key": "1234",
        "resource_type": "image",
        "file": "https://example.com/cat.jpg",
        "folder": "",
    }
    expected = hashlib.sha1(
        b"eager=w_400,h_300,c_pad|w_260,h_200,c_crop"
        b"&public_id=sample_image&timestamp=1315060510abcd"
    ).hexdigest()
    assert api_sign_request(params, "abcd") == expected


if __name__ == "__main__":
    pytest.main()
