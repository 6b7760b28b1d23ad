"""
Tests for the Image builder and delivery URL assembly.
"""

import pytest

from cloudinary_lite import (
    Crop,
    Fill,
    FillByWidth,
    Image,
    InvalidValue,
    Pad,
    PadByWidth,
    Resize,
    ScaleByWidth,
)

BASE_URL = "https://res.cloudinary.com/test/image/upload"


@pytest.fixture
def image():
    return Image.new("test", "path/name.png")


def test_image_without_transformations(image):
    assert image.build() == f"{BASE_URL}/path/name.png"
    assert image.version is None
    assert image.transformations == ()


def test_resize_by_width(image):
    image = image.add_transformation(Resize(ScaleByWidth(width=100)))
    assert image.to_string() == f"{BASE_URL}/c_scale,w_100/path/name.png"


def test_crop_fill_by_width(image):
    image = image.add_transformation(Crop(FillByWidth(width=100)))
    assert image.to_string() == f"{BASE_URL}/c_fill,w_100/path/name.png"


def test_pad_by_width(image):
    image = image.add_transformation(Pad(PadByWidth(width=100)))
    assert str(image) == f"{BASE_URL}/c_pad,w_100/path/name.png"


def test_add_transformation_returns_new_image(image):
    resized = image.add_transformation(Resize(ScaleByWidth(width=100)))
    assert resized is not image
    assert image.transformations == ()
    assert resized.transformations == (Resize(ScaleByWidth(width=100)),)


def test_version_precedes_transformations(image):
    image = (
        image.with_version(5)
        .add_transformation(Resize(ScaleByWidth(width=100)))
        .add_transformation(Crop(Fill(width=10, height=10)))
    )
    assert image.build() == f"{BASE_URL}/v5/c_scale,w_100/c_fill,w_10,h_10/path/name.png"
    assert image.with_version(None).build() == (
        f"{BASE_URL}/c_scale,w_100/c_fill,w_10,h_10/path/name.png"
    )


def test_build_is_deterministic(image):
    image = image.with_version(3).add_transformation(Crop(Fill(width=10, height=10)))
    assert image.build() == image.build()
    assert image.to_string() == str(image)


def test_path_is_escaped():
    assert Image("test", "my photo#1?.png").build() == f"{BASE_URL}/my%20photo%231%3F.png"
    assert Image("test", "a/b:c@d,e.png").build() == f"{BASE_URL}/a/b:c@d,e.png"
    assert Image("test", "100%.png").build() == f"{BASE_URL}/100%25.png"


def test_images_are_values(image):
    assert image == Image("test", "path/name.png")
    assert hash(image) == hash(Image("test", "path/name.png"))
    assert image != Image("test", "path/name.png", version=1)


def test_format(image):
    assert image.format == "png"
    assert image.with_format("jpg").path == "path/name.jpg"
    assert image.with_format(".webp").build() == f"{BASE_URL}/path/name.webp"
    assert Image("test", "folder/name").format is None
    assert Image("test", "folder/name").with_format("png").path == "folder/name.png"
    with pytest.raises(InvalidValue):
        image.with_format("")


@pytest.mark.parametrize(
    "cloud_name, path, version",
    [
        ("", "name.png", None),
        ("a/b", "name.png", None),
        ("test", "", None),
        ("test", "/name.png", None),
        ("test", "folder/", None),
        ("test", "name.png", -1),
    ],
)
def test_invalid_image(cloud_name, path, version):
    with pytest.raises(InvalidValue):
        Image(cloud_name, path, version=version)


if __name__ == "__main__":
    pytest.main()
