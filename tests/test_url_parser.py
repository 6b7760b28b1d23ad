"""
Tests for parsing delivery URLs back into images.
"""

import pytest

from cloudinary_lite import (
    AutoBackground,
    AutoMode,
    Coordinates,
    Crop,
    Fill,
    FillByWidth,
    Gravity,
    IgnoreAspectRatio,
    Image,
    MissingPath,
    NamedColor,
    NotAUrl,
    Pad,
    PadByHeight,
    PadToSize,
    Ratio,
    RawTransformation,
    Region,
    Resize,
    RgbColor,
    Scale,
    ScaleByHeight,
    ScaleByWidth,
    Sides,
    UnexpectedShape,
    parse_image_url,
)
from cloudinary_lite.io.url import is_transformation, is_version

BASE_URL = "https://res.cloudinary.com/test/image/upload"


def test_parse_plain_url():
    url = f"{BASE_URL}/path/name.png"
    image = Image.parse(url)
    assert image.cloud_name == "test"
    assert image.version is None
    assert image.path == "path/name.png"
    assert image.transformations == ()
    assert image.to_string() == url


def test_parse_version():
    image = parse_image_url(f"{BASE_URL}/v1234/path/name.png")
    assert image.version == 1234
    assert image.path == "path/name.png"


def test_parse_typed_transformation():
    image = parse_image_url(f"{BASE_URL}/c_scale,w_100/path/name.png")
    assert image.transformations == (Resize(ScaleByWidth(width=100)),)


@pytest.mark.parametrize(
    "image",
    [
        Image("test", "name.png"),
        Image("test", "a/b/c/name.jpg", version=1),
        Image("test", "a#1.png"),
        Image("test", "a?b.png"),
        Image("test", "my photo.png"),
        Image("test", "100%/café.png"),
        Image("demo", "path/name.png", transformations=[Resize(ScaleByWidth(width=100))]),
        Image(
            "demo",
            "path/name.png",
            transformations=[Resize(ScaleByWidth(width=100, aspect_ratio=Ratio(1.2345678)))],
        ),
        Image(
            "test",
            "path/name.png",
            version=42,
            transformations=[
                Resize(ScaleByHeight(height=50, aspect_ratio=IgnoreAspectRatio())),
                Resize(Scale(width=100, height=50, liquid=True)),
                Crop(FillByWidth(width=100, aspect_ratio=Sides(16, 9), gravity=Gravity.FACES)),
                Crop(
                    Region(
                        width=100,
                        height=80,
                        coordinates=Coordinates(x=10, y=20),
                        gravity=Gravity.NORTH_WEST,
                    )
                ),
                Pad(PadToSize(width=300, height=200, background=RgbColor("ffffff"))),
                Pad(
                    PadByHeight(
                        height=40,
                        background=AutoBackground(
                            mode=AutoMode.BORDER, palette=(NamedColor.RED, RgbColor("00ff00"))
                        ),
                    )
                ),
            ],
        ),
    ],
)
def test_round_trip(image):
    url = image.build()
    parsed = parse_image_url(url)
    assert parsed == image
    assert parsed.build() == url


def test_unknown_segments_are_kept_verbatim():
    url = f"{BASE_URL}/q_auto,f_auto/c_scale,w_100/e_sepia/path/name.png"
    image = parse_image_url(url)
    assert image.transformations == (
        RawTransformation("q_auto,f_auto"),
        Resize(ScaleByWidth(width=100)),
        RawTransformation("e_sepia"),
    )
    assert image.build() == url


def test_non_canonical_order_is_kept_verbatim():
    url = f"{BASE_URL}/w_100,c_scale/ar_1.0,c_fill,w_10/path/name.png"
    image = parse_image_url(url)
    assert image.transformations == (
        RawTransformation("w_100,c_scale"),
        RawTransformation("ar_1.0,c_fill,w_10"),
    )
    assert image.build() == url


def test_parse_is_deterministic():
    url = f"{BASE_URL}/v3/c_fill,w_10,h_10,g_south/path/name.png"
    assert parse_image_url(url) == parse_image_url(url)
    assert parse_image_url(url).transformations == (
        Crop(Fill(width=10, height=10, gravity=Gravity.SOUTH)),
    )


def test_version_after_transformations():
    image = parse_image_url(f"{BASE_URL}/c_scale,w_100/v12/path/name.png")
    assert image.version == 12
    assert image.transformations == (Resize(ScaleByWidth(width=100)),)
    assert image.path == "path/name.png"


def test_last_segment_is_always_the_path():
    assert parse_image_url(f"{BASE_URL}/v123").path == "v123"
    assert parse_image_url(f"{BASE_URL}/c_scale").path == "c_scale"


def test_escaped_path_is_decoded():
    image = parse_image_url(f"{BASE_URL}/c_scale,w_100/my%20photo%23.png")
    assert image.path == "my photo#.png"
    assert image.build() == f"{BASE_URL}/c_scale,w_100/my%20photo%23.png"


@pytest.mark.parametrize(
    "path, transformation",
    [("v2024/a.png", None), ("ab_photos/a.png", RawTransformation("ab_photos"))],
)
def test_leading_folder_that_looks_like_a_marker(path, transformation):
    # a first folder shaped like a version or transformation is read as one
    image = Image("test", path)
    parsed = parse_image_url(image.build())
    assert parsed != image
    assert parsed.path == "a.png"
    assert parsed.build() == image.build()
    if transformation is None:
        assert parsed.version == 2024
        assert parsed.transformations == ()
    else:
        assert parsed.version is None
        assert parsed.transformations == (transformation,)


def test_query_and_fragment_ignored():
    image = parse_image_url(f"{BASE_URL}/path/name.png?_a=BAMAAAA0#top")
    assert image.path == "path/name.png"


@pytest.mark.parametrize("url", ["not a url", "res.cloudinary.com/test/image/upload/a.png", ""])
def test_not_a_url(url):
    with pytest.raises(NotAUrl):
        parse_image_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/test/image/upload/a.png",
        "https://res.cloudinary.com/test/video/upload/a.mp4",
        "https://res.cloudinary.com/test/image/fetch/a.png",
        "https://res.cloudinary.com/test",
    ],
)
def test_unexpected_shape(url):
    with pytest.raises(UnexpectedShape):
        parse_image_url(url)


@pytest.mark.parametrize(
    "url",
    [
        f"{BASE_URL}",
        f"{BASE_URL}/",
        f"{BASE_URL}/c_scale,w_100/",
        f"{BASE_URL}//name.png",
        f"{BASE_URL}/v12/",
    ],
)
def test_missing_path(url):
    with pytest.raises(MissingPath):
        parse_image_url(url)


def test_segment_classification():
    assert is_version("v12")
    assert not is_version("v")
    assert not is_version("version")
    assert is_transformation("c_scale,w_100")
    assert is_transformation("ar_16:9")
    assert not is_transformation("path")
    assert not is_transformation("abcd_x")


if __name__ == "__main__":
    pytest.main()
