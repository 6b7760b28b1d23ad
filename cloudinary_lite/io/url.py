"""
Parsing of image delivery URLs back into :class:`Image` values.

Unofficial: the service does not document how to recover a public path from a
delivery URL, so this may break at any time. Prefer the public id returned by
the upload API when you have it.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple
from urllib.parse import unquote, urlsplit

from cloudinary_lite.domain.types.aspect_ratio import parse_aspect_ratio
from cloudinary_lite.domain.types.background import parse_background
from cloudinary_lite.domain.types.coordinates import Coordinates
from cloudinary_lite.domain.types.crop_mode import Fill, FillByHeight, FillByWidth, Region
from cloudinary_lite.domain.types.gravity import parse_gravity
from cloudinary_lite.domain.types.image import (
    DELIVERY_HOST,
    DELIVERY_TYPE,
    RESOURCE_TYPE,
    Image,
)
from cloudinary_lite.domain.types.pad_mode import PadByHeight, PadByWidth, PadToSize
from cloudinary_lite.domain.types.resize_mode import Scale, ScaleByHeight, ScaleByWidth
from cloudinary_lite.domain.types.transformation import (
    Crop,
    Pad,
    RawTransformation,
    Resize,
    Transformation,
)
from cloudinary_lite.exceptions import (
    InvalidValue,
    MissingPath,
    NotAUrl,
    UnexpectedShape,
)

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^v(\d+)$")
# a transformation segment starts with a short option code, e.g. `c_`, `ar_`, `q_`
_TRANSFORMATION_RE = re.compile(r"^[a-z]{1,3}_")

# crop mode -> wrapper and the variant for each (has width, has height) combination
_MODES = {
    "scale": (
        Resize,
        {(True, False): ScaleByWidth, (False, True): ScaleByHeight, (True, True): Scale},
    ),
    "fill": (
        Crop,
        {(True, False): FillByWidth, (False, True): FillByHeight, (True, True): Fill},
    ),
    "crop": (Crop, {(True, True): Region}),
    "pad": (
        Pad,
        {(True, False): PadByWidth, (False, True): PadByHeight, (True, True): PadToSize},
    ),
}


def is_version(segment: str) -> bool:
    return _VERSION_RE.match(segment) is not None


def is_transformation(segment: str) -> bool:
    return _TRANSFORMATION_RE.match(segment) is not None


def _split_options(segment: str) -> Optional[Dict[str, str]]:
    options: Dict[str, str] = {}
    for token in segment.split(","):
        code, sep, value = token.partition("_")
        if not sep or not value or code in options:
            return None
        options[code] = value
    return options


def _decode_mode(options: Dict[str, str]) -> Transformation:
    wrapper, variants = _MODES[options.pop("c")]
    fields = {}
    if "w" in options:
        fields["width"] = int(options.pop("w"))
    if "h" in options:
        fields["height"] = int(options.pop("h"))
    variant = variants.get(("width" in fields, "height" in fields))
    if variant is None:
        raise InvalidValue("no mode variant matches the given dimensions")

    if "x" in options or "y" in options:
        fields["coordinates"] = Coordinates(
            x=int(options.pop("x", 0)), y=int(options.pop("y", 0))
        )
    for code in ("ar", "fl"):
        if code in options:
            fields["aspect_ratio"] = parse_aspect_ratio(code, options.pop(code))
    if "g" in options:
        gravity = options.pop("g")
        if gravity == "liquid" and wrapper is Resize:
            fields["liquid"] = True
        else:
            fields["gravity"] = parse_gravity(gravity)
    if "b" in options:
        fields["background"] = parse_background(options.pop("b"))
    if options:
        raise InvalidValue(f"unsupported options: {sorted(options)}")
    return wrapper(variant(**fields))


def decode_transformation(segment: str) -> Transformation:
    """
    Best-effort decode of one transformation segment.

    The segment becomes a typed :class:`Resize` / :class:`Crop` / :class:`Pad`
    only when serializing the decoded value gives back exactly the same text;
    anything else is kept as a :class:`RawTransformation`.
    """
    options = _split_options(segment)
    if options is not None and options.get("c") in _MODES:
        try:
            decoded = _decode_mode(options)
        except ValueError as exc:
            logger.debug(f"Keeping transformation {segment!r} opaque: {exc}")
        else:
            if decoded.token() == segment:
                return decoded
            logger.debug(f"Keeping transformation {segment!r} opaque: not in canonical order")
    return RawTransformation(segment)


def _split_path(url: str) -> Tuple[str, List[str]]:
    try:
        parsed_url = urlsplit(url)
        host = parsed_url.hostname
    except (ValueError, TypeError, AttributeError) as exc:
        raise NotAUrl(f"Not a URL: {url!r}") from exc
    if parsed_url.scheme not in ("http", "https") or not host:
        raise NotAUrl(f"Not a URL: {url!r}")

    if host != DELIVERY_HOST:
        raise UnexpectedShape(f"Expected host {DELIVERY_HOST!r}, got {host!r}")
    segments = parsed_url.path.lstrip("/").split("/")
    if (
        len(segments) < 3
        or not segments[0]
        or segments[1] != RESOURCE_TYPE
        or segments[2] != DELIVERY_TYPE
    ):
        raise UnexpectedShape(
            f"Expected path '/<cloud_name>/{RESOURCE_TYPE}/{DELIVERY_TYPE}/...', "
            f"got {parsed_url.path!r}"
        )
    return segments[0], segments[3:]


def parse_image_url(url: str) -> Image:
    """
    Rebuild an :class:`Image` from a delivery URL.

    Query string and fragment are ignored. A version segment is accepted
    either before or after the transformation segments; the last segment is
    always part of the asset path. Percent-escapes in the asset path are
    decoded.

    :param url: Delivery URL, e.g. ``https://res.cloudinary.com/test/image/upload/path/name.png``.
    :type url: str
    :raises NotAUrl: if the input is not an absolute http(s) URL.
    :raises UnexpectedShape: on a different host or path prefix.
    :raises MissingPath: if no asset path follows the upload marker.
    :return: Parsed image
    :rtype: :class:`Image`
    """
    cloud_name, rest = _split_path(url)

    version: Optional[int] = None
    idx = 0
    if len(rest) > 1 and is_version(rest[0]):
        version = int(rest[0][1:])
        idx = 1

    transformations: List[Transformation] = []
    while idx < len(rest) - 1 and is_transformation(rest[idx]):
        transformations.append(decode_transformation(rest[idx]))
        idx += 1

    if version is None and idx < len(rest) - 1 and is_version(rest[idx]):
        version = int(rest[idx][1:])
        idx += 1

    path_segments = rest[idx:]
    if not path_segments or any(not segment for segment in path_segments):
        raise MissingPath(f"No asset path found in {url!r}")

    return Image(
        cloud_name,
        unquote("/".join(path_segments)),
        version=version,
        transformations=transformations,
    )
