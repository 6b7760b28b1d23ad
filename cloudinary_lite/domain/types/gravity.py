"""
Gravity: which part of the asset to keep when cropping or padding.
"""

import enum
from typing import Annotated, Union

from pydantic import AfterValidator

from cloudinary_lite.exceptions import InvalidValue


class Gravity(str, enum.Enum):
    """Gravity values known to the delivery service."""

    # compass positions
    NORTH_EAST = "north_east"
    NORTH = "north"
    NORTH_WEST = "north_west"
    WEST = "west"
    SOUTH_WEST = "south_west"
    SOUTH = "south"
    SOUTH_EAST = "south_east"
    EAST = "east"
    CENTER = "center"
    # Advanced Facial Attribute Detection add-on
    ADV_EYES = "adv_eyes"
    ADV_FACE = "adv_face"
    ADV_FACES = "adv_faces"
    # coordinates stored on upload, with fallbacks
    CUSTOM = "custom"
    CUSTOM_FACE = "custom:face"
    CUSTOM_ADV_FACE = "custom:adv_face"
    CUSTOM_ADV_FACES = "custom:adv_faces"
    CUSTOM_FACES = "custom:faces"
    # face detection, with fallbacks
    FACE = "face"
    FACE_CENTER = "face:center"
    FACE_AUTO = "face:auto"
    FACES = "faces"
    FACES_CENTER = "faces:center"
    FACES_AUTO = "faces:auto"
    OCR_TEXT = "ocr_text"
    # automatic region detection
    AUTO = "auto"
    AUTO_SUBJECT = "auto:subject"
    AUTO_CLASSIC = "auto:classic"

    def token(self) -> str:
        return f"g_{self.value}"


_KNOWN = {item.value: item for item in Gravity}


def parse_gravity(value: Union[Gravity, str]) -> Union[Gravity, str]:
    """
    Normalize a gravity value.

    Known values become :class:`Gravity` members; anything else is kept as a
    free-form string so newer service values can still be passed through.
    """
    if isinstance(value, Gravity):
        return value
    if not isinstance(value, str) or not value:
        raise InvalidValue(f"Gravity must be a non-empty string, got {value!r}")
    if "," in value or "/" in value:
        raise InvalidValue(f"Gravity must not contain ',' or '/': {value!r}")
    return _KNOWN.get(value, value)


def gravity_value(value: Union[Gravity, str]) -> str:
    return value.value if isinstance(value, Gravity) else value


GravityValue = Annotated[Union[Gravity, str], AfterValidator(parse_gravity)]
