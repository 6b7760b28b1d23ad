"""
Shared behaviour of resize, crop and pad modes.
"""

from typing import ClassVar, Dict, Optional

from cloudinary_lite.domain.types.aspect_ratio import AspectRatio
from cloudinary_lite.domain.types.background import Background, background_value
from cloudinary_lite.domain.types.base import BaseValue
from cloudinary_lite.domain.types.coordinates import Coordinates
from cloudinary_lite.domain.types.gravity import GravityValue, gravity_value


class TransformationMode(BaseValue):
    """
    One transformation step. Subclasses declare the fields they support;
    :meth:`options` emits whichever of them are set, in the fixed
    order c, w, h, x, y, ar|fl, g, b.
    """

    crop_mode: ClassVar[str]

    def options(self) -> Dict[str, str]:
        options = {"c": self.crop_mode}
        width: Optional[int] = getattr(self, "width", None)
        height: Optional[int] = getattr(self, "height", None)
        coordinates: Optional[Coordinates] = getattr(self, "coordinates", None)
        aspect_ratio: Optional[AspectRatio] = getattr(self, "aspect_ratio", None)
        gravity: Optional[GravityValue] = getattr(self, "gravity", None)
        background: Optional[Background] = getattr(self, "background", None)

        if width is not None:
            options["w"] = str(width)
        if height is not None:
            options["h"] = str(height)
        if coordinates is not None:
            options.update(coordinates.options())
        if aspect_ratio is not None:
            code, value = aspect_ratio.option()
            options[code] = value
        if gravity is not None:
            options["g"] = gravity_value(gravity)
        elif getattr(self, "liquid", False):
            # resize modes have no gravity, so the slot carries the liquid flag
            options["g"] = "liquid"
        if background is not None:
            options["b"] = background_value(background)
        return options

    def token(self) -> str:
        return ",".join(f"{code}_{value}" for code, value in self.options().items())

    def __str__(self) -> str:
        return self.token()

