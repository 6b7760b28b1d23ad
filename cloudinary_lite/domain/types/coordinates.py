from typing import Dict

from pydantic import StrictInt

from cloudinary_lite.domain.types.base import BaseValue


class Coordinates(BaseValue):
    """Pixel offset of a cropped region (`x_<x>,y_<y>`)."""

    x: StrictInt = 0
    y: StrictInt = 0

    def options(self) -> Dict[str, str]:
        return {"x": str(self.x), "y": str(self.y)}

    def token(self) -> str:
        return ",".join(f"{code}_{value}" for code, value in self.options().items())
