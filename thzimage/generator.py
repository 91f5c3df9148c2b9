"""Generator of a synthetic colour wheel image used for testing pipelines."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from .pixel import BGRAPixel, HSVAPixel

__all__ = ["ImageGenerator"]


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_PI_F = _f32(math.pi)
_SATURATION_LIMIT = _f32(0.98)
_VALUE_LIMIT = _f32(1.02)


@dataclass(frozen=True)
class ImageGenerator:
    """Produces a colour wheel: hue by angle, fading to black away from the centre."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    def read(self) -> list[BGRAPixel]:
        """Return the image as pixels in row-major order."""
        half_width = _f32(0.5 * self.width)
        half_height = _f32(0.5 * self.height)
        max_length_sq = _f32(_f32(half_width * half_width) + _f32(half_height * half_height))

        pixels = []
        for row in range(self.height):
            y = _f32(row - half_height)
            for column in range(self.width):
                x = _f32(column - half_width)
                length_sq = _f32(_f32(x * x) + _f32(y * y))
                ratio = _f32(_f32(length_sq / max_length_sq) * 5.0)

                hue = _f32(_f32(math.atan2(x, y)) + _PI_F)
                if ratio > _SATURATION_LIMIT:
                    saturation = 0xFF
                else:
                    saturation = int(_f32(_f32(ratio - 1.0) * 255.0)) & 0xFF
                if ratio <= _VALUE_LIMIT:
                    value = 0xFF
                else:
                    value = int(_f32(_f32(1.0 - ratio) * 255.0)) & 0xFF

                pixels.append(BGRAPixel.from_hsva(HSVAPixel(hue, saturation, value)))
        return pixels