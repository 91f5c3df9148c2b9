"""Pixel types for the BGRA, HSVA and MiniHSV colour spaces."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Union

from .colorspace import (
    bgr_to_hsv,
    bgr_to_mini_hsv,
    hsv_to_bgr,
    hsv_to_mini_hsv,
    mini_hsv_to_bgr,
    mini_hsv_to_hsv,
)

__all__ = ["BGRAPixel", "HSVAPixel", "MiniHSVPixel", "TemplatedBGRAPixel"]

_CHANNELS = ("blue", "green", "red", "alpha")

Number = Union[int, float]


def _check_byte(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be an integer in [0, 255], got {value!r}")


@dataclass(frozen=True, slots=True)
class BGRAPixel:
    """A blue, green, red, alpha pixel with 8 bits per channel."""

    blue: int = 0
    green: int = 0
    red: int = 0
    alpha: int = 0xFF

    def __post_init__(self) -> None:
        for name in _CHANNELS:
            _check_byte(name, getattr(self, name))

    @classmethod
    def from_hsva(cls, other: HSVAPixel) -> BGRAPixel:
        """Convert an HSVA pixel, keeping its alpha."""
        blue, green, red = hsv_to_bgr(other.hue, other.saturation, other.value)
        return cls(blue, green, red, other.alpha)

    @classmethod
    def from_mini_hsv(cls, other: MiniHSVPixel) -> BGRAPixel:
        """Convert a MiniHSV pixel; the result is fully opaque."""
        blue, green, red = mini_hsv_to_bgr(other.content)
        return cls(blue, green, red)


@dataclass(frozen=True, slots=True)
class HSVAPixel:
    """A hue, saturation, value, alpha pixel; hue is given in radians [0, 2*pi]."""

    hue: float = 0.0
    saturation: int = 0
    value: int = 0
    alpha: int = 0xFF

    def __post_init__(self) -> None:
        for name in ("saturation", "value", "alpha"):
            _check_byte(name, getattr(self, name))

    @classmethod
    def from_bgra(cls, other: BGRAPixel) -> HSVAPixel:
        """Convert a BGRA pixel, keeping its alpha."""
        hue, saturation, value = bgr_to_hsv(other.blue, other.green, other.red)
        return cls(hue, saturation, value, other.alpha)

    @classmethod
    def from_mini_hsv(cls, other: MiniHSVPixel) -> HSVAPixel:
        """Convert a MiniHSV pixel to the centre of its bin; the result is fully opaque."""
        hue, saturation, value = mini_hsv_to_hsv(other.content)
        return cls(hue, saturation, value)


@dataclass(frozen=True, slots=True)
class MiniHSVPixel:
    """An HSV pixel packed into one byte laid out as ``HHHSSVVV``."""

    content: int = 0

    def __post_init__(self) -> None:
        _check_byte("content", self.content)

    @classmethod
    def from_bgra(cls, other: BGRAPixel) -> MiniHSVPixel:
        """Convert a BGRA pixel; alpha is dropped."""
        return cls(bgr_to_mini_hsv(other.blue, other.green, other.red))

    @classmethod
    def from_hsva(cls, other: HSVAPixel) -> MiniHSVPixel:
        """Convert an HSVA pixel; alpha is dropped."""
        return cls(hsv_to_mini_hsv(other.hue, other.saturation, other.value))


@dataclass
class TemplatedBGRAPixel:
    """A BGRA pixel with wide numeric channels, for accumulating and averaging colours.

    Integer channels divided by an integer divide without remainder.
    """

    blue: Number = 0
    green: Number = 0
    red: Number = 0
    alpha: Number = 0xFF

    @classmethod
    def from_bgra(cls, other: BGRAPixel) -> TemplatedBGRAPixel:
        """Copy the channels of a BGRA pixel."""
        return cls(other.blue, other.green, other.red, other.alpha)

    def to_bgra(self) -> BGRAPixel:
        """Convert to a BGRA pixel, clamping every channel to [0, 255]."""

        def convert(value: Number) -> int:
            return int(min(max(value + 0.01, 0.0), 255.0))

        return BGRAPixel(*(convert(getattr(self, name)) for name in _CHANNELS))

    def __iadd__(self, other: object) -> TemplatedBGRAPixel:
        if not isinstance(other, (BGRAPixel, TemplatedBGRAPixel)):
            return NotImplemented
        for name in _CHANNELS:
            setattr(self, name, getattr(self, name) + getattr(other, name))
        return self

    def __isub__(self, other: object) -> TemplatedBGRAPixel:
        if not isinstance(other, (BGRAPixel, TemplatedBGRAPixel)):
            return NotImplemented
        for name in _CHANNELS:
            setattr(self, name, getattr(self, name) - getattr(other, name))
        return self

    def __imul__(self, factor: object) -> TemplatedBGRAPixel:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        for name in _CHANNELS:
            setattr(self, name, getattr(self, name) * factor)
        return self

    def __itruediv__(self, divisor: object) -> TemplatedBGRAPixel:
        if isinstance(divisor, bool) or not isinstance(divisor, (int, float)):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("cannot divide a pixel by zero")
        for field in fields(self):
            channel = getattr(self, field.name)
            if isinstance(channel, int) and isinstance(divisor, int):
                setattr(self, field.name, channel // divisor)
            else:
                setattr(self, field.name, channel / divisor)
        return self