"""Conversions between the BGR, HSV, MiniHSV and gray colour representations.

Hue values are given in radians in the range [0, 2*pi). Channel values are
integers in the range [0, 255]. Arithmetic follows single precision floats
so results match the reference behaviour bit for bit.
"""

import math
import struct

__all__ = [
    "bgr_to_hsv",
    "hsv_to_mini_hsv",
    "bgr_to_mini_hsv",
    "hsv_to_bgr",
    "mini_hsv_to_bgr",
    "mini_hsv_to_hsv",
    "bgr_to_gray",
]


def _f32(value: float) -> float:
    """Round a number to the nearest single precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


_PI_F = _f32(math.pi)
_THIRD_PI_F = _f32(_PI_F / _f32(3.0))
_TWO_PI_F = _f32(2.0 * _PI_F)
_SAT_DIVISOR = _f32(255.01)
_GRAY_BLUE = _f32(0.0722)
_GRAY_GREEN = _f32(0.7152)
_GRAY_RED = _f32(0.2126)


def _byte(name: str, value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be an integer in [0, 255], got {value!r}")
    return value


def bgr_to_hsv(blue: int, green: int, red: int) -> tuple[float, int, int]:
    """Convert a BGR colour to ``(hue, saturation, value)``."""
    blue = _byte("blue", blue)
    green = _byte("green", green)
    red = _byte("red", red)

    high = max(blue, green, red)
    low = min(blue, green, red)
    span = float(high - low)

    if high == low:
        hue = 0.0
    elif red == high:
        hue = _f32(_THIRD_PI_F * _f32((green - blue) / span))
    elif green == high:
        hue = _f32(_THIRD_PI_F * _f32(2.0 + _f32((blue - red) / span)))
    else:
        hue = _f32(_THIRD_PI_F * _f32(4.0 + _f32((red - green) / span)))
    if hue < 0.0:
        hue = _f32(hue + _TWO_PI_F)

    if high == 0:
        saturation = 0
    else:
        saturation = int(_f32(_f32(span / high) * 255.0)) & 0xFF

    return hue, saturation, high


def hsv_to_mini_hsv(hue: float, saturation: int, value: int) -> int:
    """Pack an HSV colour into the one byte MiniHSV layout ``HHHSSVVV``."""
    saturation = _byte("saturation", saturation)
    value = _byte("value", value)
    if hue < 0.0:
        raise ValueError(f"hue must not be negative, got {hue!r}")
    hue_bits = (int(_f32(hue) / (0.25 * math.pi)) & 0xFF) << 5
    return (hue_bits | ((saturation // 64) << 3) | (value // 32)) & 0xFF


def bgr_to_mini_hsv(blue: int, green: int, red: int) -> int:
    """Convert a BGR colour to its MiniHSV byte."""
    return hsv_to_mini_hsv(*bgr_to_hsv(blue, green, red))


def hsv_to_bgr(hue: float, saturation: int, value: int) -> tuple[int, int, int]:
    """Convert an HSV colour to ``(blue, green, red)``."""
    saturation = _byte("saturation", saturation)
    value = _byte("value", value)
    if value == 0 or saturation == 0:
        return value, value, value

    hue = _f32(hue)
    sector = _f32(hue / _THIRD_PI_F)
    if not 0.0 <= sector < 7.0:
        raise ValueError(f"hue out of range: {hue!r}")

    s = _f32(saturation / _SAT_DIVISOR)
    hi = int(sector)
    f = _f32(sector - hi)
    p = int(_f32(value * _f32(1.0 - s)))
    q = int(_f32(value * _f32(1.0 - _f32(s * f))))
    t = int(_f32(value * _f32(1.0 - _f32(s * _f32(1.0 - f)))))

    # (red, green, blue) for each sector of the hue circle
    sectors = {
        0: (value, t, p),
        1: (q, value, p),
        2: (p, value, t),
        3: (p, q, value),
        4: (t, p, value),
        5: (value, p, q),
        6: (value, t, p),
    }
    red, green, blue = sectors[hi]
    return blue & 0xFF, green & 0xFF, red & 0xFF


_MINI_HSV_BLUE = bytes.fromhex(
    "0d29456179 99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d"
    "0d2945617d99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d"
    "0d2945617d99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d"
    "0f2d4c6a89a7c6e4 0d2944607b97b2ce"
    "0c243d556e869fb7 0a20354b60768ba0"
    "103050709 0b0d0f0 10305070 90b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "0e2c49678 4a2bfdd 0c243d556e869fb7"
    "091d3044576a7e91 07152432404f5d6c".replace(" ", "")
)

_MINI_HSV_GREEN = bytes.fromhex(
    "0e2c496784a2bfdd 0c243d556e869fb7"
    "091d3044576a7e91 07152432404f5d6c"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "0f2d4c6a89a7c6e4 0d2944607b97b2ce"
    "0c243d556e869fb7 0a20354b60768ba0"
    "0d2945617d99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d"
    "0d2945617d99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d"
    "0d2945617d99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d".replace(" ", "")
)

_MINI_HSV_RED = bytes.fromhex(
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0"
    "0f2f4e6e8dadccec 0f2d4c6a89a7c6e4"
    "0e2c496784a2bfdd 0e2a4763809cb9d5"
    "0e2a4763809cb9d5 0a20354b60768ba0"
    "07152432404f5d6c 030b121921283037"
    "0d2945617d99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d"
    "0d2945617d99b5d1 091d3145596d8195"
    "05111d2935414d59 0105090d1115191d"
    "0e2a4763809cb9d5 0a20354b60768ba0"
    "07152432404f5d6c 030b121921283037"
    "0f2f4e6e8dadccec 0f2d4c6a89a7c6e4"
    "0e2c496784a2bfdd 0e2a4763809cb9d5"
    "1030507090b0d0f0 1030507090b0d0f0"
    "1030507090b0d0f0 1030507090b0d0f0".replace(" ", "")
)

_MINI_HSV_HUE = tuple(_f32(k * _PI_F) for k in (0.125, 0.375, 0.625, 0.875, 1.125, 1.375, 1.625, 1.875))
_MINI_HSV_SATURATION = (32, 96, 160, 224)
_MINI_HSV_VALUE = (16, 48, 80, 112, 144, 176, 208, 240)


def mini_hsv_to_bgr(minihsv: int) -> tuple[int, int, int]:
    """Convert a MiniHSV byte to ``(blue, green, red)`` using lookup tables."""
    minihsv = _byte("minihsv", minihsv)
    return _MINI_HSV_BLUE[minihsv], _MINI_HSV_GREEN[minihsv], _MINI_HSV_RED[minihsv]


def mini_hsv_to_hsv(minihsv: int) -> tuple[float, int, int]:
    """Convert a MiniHSV byte to the ``(hue, saturation, value)`` at the centre of its bin."""
    minihsv = _byte("minihsv", minihsv)
    return (
        _MINI_HSV_HUE[(minihsv >> 5) & 0x7],
        _MINI_HSV_SATURATION[(minihsv >> 3) & 0x3],
        _MINI_HSV_VALUE[minihsv & 0x7],
    )


def bgr_to_gray(blue: int, green: int, red: int) -> int:
    """Convert a BGR colour to a perceptual luminance preserving gray value."""
    blue = _byte("blue", blue)
    green = _byte("green", green)
    red = _byte("red", red)
    total = _f32(_f32(_GRAY_BLUE * blue) + _f32(_GRAY_GREEN * green))
    total = _f32(total + _f32(_GRAY_RED * red))
    return int(total) & 0xFF