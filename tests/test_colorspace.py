import itertools
import math

import pytest

from thzimage.colorspace import (
    bgr_to_gray,
    bgr_to_hsv,
    bgr_to_mini_hsv,
    hsv_to_bgr,
    hsv_to_mini_hsv,
    mini_hsv_to_bgr,
    mini_hsv_to_hsv,
)

SAMPLES = [0, 1, 17, 64, 100, 128, 200, 254, 255]


def test_gray_colours_have_no_hue_or_saturation():
    for v in SAMPLES:
        assert bgr_to_hsv(v, v, v) == (0.0, 0, v)


def test_pure_red_is_fully_saturated():
    assert bgr_to_hsv(0, 0, 255) == (0.0, 255, 255)


def test_primary_hues_are_ordered():
    red_hue = bgr_to_hsv(0, 0, 255)[0]
    green_hue = bgr_to_hsv(0, 255, 0)[0]
    blue_hue = bgr_to_hsv(255, 0, 0)[0]
    assert red_hue < green_hue < blue_hue
    assert math.isclose(green_hue, 2 * math.pi / 3, rel_tol=1e-6)
    assert math.isclose(blue_hue, 4 * math.pi / 3, rel_tol=1e-6)


def test_hue_always_within_circle():
    for b, g, r in itertools.product(SAMPLES, repeat=3):
        hue, saturation, value = bgr_to_hsv(b, g, r)
        assert 0.0 <= hue < 2 * math.pi
        assert 0 <= saturation <= 255
        assert value == max(b, g, r)


def test_hsv_round_trip_is_close():
    for b, g, r in itertools.product(SAMPLES, repeat=3):
        back = hsv_to_bgr(*bgr_to_hsv(b, g, r))
        for original, restored in zip((b, g, r), back):
            assert abs(original - restored) <= 4, ((b, g, r), back)


def test_hsv_to_bgr_zero_saturation_is_gray():
    for v in SAMPLES:
        assert hsv_to_bgr(1.5, 0, v) == (v, v, v)


def test_hsv_to_bgr_zero_value_is_black():
    assert hsv_to_bgr(3.0, 200, 0) == (0, 0, 0)


def test_hsv_to_bgr_rejects_out_of_range_hue():
    with pytest.raises(ValueError):
        hsv_to_bgr(-1.0, 100, 100)
    with pytest.raises(ValueError):
        hsv_to_bgr(8.0, 100, 100)


def test_channel_out_of_range_raises():
    with pytest.raises(ValueError):
        bgr_to_hsv(256, 0, 0)
    with pytest.raises(ValueError):
        bgr_to_gray(0, -1, 0)
    with pytest.raises(ValueError):
        mini_hsv_to_bgr(256)


def test_mini_hsv_lookup_table_entries():
    assert mini_hsv_to_bgr(0x00) == (0x0D, 0x0E, 0x10)
    assert mini_hsv_to_bgr(0xFF) == (0x6C, 0x1D, 0xF0)


def test_mini_hsv_to_hsv_bin_centres():
    hue, saturation, value = mini_hsv_to_hsv(0)
    assert math.isclose(hue, 0.125 * math.pi, rel_tol=1e-6)
    assert (saturation, value) == (32, 16)


def test_mini_hsv_bin_centres_round_trip():
    for m in range(256):
        assert hsv_to_mini_hsv(*mini_hsv_to_hsv(m)) == m


def test_bgr_to_mini_hsv_black_and_white():
    assert bgr_to_mini_hsv(0, 0, 0) == 0
    assert bgr_to_mini_hsv(255, 255, 255) == 7


def test_hsv_to_mini_hsv_stays_in_byte():
    for m in range(256):
        hue, saturation, value = mini_hsv_to_hsv(m)
        packed = hsv_to_mini_hsv(hue, saturation, value)
        assert 0 <= packed <= 255


def test_gray_black_and_gray_levels():
    assert bgr_to_gray(0, 0, 0) == 0
    for v in SAMPLES:
        assert bgr_to_gray(v, v, v) in (v - 1, v)


def test_gray_weights_green_most():
    assert bgr_to_gray(0, 255, 0) > bgr_to_gray(0, 0, 255) > bgr_to_gray(255, 0, 0)


def test_gray_is_monotonic():
    previous = -1
    for v in range(256):
        current = bgr_to_gray(v, v, v)
        assert current >= previous
        previous = current