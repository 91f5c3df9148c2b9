import pytest

from thzimage.generator import ImageGenerator


@pytest.mark.parametrize("width,height", [(1, 1), (4, 3), (7, 9), (16, 16)])
def test_read_yields_one_pixel_per_position(width, height):
    assert len(ImageGenerator(width, height).read()) == width * height


def test_empty_dimensions_yield_no_pixels():
    assert ImageGenerator(0, 5).read() == []
    assert ImageGenerator(5, 0).read() == []


def test_all_pixels_opaque():
    assert all(pixel.alpha == 0xFF for pixel in ImageGenerator(10, 6).read())


def test_read_is_deterministic():
    first = ImageGenerator(12, 8).read()
    second = ImageGenerator(12, 8).read()
    assert len(first) == 96
    assert first == second


def test_centre_region_is_at_full_value():
    width = height = 20
    pixels = ImageGenerator(width, height).read()
    for row in (9, 10, 11):
        for column in (9, 10, 11):
            pixel = pixels[column + row * width]
            assert max(pixel.blue, pixel.green, pixel.red) == 0xFF


def test_corners_are_darker_than_centre():
    width = height = 20
    pixels = ImageGenerator(width, height).read()
    corner = pixels[0]
    assert max(corner.blue, corner.green, corner.red) < 0xFF


@pytest.mark.parametrize("width,height", [(-1, 2), (2, -3), (1.5, 2)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(ValueError):
        ImageGenerator(width, height)