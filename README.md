# thzimage

Small building blocks for working with images in plain Python, with no
third-party dependencies.

## Modules

- `thzimage.colorspace`: conversion between BGR, HSV, the one-byte
  "mini HSV" encoding (`HHHSSVVV`) and gray values: `bgr_to_hsv`,
  `hsv_to_bgr`, `bgr_to_mini_hsv`, `hsv_to_mini_hsv`, `mini_hsv_to_bgr`,
  `mini_hsv_to_hsv` and `bgr_to_gray`. Hue is in radians, channels are
  integers in `[0, 255]`; a channel outside that range raises `ValueError`.
  The arithmetic is rounded to single precision floats.
- `thzimage.pixel`: the frozen pixel types `BGRAPixel`, `HSVAPixel` and
  `MiniHSVPixel`, with `from_...` class methods to convert between them,
  and the mutable `TemplatedBGRAPixel` with wide channels for sums and
  averages (`+=`, `-=`, `*=`, `/=`, and `to_bgra()` which clamps to
  `[0, 255]`). Integer channels divided by an integer divide without
  remainder.
- `thzimage.generator`: `ImageGenerator(width, height).read()` returns a
  colour-wheel test image as a list of `BGRAPixel` in row-major order.
- `thzimage.convolution`: the abstract `ImageTransformer` (a pixel source
  that hands out pixels one at a time), `ConvolutionParameters`, and
  `ConvolutionTransformer`, which slides a matrix over the pixels of a
  wrapped `ImageTransformer` and produces one output pixel per position.
  `LineBuffer` and `MatrixHelper` are the helpers it is built from.
- `thzimage.image_series`: `ImageSeriesWriter` sends each image to the next
  file of a numbered series through a writer you supply.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Examples

Colour conversion and pixels:

```python
from thzimage.colorspace import bgr_to_hsv, hsv_to_bgr
from thzimage.pixel import BGRAPixel, HSVAPixel, TemplatedBGRAPixel

hue, saturation, value = bgr_to_hsv(10, 200, 30)
blue, green, red = hsv_to_bgr(hue, saturation, value)

hsva = HSVAPixel.from_bgra(BGRAPixel(10, 200, 30))
back = BGRAPixel.from_hsva(hsva)

total = TemplatedBGRAPixel(0, 0, 0, 0)
total += BGRAPixel(10, 20, 30)
total += BGRAPixel(20, 40, 50)
total /= 2
average = total.to_bgra()  # BGRAPixel(15, 30, 40, 255)
```

A convolution wraps any `ImageTransformer`. `transform()` returns the next
pixel or `None` when there is none; `skip()`, `reset()` and `next_image()`
return whether they succeeded. The transformation is an object with a
`parameters()` method returning `ConvolutionParameters` and is called with
the matrix of rows, indexed `[y][x]`:

```python
from thzimage.convolution import ConvolutionParameters, ConvolutionTransformer, ImageTransformer
from thzimage.generator import ImageGenerator


class ListSource(ImageTransformer):
    def __init__(self, width, height, pixels):
        self._size = (width, height)
        self._pixels = pixels
        self._position = 0

    def dimensions(self):
        return self._size

    def transform(self):
        if self._position >= len(self._pixels):
            return None
        pixel = self._pixels[self._position]
        self._position += 1
        return pixel

    def skip(self):
        if self._position >= len(self._pixels):
            return False
        self._position += 1
        return True

    def reset(self):
        self._position = 0
        return True

    def next_image(self):
        return False


class TopLeft:
    def parameters(self):
        return ConvolutionParameters(2, 2, 1, 1)

    def __call__(self, matrix):
        return matrix[0][0]


source = ListSource(6, 4, ImageGenerator(6, 4).read())
convolution = ConvolutionTransformer(source, TopLeft())
convolution.dimensions()  # (5, 3)
```

`ConvolutionParameters` raises `ValueError` when a size or shift is zero or
negative, and `TypeError` when it is not an integer.

A numbered series of files:

```python
from thzimage.image_series import ImageSeriesWriter

series = ImageSeriesWriter.create("frame_?.bmp", my_writer_factory, start_number=5, increments=2)
series.current_path()  # "frame_000005.bmp"
series.init()
series.write(dimensions, pixels)
series.deinit()
series.current_path()  # "frame_000007.bmp"
```

The factory is called with the file path and must return an object with
`init()`, `write(dimensions, buffer)` and `deinit()`. `create` raises
`ValueError` if the path does not hold exactly one `?`, is longer than 509
characters, or if `increments` is zero or a number is negative.

## What it does not do

The package reads and writes no image files itself: it has no BMP, PNG,
GIF or QOI encoder or decoder, so `ImageSeriesWriter` needs a writer from
elsewhere. It has no screen capture, no image container type beyond lists
of pixels, no ready-made `ImageTransformer` over an image, and no command
line tool.