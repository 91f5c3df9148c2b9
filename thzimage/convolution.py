"""Convolution style transformations over a stream of pixels.

A transformer yields the pixels of an image one after another in row-major
order. The convolution transformer wraps another transformer, keeps just
enough lines of it in a ring buffer and feeds a matrix of rows to a
transformation callable for every output pixel.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from .pixel import BGRAPixel

__all__ = [
    "ImageTransformer",
    "ConvolutionParameters",
    "LineBuffer",
    "MatrixHelper",
    "ConvolutionTransformer",
]


class ImageTransformer(ABC):
    """A source of pixels that hands them out one at a time in row-major order."""

    @abstractmethod
    def dimensions(self) -> tuple[int, int]:
        """Return ``(width, height)`` of the image produced."""

    @abstractmethod
    def transform(self) -> Any:
        """Return the next pixel and advance, or ``None`` if there is none."""

    @abstractmethod
    def skip(self) -> bool:
        """Advance past the next pixel; return whether there was one."""

    @abstractmethod
    def reset(self) -> bool:
        """Restart the current image; return whether that succeeded."""

    @abstractmethod
    def next_image(self) -> bool:
        """Move on to the next image; return whether there is one."""


class _NullTransformer(ImageTransformer):
    """A transformer that never produces anything."""

    def dimensions(self) -> tuple[int, int]:
        return 0, 0

    def transform(self) -> Any:
        return None

    def skip(self) -> bool:
        return False

    def reset(self) -> bool:
        return False

    def next_image(self) -> bool:
        return False


_NULL_TRANSFORMER = _NullTransformer()


@dataclass(frozen=True)
class ConvolutionParameters:
    """Size of the convolution matrix and the step it moves by on each axis."""

    size_x: int
    size_y: int
    shift_x: int
    shift_y: int

    def __post_init__(self) -> None:
        for name in ("size_x", "size_y", "shift_x", "shift_y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {value!r}")
            if value == 0:
                raise ValueError(f"{name} is zero")
            if value < 0:
                raise ValueError(f"{name} is negative")


class _Transformation(Protocol):
    def parameters(self) -> ConvolutionParameters: ...

    def __call__(self, matrix: Sequence[Sequence[Any]]) -> Any: ...


class LineBuffer:
    """A ring buffer holding the lines read from a wrapped transformer.

    One spare line is kept after the buffer so the matrix of an exhausted
    helper can still be read without running off the end.
    """

    def __init__(self, fill: Any = None) -> None:
        self._fill = BGRAPixel() if fill is None else fill
        self._memory: list[Any] = []
        self._current = 0
        self._end = 0
        self._line_length = 0
        self._pixels_to_skip = 0

    def setup(self, size: int, line_length: int, pixels_to_skip: int) -> None:
        """Configure the buffer for ``size`` pixels in lines of ``line_length``."""
        if size < 0 or line_length < 0 or pixels_to_skip < 0:
            raise ValueError("buffer size, line length and pixels to skip must not be negative")
        wanted = size + line_length
        if len(self._memory) < wanted:
            self._memory.extend([self._fill] * (wanted - len(self._memory)))
        else:
            del self._memory[wanted:]
        self._line_length = line_length
        self._pixels_to_skip = pixels_to_skip
        self._current = 0
        self._end = size

    def read_next_line(self, wrapped: ImageTransformer) -> bool:
        """Read one line from ``wrapped`` into the next slot of the buffer."""
        for _ in range(self._line_length):
            pixel = wrapped.transform()
            if pixel is None:
                self._current = 0
                return False
            self._memory[self._current] = pixel
            self._current += 1
        if self._current == self._end:
            self._current = 0
        for _ in range(self._pixels_to_skip):
            if not wrapped.skip():
                self._current = 0
                return False
        return True

    def data(self) -> list[Any]:
        """Return the memory of the buffer, spare line included."""
        return self._memory


class MatrixHelper:
    """Steps a matrix of rows across the lines held by a line buffer."""

    def __init__(self) -> None:
        self._buffer: Sequence[Any] = ()
        self._starts: list[int] = []
        self._offset = 0
        self._line_length = 0
        self._matrix_width = 0
        self._shift = 1
        self._line_end = 0
        self._buffer_length = 0
        self._exhausted = True

    def setup(
        self,
        buffer: Sequence[Any],
        line_length: int,
        line_count: int,
        matrix_width: int,
        matrix_shift: int,
    ) -> None:
        """Place the matrix at the start of the first ``line_count`` lines of ``buffer``."""
        if matrix_shift <= 0:
            raise ValueError("matrix shift must be positive")
        if line_count <= 0:
            raise ValueError("line count must be positive")
        if not 0 < matrix_width <= line_length:
            raise ValueError("matrix width must be positive and fit into a line")
        self._buffer = buffer
        self._line_length = line_length
        self._matrix_width = matrix_width
        self._shift = matrix_shift
        self._starts = [line * line_length for line in range(line_count)]
        steps = 1 + (line_length - matrix_width) // matrix_shift
        self._line_end = steps * matrix_shift
        self._buffer_length = line_length * line_count
        self._offset = 0
        self._exhausted = False

    def rows(self) -> tuple[int, ...]:
        """Return the buffer index at which each row of the matrix starts."""
        return tuple(start + self._offset for start in self._starts)

    def matrix(self) -> list[Sequence[Any]]:
        """Return the current matrix, indexed ``[y][x]``."""
        width = self._matrix_width
        return [self._buffer[row : row + width] for row in self.rows()]

    @property
    def exhausted(self) -> bool:
        """Whether the matrix has moved past the end of the current lines."""
        return self._exhausted

    def next(self) -> bool:
        """Shift the matrix along the lines; return whether it is still inside them."""
        if not self._exhausted:
            self._offset += self._shift
            if self._offset == self._line_end:
                self._exhausted = True
        return not self._exhausted

    def line_feed(self, additional_lines: int) -> None:
        """Move every row to the start of its next line, skipping ``additional_lines`` more."""
        if additional_lines < 0:
            raise ValueError("additional lines must not be negative")
        advance = self._line_length * (1 + additional_lines)
        if self._buffer_length:
            self._starts = [(start + advance) % self._buffer_length for start in self._starts]
        self._offset = 0
        self._exhausted = False


def _result_size(image: int, matrix: int, shift: int) -> int:
    if image < matrix:
        return 0
    return (image - matrix) // shift + 1


class ConvolutionTransformer(ImageTransformer):
    """Applies a matrix-to-pixel transformation across a wrapped transformer.

    The transformation is an object with a ``parameters()`` method returning
    :class:`ConvolutionParameters` that is called with a matrix indexed
    ``[y][x]`` and returns the resulting pixel.
    """

    def __init__(self, wrapped: ImageTransformer, transformation: _Transformation, fill: Any = None) -> None:
        self._wrapped = wrapped
        self._used_base: ImageTransformer = wrapped
        self._transformation = transformation
        self._parameters = transformation.parameters()
        self._result = (0, 0)
        self._lines_remaining = 0
        self._line_buffer = LineBuffer(fill)
        self._matrix_helper = MatrixHelper()
        self._setup()

    def dimensions(self) -> tuple[int, int]:
        return self._result

    def transform(self) -> Any:
        if self._matrix_helper.exhausted:
            return None
        pixel = self._transformation(self._matrix_helper.matrix())
        return pixel if self.skip() else None

    def skip(self) -> bool:
        if self._matrix_helper.next():
            return True

        feed = self._parameters.shift_y
        for _ in range(feed):
            if not self._line_buffer.read_next_line(self._used_base):
                # the last line of the image counts once as a success
                if self._lines_remaining == 0:
                    self._lines_remaining = 1
                    return True
                return False
            self._lines_remaining -= 1
        self._matrix_helper.line_feed(feed - 1)
        return True

    def reset(self) -> bool:
        if self._wrapped.reset():
            return self._setup()
        return False

    def next_image(self) -> bool:
        if self._wrapped.next_image():
            return self._setup()
        return False

    def _exhaust(self) -> None:
        while self._matrix_helper.next():
            pass

    def _setup(self) -> bool:
        params = self._parameters
        self._used_base = self._wrapped
        width, height = self._wrapped.dimensions()
        self._lines_remaining = height
        result_width = _result_size(width, params.size_x, params.shift_x)
        result_height = _result_size(height, params.size_y, params.shift_y)
        self._result = (result_width, result_height)

        if result_width * result_height == 0:
            self._used_base = _NULL_TRANSFORMER
            self._line_buffer.setup(params.size_x * params.size_y, params.size_x, 0)
            self._matrix_helper.setup(
                self._line_buffer.data(), params.size_x, params.size_y, params.size_x, params.shift_x
            )
            self._exhaust()
            return False

        line_length = params.size_x + (result_width - 1) * params.shift_x
        pixels_to_skip = width - line_length
        self._line_buffer.setup(line_length * params.size_y, line_length, pixels_to_skip)
        self._matrix_helper.setup(
            self._line_buffer.data(), line_length, params.size_y, params.size_x, params.shift_x
        )

        for _ in range(params.size_y):
            if not self._line_buffer.read_next_line(self._used_base):
                self._exhaust()
                return False
            self._lines_remaining -= 1
        return True