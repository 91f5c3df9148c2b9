"""Writing a numbered series of images through a single-file writer."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

__all__ = ["ImageSeriesWriter"]

_PATH_LIMIT = 512
_PLACEHOLDER = "?"
_NUMBER_MASK = 0xFFFFFFFF


class _ImageWriter(Protocol):
    def init(self) -> bool: ...

    def write(self, dimensions: Any, buffer: Sequence[Any]) -> bool: ...

    def deinit(self) -> None: ...


class ImageSeriesWriter:
    """Wraps a file writer so each image goes to the next numbered file.

    The file path holds a single ``?`` that is replaced by the image number,
    padded with zeros to six digits.
    """

    def __init__(
        self,
        filepath: str,
        writer_factory: Callable[[str], _ImageWriter],
        start_number: int = 0,
        increments: int = 1,
    ) -> None:
        if increments == 0:
            raise ValueError("increments must not be zero")
        if increments < 0 or start_number < 0:
            raise ValueError("start number and increments must not be negative")
        if len(filepath) + 3 > _PATH_LIMIT:
            raise ValueError(f"file path longer than {_PATH_LIMIT - 3} characters")
        if filepath.count(_PLACEHOLDER) != 1:
            raise ValueError("file path must contain exactly one '?' for the number")
        self._prefix, self._suffix = filepath.split(_PLACEHOLDER)
        self._writer_factory = writer_factory
        self._next_number = start_number & _NUMBER_MASK
        self._increments = increments & _NUMBER_MASK
        self._wrapped: Optional[_ImageWriter] = None

    @classmethod
    def create(
        cls,
        filepath: str,
        writer_factory: Callable[[str], _ImageWriter],
        start_number: int = 0,
        increments: int = 1,
    ) -> ImageSeriesWriter:
        """Create a series writer; raises ValueError for an unusable path or increment."""
        return cls(filepath, writer_factory, start_number, increments)

    def current_path(self) -> str:
        """Return the path the next image will be written to."""
        return f"{self._prefix}{self._next_number:06d}{self._suffix}"

    def init(self) -> bool:
        """Open a writer for the current path and initialise it."""
        self._wrapped = None
        self._wrapped = self._writer_factory(self.current_path())
        return self._wrapped.init()

    def write(self, dimensions: Any, buffer: Sequence[Any]) -> bool:
        """Write an image through the open writer; False if none is open."""
        if self._wrapped is None:
            return False
        return self._wrapped.write(dimensions, buffer)

    def deinit(self) -> None:
        """Finish the current file and move on to the next number."""
        if self._wrapped is not None:
            self._wrapped.deinit()
        self._wrapped = None
        self._next_number = (self._next_number + self._increments) & _NUMBER_MASK