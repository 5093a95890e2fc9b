"""A fixed-size grid of on/off pixels."""

from __future__ import annotations

from collections.abc import Iterator


class OutOfCanvasError(IndexError):
    """Raised when a pixel position lies outside the canvas."""


class Canvas:
    """A width x height grid of boolean pixels, all cleared at creation."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width} x {height}")
        self._width = width
        self._height = height
        self._cells = bytearray(width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) is a pixel of this canvas."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int, operation: str) -> int:
        if not self.in_bounds(x, y):
            raise OutOfCanvasError(
                f"{operation}: coordinates {x}, {y} are out of range "
                f"({self._width} x {self._height})"
            )
        return x + y * self._width

    def set_pixel(self, x: int, y: int) -> None:
        """Turn the pixel at (x, y) on."""
        self._cells[self._index(x, y, "set_pixel")] = 1

    def clear_pixel(self, x: int, y: int) -> None:
        """Turn the pixel at (x, y) off."""
        self._cells[self._index(x, y, "clear_pixel")] = 0

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is on."""
        return bool(self._cells[self._index(x, y, "get_pixel")])

    def clear(self) -> None:
        """Turn every pixel off."""
        self._cells = bytearray(self._width * self._height)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) position of every pixel that is on, row by row."""
        for index, value in enumerate(self._cells):
            if value:
                y, x = divmod(index, self._width)
                yield x, y

    def _set_if_inside(self, x: int, y: int) -> None:
        if self.in_bounds(x, y):
            self.set_pixel(x, y)

    def draw_test_shape(self) -> None:
        """Draw a shape suited to checking fill algorithms.

        Two horizontal lines near the top and bottom edge, and two
        diagonals that cross with a one-pixel gap in the middle column.
        """
        width, height = self._width, self._height
        for i in range(1, width - 1):
            self._set_if_inside(i, 1)
            self._set_if_inside(i, height - 2)
        for i in range(1, width // 2):
            self._set_if_inside(i, i)
            self._set_if_inside(i, width - i - 1)
            self._set_if_inside(width - i, i)
            self._set_if_inside(width - i, width - i - 1)