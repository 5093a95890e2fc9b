"""A tool that draws star outlines with a configurable number of points."""

from __future__ import annotations

import math

from pixelgrid.canvas import Canvas
from pixelgrid.tools import Tool, ToolShape

MIN_POINTS = 3
MAX_POINTS = 20
DEFAULT_POINTS = 5
INNER_RATIO = 0.4


class StarTool(Tool):
    """Draws a star centred on the start point whose tips reach the end point."""

    shape = ToolShape.CIRCLE

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)
        self._num_points = DEFAULT_POINTS

    @property
    def num_points(self) -> int:
        """The number of tips the star is drawn with."""
        return self._num_points

    def increment_points(self) -> None:
        """Add one tip, up to the maximum."""
        self._num_points = min(MAX_POINTS, self._num_points + 1)

    def decrement_points(self) -> None:
        """Remove one tip, down to the minimum."""
        self._num_points = max(MIN_POINTS, self._num_points - 1)

    def draw_span(self, x0: int, y0: int, x1: int, y1: int) -> None:
        outer = int(math.sqrt((x0 - x1) ** 2 + (y0 - y1) ** 2))
        inner = int(outer * INNER_RATIO)
        self._rasterize(x0, y0, outer, inner)

    def describe(self) -> str:
        return (
            f"Tool: Star ({self._num_points} points) - click and drag mouse "
            "to draw, +/- to change point count"
        )

    def _vertices(self, cx: int, cy: int, outer: int, inner: int) -> list[tuple[int, int]]:
        vertices = []
        for i in range(2 * self._num_points):
            angle = i * math.pi / self._num_points
            radius = outer if i % 2 == 0 else inner
            vertices.append(
                (cx + int(radius * math.sin(angle)), cy - int(radius * math.cos(angle)))
            )
        return vertices

    def _rasterize(self, cx: int, cy: int, outer: int, inner: int) -> None:
        if outer <= 0:
            return
        vertices = self._vertices(cx, cy, outer, inner)
        for start, end in zip(vertices, vertices[1:] + vertices[:1]):
            self._line(*start, *end)

    def _line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self._plot(x0, y0)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 > -dy:
                if x0 == x1:
                    break
                err -= dy
                x0 += sx
            if e2 < dx:
                if y0 == y1:
                    break
                err += dx
                y0 += sy