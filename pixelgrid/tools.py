"""Drawing tools that rasterise shapes onto a canvas."""

from __future__ import annotations

import math
from enum import Enum

from pixelgrid.canvas import Canvas


class ToolShape(Enum):
    """The outline a tool draws, used for previews while dragging."""

    LINE = "line"
    BOX = "box"
    CIRCLE = "circle"
    NONE = "none"


class Tool:
    """Base for all tools; draws nothing on its own.

    ``draw_point`` is used by tools acting on a single position, such as the
    pen or the fill tools; ``draw_span`` by tools that need a start and an
    end position, such as lines, circles or boxes.
    """

    shape: ToolShape = ToolShape.NONE
    draggable: bool = True

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas

    def draw_point(self, x: int, y: int) -> None:
        """Act on a single grid position."""

    def draw_span(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Act on a start and an end grid position."""

    def describe(self) -> str:
        """Return the status line shown while the tool is active."""
        return ""

    def _plot(self, x: int, y: int) -> None:
        # Shapes may reach past the edge of the canvas; those pixels are dropped.
        if self.canvas.in_bounds(x, y):
            self.canvas.set_pixel(x, y)


class PenTool(Tool):
    """Sets single pixels."""

    def draw_point(self, x: int, y: int) -> None:
        self.canvas.set_pixel(x, y)

    def describe(self) -> str:
        return "Tool: Pen (click and hold left button to draw)"


class DDALineTool(Tool):
    """Draws lines with the digital differential analyser."""

    shape = ToolShape.LINE

    def draw_span(self, x0: int, y0: int, x1: int, y1: int) -> None:
        swapped = abs(y1 - y0) > abs(x1 - x0)
        if swapped:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        slope = (y1 - y0) / (x1 - x0) if x1 != x0 else 0.0
        y = float(y0)
        for x in range(x0, x1 + 1):
            rounded = int(y + 0.5)
            if swapped:
                self._plot(rounded, x)
            else:
                self._plot(x, rounded)
            y += slope

    def describe(self) -> str:
        return "Tool: DDA-Line (click and drag mouse to draw)"


class BresenhamLineTool(Tool):
    """Draws lines with Bresenham's integer algorithm."""

    shape = ToolShape.LINE

    def draw_span(self, x0: int, y0: int, x1: int, y1: int) -> None:
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        dx = x1 - x0
        dy = abs(y1 - y0)
        step = 1 if y0 < y1 else -1
        decision = 2 * dy - dx
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self._plot(y, x)
            else:
                self._plot(x, y)
            if decision > 0:
                y += step
                decision -= 2 * dx
            decision += 2 * dy

    def describe(self) -> str:
        return "Tool: Bresenham-Line (click and drag mouse to draw)"


class BresenhamCircleTool(Tool):
    """Draws circles around the start point through the end point."""

    shape = ToolShape.CIRCLE

    def _plot_octants(self, cx: int, cy: int, x: int, y: int) -> None:
        for px, py in (
            (cx + x, cy + y),
            (cx - x, cy + y),
            (cx + x, cy - y),
            (cx - x, cy - y),
            (cx + y, cy + x),
            (cx - y, cy + x),
            (cx + y, cy - x),
            (cx - y, cy - x),
        ):
            self._plot(px, py)

    def draw_span(self, x0: int, y0: int, x1: int, y1: int) -> None:
        radius = int(math.sqrt((x0 - x1) ** 2 + (y0 - y1) ** 2))
        x, y = 0, radius
        decision = 3 - 2 * radius
        self._plot_octants(x0, y0, x, y)
        while y >= x:
            x += 1
            if decision > 0:
                y -= 1
                decision += 4 * (x - y) + 10
            else:
                decision += 4 * x + 6
            self._plot_octants(x0, y0, x, y)

    def describe(self) -> str:
        return "Tool: Bresenham-Circle (click and drag mouse to draw)"


class RectangleTool(Tool):
    """Draws the outline of an axis-aligned box between two corners."""

    shape = ToolShape.BOX

    def draw_span(self, x0: int, y0: int, x1: int, y1: int) -> None:
        left, right = sorted((x0, x1))
        top, bottom = sorted((y0, y1))
        for x in range(left, right + 1):
            self._plot(x, top)
            self._plot(x, bottom)
        for y in range(top + 1, bottom):
            self._plot(left, y)
            self._plot(right, y)

    def describe(self) -> str:
        return "Tool: Rectangle (click and drag mouse to draw)"