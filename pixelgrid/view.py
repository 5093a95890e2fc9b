"""Screen geometry of the pixel grid and the outline previews of drag tools."""

from __future__ import annotations

import math

from pixelgrid.canvas import Canvas
from pixelgrid.tools import ToolShape

DEFAULT_ZOOM = 1.0
DEFAULT_TRANSLATION = (10.0, 10.0)
# Space left free around the grid: side margins and the status line below.
HORIZONTAL_MARGIN = 20
VERTICAL_MARGIN = 40
# Below this cell size the grid lines fade out so they do not clutter the view.
GRID_FADE_SIZE = 5.0
CIRCLE_STEP_DEGREES = 5


class View:
    """Maps between window pixels and canvas cells under translation and zoom."""

    def __init__(self, canvas: Canvas, window_width: int, window_height: int) -> None:
        self.canvas = canvas
        self.window_width = window_width
        self.window_height = window_height
        self.zoom = DEFAULT_ZOOM
        self.translation = DEFAULT_TRANSLATION

    def reset(self) -> None:
        """Restore the initial zoom factor and translation."""
        self.zoom = DEFAULT_ZOOM
        self.translation = DEFAULT_TRANSLATION

    def resize(self, window_width: int, window_height: int) -> None:
        """Record a new window size."""
        self.window_width = window_width
        self.window_height = window_height

    def cell_size(self) -> float:
        """Return the edge length of one canvas cell in window pixels."""
        cell_x = (self.window_width - HORIZONTAL_MARGIN) * self.zoom / float(self.canvas.width)
        cell_y = (self.window_height - VERTICAL_MARGIN) * self.zoom / float(self.canvas.height)
        return min(cell_x, cell_y)

    def _cell_floor(self, sx: float, sy: float) -> tuple[float, float]:
        cell = self.cell_size()
        tx, ty = self.translation
        return math.floor((sx - tx) / cell), math.floor((sy - ty) / cell)

    def screen_to_grid(self, sx: int, sy: int) -> tuple[int, int]:
        """Return the cell that contains the window position (sx, sy)."""
        gx, gy = self._cell_floor(sx, sy)
        return int(gx), int(gy)

    def snap_screen_coords(self, sx: int, sy: int) -> tuple[int, int]:
        """Return the window position of the centre of the cell under (sx, sy)."""
        cell = self.cell_size()
        tx, ty = self.translation
        gx, gy = self._cell_floor(sx, sy)
        return int((gx + 0.5) * cell + tx), int((gy + 0.5) * cell + ty)

    def grid_alpha(self) -> float:
        """Return the opacity of the inner grid lines for the current cell size."""
        cell = self.cell_size()
        if cell < GRID_FADE_SIZE:
            return (cell - 2) / 3.0
        return 1.0


class Preview:
    """The outline shown while a two-point tool is being dragged."""

    def __init__(self) -> None:
        self.shape = ToolShape.NONE
        self.start = (0, 0)
        self.dest = (0, 0)
        self.enabled = False

    def enable(self) -> None:
        """Start showing the outline."""
        self.enabled = True

    def disable(self) -> None:
        """Stop showing the outline."""
        self.enabled = False

    def set_start(self, x: int, y: int) -> None:
        """Set the start of the shape; the destination moves there too."""
        self.start = (x, y)
        self.dest = (x, y)

    def set_dest(self, x: int, y: int) -> None:
        """Set the destination of the shape."""
        self.dest = (x, y)

    def outline(self) -> list[tuple[float, float]]:
        """Return the polyline to draw, or an empty list if nothing is shown."""
        if not self.enabled:
            return []
        (sx, sy), (dx, dy) = self.start, self.dest
        if self.shape is ToolShape.LINE:
            return [(sx, sy), (dx, dy)]
        if self.shape is ToolShape.BOX:
            return [(sx, sy), (dx, sy), (dx, dy), (sx, dy), (sx, sy)]
        if self.shape is ToolShape.CIRCLE:
            radius = math.hypot(dx - sx, dy - sy)
            return [
                (
                    sx + math.cos(math.radians(angle)) * radius,
                    sy + math.sin(math.radians(angle)) * radius,
                )
                for angle in range(0, 361, CIRCLE_STEP_DEGREES)
            ]
        return []