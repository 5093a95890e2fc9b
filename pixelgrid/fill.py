"""Tools that flood-fill a 4-connected region of cleared pixels."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from pixelgrid.canvas import Canvas
from pixelgrid.tools import Tool, ToolShape


class RecursiveFillTool(Tool):
    """Depth-first fill visiting neighbours below, right, above, then left.

    The start pixel is set even if it already was, and its cleared
    neighbours are filled from there.
    """

    shape = ToolShape.NONE
    draggable = False

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)

    def _candidates(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        if y + 1 < self.canvas.height:
            yield x, y + 1
        if x + 1 < self.canvas.width:
            yield x + 1, y
        if y - 1 >= 0:
            yield x, y - 1
        if x - 1 >= 0:
            yield x - 1, y

    def draw_point(self, x: int, y: int) -> None:
        canvas = self.canvas
        canvas.set_pixel(x, y)
        # An explicit stack of neighbour iterators keeps the visiting order
        # of the recursive formulation without Python's recursion limit.
        frames = [self._candidates(x, y)]
        while frames:
            position = next(frames[-1], None)
            if position is None:
                frames.pop()
                continue
            if not canvas.get_pixel(*position):
                canvas.set_pixel(*position)
                frames.append(self._candidates(*position))

    def describe(self) -> str:
        return "Tool: Recursive Fill (click to fill)"


class NonRecursiveFillTool(Tool):
    """Breadth-first fill with a queue; pixels are set as they are queued."""

    shape = ToolShape.NONE
    draggable = False

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)

    def draw_point(self, x: int, y: int) -> None:
        canvas = self.canvas
        pending: deque[tuple[int, int]] = deque()
        if not canvas.get_pixel(x, y):
            canvas.set_pixel(x, y)
            pending.append((x, y))
        while pending:
            cx, cy = pending.popleft()
            for nx, ny, inside in (
                (cx + 1, cy, cx + 1 < canvas.width),
                (cx, cy + 1, cy + 1 < canvas.height),
                (cx - 1, cy, cx > 0),
                (cx, cy - 1, cy > 0),
            ):
                if inside and not canvas.get_pixel(nx, ny):
                    canvas.set_pixel(nx, ny)
                    pending.append((nx, ny))

    def describe(self) -> str:
        return "Tool: Non-Recursive Fill (click to fill)"


class LineFillTool(Tool):
    """Scan-line fill: fills whole horizontal runs and seeds the rows beside them."""

    shape = ToolShape.NONE
    draggable = False

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)

    def draw_point(self, x: int, y: int) -> None:
        canvas = self.canvas
        if canvas.get_pixel(x, y):
            return
        waiting = [(x, y)]
        while waiting:
            sx, sy = waiting.pop()
            if canvas.get_pixel(sx, sy):
                continue
            left = sx
            while left > 0 and not canvas.get_pixel(left - 1, sy):
                left -= 1
            right = sx
            while right + 1 < canvas.width and not canvas.get_pixel(right + 1, sy):
                right += 1
            for cx in range(left, right + 1):
                canvas.set_pixel(cx, sy)
            for ny in (sy - 1, sy + 1):
                if 0 <= ny < canvas.height:
                    self._seed_row(waiting, left, right, ny)

    def _seed_row(self, waiting: list[tuple[int, int]], left: int, right: int, y: int) -> None:
        in_run = False
        for cx in range(left, right + 1):
            if self.canvas.get_pixel(cx, y):
                in_run = False
            elif not in_run:
                waiting.append((cx, y))
                in_run = True

    def describe(self) -> str:
        return "Tool: Line Fill (click to fill)"