"""The editor state: the canvas, the view, the active tool and input handling."""

from __future__ import annotations

from enum import Enum, IntEnum

from pixelgrid.canvas import Canvas
from pixelgrid.fill import LineFillTool, NonRecursiveFillTool, RecursiveFillTool
from pixelgrid.star import StarTool
from pixelgrid.tools import (
    BresenhamCircleTool,
    BresenhamLineTool,
    DDALineTool,
    PenTool,
    RectangleTool,
    Tool,
)
from pixelgrid.view import Preview, View

CANVAS_SIZE = 100
DEFAULT_WINDOW_WIDTH = 620
DEFAULT_WINDOW_HEIGHT = 640
ZOOM_STEP = 0.2
MIN_ZOOM = 0.2
ESCAPE = "\x1b"


class MenuAction(IntEnum):
    """Commands that can be chosen from the menu or by key."""

    TOOL_PEN = 1
    TOOL_DDA_LINE = 2
    TOOL_BRESENHAM_LINE = 3
    TOOL_CIRCLE = 4
    TOOL_RECTANGLE = 5
    FILL_RECURSIVE = 6
    FILL_NONRECURSIVE = 7
    FILL_LINE = 8
    CLEAR_CANVAS = 9
    TEST_SHAPE = 10
    RESET_VIEW = 11
    TOOL_STAR = 12
    INCREASE_POINTS = 13
    DECREASE_POINTS = 14


class MouseButton(Enum):
    """The mouse buttons the editor reacts to."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


_TOOL_CLASSES: dict[MenuAction, type[Tool]] = {
    MenuAction.TOOL_PEN: PenTool,
    MenuAction.TOOL_DDA_LINE: DDALineTool,
    MenuAction.TOOL_BRESENHAM_LINE: BresenhamLineTool,
    MenuAction.TOOL_CIRCLE: BresenhamCircleTool,
    MenuAction.TOOL_RECTANGLE: RectangleTool,
    MenuAction.FILL_RECURSIVE: RecursiveFillTool,
    MenuAction.FILL_NONRECURSIVE: NonRecursiveFillTool,
    MenuAction.FILL_LINE: LineFillTool,
    MenuAction.TOOL_STAR: StarTool,
}

KEY_BINDINGS: dict[str, MenuAction] = {
    "p": MenuAction.TOOL_PEN,
    "d": MenuAction.TOOL_DDA_LINE,
    "b": MenuAction.TOOL_BRESENHAM_LINE,
    "o": MenuAction.TOOL_CIRCLE,
    "s": MenuAction.TOOL_RECTANGLE,
    "*": MenuAction.TOOL_STAR,
    "+": MenuAction.INCREASE_POINTS,
    "-": MenuAction.DECREASE_POINTS,
    "r": MenuAction.FILL_RECURSIVE,
    "f": MenuAction.FILL_NONRECURSIVE,
    "l": MenuAction.FILL_LINE,
    "c": MenuAction.CLEAR_CANVAS,
    " ": MenuAction.CLEAR_CANVAS,
    "\r": MenuAction.TEST_SHAPE,
    "t": MenuAction.TEST_SHAPE,
    "\b": MenuAction.RESET_VIEW,
}


class Application:
    """Holds the editor state and reacts to keyboard and mouse input."""

    def __init__(
        self,
        window_width: int = DEFAULT_WINDOW_WIDTH,
        window_height: int = DEFAULT_WINDOW_HEIGHT,
    ) -> None:
        self.canvas = Canvas(CANVAS_SIZE, CANVAS_SIZE)
        self.view = View(self.canvas, window_width, window_height)
        self.preview = Preview()
        self.dragging = False
        self.scroll_mode = False
        self.running = True
        self._drag_start = (-1, -1)
        self._last_mouse: tuple[int, int] | None = None
        self.tool: Tool = PenTool(self.canvas)
        self.set_tool(self.tool)

    def set_tool(self, tool: Tool) -> None:
        """Make ``tool`` the active tool and preview its shape."""
        self.tool = tool
        self.preview.shape = tool.shape

    def select(self, action: MenuAction | int) -> None:
        """Carry out a menu command; unknown commands are ignored."""
        try:
            action = MenuAction(action)
        except ValueError:
            return
        tool_class = _TOOL_CLASSES.get(action)
        if tool_class is not None:
            self.set_tool(tool_class(self.canvas))
        elif action is MenuAction.CLEAR_CANVAS:
            self.canvas.clear()
        elif action is MenuAction.TEST_SHAPE:
            self.canvas.draw_test_shape()
        elif action is MenuAction.RESET_VIEW:
            self.view.reset()
        elif isinstance(self.tool, StarTool):
            if action is MenuAction.INCREASE_POINTS:
                self.tool.increment_points()
            elif action is MenuAction.DECREASE_POINTS:
                self.tool.decrement_points()

    def key_down(self, key: str) -> None:
        """React to a typed character; escape stops the editor."""
        if key == ESCAPE:
            self.running = False
            return
        action = KEY_BINDINGS.get(key)
        if action is not None:
            self.select(action)

    def mouse_button(self, button: MouseButton, pressed: bool, x: int, y: int) -> None:
        """React to a mouse button being pressed or released at (x, y)."""
        if button is MouseButton.MIDDLE:
            self.scroll_mode = pressed
            self._last_mouse = None
        if button is not MouseButton.LEFT:
            return

        gx, gy = self.view.screen_to_grid(x, y)
        snapped = self.view.snap_screen_coords(x, y)

        if pressed:
            self.preview.enable()
            self.preview.set_start(*snapped)
            self.dragging = True
            self._drag_start = (gx, gy)
            if self.canvas.in_bounds(gx, gy):
                self.tool.draw_point(gx, gy)
        elif self.dragging:
            self.preview.disable()
            self.tool.draw_span(*self._drag_start, gx, gy)
            self.dragging = False

    def mouse_move(self, x: int, y: int) -> None:
        """React to the mouse moving to (x, y) with a button held."""
        if self.scroll_mode and self._last_mouse is not None:
            last_x, last_y = self._last_mouse
            tx, ty = self.view.translation
            self.view.translation = (tx + x - last_x, ty + y - last_y)

        gx, gy = self.view.screen_to_grid(x, y)
        snapped = self.view.snap_screen_coords(x, y)

        if self.canvas.in_bounds(gx, gy) and self.dragging and self.tool.draggable:
            self.tool.draw_point(gx, gy)

        self.preview.set_dest(*snapped)
        self._last_mouse = (x, y)

    def mouse_wheel(self, direction: int, x: int, y: int) -> None:
        """Zoom in (direction > 0) or out, keeping the point under (x, y) fixed."""
        old_zoom = self.view.zoom
        if direction > 0:
            zoom = old_zoom + ZOOM_STEP
        else:
            zoom = max(MIN_ZOOM, old_zoom - ZOOM_STEP)
        self.view.zoom = zoom

        factor = 1.0 - zoom / old_zoom
        tx, ty = self.view.translation
        self.view.translation = (tx + (x - tx) * factor, ty + (y - ty) * factor)

    def status_text(self) -> str:
        """Return the status line of the active tool."""
        return self.tool.describe()