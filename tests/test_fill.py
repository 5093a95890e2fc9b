import pytest

from pixelgrid.canvas import Canvas, OutOfCanvasError
from pixelgrid.fill import LineFillTool, NonRecursiveFillTool, RecursiveFillTool
from pixelgrid.tools import RectangleTool, ToolShape

FILL_TOOLS = [RecursiveFillTool, NonRecursiveFillTool, LineFillTool]


def boxed_canvas():
    canvas = Canvas(12, 12)
    RectangleTool(canvas).draw_span(2, 2, 8, 7)
    return canvas


@pytest.mark.parametrize("tool_cls", FILL_TOOLS)
def test_fill_empty_canvas_sets_everything(tool_cls):
    canvas = Canvas(7, 5)
    tool_cls(canvas).draw_point(3, 2)
    assert len(list(canvas)) == 7 * 5


@pytest.mark.parametrize("tool_cls", FILL_TOOLS)
def test_fill_inside_box_stays_inside(tool_cls):
    canvas = boxed_canvas()
    tool_cls(canvas).draw_point(5, 5)
    filled = set(canvas)
    interior = {(x, y) for x in range(3, 8) for y in range(3, 7)}
    assert interior <= filled
    assert not canvas.get_pixel(0, 0)
    assert not canvas.get_pixel(10, 10)
    assert all(2 <= x <= 8 and 2 <= y <= 7 for x, y in filled)


@pytest.mark.parametrize("tool_cls", FILL_TOOLS)
def test_fill_outside_box_leaves_interior(tool_cls):
    canvas = boxed_canvas()
    tool_cls(canvas).draw_point(0, 0)
    assert not canvas.get_pixel(5, 5)
    assert canvas.get_pixel(11, 11)


@pytest.mark.parametrize("tool_cls", FILL_TOOLS)
def test_fill_outside_raises(tool_cls):
    with pytest.raises(OutOfCanvasError):
        tool_cls(Canvas(4, 4)).draw_point(4, 0)


@pytest.mark.parametrize("tool_cls", FILL_TOOLS)
def test_fill_tools_are_not_draggable(tool_cls):
    tool = tool_cls(Canvas(2, 2))
    assert tool.draggable is False
    assert tool.shape is ToolShape.NONE


def test_all_fills_agree_on_test_shape():
    results = []
    for tool_cls in FILL_TOOLS:
        canvas = Canvas(30, 30)
        canvas.draw_test_shape()
        tool_cls(canvas).draw_point(15, 5)
        results.append(set(canvas))
    assert results[0] == results[1] == results[2]


def test_recursive_fill_handles_large_canvas():
    canvas = Canvas(100, 100)
    RecursiveFillTool(canvas).draw_point(50, 50)
    assert len(list(canvas)) == 100 * 100


def test_recursive_fill_from_set_pixel_still_floods():
    canvas = Canvas(5, 5)
    canvas.set_pixel(2, 2)
    RecursiveFillTool(canvas).draw_point(2, 2)
    assert len(list(canvas)) == 25


@pytest.mark.parametrize("tool_cls", [NonRecursiveFillTool, LineFillTool])
def test_other_fills_from_set_pixel_do_nothing(tool_cls):
    canvas = Canvas(5, 5)
    canvas.set_pixel(2, 2)
    tool_cls(canvas).draw_point(2, 2)
    assert list(canvas) == [(2, 2)]


def test_line_fill_handles_concave_region():
    canvas = Canvas(9, 9)
    for y in range(0, 7):
        canvas.set_pixel(4, y)
    LineFillTool(canvas).draw_point(0, 0)
    assert canvas.get_pixel(8, 0)
    assert len(list(canvas)) == 81


def test_descriptions():
    canvas = Canvas(1, 1)
    assert RecursiveFillTool(canvas).describe() == "Tool: Recursive Fill (click to fill)"
    assert NonRecursiveFillTool(canvas).describe() == "Tool: Non-Recursive Fill (click to fill)"
    assert LineFillTool(canvas).describe() == "Tool: Line Fill (click to fill)"