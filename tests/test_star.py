import pytest

from pixelgrid.canvas import Canvas
from pixelgrid.star import StarTool
from pixelgrid.tools import ToolShape


@pytest.fixture
def canvas():
    return Canvas(40, 40)


def test_default_has_five_points(canvas):
    assert StarTool(canvas).num_points == 5


def test_increment_is_capped_at_twenty(canvas):
    tool = StarTool(canvas)
    for _ in range(30):
        tool.increment_points()
    assert tool.num_points == 20


def test_decrement_is_capped_at_three(canvas):
    tool = StarTool(canvas)
    for _ in range(10):
        tool.decrement_points()
    assert tool.num_points == 3


def test_increment_then_decrement_round_trip(canvas):
    tool = StarTool(canvas)
    tool.increment_points()
    assert tool.num_points == 6
    tool.decrement_points()
    assert tool.num_points == 5


def test_describe_mentions_point_count(canvas):
    tool = StarTool(canvas)
    tool.increment_points()
    assert "(6 points)" in tool.describe()
    assert tool.describe().startswith("Tool: Star")


def test_preview_shape_is_circle(canvas):
    assert StarTool(canvas).shape is ToolShape.CIRCLE


def test_zero_radius_draws_nothing(canvas):
    StarTool(canvas).draw_span(10, 10, 10, 10)
    assert list(canvas) == []


def test_top_tip_and_bottom_notch_are_set(canvas):
    StarTool(canvas).draw_span(20, 20, 20, 10)
    assert canvas.get_pixel(20, 10)
    assert canvas.get_pixel(20, 24)
    assert not canvas.get_pixel(20, 20)


def test_all_pixels_stay_within_outer_radius(canvas):
    StarTool(canvas).draw_span(20, 20, 28, 20)
    pixels = list(canvas)
    assert pixels
    assert all((x - 20) ** 2 + (y - 20) ** 2 <= 8 ** 2 + 2 for x, y in pixels)


def test_star_near_edge_is_clipped(canvas):
    StarTool(canvas).draw_span(0, 0, 0, 15)
    pixels = list(canvas)
    assert pixels
    assert all(canvas.in_bounds(x, y) for x, y in pixels)


def test_star_is_mirror_symmetric_for_even_points(canvas):
    tool = StarTool(canvas)
    tool.decrement_points()
    tool.decrement_points()
    for _ in range(3):
        tool.increment_points()
    assert tool.num_points == 6
    tool.draw_span(20, 20, 20, 8)
    pixels = set(canvas)
    assert pixels == {(40 - x, y) for x, y in pixels if 0 < 40 - x < 40} | {
        (x, y) for x, y in pixels if not 0 < 40 - x < 40
    }