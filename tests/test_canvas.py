import pytest

from pixelgrid.canvas import Canvas, OutOfCanvasError


def test_new_canvas_is_empty():
    canvas = Canvas(8, 6)
    assert set(canvas) == set()
    assert (canvas.width, canvas.height) == (8, 6)


def test_set_and_get_pixel():
    canvas = Canvas(8, 6)
    canvas.set_pixel(3, 4)
    assert canvas.get_pixel(3, 4) is True
    assert canvas.get_pixel(4, 3) is False
    assert set(canvas) == {(3, 4)}


def test_clear_pixel():
    canvas = Canvas(8, 6)
    canvas.set_pixel(7, 5)
    canvas.clear_pixel(7, 5)
    assert canvas.get_pixel(7, 5) is False


def test_clear_turns_everything_off():
    canvas = Canvas(5, 5)
    for i in range(5):
        canvas.set_pixel(i, i)
    canvas.clear()
    assert list(canvas) == []


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 6), (8, 6)])
@pytest.mark.parametrize("method", ["set_pixel", "clear_pixel", "get_pixel"])
def test_out_of_range_raises(method, x, y):
    canvas = Canvas(8, 6)
    with pytest.raises(OutOfCanvasError) as excinfo:
        getattr(canvas, method)(x, y)
    assert "out of range" in str(excinfo.value)
    assert set(canvas) == set()


def test_out_of_range_error_is_index_error():
    canvas = Canvas(2, 2)
    with pytest.raises(IndexError, match="out of range"):
        canvas.set_pixel(2, 0)


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 0, True), (7, 5, True), (-1, 0, False), (8, 5, False), (7, 6, False)],
)
def test_in_bounds(x, y, expected):
    assert Canvas(8, 6).in_bounds(x, y) is expected


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 4)


def test_iteration_is_row_major():
    canvas = Canvas(4, 4)
    canvas.set_pixel(3, 0)
    canvas.set_pixel(0, 2)
    canvas.set_pixel(1, 0)
    assert list(canvas) == [(1, 0), (3, 0), (0, 2)]


def test_test_shape_horizontal_lines():
    canvas = Canvas(100, 100)
    canvas.draw_test_shape()
    for x in range(1, 99):
        assert canvas.get_pixel(x, 1)
        assert canvas.get_pixel(x, 98)
    assert not canvas.get_pixel(0, 1)
    assert not canvas.get_pixel(99, 1)


def test_test_shape_diagonals_leave_gap_in_middle():
    canvas = Canvas(100, 100)
    canvas.draw_test_shape()
    assert canvas.get_pixel(49, 49)
    assert canvas.get_pixel(51, 49)
    assert not canvas.get_pixel(50, 49)
    assert not canvas.get_pixel(50, 50)


def test_test_shape_is_mirror_symmetric_in_rows():
    canvas = Canvas(40, 40)
    canvas.draw_test_shape()
    pixels = set(canvas)
    assert {(x, 39 - y) for x, y in pixels} == pixels


def test_test_shape_on_non_square_canvas_stays_inside():
    canvas = Canvas(30, 10)
    canvas.draw_test_shape()
    assert all(canvas.in_bounds(x, y) for x, y in canvas)
    assert canvas.get_pixel(1, 1)