# pixelgrid

pixelgrid is a small raster editor for trying out classic rasterisation
algorithms on a grid of cells. You draw on a 100 × 100 canvas of on/off
pixels with a choice of tools:

- a pen that sets single cells,
- lines rasterised with DDA or Bresenham,
- circles rasterised with Bresenham,
- rectangle outlines,
- stars with 3 to 20 points (5 to start with),
- recursive, queue-based and scan-line flood fills.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Running

```
pixelgrid
```

The window opens at 620 × 640 pixels; `--width` and `--height` choose another
size, and the window can be resized while it runs.

Left-click to draw. The pen also draws while you drag with the left button
held. Tools that take two points (lines, circles, rectangles, stars) are drawn
by pressing the left button at one point and releasing it at another; circles
and stars are centred on the first point and reach the second. A green preview
follows the mouse while you drag. The fill tools fill the 4-connected region of
cleared cells around the cell you click. Hold the middle button and move the
mouse to pan, and turn the wheel to zoom around the cursor.

Keys:

| Key              | Action                          |
|------------------|---------------------------------|
| `p`              | pen                             |
| `d`              | line (DDA)                      |
| `b`              | line (Bresenham)                |
| `o`              | circle (Bresenham)              |
| `s`              | rectangle                       |
| `*`              | star                            |
| `+` / `-`        | more / fewer star points        |
| `r`              | recursive fill                  |
| `f`              | non-recursive fill              |
| `l`              | line fill                       |
| `c` or space     | clear the canvas                |
| `t` or Return    | draw the fill test shape        |
| Backspace        | reset pan and zoom              |
| Esc              | quit                            |

The bottom line of the window shows the active tool.

## Using the library

The drawing logic works without a window:

```python
from pixelgrid.canvas import Canvas
from pixelgrid.tools import BresenhamCircleTool
from pixelgrid.fill import NonRecursiveFillTool

canvas = Canvas(20, 20)
BresenhamCircleTool(canvas).draw_span(10, 10, 15, 10)
NonRecursiveFillTool(canvas).draw_point(10, 10)
print(canvas.get_pixel(10, 10))  # True
print(sorted(canvas)[:3])        # positions of the pixels that are on
```

- `pixelgrid.canvas.Canvas` stores the pixels. `set_pixel`, `clear_pixel` and
  `get_pixel` raise `OutOfCanvasError` (an `IndexError`) for positions outside
  the canvas; `in_bounds` checks a position first. Iterating a canvas yields
  the `(x, y)` of every pixel that is on.
- The tools in `pixelgrid.tools`, `pixelgrid.star` and `pixelgrid.fill` take a
  canvas and offer `draw_point(x, y)`, `draw_span(x0, y0, x1, y1)` and
  `describe()`. Shapes that reach past the edge of the canvas are clipped.
- `pixelgrid.view.View` converts window positions to cells under pan and zoom,
  and `pixelgrid.view.Preview` gives the outline of a shape being dragged.
- `pixelgrid.app.Application` holds the whole editor state (canvas, view,
  preview and current tool) and accepts key, mouse and wheel events, so it can
  be driven from other front ends as well as from `pixelgrid.gui`.

## What it does not do

The canvas lives only in memory: there is no saving or loading of images, no
undo, and the canvas size is fixed at 100 × 100 in the editor.

## Tests

```
pip install .[test]
pytest
```