# toolpathview

Vertex geometry for showing a CNC machine's surroundings: a probed
height map, the cutting tool, the coordinate origin and a selected
point. Each drawable works out the line, point and triangle vertices a
renderer needs. The package itself draws nothing. You pass its vertex
lists to whatever graphics backend you use.

## Installation

```
pip install toolpathview
```

The package has no runtime dependencies beyond the standard library.

## Modules

### `toolpathview.geometry`

- `Vec3(x, y, z)`: a frozen three-component vector. It supports `+`,
  `-`, unary `-`, and multiplication by a number, and it can be iterated
  as `(x, y, z)`. It also has `length()` and `with_z(z)`.
- `Rect(x, y, width, height)`: a frozen rectangle with `right` and
  `bottom` properties.
- `nan_min(v1, v2)` / `nan_max(v1, v2)`: minimum and maximum that ignore
  a NaN argument. They return NaN only when both arguments are NaN.
- `color_to_vector(color)`: turns an 8-bit `(r, g, b)` or `(r, g, b, a)`
  colour into a `Vec3` of values from 0 to 1. The alpha value is
  dropped. It raises `ValueError` if the colour has the wrong number of
  components or a component outside 0–255.
- `hsv_color_vector(hue, saturation, value)`: turns an HSV colour with
  components from 0 to 1 into an RGB `Vec3`.
  - A hue of `-1` gives a grey.
  - A value out of range raises `ValueError`.

### `toolpathview.interpolation`

- `cubic(p, x)`: Catmull-Rom interpolation between `p[1]` and `p[2]`.
- `bicubic(p, x, y)`: the same over a 4×4 patch.
- `bicubic_grid(border_rect, grid, x, y)`: interpolates a grid of
  heights at `(x, y)`.
  - The grid is a sequence of rows, spread evenly over `border_rect`.
  - It raises `ValueError` if the grid has fewer than 2 rows or 2
    columns, or if the rectangle has zero width or height.
- `bicubic_point(border_rect, grid, point)`: returns `point` with the
  interpolated height added to its z.

### `toolpathview.drawable`

- `SNAN`: the marker value `65536.0`. It means "not set" in a vertex's
  `start` attribute.
- `VertexData(position, color, start)`: one vertex.
- `ShaderDrawable`: the base class for all drawables.
  - It holds `triangles`, `lines` and `points` lists, plus `line_width`,
    `point_size` and `visible` attributes.
  - `update()` marks the geometry as stale.
  - `needs_update_geometry()` reports whether the geometry is stale.
  - `update_geometry()` calls `update_data()`. If that returns true, it
    refills the vertex buffer.
  - `vertices()` returns the buffer: triangles, then lines, then points.
  - `vertex_count()` counts the vertices in the three lists.
  - `sizes()`, `minimum_extremes()` and `maximum_extremes()` return zero
    vectors in the base class.
  - The base `update_data()` produces three 10-unit axis lines.

### `toolpathview.heightmap`

- `HeightMapBorderDrawer`: draws the outline of `border_rect` in red at
  z = 0.
- `HeightMapGridDrawer`: draws the probe grid from `model`, which is a
  sequence of rows of heights.
  - A NaN cell has not been probed yet. It is drawn as an orange
    vertical marker from `z_top` to `z_bottom`.
  - A probed cell becomes a blue point.
  - Blue lines join neighbouring cells.
  - Other settings: `border_rect`, `grid_size`, `point_size` (default 4).
- `HeightMapInterpolationDrawer`: draws the interpolated surface from
  `data`, which is also rows of heights, as grid lines over
  `border_rect`.
  - Vertices are coloured by height, from red (highest) to blue
    (lowest).
  - If every height is equal, the lines are black.

Setting `border_rect`, `grid_size`, `z_top`, `z_bottom`, `model` or
`data` marks a drawable stale. The one exception is `border_rect` on
`HeightMapInterpolationDrawer`, which does not.

### `toolpathview.drawers`

- `OriginDrawer`: draws red, green and blue arrows for the X, Y and Z
  axes, and a 2×2 square around the origin.
- `SelectionDrawer`: draws one point at `end_position`.
  - The point is drawn in `color` (an 8-bit tuple) at size `point_size`
    (default 6).
  - It also has a `start_position` attribute.
- `ToolDrawer`: draws the tool as a wire-frame cylinder.
  - Settings: `tool_diameter` (default 3), `tool_length` (default 15),
    `tool_position`, `rotation_angle`, `tool_angle` and `color`.
  - A `tool_angle` strictly between 0 and 180 gives a conical tip. Its
    height is shown in `end_length`, and `tool_length` is raised to at
    least that height.
  - With no tip, it also draws a circle at z = 0.
  - `rotate(angle)` turns the tool by `angle` degrees.
- `normalize_angle(angle)`: brings an angle in degrees into [0, 360].
- `create_circle(center, radius, arcs, color)`: returns line-segment
  vertex pairs around a circle. It raises `ValueError` if `arcs < 1`.

## Examples

Correct a point's z from a probed height map:

```python
from toolpathview.geometry import Rect, Vec3
from toolpathview.interpolation import bicubic_point

border = Rect(0.0, 0.0, 10.0, 10.0)
heights = [
    [0.0, 0.1, 0.2],
    [0.1, 0.2, 0.3],
    [0.2, 0.3, 0.4],
]
corrected = bicubic_point(border, heights, Vec3(5.0, 5.0, -1.0))
```

Build the vertices for the tool:

```python
from toolpathview.drawers import ToolDrawer

tool = ToolDrawer()
tool.color = (255, 153, 0)
tool.rotate(45)
if tool.needs_update_geometry():
    tool.update_geometry()
vertices = tool.vertices()
print(tool.vertex_count())
```

## What it does not do

- It does not render anything or open a window. It produces vertex lists
  only.
- It does not read or parse G-code programs.
- It does not talk to a machine or a serial port.
- It does not probe, load or save height maps. Heights are passed in as
  plain nested sequences.

## Running the tests

```
pip install toolpathview[test]
pytest
```