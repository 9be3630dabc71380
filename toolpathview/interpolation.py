"""Cubic and bicubic interpolation over height-map grids."""

from __future__ import annotations

import math
from typing import Sequence

from toolpathview.geometry import Rect, Vec3

Grid = Sequence[Sequence[float]]


def cubic(p: Sequence[float], x: float) -> float:
    """Catmull-Rom interpolation between p[1] and p[2] at fraction x."""
    p0, p1, p2, p3 = p
    return p1 + 0.5 * x * (
        p2 - p0 + x * (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3 + x * (3.0 * (p1 - p2) + p3 - p0))
    )


def bicubic(p: Sequence[Sequence[float]], x: float, y: float) -> float:
    """Bicubic interpolation over a 4x4 patch of rows."""
    return cubic([cubic(row, x) for row in p], y)


def _cell(grid: Grid, row: int, col: int) -> float:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return float(grid[row][col])
    return 0.0


def bicubic_grid(border_rect: Rect, grid: Grid, x: float, y: float) -> float:
    """Interpolate a grid of heights spread evenly over a rectangle at (x, y).

    The grid is a sequence of rows; cells outside it read as zero.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if rows < 2 or cols < 2:
        raise ValueError("height-map grid needs at least 2 rows and 2 columns")

    step_x = border_rect.width / (cols - 1)
    step_y = border_rect.height / (rows - 1)
    if step_x == 0 or step_y == 0:
        raise ValueError("border rectangle has zero width or height")

    x -= border_rect.x
    y -= border_rect.y

    ix = min(math.trunc(x / step_x), cols - 2)
    iy = min(math.trunc(y / step_y), rows - 2)

    col_indices = (ix - 1 if ix > 0 else ix, ix, ix + 1, ix + 2 if ix < cols - 2 else ix + 1)
    row_indices = (iy - 1 if iy > 0 else iy, iy, iy + 1, iy + 2 if iy < rows - 2 else iy + 1)

    patch = [[_cell(grid, r, c) for c in col_indices] for r in row_indices]
    return bicubic(patch, x / step_x - ix, y / step_y - iy)


def bicubic_point(border_rect: Rect, grid: Grid, point: Vec3) -> Vec3:
    """Shift a point's z by the interpolated height at its x and y."""
    return Vec3(point.x, point.y, point.z + bicubic_grid(border_rect, grid, point.x, point.y))