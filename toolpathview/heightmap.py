"""Drawables for the height-map border, probe grid and interpolated surface."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from toolpathview.drawable import SNAN, ShaderDrawable, VertexData
from toolpathview.geometry import Rect, Vec3, hsv_color_vector, nan_max, nan_min

Heights = Sequence[Sequence[float]]

_BORDER_COLOR = Vec3(1.0, 0.0, 0.0)
_UNPROBED_COLOR = Vec3(1.0, 0.6, 0.0)
_PROBED_COLOR = Vec3(0.0, 0.0, 1.0)
_NO_START = Vec3(SNAN, SNAN, SNAN)


def _grid_steps(rect: Rect, rows: int, cols: int) -> tuple[float, float]:
    step_x = rect.width / (cols - 1) if cols > 1 else 0.0
    step_y = rect.height / (rows - 1) if rows > 1 else 0.0
    return step_x, step_y


class HeightMapBorderDrawer(ShaderDrawable):
    """Draws the rectangle that bounds the height map."""

    def __init__(self) -> None:
        super().__init__()
        self._border_rect = Rect()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, rect: Rect) -> None:
        self._border_rect = rect
        self.update()

    def update_data(self) -> bool:
        r = self._border_rect
        corners = [
            Vec3(r.x, r.y, 0),
            Vec3(r.x, r.bottom, 0),
            Vec3(r.right, r.bottom, 0),
            Vec3(r.right, r.y, 0),
        ]
        self.lines = [
            VertexData(position, _BORDER_COLOR, _NO_START)
            for a, b in zip(corners, corners[1:] + corners[:1])
            for position in (a, b)
        ]
        return True


class HeightMapGridDrawer(ShaderDrawable):
    """Draws the probe grid: probed heights as points, unprobed cells as markers.

    The model is a sequence of rows of heights; NaN marks a cell not yet probed.
    """

    def __init__(self) -> None:
        super().__init__()
        self.point_size = 4.0
        self._grid_size: tuple[float, float] = (0.0, 0.0)
        self._border_rect = Rect()
        self._z_top = 0.0
        self._z_bottom = 0.0
        self._model: Optional[Heights] = None

    @property
    def grid_size(self) -> tuple[float, float]:
        return self._grid_size

    @grid_size.setter
    def grid_size(self, size: tuple[float, float]) -> None:
        self._grid_size = size
        self.update()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, rect: Rect) -> None:
        self._border_rect = rect
        self.update()

    @property
    def z_top(self) -> float:
        return self._z_top

    @z_top.setter
    def z_top(self, value: float) -> None:
        self._z_top = value
        self.update()

    @property
    def z_bottom(self) -> float:
        return self._z_bottom

    @z_bottom.setter
    def z_bottom(self, value: float) -> None:
        self._z_bottom = value
        self.update()

    @property
    def model(self) -> Optional[Heights]:
        return self._model

    @model.setter
    def model(self, model: Optional[Heights]) -> None:
        self._model = model
        self.update()

    def update_data(self) -> bool:
        self.lines = []
        self.points = []

        grid = [[float(v) for v in row] for row in (self._model or [])]
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        rect = self._border_rect
        step_x, step_y = _grid_steps(rect, rows, cols)
        start = Vec3(SNAN, SNAN, self.point_size)

        def at(i: int, j: int, z: float) -> Vec3:
            return Vec3(rect.x + step_x * j, rect.y + step_y * i, z)

        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                if math.isnan(value):
                    self.lines.append(VertexData(at(i, j, self._z_top), _UNPROBED_COLOR, start))
                    self.lines.append(VertexData(at(i, j, self._z_bottom), _UNPROBED_COLOR, start))
                else:
                    self.points.append(VertexData(at(i, j, value), _PROBED_COLOR, start))

        for i, row in enumerate(grid):
            for j in range(1, cols):
                if math.isnan(row[j]):
                    continue
                self.lines.append(VertexData(at(i, j - 1, row[j - 1]), _PROBED_COLOR, start))
                self.lines.append(VertexData(at(i, j, row[j]), _PROBED_COLOR, start))

        for j in range(cols):
            for i in range(1, rows):
                if math.isnan(grid[i][j]):
                    continue
                self.lines.append(VertexData(at(i - 1, j, grid[i - 1][j]), _PROBED_COLOR, start))
                self.lines.append(VertexData(at(i, j, grid[i][j]), _PROBED_COLOR, start))

        return True


def _height_color(value: float, low: float, high: float) -> Vec3:
    """Colour from red (highest) to blue (lowest); undefined hues give black."""
    try:
        return hsv_color_vector(0.67 * (high - value) / (high - low), 1.0, 1.0)
    except (ValueError, ZeroDivisionError):
        return Vec3(0.0, 0.0, 0.0)


class HeightMapInterpolationDrawer(ShaderDrawable):
    """Draws the interpolated height-map surface as coloured grid lines."""

    def __init__(self) -> None:
        super().__init__()
        self._border_rect = Rect()
        self._data: Optional[Heights] = None

    @property
    def data(self) -> Optional[Heights]:
        return self._data

    @data.setter
    def data(self, data: Optional[Heights]) -> None:
        self._data = data
        self.update()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, rect: Rect) -> None:
        self._border_rect = rect

    def update_data(self) -> bool:
        self.lines = []
        if not self._data:
            return True

        grid = [[float(v) for v in row] for row in self._data]
        rows = len(grid)
        cols = len(grid[0])
        rect = self._border_rect
        step_x, step_y = _grid_steps(rect, rows, cols)

        low = high = grid[0][0]
        for row in grid:
            for value in row[:cols]:
                low = nan_min(low, value)
                high = nan_max(high, value)

        def vertex(i: int, j: int) -> VertexData:
            value = grid[i][j]
            return VertexData(
                Vec3(rect.x + step_x * j, rect.y + step_y * i, value),
                _height_color(value, low, high),
                _NO_START,
            )

        for i in range(rows):
            for j in range(1, cols):
                if math.isnan(grid[i][j]):
                    continue
                self.lines.append(vertex(i, j - 1))
                self.lines.append(vertex(i, j))

        for j in range(cols):
            for i in range(1, rows):
                if math.isnan(grid[i][j]):
                    continue
                self.lines.append(vertex(i - 1, j))
                self.lines.append(vertex(i, j))

        return True