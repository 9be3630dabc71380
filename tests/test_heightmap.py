import math

import pytest

from toolpathview.drawable import SNAN
from toolpathview.geometry import Rect, Vec3
from toolpathview.heightmap import (
    HeightMapBorderDrawer,
    HeightMapGridDrawer,
    HeightMapInterpolationDrawer,
)


def test_border_setter_marks_update():
    drawer = HeightMapBorderDrawer()
    drawer.update_geometry()
    assert drawer.needs_update_geometry() is False
    drawer.border_rect = Rect(1, 2, 3, 4)
    assert drawer.needs_update_geometry() is True
    assert drawer.border_rect == Rect(1, 2, 3, 4)


def test_border_lines_form_closed_rectangle():
    drawer = HeightMapBorderDrawer()
    drawer.border_rect = Rect(1, 2, 3, 4)
    assert drawer.update_geometry() is True
    positions = [v.position for v in drawer.lines]
    assert positions == [
        Vec3(1, 2, 0), Vec3(1, 6, 0),
        Vec3(1, 6, 0), Vec3(4, 6, 0),
        Vec3(4, 6, 0), Vec3(4, 2, 0),
        Vec3(4, 2, 0), Vec3(1, 2, 0),
    ]
    assert all(v.color == Vec3(1.0, 0.0, 0.0) for v in drawer.lines)
    assert all(v.start == Vec3(SNAN, SNAN, SNAN) for v in drawer.lines)
    assert len(drawer.vertices()) == 8


def _grid_drawer():
    drawer = HeightMapGridDrawer()
    drawer.border_rect = Rect(0, 0, 10, 20)
    drawer.z_top = 5
    drawer.z_bottom = -1
    drawer.model = [[0.0, 1.0], [2.0, math.nan]]
    drawer.update_geometry()
    return drawer


def test_grid_points_for_probed_cells():
    drawer = _grid_drawer()
    assert [p.position for p in drawer.points] == [Vec3(0, 0, 0), Vec3(10, 0, 1), Vec3(0, 20, 2)]
    assert all(p.color == Vec3(0.0, 0.0, 1.0) for p in drawer.points)
    assert all(p.start == Vec3(SNAN, SNAN, 4.0) for p in drawer.points)


def test_grid_lines_include_unprobed_marker_and_links():
    drawer = _grid_drawer()
    positions = [v.position for v in drawer.lines]
    assert positions == [
        Vec3(10, 20, 5), Vec3(10, 20, -1),
        Vec3(0, 0, 0), Vec3(10, 0, 1),
        Vec3(0, 0, 0), Vec3(0, 20, 2),
    ]
    assert drawer.lines[0].color == Vec3(1.0, 0.6, 0.0)
    assert drawer.lines[2].color == Vec3(0.0, 0.0, 1.0)
    assert drawer.vertex_count() == 9


def test_grid_without_model_is_empty():
    drawer = HeightMapGridDrawer()
    assert drawer.update_geometry() is True
    assert drawer.lines == [] and drawer.points == []


def test_grid_single_column_has_zero_step():
    drawer = HeightMapGridDrawer()
    drawer.border_rect = Rect(3, 0, 10, 10)
    drawer.model = [[1.0], [2.0]]
    drawer.update_geometry()
    assert all(p.position.x == 3 for p in drawer.points)
    assert [v.position for v in drawer.lines] == [Vec3(3, 0, 1.0), Vec3(3, 10, 2.0)]


@pytest.mark.parametrize("attr, value", [("z_top", 3.0), ("z_bottom", -2.0), ("grid_size", (1.0, 2.0))])
def test_grid_setters_mark_update(attr, value):
    drawer = HeightMapGridDrawer()
    drawer.update_geometry()
    setattr(drawer, attr, value)
    assert drawer.needs_update_geometry() is True
    assert getattr(drawer, attr) == value


def test_interpolation_without_data_clears_lines():
    drawer = HeightMapInterpolationDrawer()
    drawer.lines = [object()]
    assert drawer.update_data() is True
    assert drawer.lines == []


def test_interpolation_lines_and_colors():
    drawer = HeightMapInterpolationDrawer()
    drawer.border_rect = Rect(0, 0, 4, 4)
    drawer.data = [[0.0, 1.0], [2.0, 3.0]]
    drawer.update_geometry()
    positions = [v.position for v in drawer.lines]
    assert positions == [
        Vec3(0, 0, 0), Vec3(4, 0, 1),
        Vec3(0, 4, 2), Vec3(4, 4, 3),
        Vec3(0, 0, 0), Vec3(0, 4, 2),
        Vec3(4, 0, 1), Vec3(4, 4, 3),
    ]
    highest = next(v for v in drawer.lines if v.position.z == 3)
    assert highest.color == Vec3(1.0, 0.0, 0.0)
    lowest = drawer.lines[0].color
    assert lowest.z == pytest.approx(1.0)
    assert lowest.y == pytest.approx(0.0)
    assert lowest.x < highest.color.x
    assert all(v.start == Vec3(SNAN, SNAN, SNAN) for v in drawer.lines)


def test_interpolation_flat_surface_is_black():
    drawer = HeightMapInterpolationDrawer()
    drawer.border_rect = Rect(0, 0, 1, 1)
    drawer.data = [[2.0, 2.0], [2.0, 2.0]]
    drawer.update_geometry()
    assert len(drawer.lines) == 8
    assert all(v.color == Vec3(0.0, 0.0, 0.0) for v in drawer.lines)


def test_interpolation_border_setter_does_not_mark_update():
    drawer = HeightMapInterpolationDrawer()
    drawer.update_geometry()
    drawer.border_rect = Rect(0, 0, 5, 5)
    assert drawer.needs_update_geometry() is False
    drawer.data = [[1.0]]
    assert drawer.needs_update_geometry() is True