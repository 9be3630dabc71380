import math

import pytest

from toolpathview.geometry import (
    Rect,
    Vec3,
    color_to_vector,
    hsv_color_vector,
    nan_max,
    nan_min,
)


def test_vec3_add_and_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.0)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_vec3_length_matches_components():
    v = Vec3(3.0, 4.0, 12.0)
    assert v.length() == pytest.approx(math.sqrt(v.x**2 + v.y**2 + v.z**2))


def test_vec3_scalar_multiplication_and_negation():
    v = Vec3(1.0, 2.0, 3.0)
    assert 2 * v == v + v
    assert -v + v == Vec3()


def test_vec3_with_z_keeps_xy():
    v = Vec3(1.0, 2.0, 3.0).with_z(0.0)
    assert tuple(v) == (1.0, 2.0, 0.0)


def test_rect_right_and_bottom():
    r = Rect(2.0, 3.0, 10.0, 20.0)
    assert r.right == r.x + r.width
    assert r.bottom == r.y + r.height


def test_nan_min_and_max_regular_values():
    assert nan_min(1.0, 2.0) == 1.0
    assert nan_max(1.0, 2.0) == 2.0


@pytest.mark.parametrize("func", [nan_min, nan_max])
def test_nan_is_ignored(func):
    assert func(math.nan, 3.0) == 3.0
    assert func(3.0, math.nan) == 3.0
    assert math.isnan(func(math.nan, math.nan))


def test_color_to_vector_extremes():
    assert color_to_vector((255, 0, 255)) == Vec3(1.0, 0.0, 1.0)
    assert color_to_vector((0, 0, 0, 255)) == Vec3()


def test_color_to_vector_component_scale():
    v = color_to_vector((51, 102, 204))
    assert v.x * 255 == pytest.approx(51)
    assert v.y * 255 == pytest.approx(102)
    assert v.z * 255 == pytest.approx(204)


@pytest.mark.parametrize("color", [(256, 0, 0), (-1, 0, 0), (1, 2)])
def test_color_to_vector_rejects_bad_input(color):
    with pytest.raises(ValueError):
        color_to_vector(color)


def test_hsv_red_at_hue_zero_and_one():
    assert hsv_color_vector(0.0, 1.0, 1.0) == Vec3(1.0, 0.0, 0.0)
    assert hsv_color_vector(1.0, 1.0, 1.0) == Vec3(1.0, 0.0, 0.0)


def test_hsv_achromatic():
    assert hsv_color_vector(-1.0, 1.0, 0.25) == Vec3(0.25, 0.25, 0.25)


def test_hsv_zero_saturation_is_gray():
    v = hsv_color_vector(0.4, 0.0, 0.5)
    assert v.x == v.y == v.z == 0.5


@pytest.mark.parametrize(
    "hsv", [(1.5, 1.0, 1.0), (math.nan, 1.0, 1.0), (0.5, 2.0, 1.0), (0.5, 1.0, -0.1)]
)
def test_hsv_rejects_out_of_range(hsv):
    with pytest.raises(ValueError):
        hsv_color_vector(*hsv)