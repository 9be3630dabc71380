"""Drawables for the coordinate origin, the selected point and the cutting tool."""

from __future__ import annotations

import math
from typing import Sequence

from toolpathview.drawable import SNAN, ShaderDrawable, VertexData
from toolpathview.geometry import Vec3, color_to_vector

Color = Sequence[int]

_NO_START = Vec3(SNAN, SNAN, SNAN)
_RED = Vec3(1.0, 0.0, 0.0)
_GREEN = Vec3(0.0, 1.0, 0.0)
_BLUE = Vec3(0.0, 0.0, 1.0)


def normalize_angle(angle: float) -> float:
    """Bring an angle in degrees into the range [0, 360]."""
    if angle < 0:
        angle += 360 * math.ceil(-angle / 360)
    if angle > 360:
        angle -= 360 * math.ceil((angle - 360) / 360)
    return angle


def create_circle(center: Vec3, radius: float, arcs: int, color: Vec3) -> list[VertexData]:
    """Line-segment vertex pairs approximating a circle in the plane z = center.z."""
    if arcs < 1:
        raise ValueError(f"a circle needs at least one arc, got {arcs}")
    positions = [
        Vec3(
            center.x + radius * math.cos(2 * math.pi * i / arcs),
            center.y + radius * math.sin(2 * math.pi * i / arcs),
            center.z,
        )
        for i in range(arcs + 1)
    ]
    if arcs == 1:
        sequence = [positions[0], positions[0], positions[1]]
    else:
        sequence = [p for a, b in zip(positions, positions[1:]) for p in (a, b)]
    return [VertexData(position, color, _NO_START) for position in sequence]


def _axis_arrow(direction: Vec3, side: Vec3, color: Vec3) -> list[VertexData]:
    tip = direction * 10
    barb_base = direction * 8
    positions = [
        Vec3(),
        direction * 9,
        tip,
        barb_base + side * 0.5,
        barb_base + side * 0.5,
        barb_base - side * 0.5,
        barb_base - side * 0.5,
        tip,
    ]
    return [VertexData(p, color, _NO_START) for p in positions]


class OriginDrawer(ShaderDrawable):
    """Draws the X, Y and Z axis arrows and a 2x2 square around the origin."""

    def update_data(self) -> bool:
        square = [Vec3(1, 1, 0), Vec3(-1, 1, 0), Vec3(-1, -1, 0), Vec3(1, -1, 0)]
        self.lines = [
            *_axis_arrow(Vec3(1, 0, 0), Vec3(0, 1, 0), _RED),
            *_axis_arrow(Vec3(0, 1, 0), Vec3(1, 0, 0), _GREEN),
            *_axis_arrow(Vec3(0, 0, 1), Vec3(1, 0, 0), _BLUE),
            *(
                VertexData(p, _RED, _NO_START)
                for a, b in zip(square, square[1:] + square[:1])
                for p in (a, b)
            ),
        ]
        return True


class SelectionDrawer(ShaderDrawable):
    """Draws a single point marking the end of the selected segment."""

    def __init__(self) -> None:
        super().__init__()
        self.start_position = Vec3()
        self.end_position = Vec3(SNAN, SNAN, SNAN)
        self.color: Color = (0, 0, 0)
        self.point_size = 6.0

    def update_data(self) -> bool:
        self.points = [
            VertexData(
                self.end_position,
                color_to_vector(self.color),
                Vec3(SNAN, SNAN, self.point_size),
            )
        ]
        return True


class ToolDrawer(ShaderDrawable):
    """Draws the cutting tool as a wire-frame cylinder with an optional cone tip."""

    def __init__(self) -> None:
        super().__init__()
        self._tool_diameter = 3.0
        self._tool_length = 15.0
        self._end_length = 0.0
        self._tool_position = Vec3()
        self._rotation_angle = 0.0
        self._tool_angle = 0.0
        self.color: Color = (0, 0, 0)

    @property
    def tool_diameter(self) -> float:
        return self._tool_diameter

    @tool_diameter.setter
    def tool_diameter(self, value: float) -> None:
        if value != self._tool_diameter:
            self._tool_diameter = value
            self.update()

    @property
    def tool_length(self) -> float:
        return self._tool_length

    @tool_length.setter
    def tool_length(self, value: float) -> None:
        if value != self._tool_length:
            self._tool_length = value
            self.update()

    @property
    def tool_position(self) -> Vec3:
        return self._tool_position

    @tool_position.setter
    def tool_position(self, value: Vec3) -> None:
        if value != self._tool_position:
            self._tool_position = value
            self.update()

    @property
    def rotation_angle(self) -> float:
        return self._rotation_angle

    @rotation_angle.setter
    def rotation_angle(self, value: float) -> None:
        if value != self._rotation_angle:
            self._rotation_angle = value
            self.update()

    @property
    def tool_angle(self) -> float:
        return self._tool_angle

    @tool_angle.setter
    def tool_angle(self, value: float) -> None:
        if value == self._tool_angle:
            return
        self._tool_angle = value
        if 0 < value < 180:
            self._end_length = self._tool_diameter / 2 / math.tan(value / 180 * math.pi / 2)
        else:
            self._end_length = 0.0
        if self._tool_length < self._end_length:
            self._tool_length = self._end_length
        self.update()

    @property
    def end_length(self) -> float:
        """Height of the conical tip, derived from the tool angle."""
        return self._end_length

    def rotate(self, angle: float) -> None:
        """Turn the tool by an angle in degrees."""
        self.rotation_angle = normalize_angle(self._rotation_angle + angle)

    def update_data(self) -> bool:
        arcs = 4
        color = color_to_vector(self.color)
        pos = self._tool_position
        radius = self._tool_diameter / 2
        tip_z = pos.z + self._end_length
        top_z = pos.z + self._tool_length

        positions: list[Vec3] = []
        for i in range(arcs):
            angle = self._rotation_angle / 180 * math.pi + (2 * math.pi / arcs) * i
            x = pos.x + radius * math.cos(angle)
            y = pos.y + radius * math.sin(angle)
            positions += [
                Vec3(x, y, tip_z),
                Vec3(x, y, top_z),
                Vec3(pos.x, pos.y, pos.z),
                Vec3(x, y, tip_z),
                Vec3(pos.x, pos.y, top_z),
                Vec3(x, y, top_z),
                Vec3(pos.x, pos.y, 0),
                Vec3(x, y, 0),
            ]

        self.points = []
        self.lines = [VertexData(p, color, _NO_START) for p in positions]
        self.lines += create_circle(Vec3(pos.x, pos.y, tip_z), radius, 20, color)
        self.lines += create_circle(Vec3(pos.x, pos.y, top_z), radius, 20, color)
        if self._end_length == 0:
            self.lines += create_circle(Vec3(pos.x, pos.y, 0), radius, 20, color)
        return True