"""Small geometric value types and colour helpers."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass, replace
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y, self.z)

    def with_z(self, z: float) -> Vec3:
        """Return a copy with the z component replaced."""
        return replace(self, z=z)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def nan_min(v1: float, v2: float) -> float:
    """Minimum of two values, ignoring NaN unless both are NaN."""
    if math.isnan(v1):
        return v2 if not math.isnan(v2) else math.nan
    if math.isnan(v2):
        return v1
    return min(v1, v2)


def nan_max(v1: float, v2: float) -> float:
    """Maximum of two values, ignoring NaN unless both are NaN."""
    if math.isnan(v1):
        return v2 if not math.isnan(v2) else math.nan
    if math.isnan(v2):
        return v1
    return max(v1, v2)


def color_to_vector(color: Sequence[int]) -> Vec3:
    """Convert an 8-bit (r, g, b[, a]) colour to a vector of unit components."""
    if len(color) not in (3, 4):
        raise ValueError(f"expected 3 or 4 colour components, got {len(color)}")
    components = tuple(color[:3])
    for component in components:
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range: {component}")
    red, green, blue = (component / 255.0 for component in components)
    return Vec3(red, green, blue)


def hsv_color_vector(hue: float, saturation: float, value: float) -> Vec3:
    """Convert an HSV colour with unit components to an RGB vector.

    A hue of -1 denotes an achromatic colour.
    """
    if not (0.0 <= hue <= 1.0 or hue == -1.0):
        raise ValueError(f"hue out of range: {hue}")
    if not 0.0 <= saturation <= 1.0:
        raise ValueError(f"saturation out of range: {saturation}")
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"value out of range: {value}")
    if hue == -1.0:
        return Vec3(value, value, value)
    return Vec3(*colorsys.hsv_to_rgb(hue, saturation, value))