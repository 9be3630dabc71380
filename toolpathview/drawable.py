"""Vertex containers shared by all scene drawables."""

from __future__ import annotations

from dataclasses import dataclass

from toolpathview.geometry import Vec3

SNAN = 65536.0
"""Marker value meaning "not set" in vertex start attributes."""


@dataclass
class VertexData:
    """One vertex: position, colour and line-start attribute."""

    position: Vec3 = Vec3()
    color: Vec3 = Vec3()
    start: Vec3 = Vec3()


class ShaderDrawable:
    """Base for objects that build triangles, lines and points for display."""

    def __init__(self) -> None:
        self.line_width = 1.0
        self.point_size = 1.0
        self.visible = True
        self.triangles: list[VertexData] = []
        self.lines: list[VertexData] = []
        self.points: list[VertexData] = []
        self._buffer: list[VertexData] = []
        self._needs_update = True

    def update(self) -> None:
        """Mark the geometry as stale."""
        self._needs_update = True

    def needs_update_geometry(self) -> bool:
        return self._needs_update

    def update_data(self) -> bool:
        """Rebuild the vertex lists; return True if the buffer must be refilled."""
        self.lines = [
            VertexData(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(SNAN, 0, 0)),
            VertexData(Vec3(10, 0, 0), Vec3(1, 0, 0), Vec3(SNAN, 0, 0)),
            VertexData(Vec3(0, 0, 0), Vec3(0, 1, 0), Vec3(SNAN, 0, 0)),
            VertexData(Vec3(0, 10, 0), Vec3(0, 1, 0), Vec3(SNAN, 0, 0)),
            VertexData(Vec3(0, 0, 0), Vec3(0, 0, 1), Vec3(SNAN, 0, 0)),
            VertexData(Vec3(0, 0, 10), Vec3(0, 0, 1), Vec3(SNAN, 0, 0)),
        ]
        return True

    def update_geometry(self) -> bool:
        """Refresh the vertex buffer from the lists; return whether it was refilled."""
        refilled = self.update_data()
        if refilled:
            self._buffer = [*self.triangles, *self.lines, *self.points]
        self._needs_update = False
        return refilled

    def vertices(self) -> list[VertexData]:
        """The vertex buffer: triangles, then lines, then points."""
        return list(self._buffer)

    def sizes(self) -> Vec3:
        return Vec3()

    def minimum_extremes(self) -> Vec3:
        return Vec3()

    def maximum_extremes(self) -> Vec3:
        return Vec3()

    def vertex_count(self) -> int:
        return len(self.lines) + len(self.points) + len(self.triangles)