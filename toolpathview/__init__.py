"""Vertex geometry for CNC tool, origin, selection and height-map drawables."""

__version__ = "1.1.9"

__all__ = ["geometry", "interpolation", "drawable", "heightmap", "drawers"]