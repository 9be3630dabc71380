[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolpathview"
version = "1.1.9"
description = "Vertex geometry for CNC toolpath visualisation: height-map, tool, origin and selection drawables with bicubic height-map interpolation."
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "heightmap", "interpolation", "bicubic", "visualization", "geometry", "vertices"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toolpathview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
