[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routeart"
version = "0.1.0"
description = "Snap traces to street segments, draw them as SVG, and place drawings on a map as GPX tracks"
requires-python = ">=3.10"
dependencies = []
keywords = ["gis", "map-matching", "gpx", "svg", "route", "gps-art"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
routeart-grid = "routeart.grid:main"
routeart-match = "routeart.matcher:main"
routeart-svg = "routeart.svg:main"

[tool.hatch.build.targets.wheel]
packages = ["routeart"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
