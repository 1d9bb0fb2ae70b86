"""Street grids, trace snapping, SVG rendering and GPX placement for route drawings."""

__version__ = "0.1.0"