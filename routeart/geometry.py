"""Planar points, road edges and nearest-segment snapping."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in planar (or lon/lat) coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """A straight road segment from ``a`` to ``b`` with an identifier."""

    id: int
    a: Point
    b: Point


@dataclass(frozen=True)
class Projection:
    """The closest point on a segment and its distance from the query point."""

    distance: float
    point: Point


def project_on_segment(p: Point, a: Point, b: Point) -> Projection:
    """Project ``p`` onto the segment ``ab``, clamping to its end points."""
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return Projection(math.hypot(p.x - a.x, p.y - a.y), a)
    t = ((p.x - a.x) * dx + (p.y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    projected = Point(a.x + t * dx, a.y + t * dy)
    return Projection(math.hypot(p.x - projected.x, p.y - projected.y), projected)


def snap(edges: Iterable[Edge], points: Iterable[Point]) -> list[Point]:
    """Move every point onto the nearest edge.

    When several edges are equally close, the first one wins.
    """
    edges = list(edges)
    points = list(points)
    if points and not edges:
        raise ValueError("cannot snap points without any edges")
    return [
        min(
            (project_on_segment(p, edge.a, edge.b) for edge in edges),
            key=lambda projection: projection.distance,
        ).point
        for p in points
    ]