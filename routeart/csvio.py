"""Readers for the comma or space separated edge, trace and match files."""

from __future__ import annotations

import os
from collections.abc import Iterator

from routeart.geometry import Edge, Point

PathLike = str | os.PathLike


def _rows(path: PathLike) -> Iterator[list[str]]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield line.replace(",", " ").split()


def _floats(tokens: list[str], count: int) -> list[float] | None:
    if len(tokens) < count:
        return None
    try:
        return [float(token) for token in tokens[:count]]
    except ValueError:
        return None


def read_edges(path: PathLike) -> list[Edge]:
    """Read ``id,ax,ay,bx,by`` lines; lines that do not parse are skipped."""
    edges = []
    for tokens in _rows(path):
        if not tokens:
            continue
        try:
            edge_id = int(tokens[0])
        except ValueError:
            continue
        coords = _floats(tokens[1:], 4)
        if coords is None:
            continue
        ax, ay, bx, by = coords
        edges.append(Edge(edge_id, Point(ax, ay), Point(bx, by)))
    return edges


def read_trace(path: PathLike) -> list[Point]:
    """Read ``x,y`` lines of a trace; lines that do not parse are skipped."""
    points = []
    for tokens in _rows(path):
        coords = _floats(tokens, 2)
        if coords is not None:
            points.append(Point(*coords))
    return points


def read_points(path: PathLike) -> list[Point]:
    """Read one point per line from the first two columns."""
    return read_trace(path)


def read_segments(path: PathLike) -> list[tuple[Point, Point]]:
    """Read ``x1,y1,x2,y2`` lines as pairs of end points."""
    segments = []
    for tokens in _rows(path):
        coords = _floats(tokens, 4)
        if coords is None:
            continue
        x1, y1, x2, y2 = coords
        segments.append((Point(x1, y1), Point(x2, y2)))
    return segments


def read_matched(path: PathLike) -> list[Point]:
    """Read whitespace separated ``x y`` pairs, stopping at the first bad value."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    points = []
    for x_token, y_token in zip(tokens[0::2], tokens[1::2]):
        try:
            points.append(Point(float(x_token), float(y_token)))
        except ValueError:
            break
    return points