"""Placing image points on the globe, candidate search centres and GPX output."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Iterator

from routeart.geometry import Point

KM_PER_DEG_LAT = 111.32
_IMAGE_SIZE = 1000.0


def _km_per_deg_lon(lat: float) -> float:
    return KM_PER_DEG_LAT * math.cos(math.radians(lat))


def geo_place(
    points: Iterable[Point], center_lat: float, center_lon: float, km_width: float = 10.0
) -> list[Point]:
    """Map image coordinates (nominally 0..1000) to lon/lat around a centre.

    The result holds longitude in ``x`` and latitude in ``y``.
    """
    lon_scale = _km_per_deg_lon(center_lat)
    placed = []
    for p in points:
        dx = (p.x / _IMAGE_SIZE - 0.5) * km_width
        dy = (p.y / _IMAGE_SIZE - 0.5) * km_width
        placed.append(Point(center_lon + dx / lon_scale, center_lat + dy / KM_PER_DEG_LAT))
    return placed


def candidate_centers(
    center_lat: float, center_lon: float, step_km: float = 2.0, grid: int = 5
) -> Iterator[tuple[float, float]]:
    """Yield ``(lat, lon)`` centres on a square grid around the given centre."""
    lon_scale = _km_per_deg_lon(center_lat)
    for dx in range(-grid, grid + 1):
        for dy in range(-grid, grid + 1):
            yield (
                center_lat + dy * step_km / KM_PER_DEG_LAT,
                center_lon + dx * step_km / lon_scale,
            )


def _fmt(value: float) -> str:
    return format(value, "g")


def gpx_document(points: Iterable[Point]) -> str:
    """A GPX 1.1 track with one segment; points carry lon in ``x`` and lat in ``y``."""
    parts = ['<?xml version="1.0" encoding="UTF-8"?>\n', '<gpx version="1.1">\n<trk><trkseg>\n']
    parts.extend(f'<trkpt lat="{_fmt(p.y)}" lon="{_fmt(p.x)}"/>\n' for p in points)
    parts.append("</trkseg></trk></gpx>\n")
    return "".join(parts)


def write_gpx(path: str | os.PathLike, points: Iterable[Point]) -> None:
    """Write the GPX track to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(gpx_document(points))