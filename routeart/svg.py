"""Draw edges, a trace and matched points into an SVG picture."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from routeart.csvio import read_matched, read_points, read_segments
from routeart.geometry import Point


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned rectangle."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def padded(self, ratio: float) -> BoundingBox:
        """Grow every side by ``ratio`` times the longer side."""
        pad = ratio * max(self.width, self.height)
        return BoundingBox(self.min_x - pad, self.min_y - pad, self.max_x + pad, self.max_y + pad)


def bounding_box(points: Iterable[Point]) -> BoundingBox:
    """Smallest box holding all points."""
    points = list(points)
    if not points:
        raise ValueError("cannot bound an empty set of points")
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def _line(a: Point, b: Point, stroke: str, width: float) -> str:
    return (
        f'<line x1="{a.x:.3f}" y1="{a.y:.3f}" x2="{b.x:.3f}" y2="{b.y:.3f}" '
        f'stroke="{stroke}" stroke-width="{width:.3f}" />\n'
    )


def _circle(p: Point, fill: str, r: float) -> str:
    return f'<circle cx="{p.x:.3f}" cy="{p.y:.3f}" r="{r:.3f}" fill="{fill}" />\n'


def render_svg(
    segments: Sequence[tuple[Point, Point]],
    trace: Sequence[Point],
    matched: Sequence[Point],
) -> str:
    """Edges in black, the trace as a red polyline, matched points as blue dots."""
    everything = [p for seg in segments for p in seg] + list(trace) + list(matched)
    box = bounding_box(everything).padded(0.1)
    parts = [
        '<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{box.min_x:.3f} {box.min_y:.3f} {box.width:.3f} {box.height:.3f}">'
    ]
    parts.extend(_line(a, b, "black", 0.03) for a, b in segments)
    parts.extend(_line(a, b, "red", 0.05) for a, b in zip(trace, trace[1:]))
    parts.extend(_circle(p, "blue", 0.08) for p in matched)
    parts.append("</svg>\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render edges, trace and matched points as SVG.")
    parser.add_argument("--edges", default="edges.csv")
    parser.add_argument("--trace", default="trace.csv")
    parser.add_argument("--matched", default="matched.txt")
    parser.add_argument("--output", default="map.svg")
    args = parser.parse_args(argv)

    loaders = ((read_segments, args.edges), (read_points, args.trace), (read_matched, args.matched))
    loaded = []
    for reader, path in loaders:
        try:
            loaded.append(reader(path))
        except OSError:
            print(f"Error: Could not open file {path}", file=sys.stderr)
            return 1
    segments, trace, matched = loaded

    try:
        document = render_svg(segments, trace, matched)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(document)
    except OSError:
        print(f"Error: Could not open file {args.output} for writing", file=sys.stderr)
        return 1
    print(f"Generated {args.output}  (open in browser)")
    return 0


if __name__ == "__main__":
    sys.exit(main())