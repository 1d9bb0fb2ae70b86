"""Snap a GPS trace onto road edges and print the matched points."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from routeart.csvio import read_edges, read_trace
from routeart.geometry import Point, snap


def format_points(points: Iterable[Point]) -> str:
    """Render points as ``x y`` lines with two decimals each."""
    return "".join(f"{p.x:.2f} {p.y:.2f}\n" for p in points)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Snap trace points onto the nearest road edge.")
    parser.add_argument("--edges", default="edges.csv", help="edge file: id,ax,ay,bx,by per line")
    parser.add_argument("--trace", default="trace.csv", help="trace file: x,y per line")
    args = parser.parse_args(argv)

    try:
        edges = read_edges(args.edges)
    except OSError:
        print(f"Error: Could not open edge file: {args.edges}", file=sys.stderr)
        return 1
    try:
        trace = read_trace(args.trace)
    except OSError:
        print(f"Error: Could not open trace file: {args.trace}", file=sys.stderr)
        return 1

    print(f"Read {len(edges)} edges and {len(trace)} trace points.")
    if not edges or not trace:
        print(
            "Warning: Edge or trace data is empty. No matching will be performed.",
            file=sys.stderr,
        )
        return 1

    matched = snap(edges, trace)
    print("matched trace (lon lat):")
    sys.stdout.write(format_points(matched))
    return 0


if __name__ == "__main__":
    sys.exit(main())