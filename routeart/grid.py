"""Generate a Manhattan-style grid of road segments."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from routeart.geometry import Point


def grid_edges(width: int, height: int, spacing: float = 1.0) -> Iterator[tuple[Point, Point]]:
    """Yield all horizontal edges row by row, then all vertical edges column by column."""
    for y in range(height):
        for x in range(width - 1):
            yield Point(x * spacing, y * spacing), Point((x + 1) * spacing, y * spacing)
    for x in range(width):
        for y in range(height - 1):
            yield Point(x * spacing, y * spacing), Point(x * spacing, (y + 1) * spacing)


def _fmt(value: float) -> str:
    return format(value, "g")


def write_grid(out: TextIO, width: int, height: int, spacing: float = 1.0) -> None:
    """Write the grid as ``x1,y1,x2,y2`` lines."""
    for a, b in grid_edges(width, height, spacing):
        out.write(",".join(_fmt(v) for v in (a.x, a.y, b.x, b.y)) + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write a rectangular street grid as CSV edges.")
    parser.add_argument("--width", type=int, default=6)
    parser.add_argument("--height", type=int, default=6)
    parser.add_argument("--spacing", type=float, default=0.5)
    parser.add_argument("--output", default="edges.csv")
    args = parser.parse_args(argv)
    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            write_grid(handle, args.width, args.height, args.spacing)
    except OSError:
        print("Unable to open file for writing", file=sys.stderr)
        return 1
    print(f"Grid generated and saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())