# routeart

Small tools for route drawings. They build a toy street grid, snap a
trace onto street segments, render the result as SVG, and turn a
drawing in image coordinates into geographic coordinates and a GPX
track.

The package needs only the Python standard library (Python 3.10 or
later).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

By default each command reads and writes files in the current
directory. Options change the file names.

### `routeart-grid`

Writes a Manhattan-style street grid. Each line holds one street
segment as `x1,y1,x2,y2`. All horizontal segments come first, row by
row, then all vertical ones, column by column.

```
routeart-grid [--width 6] [--height 6] [--spacing 0.5] [--output edges.csv]
```

`--width` and `--height` count grid nodes. The defaults are shown
above.

### `routeart-match`

Reads street segments from `--edges` (default `edges.csv`, lines of
the form `id,x1,y1,x2,y2`) and a trace from `--trace` (default
`trace.csv`, lines of the form `x,y`). Lines that do not parse are
skipped. Each trace point is snapped to the nearest point on any
segment. When several segments are equally close, the first one wins.

The command prints a line `Read N edges and M trace points.`, then
`matched trace (lon lat):`, then one snapped point per line as `x y`
with two decimals. It exits with status 1 if a file cannot be opened
or if either file holds no usable data.

```
routeart-match [--edges edges.csv] [--trace trace.csv]
```

### `routeart-svg`

Reads segments from `--edges` (`x1,y1,x2,y2`), a trace from `--trace`
(`x,y`) and snapped points from `--matched`. The `--matched` file holds
whitespace-separated `x y` pairs, and reading stops at the first value
that is not a number. The command then writes `--output`. The defaults
are `edges.csv`, `trace.csv`, `matched.txt` and `map.svg`.

Streets are drawn in black, the trace as a red polyline and the
snapped points as blue dots. The view box is the bounding box of all
points, grown on every side by 10 % of its larger side. The command
exits with status 1 if a file cannot be read or written, or if there
are no points at all.

```
routeart-svg [--edges edges.csv] [--trace trace.csv] [--matched matched.txt] [--output map.svg]
```

## Library use

```python
from routeart.geometry import Point, Edge, project_on_segment, snap
from routeart.grid import grid_edges
from routeart.placement import geo_place, candidate_centers, write_gpx

edges = [Edge(1, Point(0.0, 0.0), Point(1.0, 0.0))]
print(snap(edges, [Point(0.5, 0.2)]))          # [Point(x=0.5, y=0.0)]

projection = project_on_segment(Point(2.0, 1.0), Point(0.0, 0.0), Point(1.0, 0.0))
print(projection.point, projection.distance)   # clamped to the end point (1, 0)

# Place a drawing (nominally 0..1000 image coordinates) 10 km wide around a centre.
drawing = [Point(0.0, 0.0), Point(500.0, 500.0), Point(1000.0, 1000.0)]
track = geo_place(drawing, 52.52, 13.40, 10.0)  # x = longitude, y = latitude
write_gpx("route.gpx", track)

# (lat, lon) centres of a search grid: step 2 km, 5 steps each way.
centres = list(candidate_centers(52.52, 13.40, 2.0, 5))
```

If `snap` is given points but no edges, it raises `ValueError`.

`routeart.grid.write_grid` writes the grid from `grid_edges` to an open
text stream. `routeart.csvio` holds the readers that the commands use:
`read_edges`, `read_trace`, `read_points`, `read_segments` and
`read_matched`. `routeart.svg` provides `BoundingBox` (with `padded`),
`bounding_box` and `render_svg`. `routeart.matcher.format_points`
formats points the way `routeart-match` prints them.
`routeart.placement.gpx_document` returns the GPX text without writing
it to a file.

## What the package does not do

The package has no command for placing drawings or writing GPX. That
part is available only as a library.

The package does not turn an image into drawing points, so the points
must come from elsewhere.

The package does no map-matching against a real road network. Snapping
moves each point onto its nearest straight segment, independently of
the others.

`candidate_centers` only yields the search centres. Nothing here scores
the placements or picks the best one.