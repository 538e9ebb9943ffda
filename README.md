# geoos

Planar geometry algorithms in pure Python, with no runtime dependencies:
geometry values, segment intersection, DE-9IM relate matrices, overlay
operations (intersection, difference, union), line merging, shared paths,
snapping, and a two-dimensional K-D tree searched by a fast spherical distance.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `geoos.geometry`: the geometry values.
  - `Point`, `LineString`, `Polygon` (shell ring first, then holes) and
    `Collection`. Each has `equals`, `is_empty`, `dimension`,
    `boundary_dimension` and `bound`.
  - Measures: `planar_distance`, `distance_segment_to_point`, `area_direction`
    and `bounds_intersect`.
  - The overlay records `Vertex`, `Edge` and `Line`.
  - The error classes `GeometryError`, `NotMatchTypeError` and
    `UnsupportedCollectionError`.
- `geoos.intersect`: segment and polyline predicates.
  - Segment and polyline intersection: `intersection`, `intersection_edge`,
    `IntersectionPoint`.
  - Point-on-line tests: `in_line`, `in_line_vertex`, `in_line_matrix`.
  - An even-odd ray-casting `in_polygon`.
- `geoos.relate`: topological relations.
  - `relate(g0, g1, intersect_bound)` returns a DE-9IM string.
  - `im(...)` returns an `IntersectionMatrix`, which has `is_covers`,
    `is_contains` and `is_within`.
- `geoos.operations`: overlay functions that dispatch on the type of the first
  geometry: `intersection`, `difference`, `sym_difference`, `union`,
  `unary_union`, `unary_union_by_half` and `union_line`.
- The overlay classes behind those functions:
  - `geoos.overlay.PointOverlay`
  - `geoos.line_overlay.LineOverlay` (with `intersect_line`)
  - `geoos.polygon_overlay.PolygonOverlay`, which does Weiler–Atherton
    clipping with the walkers `ComputeMergeOverlay`, `ComputeClipOverlay` and
    `ComputeMainOverlay`, and `geoos.plane.Plane`.
- `geoos.linemerge`: `line_merge` joins line strings that continue one another.
- `geoos.sharedpaths`: `shared_paths(g1, g2)` returns the paths the two
  geometries share, as two collections. The first holds paths that run the same
  way in both, the second those that run the opposite way.
- `geoos.snap`: `snap(g0, g1, tolerance)` pulls two geometries together.
  `Snapper` and `LineSnapper` do the work.
- `geoos.distance`: distances between longitude/latitude points given in
  degrees.
  - `distance_spherical` returns kilometres.
  - `distance_spherical_fast` returns a squared distance in degrees, computed
    with the parabolic `fast_sine` and `fast_cos`.
- `geoos.kdtree`: `KDTree` over a list of points.
  - `insert`, `in_range` and `height`.
  - `in_range(point, dist)` returns the indices of points whose
    `distance_spherical_fast` to `point` is below `dist` squared.

## Examples

Intersecting two squares:

```python
from geoos.geometry import Polygon
from geoos.operations import intersection

a = Polygon([[(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]])
b = Polygon([[(5, 5), (15, 5), (15, 15), (5, 15), (5, 5)]])
print(intersection(a, b))   # the square from (5, 5) to (10, 10)
```

Checking whether a polygon contains a point:

```python
from geoos.geometry import Point, Polygon
from geoos.relate import im

square = Polygon([[(90, 90), (90, 101), (101, 101), (101, 90), (90, 90)]])
print(im(square, Point(100, 100), True).is_contains())   # True
```

Snapping a point onto a nearby one:

```python
from geoos.geometry import Point
from geoos.snap import snap

print(snap(Point(0.05, 0.05), Point(0, 0), 0.1))
# Collection([LineString([Point(0.0, 0.0)]), LineString([Point(0.0, 0.0)])])
```

Searching a K-D tree:

```python
from geoos.kdtree import KDTree

tree = KDTree([(0, 0), (0.001, 0), (1, 1)])
print(sorted(tree.in_range((0, 0), 0.01)))   # [0, 1]
```

## Errors

Overlay and relate operations raise `geoos.geometry.GeometryError` or one of
its subclasses:

- `NotMatchTypeError` is raised when the geometry types of an operation do not
  fit together.
- `UnsupportedCollectionError` is raised when `operations.intersection` or
  `operations.difference` is given a collection as its first geometry.

Some inputs raise `ValueError`:

- `IntersectionMatrix.set_at_least_string`, for a malformed pattern.
- `distance.fast_sine`, for an angle outside [-pi, pi].

## What the package does not do

There is no clustering routine. The package has the spherical distances and the
K-D tree range search that density-based clustering is built on, but it does
not itself group points into clusters. There is also no reading or writing of
geometry formats such as WKT or GeoJSON. Geometries are built directly from
coordinate sequences.