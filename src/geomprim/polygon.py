## planar polygons for geomprim

## Copyright (c) 2026 geomprim contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


"""
Polygons
========

A ``Polygon`` is an ordered list of vertices.  Insertion order is
winding order, and the closing edge from the last vertex back to the
first is implicit: it is never stored, but every operation (area,
perimeter, edges, inside testing) includes it.

Polygons are the one mutable geometry type.  Vertices can only be
appended, with ``add_vertex()``; every other operation leaves the
polygon untouched and returns new values.

Area, centroid, convexity, inside testing and the convex hull work on
the XY projection of the vertices.  Polygons with fewer than three
vertices are degenerate: they have zero area, are never convex and
contain no points.
"""

from __future__ import annotations

import logging
import math
from functools import cmp_to_key
from typing import Iterable, Iterator, List, Tuple

from geomprim.errors import GeometryError
from geomprim.line import Line
from geomprim.point import Point
from geomprim.tolerance import EPSILON

logger = logging.getLogger(__name__)


def _turn(p1: Point, p2: Point, p3: Point) -> float:
    """z component of (p2 - p1) x (p3 - p2)"""
    return (p2.x - p1.x) * (p3.y - p2.y) - (p2.y - p1.y) * (p3.x - p2.x)


class Polygon:
    """Append-only closed polygon."""

    def __init__(self, vertices: Iterable[Point] = ()):
        self._vertices: List[Point] = []
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_vertex(self, point: Point) -> None:
        if not isinstance(point, Point):
            raise GeometryError("attempt to add a non-point vertex to a polygon",
                                {"value": repr(point)})
        self._vertices.append(point)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return tuple(self._vertices)

    def __len__(self):
        return len(self._vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._vertices))

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._vertices == other._vertices

    def __repr__(self):
        return "Polygon({!r})".format(self._vertices)

    def __str__(self):
        return "Polygon[{}]".format(", ".join(str(v) for v in self._vertices))

    def _cyclic_pairs(self) -> Iterator[Tuple[Point, Point]]:
        count = len(self._vertices)
        for i in range(count):
            yield self._vertices[i], self._vertices[(i + 1) % count]

    ## measures
    ## --------

    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise winding."""
        if len(self._vertices) < 3:
            return 0.0
        total = sum(a.x * b.y - b.x * a.y for a, b in self._cyclic_pairs())
        return total * 0.5

    def area(self) -> float:
        return abs(self.signed_area())

    def perimeter(self) -> float:
        if len(self._vertices) < 2:
            return 0.0
        return sum(a.distance_to(b) for a, b in self._cyclic_pairs())

    def centroid(self) -> Point:
        """Area-weighted centroid of the polygon.

        One vertex is its own centroid and two vertices give their
        midpoint.  When the net signed area is (near) zero, as for
        collinear or self-cancelling outlines, the plain vertex mean is
        returned instead.  The z coordinate is always the vertex mean,
        so a polygon lifted off the XY plane keeps its height rather
        than dropping to z = 0.

        Raises ``GeometryError`` for an empty polygon.
        """
        count = len(self._vertices)
        if count == 0:
            raise GeometryError("cannot compute the centroid of an empty polygon")
        if count == 1:
            return self._vertices[0]
        if count == 2:
            return Line(self._vertices[0], self._vertices[1]).midpoint()

        mean_x = sum(v.x for v in self._vertices) / count
        mean_y = sum(v.y for v in self._vertices) / count
        mean_z = sum(v.z for v in self._vertices) / count

        area_sum = 0.0
        cx = 0.0
        cy = 0.0
        for a, b in self._cyclic_pairs():
            weight = (a.x * b.y - b.x * a.y) * 0.5
            area_sum += weight
            cx += (a.x + b.x) * weight / 3.0
            cy += (a.y + b.y) * weight / 3.0

        if abs(area_sum) < EPSILON:
            logger.debug("near-zero polygon area %g, using vertex mean as centroid", area_sum)
            return Point(mean_x, mean_y, mean_z)
        return Point(cx / area_sum, cy / area_sum, mean_z)

    def bounding_box(self) -> Tuple[Point, Point]:
        """``(min_corner, max_corner)``; the origin twice when empty."""
        if not self._vertices:
            return Point(), Point()
        xs = [v.x for v in self._vertices]
        ys = [v.y for v in self._vertices]
        zs = [v.z for v in self._vertices]
        return Point(min(xs), min(ys), min(zs)), Point(max(xs), max(ys), max(zs))

    ## shape predicates
    ## ----------------

    def is_convex(self) -> bool:
        """Do all turns go the same way?

        Each turn is classed as left (positive) or not.  A zero turn
        falls in the same class as a right turn, so a counterclockwise
        outline with a collinear vertex is not convex, while an outline
        whose turns are all zero is.  Fewer than three vertices is never
        convex.
        """
        count = len(self._vertices)
        if count < 3:
            return False

        left = None
        for i in range(count):
            turn = _turn(self._vertices[i],
                         self._vertices[(i + 1) % count],
                         self._vertices[(i + 2) % count])
            if left is None:
                left = turn > 0
            elif (turn > 0) != left:
                return False
        return True

    def contains_point(self, point: Point, include_boundary: bool = False) -> bool:
        """Ray-casting inside test over the XY projection.

        With ``include_boundary`` a point lying on any edge counts as
        inside.
        """
        count = len(self._vertices)
        if count < 3:
            return False

        inside = False
        j = count - 1
        for i in range(count):
            vi = self._vertices[i]
            vj = self._vertices[j]
            if include_boundary and Line(vi, vj).contains(point):
                return True
            if (vi.y > point.y) != (vj.y > point.y):
                crossing = (vj.x - vi.x) * (point.y - vi.y) / (vj.y - vi.y) + vi.x
                if point.x < crossing:
                    inside = not inside
            j = i
        return inside

    def distance_to(self, point: Point) -> float:
        """Zero inside (or on) the polygon, else the distance to the nearest edge."""
        if not self._vertices:
            return math.inf
        if len(self._vertices) == 1:
            return self._vertices[0].distance_to(point)
        if self.contains_point(point, include_boundary=True):
            return 0.0
        return min(edge.distance_to(point) for edge in self.edges())

    def intersects(self, other: "Polygon") -> bool:
        """Do the outlines cross, or does either polygon hold a vertex of the other?

        Quadratic in the number of edges.
        """
        other_edges = other.edges()
        for edge in self.edges():
            for other_edge in other_edges:
                if edge.intersects(other_edge):
                    return True

        if any(other.contains_point(v) for v in self._vertices):
            return True
        return any(self.contains_point(v) for v in other._vertices)

    ## derived polygons
    ## ----------------

    def edges(self) -> List[Line]:
        """Cyclic list of edges, closing edge included."""
        if len(self._vertices) < 2:
            return []
        return [Line(a, b) for a, b in self._cyclic_pairs()]

    def simplify(self, epsilon: float = EPSILON) -> "Polygon":
        """Drop interior vertices collinear with their neighbours.

        The first and last vertices are always kept.
        """
        vertices = self._vertices
        if len(vertices) < 3:
            return Polygon(vertices)

        kept = [vertices[0]]
        for prev, curr, nxt in zip(vertices, vertices[1:], vertices[2:]):
            if not Line.are_collinear(prev, curr, nxt, epsilon):
                kept.append(curr)
        kept.append(vertices[-1])
        return Polygon(kept)

    def convex_hull(self) -> "Polygon":
        """Graham scan convex hull of the vertices, in the XY plane.

        The pivot is the lowest vertex (leftmost on ties); the other
        vertices are visited in order of polar angle about the pivot,
        nearer points first on equal angles.  Collinear boundary points
        are dropped, so the hull has strictly left turns, in
        counter-clockwise order starting at the pivot.  Fewer than three
        vertices are returned unchanged.
        """
        if len(self._vertices) < 3:
            logger.debug("convex hull of %d points is the input itself", len(self._vertices))
            return Polygon(self._vertices)

        points = list(self._vertices)
        pivot_index = min(range(len(points)), key=lambda i: (points[i].y, points[i].x))
        points[0], points[pivot_index] = points[pivot_index], points[0]
        pivot = points[0]

        def polar_order(a: Point, b: Point) -> int:
            angle_a = math.atan2(a.y - pivot.y, a.x - pivot.x)
            angle_b = math.atan2(b.y - pivot.y, b.x - pivot.x)
            if abs(angle_a - angle_b) < EPSILON:
                dist_a = pivot.distance_to(a)
                dist_b = pivot.distance_to(b)
                return (dist_a > dist_b) - (dist_a < dist_b)
            return -1 if angle_a < angle_b else 1

        ordered = [pivot] + sorted(points[1:], key=cmp_to_key(polar_order))

        hull = ordered[:2]
        for p in ordered[2:]:
            while len(hull) > 1 and _turn(hull[-2], hull[-1], p) <= 0:
                hull.pop()
            hull.append(p)
        return Polygon(hull)
