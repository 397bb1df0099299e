## line segment / infinite line type for geomprim

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

"""lines and line segments for **geomprim**

A ``Line`` is a pair of points, ``start`` and ``end``.  Lines are
parameterized over the interval `0 <= t <= 1`, where `t=0` corresponds
to ``start`` and `t=1` to ``end``.

The same ``Line`` is read in two ways depending on the operation:

- *segment* operations only consider the `[0,1]` parameter interval:
  ``contains()``, ``distance_to()``, ``project()``, ``reflect()`` and
  ``intersects()``.  Projection, reflection and distance clamp the
  projection parameter to `[0,1]`, so a point whose perpendicular foot
  falls beyond an endpoint is measured from (or mirrored through) that
  endpoint.

- *infinite line* operations only look at the direction:
  ``direction()``, ``angle_with()`` and ``are_collinear()``.

``intersects()`` is a two-dimensional test.  It looks at the `x` and
`y` coordinates only and ignores `z`; lines in different XY planes
whose projections cross are reported as intersecting.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from geomprim.errors import GeometryError
from geomprim.point import Point, cross_product, dot_product
from geomprim.tolerance import EPSILON, ORIENTATION_EPSILON

## orientation classes returned by _orientation()
COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2


def _orientation(p: Point, q: Point, r: Point) -> int:
    """Classify the XY turn p -> q -> r."""
    value = (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)
    if abs(value) < ORIENTATION_EPSILON:
        return COLLINEAR
    return COUNTERCLOCKWISE if value > 0 else CLOCKWISE


def _within_box_xy(p: Point, q: Point, r: Point) -> bool:
    """Does ``q`` fall inside the padded XY bounding box of ``p`` and ``r``?"""
    return (min(p.x, r.x) - ORIENTATION_EPSILON <= q.x <= max(p.x, r.x) + ORIENTATION_EPSILON and
            min(p.y, r.y) - ORIENTATION_EPSILON <= q.y <= max(p.y, r.y) + ORIENTATION_EPSILON)


@dataclass(frozen=True)
class Line:
    """Immutable pair of endpoints."""

    start: Point
    end: Point

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Point:
        """Unit vector from ``start`` to ``end``.

        Raises ``GeometryError`` for a zero-length line.
        """
        return (self.end - self.start).normalized()

    def midpoint(self) -> Point:
        return (self.start + self.end) * 0.5

    def point_at(self, t: float) -> Point:
        """Sample the line at parameter ``t``; no clamping is applied."""
        return self.start + (self.end - self.start) * t

    ## segment operations
    ## ------------------

    def intersects(self, other: "Line") -> bool:
        """Do the XY projections of the two segments cross or touch?"""
        p1, q1 = self.start, self.end
        p2, q2 = other.start, other.end

        o1 = _orientation(p1, q1, p2)
        o2 = _orientation(p1, q1, q2)
        o3 = _orientation(p2, q2, p1)
        o4 = _orientation(p2, q2, q1)

        if o1 != o2 and o3 != o4:
            return True

        # collinear endpoints: overlap if the endpoint lies inside the
        # other segment's box
        if o1 == COLLINEAR and _within_box_xy(p1, p2, q1):
            return True
        if o2 == COLLINEAR and _within_box_xy(p1, q2, q1):
            return True
        if o3 == COLLINEAR and _within_box_xy(p2, p1, q2):
            return True
        if o4 == COLLINEAR and _within_box_xy(p2, q1, q2):
            return True

        return False

    def contains(self, point: Point, epsilon: float = EPSILON) -> bool:
        """Does ``point`` lie on the segment, to within ``epsilon``?

        Unlike ``intersects()`` this is a full 3D test.
        """
        cross = cross_product(self.end - self.start, point - self.start)
        if cross.magnitude() >= epsilon:
            return False

        s, e = self.start, self.end
        return (min(s.x, e.x) - epsilon <= point.x <= max(s.x, e.x) + epsilon and
                min(s.y, e.y) - epsilon <= point.y <= max(s.y, e.y) + epsilon and
                min(s.z, e.z) - epsilon <= point.z <= max(s.z, e.z) + epsilon)

    def _projection_parameter(self, point: Point) -> float:
        delta = self.end - self.start
        length_squared = delta.magnitude_squared()
        if length_squared < EPSILON * EPSILON:
            return 0.0
        t = dot_product(point - self.start, delta) / length_squared
        return max(0.0, min(1.0, t))

    def project(self, point: Point) -> Point:
        """Closest point to ``point`` on the segment."""
        return self.point_at(self._projection_parameter(point))

    def distance_to(self, point: Point) -> float:
        """Distance from ``point`` to the closest point on the segment."""
        return point.distance_to(self.project(point))

    def reflect(self, point: Point) -> Point:
        """Mirror ``point`` through its clamped projection on the segment."""
        return self.project(point) * 2.0 - point

    ## infinite line operations
    ## ------------------------

    def angle_with(self, other: "Line") -> float:
        """Acute angle, in radians, between the two line directions."""
        cosine = abs(dot_product(self.direction(), other.direction()))
        return math.acos(max(0.0, min(1.0, cosine)))

    @staticmethod
    def are_collinear(a: Point, b: Point, c: Point, epsilon: float = EPSILON) -> bool:
        return cross_product(b - a, c - a).magnitude() < epsilon

    @staticmethod
    def bezier_interpolate(t: float, *points: Point) -> Point:
        """Evaluate a linear, quadratic or cubic Bezier curve at ``t``.

        ``points`` holds the start point, zero to two interior control
        points and the end point.  The curve is evaluated by repeated
        linear interpolation (de Casteljau); ``t`` is not clamped.
        """
        if not 2 <= len(points) <= 4:
            raise GeometryError("Bezier interpolation needs 2, 3 or 4 points",
                                {"count": len(points)})
        level = list(points)
        while len(level) > 1:
            level = [Line(a, b).point_at(t) for a, b in zip(level, level[1:])]
        return level[0]

    def __str__(self):
        return "Line[{} -> {}]".format(self.start, self.end)
