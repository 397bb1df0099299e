## planes in 3D space for geomprim

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


"""planes for **geomprim**

A ``Plane`` is stored as a unit normal and a point it passes through.
Equivalently it is the set of points `x` with `n.x + d = 0`; the offset
``d()`` is always derived from the stored normal and point.

Planes can be built three ways: ::

   p1 = Plane(Point(0, 0, 1), Point(0, 0, 5))             # normal + point
   p2 = Plane.from_points(Point(0, 0, 0), Point(1, 0, 0),
                          Point(0, 1, 0))                  # three points
   p3 = Plane.from_coefficients(0, 0, 1, -5)               # ax+by+cz+d=0

All three normalize the normal to unit length, and raise
``GeometryError`` when no plane is defined (a near-zero normal or three
collinear points).

Plane projection and reflection act on the infinite plane.  Line
intersection treats the line as infinite as well.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from geomprim.errors import GeometryError
from geomprim.line import Line
from geomprim.point import Point, cross_product, dot_product
from geomprim.tolerance import EPSILON, NORMAL_EPSILON


@dataclass(frozen=True)
class Plane:
    """Immutable plane through ``point`` with unit ``normal``."""

    normal: Point
    point: Point

    def __post_init__(self):
        length = self.normal.magnitude()
        if length < NORMAL_EPSILON:
            raise GeometryError("plane normal is too close to zero",
                                {"normal": self.normal.as_tuple()})
        object.__setattr__(self, "normal", self.normal / length)

    @classmethod
    def from_points(cls, a: Point, b: Point, c: Point) -> "Plane":
        """Plane through three non-collinear points.

        The normal follows the right-hand rule for ``a -> b -> c``.
        """
        normal = cross_product(b - a, c - a)
        if normal.magnitude() < EPSILON:
            raise GeometryError("cannot build a plane from collinear points",
                                {"points": [a.as_tuple(), b.as_tuple(), c.as_tuple()]})
        return cls(normal, a)

    @classmethod
    def from_coefficients(cls, a: float, b: float, c: float, d: float) -> "Plane":
        """Plane satisfying `a*x + b*y + c*z + d = 0`."""
        normal = Point(a, b, c)
        if normal.magnitude() < NORMAL_EPSILON:
            raise GeometryError("plane coefficients (a, b, c) are too close to zero",
                                {"coefficients": (a, b, c, d)})

        # solve for the axis with the largest coefficient
        if abs(a) >= abs(b) and abs(a) >= abs(c):
            on_plane = Point(-d / a, 0.0, 0.0)
        elif abs(b) >= abs(c):
            on_plane = Point(0.0, -d / b, 0.0)
        else:
            on_plane = Point(0.0, 0.0, -d / c)
        return cls(normal, on_plane)

    def d(self) -> float:
        return -dot_product(self.normal, self.point)

    def coefficients(self) -> Tuple[float, float, float, float]:
        """``(a, b, c, d)`` of the normalized plane equation."""
        return (self.normal.x, self.normal.y, self.normal.z, self.d())

    def signed_distance_to(self, point: Point) -> float:
        """Distance to ``point``, positive on the side the normal points to."""
        return dot_product(self.normal, point) + self.d()

    def distance_to(self, point: Point) -> float:
        return abs(self.signed_distance_to(point))

    def contains(self, point: Point, epsilon: float = EPSILON) -> bool:
        return self.distance_to(point) < epsilon

    ## line queries
    ## ------------

    def intersects(self, line: Line) -> bool:
        """Does the (infinite) line meet the plane?

        A line lying in the plane counts as intersecting.
        """
        if abs(dot_product(self.normal, line.direction())) > EPSILON:
            return True
        return self.distance_to(line.start) < EPSILON

    def intersection_with(self, line: Line) -> Optional[Point]:
        """Point where the infinite line crosses the plane.

        Returns ``None`` when the line is parallel to the plane,
        including the case where it lies in the plane.
        """
        direction = line.direction()
        denominator = dot_product(self.normal, direction)
        if abs(denominator) < EPSILON:
            return None
        t = -(dot_product(self.normal, line.start) + self.d()) / denominator
        return line.start + direction * t

    ## point transforms
    ## ----------------

    def project(self, point: Point) -> Point:
        return point - self.normal * self.signed_distance_to(point)

    def reflect(self, point: Point) -> Point:
        return point - self.normal * (2.0 * self.signed_distance_to(point))

    ## plane/plane queries
    ## -------------------

    def angle_with(self, other: "Plane") -> float:
        """Acute angle, in radians, between the two planes."""
        cosine = abs(dot_product(self.normal, other.normal))
        return math.acos(max(0.0, min(1.0, cosine)))

    def is_parallel_to(self, other: "Plane", epsilon: float = EPSILON) -> bool:
        return cross_product(self.normal, other.normal).magnitude() < epsilon

    def __str__(self):
        return "Plane[normal={}, point={}, d={:g}]".format(self.normal, self.point, self.d())
