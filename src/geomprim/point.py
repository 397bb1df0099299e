## three-component vector/point value type for geomprim

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

"""three-component vector algebra for **geomprim**

The ``Point`` class doubles as a position and as a free vector.
Instances are immutable; every operation returns a new ``Point``.

Equality is exact component comparison.  No tolerance is applied at
this level: callers decide what "close enough" means, usually with one
of the constants in ``geomprim.tolerance``.

Scalar multiplication and division store their results at single
precision, so ``p * s`` and ``p / s`` are rounded to the nearest
binary32 value per component even though ``s`` is a double.  Addition
and subtraction are carried out at full double precision.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence, Tuple

import numpy as np

from geomprim.errors import GeometryError


def _single(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    return float(np.float32(value))


@dataclass(frozen=True)
class Point:
    """Immutable 3D point/vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point":
        """Build a point from a sequence of two or three numbers."""
        if len(values) not in (2, 3):
            raise GeometryError("point needs two or three components",
                                {"length": len(values)})
        return cls(*values)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    ## arithmetic
    ## ----------

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Point(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        if isinstance(scalar, bool) or not isinstance(scalar, Real):
            return NotImplemented
        return Point(_single(self.x * scalar),
                     _single(self.y * scalar),
                     _single(self.z * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, bool) or not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise GeometryError("division of a point by zero",
                                {"point": self.as_tuple()})
        return Point(_single(self.x / scalar),
                     _single(self.y / scalar),
                     _single(self.z / scalar))

    # named forms of the operators
    def add(self, other: "Point") -> "Point":
        return self + other

    def sub(self, other: "Point") -> "Point":
        return self - other

    def scale(self, scalar: float) -> "Point":
        return self * scalar

    def dot(self, other: "Point") -> float:
        return dot_product(self, other)

    def cross(self, other: "Point") -> "Point":
        return cross_product(self, other)

    ## metric operations
    ## -----------------

    def magnitude(self) -> float:
        """Euclidean norm, computed without intermediate overflow."""
        return math.hypot(self.x, self.y, self.z)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y, self.z - other.z)

    def normalized(self) -> "Point":
        """Return the unit vector pointing the same way as ``self``.

        Raises ``GeometryError`` for the zero vector, which has no
        direction.
        """
        length = self.magnitude()
        if length == 0.0:
            raise GeometryError("cannot normalize a zero-length vector")
        return self / length

    def __str__(self):
        return "({:g}, {:g}, {:g})".format(self.x, self.y, self.z)


def dot_product(a: Point, b: Point) -> float:
    """3 vector ``a`` dot ``b``"""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross_product(a: Point, b: Point) -> Point:
    """3 vector ``a`` cross ``b``"""
    return Point(a.y * b.z - a.z * b.y,
                 a.z * b.x - a.x * b.z,
                 a.x * b.y - a.y * b.x)
