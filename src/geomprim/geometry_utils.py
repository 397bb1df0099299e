"""Free functions combining points, lines, planes and polygons."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from geomprim.line import Line
from geomprim.plane import Plane
from geomprim.point import Point, cross_product, dot_product
from geomprim.polygon import Polygon
from geomprim.tolerance import EPSILON

logger = logging.getLogger(__name__)


## distances
## ---------

def point_distance(p1: Point, p2: Point) -> float:
    return p1.distance_to(p2)


def point_line_distance(point: Point, line: Line) -> float:
    """Distance from ``point`` to the segment ``line``."""
    return line.distance_to(point)


def point_plane_distance(point: Point, plane: Plane) -> float:
    return plane.distance_to(point)


def line_line_distance(line1: Line, line2: Line) -> float:
    """Shortest distance between two lines.

    Non-parallel lines are treated as infinite and measured with the
    triple product.  Parallel lines fall back to the distance from the
    start of ``line2`` to the segment ``line1``.
    """
    normal = cross_product(line1.direction(), line2.direction())
    length = normal.magnitude()
    if length < EPSILON:
        return line1.distance_to(line2.start)
    return abs(dot_product(line2.start - line1.start, normal)) / length


def distance(a, b) -> float:
    """Distance between two figures, dispatched on their types.

    Supported pairs are point/point, point/line, point/plane and
    line/line.
    """
    if isinstance(a, Point) and isinstance(b, Point):
        return point_distance(a, b)
    if isinstance(a, Point) and isinstance(b, Line):
        return point_line_distance(a, b)
    if isinstance(a, Point) and isinstance(b, Plane):
        return point_plane_distance(a, b)
    if isinstance(a, Line) and isinstance(b, Line):
        return line_line_distance(a, b)
    raise TypeError("unsupported figures for distance(): {} and {}".format(
        type(a).__name__, type(b).__name__))


## intersections
## -------------

def line_plane_intersection(line: Line, plane: Plane) -> Optional[Point]:
    return plane.intersection_with(line)


def line_line_intersection(line1: Line, line2: Line) -> Optional[Point]:
    """Intersection of two infinite lines, solved in the XY plane.

    The z coordinate of the result follows ``line1``; lines that are
    skew in 3D but cross in their XY projection still intersect.
    Returns ``None`` for lines parallel in XY.
    """
    dir1 = line1.direction()
    dir2 = line2.direction()

    cross_z = dir1.x * dir2.y - dir1.y * dir2.x
    if abs(cross_z) < EPSILON:
        return None

    p1 = line1.start
    p2 = line2.start
    t1 = ((p2.x - p1.x) * dir2.y - (p2.y - p1.y) * dir2.x) / cross_z
    return p1 + dir1 * t1


def plane_plane_intersection(plane1: Plane, plane2: Plane) -> Optional[Line]:
    """Line along which two planes meet, or ``None`` for parallel planes.

    The returned line starts on both planes and has unit length along
    the crossing direction.
    """
    if plane1.is_parallel_to(plane2):
        return None

    direction = cross_product(plane1.normal, plane2.normal).normalized()
    n1 = plane1.normal.as_tuple()
    n2 = plane2.normal.as_tuple()
    r1 = -plane1.d()
    r2 = -plane2.d()

    # pin the coordinate along the dominant direction axis to zero and
    # solve the remaining 2x2 system.  The determinant equals that
    # direction component, so pinning the smallest axis instead would
    # go singular for lines parallel to a coordinate plane.
    components = direction.as_tuple()
    axis = max(range(3), key=lambda i: abs(components[i]))
    u, v = [i for i in range(3) if i != axis]
    det = n1[u] * n2[v] - n2[u] * n1[v]

    coords = [0.0, 0.0, 0.0]
    if abs(det) < EPSILON:
        logger.debug("singular plane-plane system (det=%g), using the origin", det)
    else:
        coords[u] = (r1 * n2[v] - r2 * n1[v]) / det
        coords[v] = (n1[u] * r2 - n2[u] * r1) / det
    point = Point(*coords)
    return Line(point, point + direction)


def three_plane_intersection(plane1: Plane, plane2: Plane, plane3: Plane) -> Optional[Point]:
    """Unique common point of three planes, by Cramer's rule.

    Returns ``None`` if any two planes are parallel or the system is
    singular.
    """
    if (plane1.is_parallel_to(plane2) or plane1.is_parallel_to(plane3)
            or plane2.is_parallel_to(plane3)):
        return None

    a1, b1, c1, d1 = plane1.coefficients()
    a2, b2, c2, d2 = plane2.coefficients()
    a3, b3, c3, d3 = plane3.coefficients()

    det = a1 * (b2 * c3 - b3 * c2) - b1 * (a2 * c3 - a3 * c2) + c1 * (a2 * b3 - a3 * b2)
    if abs(det) < EPSILON:
        logger.debug("singular three-plane system (det=%g)", det)
        return None

    x = (-d1 * (b2 * c3 - b3 * c2) + b1 * (d2 * c3 - d3 * c2) - c1 * (d2 * b3 - d3 * b2)) / det
    y = (-a1 * (d2 * c3 - d3 * c2) + d1 * (a2 * c3 - a3 * c2) - c1 * (a2 * d3 - a3 * d2)) / det
    z = (-a1 * (b2 * d3 - b3 * d2) + b1 * (a2 * d3 - a3 * d2) - d1 * (a2 * b3 - a3 * b2)) / det
    return Point(x, y, z)


def intersection(*figures):
    """Intersection of two or three figures, dispatched on their types.

    Supported: line/plane, line/line, plane/plane and
    plane/plane/plane.  Returns ``None`` when there is no unique answer.
    """
    if len(figures) == 2:
        a, b = figures
        if isinstance(a, Line) and isinstance(b, Plane):
            return line_plane_intersection(a, b)
        if isinstance(a, Line) and isinstance(b, Line):
            return line_line_intersection(a, b)
        if isinstance(a, Plane) and isinstance(b, Plane):
            return plane_plane_intersection(a, b)
    elif len(figures) == 3 and all(isinstance(f, Plane) for f in figures):
        return three_plane_intersection(*figures)
    raise TypeError("unsupported figures for intersection(): {}".format(
        ", ".join(type(f).__name__ for f in figures)))


## predicates
## ----------

def is_point_on_line(point: Point, line: Line, epsilon: float = EPSILON) -> bool:
    return line.contains(point, epsilon)


def is_point_on_plane(point: Point, plane: Plane, epsilon: float = EPSILON) -> bool:
    return plane.contains(point, epsilon)


def are_collinear(p1: Point, p2: Point, p3: Point, epsilon: float = EPSILON) -> bool:
    return Line.are_collinear(p1, p2, p3, epsilon)


def are_coplanar(p1: Point, p2: Point, p3: Point, p4: Point,
                 epsilon: float = EPSILON) -> bool:
    """Is the triple product of the edge vectors from ``p1`` near zero?"""
    triple = dot_product(cross_product(p2 - p1, p3 - p1), p4 - p1)
    return abs(triple) < epsilon


## measures
## --------

def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    return cross_product(p2 - p1, p3 - p1).magnitude() * 0.5


def tetrahedron_volume(p1: Point, p2: Point, p3: Point, p4: Point) -> float:
    triple = dot_product(cross_product(p2 - p1, p3 - p1), p4 - p1)
    return abs(triple) / 6.0


def angle_between(v1: Point, v2: Point) -> float:
    """Angle between two vectors in `[0, pi]`; 0 if either is near zero."""
    mag1 = v1.magnitude()
    mag2 = v2.magnitude()
    if mag1 < EPSILON or mag2 < EPSILON:
        return 0.0
    cosine = dot_product(v1, v2) / (mag1 * mag2)
    return math.acos(max(-1.0, min(1.0, cosine)))


def convex_hull_2d(points: Sequence[Point]) -> Polygon:
    """Convex hull of a bare point set; see ``Polygon.convex_hull()``."""
    return Polygon(points).convex_hull()


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0
