## geomprim: points, lines, planes and polygons

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


"""computational geometry primitives

**geomprim** provides value types for points, lines, planes and
polygons, and the distance, intersection, containment and convex hull
algorithms built on them.

Precondition violations raise ``GeometryError``.  Queries that have no
well-defined answer, such as the intersection of parallel planes,
return ``None``.
"""

import logging

from geomprim.errors import GeometryError
from geomprim.tolerance import EPSILON, NORMAL_EPSILON, ORIENTATION_EPSILON
from geomprim.point import Point, cross_product, dot_product
from geomprim.line import Line
from geomprim.plane import Plane
from geomprim.polygon import Polygon
from geomprim.geometry_utils import (
    angle_between,
    are_collinear,
    are_coplanar,
    convex_hull_2d,
    degrees_to_radians,
    distance,
    intersection,
    is_point_on_line,
    is_point_on_plane,
    line_line_distance,
    line_line_intersection,
    line_plane_intersection,
    plane_plane_intersection,
    point_distance,
    point_line_distance,
    point_plane_distance,
    radians_to_degrees,
    tetrahedron_volume,
    three_plane_intersection,
    triangle_area,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GeometryError", "EPSILON", "NORMAL_EPSILON", "ORIENTATION_EPSILON",
    "Point", "cross_product", "dot_product", "Line", "Plane", "Polygon",
    "angle_between", "are_collinear", "are_coplanar", "convex_hull_2d",
    "degrees_to_radians", "distance", "intersection", "is_point_on_line",
    "is_point_on_plane", "line_line_distance", "line_line_intersection",
    "line_plane_intersection", "plane_plane_intersection", "point_distance",
    "point_line_distance", "point_plane_distance", "radians_to_degrees",
    "tetrahedron_volume", "three_plane_intersection", "triangle_area",
    "__version__",
]
