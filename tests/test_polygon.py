import logging
import math

import pytest

from geomprim.errors import GeometryError
from geomprim.line import Line
from geomprim.point import Point
from geomprim.polygon import Polygon


def square(size=2.0, x=0.0, y=0.0):
    return Polygon([Point(x, y), Point(x + size, y),
                    Point(x + size, y + size), Point(x, y + size)])


HULL_POINTS = [Point(3, 1), Point(1, 1), Point(2, 2), Point(2, 3), Point(3, 3), Point(4, 2)]


class TestPolygonBasics:
    def test_create(self):
        poly = Polygon()
        assert len(poly) == 0
        poly.add_vertex(Point(0, 0))
        poly.add_vertex(Point(1, 0))
        assert poly.vertices == (Point(0, 0), Point(1, 0))
        assert list(poly) == [Point(0, 0), Point(1, 0)]
        assert poly == Polygon([Point(0, 0), Point(1, 0)])

    def test_add_non_point(self):
        poly = Polygon()
        with pytest.raises(GeometryError):
            poly.add_vertex((1, 2, 3))
        with pytest.raises(GeometryError):
            Polygon([Point(0, 0), [1, 1]])

    def test_vertices_are_read_only(self):
        poly = square()
        verts = poly.vertices
        assert isinstance(verts, tuple)
        poly.add_vertex(Point(-1, 1))
        assert len(verts) == 4
        assert len(poly) == 5

    def test_format(self):
        poly = Polygon([Point(0, 0), Point(1, 0), Point(1, 1)])
        assert str(poly) == 'Polygon[(0, 0, 0), (1, 0, 0), (1, 1, 0)]'
        assert str(Polygon()) == 'Polygon[]'


class TestMeasures:
    def test_square(self):
        sq = square()
        assert sq.area() == 4.0
        assert sq.perimeter() == 8.0
        assert sq.centroid().as_tuple() == pytest.approx((1.0, 1.0, 0.0))
        assert sq.is_convex()
        assert sq.contains_point(Point(1, 1, 0))

    def test_signed_area(self):
        ccw = Polygon([Point(0, 0), Point(1, 0), Point(0, 1)])
        cw = Polygon([Point(0, 0), Point(0, 1), Point(1, 0)])
        assert ccw.signed_area() == 0.5
        assert cw.signed_area() == -0.5
        assert cw.area() == 0.5

    def test_degenerate(self):
        empty = Polygon()
        two = Polygon([Point(0, 0), Point(3, 4)])
        for poly in (empty, Polygon([Point(1, 1)]), two):
            assert poly.area() == 0.0
            assert not poly.is_convex()
            assert not poly.contains_point(Point(0, 0))
        assert empty.perimeter() == 0.0
        assert Polygon([Point(1, 1)]).perimeter() == 0.0
        assert two.perimeter() == 10.0

    def test_centroid(self):
        tri = Polygon([Point(0, 0), Point(3, 0), Point(0, 3)])
        assert tri.centroid().as_tuple() == pytest.approx((1.0, 1.0, 0.0))
        raised = Polygon([Point(0, 0, 5), Point(2, 0, 5), Point(2, 2, 5), Point(0, 2, 5)])
        assert raised.centroid().as_tuple() == pytest.approx((1.0, 1.0, 5.0))

    def test_centroid_small_polygons(self):
        with pytest.raises(GeometryError):
            Polygon().centroid()
        assert Polygon([Point(1, 2, 3)]).centroid() == Point(1, 2, 3)
        assert Polygon([Point(0, 0, 0), Point(2, 4, 6)]).centroid() == Point(1, 2, 3)

    def test_centroid_fallback(self, caplog):
        flat = Polygon([Point(0, 0), Point(1, 0), Point(2, 0)])
        with caplog.at_level(logging.DEBUG, logger="geomprim.polygon"):
            assert flat.centroid() == Point(1, 0, 0)
        assert "vertex mean" in caplog.text

    def test_bounding_box(self):
        assert Polygon().bounding_box() == (Point(), Point())
        poly = Polygon([Point(1, -2, 3), Point(-4, 5, 0), Point(2, 2, -1)])
        assert poly.bounding_box() == (Point(-4, -2, -1), Point(2, 5, 3))


class TestShape:
    def test_convexity(self):
        cw_square = Polygon(reversed(square().vertices))
        assert cw_square.is_convex()
        notch = Polygon([Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)])
        assert not notch.is_convex()

    def test_collinear_vertex_breaks_convexity(self):
        # a zero turn is classed with right turns
        poly = Polygon([Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
        assert not poly.is_convex()
        assert poly.simplify().is_convex()

    def test_all_zero_turns_are_convex(self):
        assert Polygon([Point(0, 0), Point(1, 0), Point(2, 0)]).is_convex()
        assert Polygon([Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)]).is_convex()

    def test_contains_point(self):
        sq = square()
        assert not sq.contains_point(Point(3, 1))
        assert not sq.contains_point(Point(-0.5, 1))
        assert sq.contains_point(Point(0.1, 1.9))

    def test_contains_boundary(self):
        sq = square()
        assert sq.contains_point(Point(2, 1), include_boundary=True)
        assert sq.contains_point(Point(0, 0), include_boundary=True)
        assert sq.contains_point(Point(1, 2), include_boundary=True)
        assert not sq.contains_point(Point(2.5, 1), include_boundary=True)

    def test_concave_contains(self):
        notch = Polygon([Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)])
        assert notch.contains_point(Point(1, 1))
        assert not notch.contains_point(Point(2, 3))

    def test_distance(self):
        sq = square()
        assert sq.distance_to(Point(1, 1)) == 0.0
        assert sq.distance_to(Point(2, 1)) == 0.0
        assert sq.distance_to(Point(3, 1)) == pytest.approx(1.0)
        assert sq.distance_to(Point(3, 3)) == pytest.approx(math.sqrt(2))
        assert Polygon([Point(0, 0)]).distance_to(Point(3, 4)) == 5.0
        assert Polygon().distance_to(Point(3, 4)) == math.inf

    def test_intersects(self):
        sq = square()
        assert sq.intersects(square(x=1, y=1))
        assert not sq.intersects(square(x=3, y=3))
        big = square(size=10)
        small = square(size=2, x=2, y=2)
        assert big.intersects(small)
        assert small.intersects(big)


class TestDerived:
    def test_edges(self):
        sq = square()
        edges = sq.edges()
        assert len(edges) == 4
        assert edges[0] == Line(Point(0, 0), Point(2, 0))
        assert edges[-1] == Line(Point(0, 2), Point(0, 0))
        assert Polygon([Point(0, 0)]).edges() == []
        assert len(Polygon([Point(0, 0), Point(1, 0)]).edges()) == 2

    def test_simplify(self):
        poly = Polygon([Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
        simple = poly.simplify()
        assert simple.vertices == (Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2))
        assert len(poly) == 5

    def test_simplify_keeps_endpoints(self):
        poly = Polygon([Point(0, 0), Point(1, 0), Point(2, 0)])
        assert poly.simplify().vertices == (Point(0, 0), Point(2, 0))
        short = Polygon([Point(0, 0), Point(1, 0)])
        assert short.simplify() == short

    def test_simplify_epsilon(self):
        poly = Polygon([Point(0, 0), Point(1, 0.01), Point(2, 0), Point(2, 2)])
        assert len(poly.simplify()) == 4
        assert len(poly.simplify(epsilon=0.1)) == 3


class TestConvexHull:
    def test_hull_order(self):
        hull = Polygon(HULL_POINTS).convex_hull()
        assert hull.vertices == (Point(1, 1), Point(3, 1), Point(4, 2), Point(3, 3), Point(2, 3))
        assert Point(2, 2) not in hull.vertices
        assert hull.signed_area() > 0

    def test_hull_properties(self):
        polys = [
            Polygon(HULL_POINTS),
            Polygon([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 1), Point(1, 0)]),
            Polygon([Point(5, -1), Point(-3, 2), Point(0, 7), Point(1, 1), Point(-2, -4),
                     Point(4, 4), Point(0.5, 0.25)]),
        ]
        for poly in polys:
            hull = poly.convex_hull()
            assert set(hull.vertices) <= set(poly.vertices)
            assert hull.is_convex()
            for v in poly:
                assert hull.contains_point(v, include_boundary=True)
            assert set(hull.convex_hull().vertices) == set(hull.vertices)

    def test_hull_drops_collinear_points(self):
        poly = Polygon([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 1), Point(1, 0)])
        assert poly.convex_hull().vertices == (Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2))

    def test_small_hull(self):
        poly = Polygon([Point(0, 0), Point(1, 1)])
        hull = poly.convex_hull()
        assert hull == poly
        assert hull is not poly
