import pytest
from v3d.errors import UndefinedOperationError
from v3d.tolerance import Exact
from v3d.vector import Vector, I, K
from v3d.point import Point
from v3d.line import Line
from v3d.segment import LineSegment
from v3d.plane import Plane
from v3d.triangle import Triangle
from v3d.hull import ConvexHull
from v3d.join import *


class TestJoin:
    """joining partial intersection results"""

    tol = Exact(-12)

    def test_none(self):
        p = Point(1, 2, 3)
        assert(join(None, None, self.tol) is None)
        assert(join(None, p, self.tol) is p)
        assert(join(p, None, self.tol) is p)
        assert(joinAll([], self.tol) is None)
        assert(joinAll([None, None], self.tol) is None)

    def test_points(self):
        p = Point(1, 0, 0)
        assert(join(p, Point(1, 0, 0), self.tol) == p)
        s = join(p, Point(3, 0, 0), self.tol)
        assert(s.equals(LineSegment(Point(1, 0, 0), Point(3, 0, 0))))

    def test_segment_and_point(self):
        s = LineSegment(Point(0, 0, 0), Point(2, 0, 0))
        assert(join(s, Point(1, 0, 0), self.tol) is s)
        assert(join(Point(2, 0, 0), s, self.tol) is s)
        with pytest.raises(UndefinedOperationError):
            join(s, Point(5, 0, 0), self.tol)

    def test_segments(self):
        a = LineSegment(Point(0, 0, 0), Point(2, 0, 0))
        b = LineSegment(Point(3, 0, 0), Point(1, 0, 0))
        g = join(a, b, self.tol)
        assert(g.equals(LineSegment(Point(0, 0, 0), Point(3, 0, 0))))
        touching = LineSegment(Point(2, 0, 0), Point(4, 0, 0))
        g = join(a, touching, self.tol)
        assert(g.equals(LineSegment(Point(0, 0, 0), Point(4, 0, 0))))

    def test_disjoint_segments_fail(self):
        a = LineSegment(Point(0, 0, 0), Point(1, 0, 0))
        b = LineSegment(Point(2, 0, 0), Point(3, 0, 0))
        with pytest.raises(UndefinedOperationError):
            join(a, b, self.tol)
        bent = LineSegment(Point(1, 0, 0), Point(1, 1, 0))
        with pytest.raises(UndefinedOperationError):
            join(a, bent, self.tol)

    def test_flat_shapes(self):
        t = Triangle(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0))
        g = join(t, Point(1, 1, 0), self.tol)
        assert(isinstance(g, ConvexHull))
        assert(len(g.getPoints()) == 4)
        g = join(LineSegment(Point(0, 0, 0), Point(1, 0, 0)), t, self.tol)
        assert(g.equals(t))

    def test_infinite_shapes(self):
        l = Line(Point(0, 0, 0), I)
        assert(join(l, Point(5, 0, 0), self.tol) is l)
        assert(join(Point(5, 0, 0), l, self.tol) is l)
        assert(join(l, Line(Point(3, 0, 0), I * -1), self.tol) is l)
        pl = Plane(Point(0, 0, 0), K)
        seg = LineSegment(Point(0, 0, 0), Point(1, 1, 0))
        assert(join(seg, pl, self.tol) is pl)
        with pytest.raises(UndefinedOperationError):
            join(l, pl, self.tol)
        with pytest.raises(UndefinedOperationError):
            join(l, Point(0, 1, 0), self.tol)

    def test_join_all(self):
        g = joinAll([None, Point(0, 0, 0), None, Point(0, 0, 2),
                     Point(0, 0, 1)], self.tol)
        assert(g.equals(LineSegment(Point(0, 0, 0), Point(0, 0, 2))))
