import pytest
from fractions import Fraction
from v3d.errors import DegenerateInputError, UndefinedOperationError
from v3d.tolerance import Approximate, Exact
from v3d.vector import Vector, I, J, K
from v3d.point import Point
from v3d.segment import LineSegment
from v3d.line import *


class TestLine:
    """infinite lines"""

    tol = Exact(-12)
    xaxis = Line(Point(0, 0, 0), Point(1, 0, 0))

    def test_construction(self):
        l = Line(Point(1, 1, 1), Vector(0, 2, 0))
        assert(l.q == Point(1, 3, 1))
        assert(l.v == Vector(0, 2, 0))
        with pytest.raises(DegenerateInputError):
            Line(Point(1, 1, 1), Point(1, 1, 1))
        with pytest.raises(DegenerateInputError):
            Line(Point(0, 0, 0), Vector(1e-9, 0, 0), Approximate(1e-6))
        with pytest.raises(ValueError):
            Line(Point(0, 0, 0), (1, 0, 0))

    def test_equality_ignores_direction(self):
        a = Line(Point(0, 0, 0), Point(1, 1, 1))
        b = Line(Point(2, 2, 2), Point(-1, -1, -1))
        assert(a.equals(b, self.tol))
        assert(not a.equals(Line(Point(0, 0, 1), Vector(1, 1, 1)), self.tol))
        assert(not a.equals(Point(0, 0, 0)))

    def test_point_queries(self):
        assert(self.xaxis.isIntersectedBy(Point(-7, 0, 0), self.tol))
        assert(not self.xaxis.isIntersectedBy(Point(0, 1, 0), self.tol))
        p = self.xaxis.getPointOfIntersect(Point(3, 4, 0), self.tol)
        assert(p == Point(3, 0, 0))
        assert(self.xaxis.getDistanceSquared(Point(3, 4, 0), self.tol) == 16)
        assert(self.xaxis.getIntersect(Point(3, 0, 0)) == Point(3, 0, 0))

    def test_crossing_lines(self):
        yline = Line(Point(0, 1, 0), Point(0, 2, 0))
        assert(self.xaxis.getIntersect(yline, self.tol) == Point(0, 0, 0))
        assert(self.xaxis.getDistanceSquared(yline, self.tol) == 0)
        assert(self.xaxis.getLineOfIntersect(yline, self.tol) is None)

    def test_skew_lines(self):
        skew = Line(Point(0, 0, 1), J)
        assert(self.xaxis.getIntersect(skew, self.tol) is None)
        assert(self.xaxis.getDistanceSquared(skew, self.tol) == 1)
        seg = self.xaxis.getLineOfIntersect(skew, self.tol)
        assert(seg.equals(LineSegment(Point(0, 0, 0), Point(0, 0, 1)),
                          self.tol))

    def test_parallel_lines(self):
        other = Line(Point(5, 3, 4), I * -2)
        assert(self.xaxis.isParallel(other, self.tol))
        assert(self.xaxis.getIntersect(other, self.tol) is None)
        assert(self.xaxis.getDistance(other, self.tol) == 5)
        same = Line(Point(9, 0, 0), I)
        assert(self.xaxis.getIntersect(same, self.tol) is self.xaxis)

    def test_no_bounding_box(self):
        with pytest.raises(UndefinedOperationError):
            self.xaxis.getAABB()

    def test_collinear(self):
        pts = [Point(0, 0, 0), Point(1, 1, 1), Point(3, 3, 3),
               Point(0, 0, 0)]
        assert(isCollinear(pts, self.tol))
        assert(not isCollinear(pts + [Point(1, 0, 0)], self.tol))
        assert(isCollinear([Point(1, 2, 3), Point(1, 2, 3)], self.tol))

    def test_closest_params(self):
        st = closestParams(Point(0, 0, 0), I, Point(2, -1, 3), J, self.tol)
        assert(st == (2, 1))
        assert(closestParams(Point(0, 0, 0), I, Point(0, 1, 0), I * 3,
                             self.tol) is None)


class TestRay:
    """half lines"""

    tol = Exact(-12)
    ray = Ray(Point(0, 0, 0), Vector(1, 0, 0))

    def test_membership(self):
        assert(self.ray.isIntersectedBy(Point(0, 0, 0), self.tol))
        assert(self.ray.isIntersectedBy(Point(2, 0, 0), self.tol))
        assert(not self.ray.isIntersectedBy(Point(-1, 0, 0), self.tol))
        assert(not self.ray.isIntersectedBy(Point(1, 1, 0), self.tol))

    def test_ray_line(self):
        cross = Line(Point(3, -1, 0), J)
        assert(self.ray.getIntersect(cross, self.tol) == Point(3, 0, 0))
        behind = Line(Point(-3, -1, 0), J)
        assert(self.ray.getIntersect(behind, self.tol) is None)
        assert(self.ray.getDistanceSquared(behind, self.tol) == 9)
        along = Line(Point(-5, 0, 0), I)
        assert(self.ray.getIntersect(along, self.tol) is self.ray)
        assert(cross.getIntersect(self.ray, self.tol) == Point(3, 0, 0))

    def test_ray_ray(self):
        same = Ray(Point(2, 0, 0), Vector(5, 0, 0))
        assert(self.ray.getIntersect(same, self.tol) is same)
        opposite = Ray(Point(2, 0, 0), Vector(-1, 0, 0))
        g = self.ray.getIntersect(opposite, self.tol)
        assert(g.equals(LineSegment(Point(0, 0, 0), Point(2, 0, 0)),
                        self.tol))
        touching = Ray(Point(0, 0, 0), Vector(-1, 0, 0))
        assert(self.ray.getIntersect(touching, self.tol) == Point(0, 0, 0))
        apart = Ray(Point(-1, 0, 0), Vector(-1, 0, 0))
        assert(self.ray.getIntersect(apart, self.tol) is None)
        assert(self.ray.getDistanceSquared(apart, self.tol) == 1)
        crossing = Ray(Point(1, -1, 0), Vector(0, 1, 0))
        assert(self.ray.getIntersect(crossing, self.tol) == Point(1, 0, 0))

    def test_distances(self):
        assert(self.ray.getDistanceSquared(Point(-3, 4, 0), self.tol) == 25)
        assert(self.ray.getDistanceSquared(Point(3, 4, 0), self.tol) == 16)
        above = Ray(Point(1, 0, 2), Vector(0, 1, 0))
        assert(self.ray.getDistanceSquared(above, self.tol) == 4)

    def test_equals(self):
        assert(self.ray.equals(Ray(Point(0, 0, 0), Vector(4, 0, 0))))
        assert(not self.ray.equals(Ray(Point(0, 0, 0), Vector(-4, 0, 0))))
        assert(not self.ray.equals(Ray(Point(1, 0, 0), Vector(1, 0, 0))))

    def test_translate_moves_line(self):
        r = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        assert(r.l.isIntersectedBy(Point(0, 0, 5), self.tol))
        r.translate(Vector(1, 0, 0))
        assert(r.l.isIntersectedBy(Point(1, 0, 5), self.tol))
        assert(not r.isIntersectedBy(Point(0, 0, 5), self.tol))
