import pytest
from fractions import Fraction
from v3d.errors import DegenerateInputError, UndefinedOperationError
from v3d.tolerance import Exact
from v3d.vector import Vector, K
from v3d.point import Point
from v3d.segment import LineSegment
from v3d.triangle import Triangle
from v3d.tetrahedron import Tetrahedron
from v3d.aabb import *


class TestAABB:
    """axis-aligned boxes"""

    tol = Exact(-12)
    a = AABB(0, 2, 0, 2, 0, 2)
    b = AABB(1, 3, -1, 1, 5, 6)
    c = AABB(-1, 0, 4, 5, 1, 1)

    def test_construction(self):
        assert(self.a.getLo() == (0, 0, 0) and self.a.getHi() == (2, 2, 2))
        assert(self.b.zMin == 5 and self.b.yMax == 1)
        with pytest.raises(ValueError):
            AABB(2, 0, 0, 1, 0, 1)
        box = AABB.fromPoints([Point(1, 5, -2), Point(0, 7, 3),
                               Point(4, 6, 0)])
        assert(box.getLo() == (0, 5, -2) and box.getHi() == (4, 7, 3))
        with pytest.raises(ValueError):
            AABB.fromPoints([])

    def test_union(self):
        ab = self.a.union(self.b)
        assert(ab.equals(self.b.union(self.a), self.tol))
        assert(ab.getLo() == (0, -1, 0) and ab.getHi() == (3, 2, 6))
        left = self.a.union(self.b).union(self.c)
        right = self.a.union(self.b.union(self.c))
        assert(left.equals(right, self.tol))
        assert(left.contains(self.a) and left.contains(self.c))

    def test_contains(self):
        a2 = AABB.fromPoints([Point(0, 0, 0), Point(2, 2, 2)])
        assert(self.a.contains(a2, self.tol) and a2.contains(self.a, self.tol))
        assert(self.a.equals(a2, self.tol))
        assert(self.a.contains(AABB(1, 2, 0, 1, 0, 0), self.tol))
        assert(not self.a.contains(self.b, self.tol))
        assert(self.a.contains(Point(2, 1, 0), self.tol))
        assert(not self.a.contains(Point(3, 1, 0), self.tol))

    def test_intersects(self):
        touching = AABB(2, 3, 0, 1, 0, 1)
        assert(self.a.intersects(touching, self.tol))
        assert(not self.a.isBeyond(touching, self.tol))
        apart = AABB(3, 4, 0, 1, 0, 1)
        assert(self.a.isBeyond(apart, self.tol))
        assert(not self.a.intersects(apart, self.tol))
        assert(not self.a.intersects(self.b, self.tol))
        assert(self.a.intersects(Point(1, 1, 1), self.tol))
        t = Triangle(Point(1, 1, 1), Point(5, 1, 1), Point(1, 5, 1))
        assert(self.a.intersects(t, self.tol))

    def test_overlap(self):
        g = self.a.getIntersect(AABB(1, 3, 1, 3, 1, 3), self.tol)
        assert(g.equals(AABB(1, 2, 1, 2, 1, 2), self.tol))
        assert(self.a.getIntersect(self.b, self.tol) is None)
        p = Point(1, 1, 1)
        assert(self.a.getIntersect(p, self.tol) is p)

    def test_distances(self):
        assert(self.a.getDistanceSquared(AABB(4, 5, 0, 1, 0, 1),
                                         self.tol) == 4)
        assert(self.a.getDistanceSquared(AABB(4, 5, 5, 6, 0, 1),
                                         self.tol) == 13)
        assert(self.a.getDistanceSquared(Point(3, 3, 2), self.tol) == 2)
        assert(self.a.getDistanceSquared(Point(1, 1, 1), self.tol) == 0)

    def test_corners_and_edges(self):
        assert(len(self.a.getCorners()) == 8)
        assert(self.a.getCorner('ulu') == Point(2, 0, 2))
        assert(self.a.getCorner('lll') == Point(0, 0, 0))
        with pytest.raises(ValueError):
            self.a.getCorner('up')
        assert(len(self.a.getEdges()) == 12)
        assert(len(self.a.getPoints()) == 8)
        assert(self.a.getCentroid(self.tol) == Point(1, 1, 1))

    def test_planes(self):
        planes = self.a.getPlanes()
        assert(sorted(planes) == ['a', 'b', 'f', 'l', 'r', 't'])
        assert(planes['r'].isIntersectedBy(Point(2, 1, 1), self.tol))
        assert(planes['r'].n == Vector(1, 0, 0))
        assert(planes['a'].n == Vector(0, 0, -1))
        assert(planes['f'].getSideOfPlane(Point(1, 1, 1), self.tol) == -1)

    def test_translate_drops_caches(self):
        box = AABB(0, 1, 0, 1, 0, 1)
        assert(box.getCorners()[0] == Point(0, 0, 0))
        box.getPlanes()
        box.translate(Vector(1, 1, 1))
        assert(box.getLo() == (1, 1, 1))
        assert(box.getCorners()[0] == Point(1, 1, 1))
        assert(box.getPlanes()['l'].isIntersectedBy(Point(1, 5, 5), self.tol))
        box.translate(Vector(-1, -1, -1))
        assert(box.equals(AABB(0, 1, 0, 1, 0, 1)))

    def test_cannot_rotate(self):
        with pytest.raises(UndefinedOperationError):
            self.a.rotate(Point(0, 0, 0), K, 1.0)

    def test_shape_boxes(self):
        t = Triangle(Point(1, 5, -2), Point(0, 7, 3), Point(4, 6, 0))
        assert(t.getAABB().getLo() == (0, 5, -2))
        assert(t.getAABB().getHi() == (4, 7, 3))

    def test_shape_operands(self):
        t = Triangle(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0))
        box = AABB(0, 2, 0, 2, -1, 1)
        assert(t.intersects(box, self.tol))
        assert(box.intersects(t, self.tol))
        assert(t.getIntersect(box, self.tol).equals(AABB(0, 1, 0, 1, 0, 0),
                                                    self.tol))
        far = AABB(3, 4, 0, 1, 0, 1)
        assert(not t.intersects(far, self.tol))
        assert(t.getDistanceSquared(far, self.tol) == 4)
        assert(far.getDistanceSquared(t, self.tol) == 4)
        assert(t.getDistanceSquared(box, self.tol) == 0)

    def test_tetrahedron_operand(self):
        tet = Tetrahedron(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0),
                          Point(0, 0, 1))
        assert(tet.intersects(AABB(0, 1, 0, 1, 0, 1), self.tol))
        assert(not tet.intersects(AABB(2, 3, 0, 1, 0, 1), self.tol))
        assert(tet.getDistanceSquared(AABB(0, 1, 0, 1, 3, 4), self.tol) == 4)

    def test_shape_box_is_a_copy(self):
        t = Triangle(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0))
        t.getAABB().translate(Vector(100, 0, 0))
        assert(t.getAABB().getLo() == (0, 0, 0))
        s = LineSegment(Point(Fraction(1, 4), Fraction(1, 4), -1),
                        Point(Fraction(1, 4), Fraction(1, 4), 1))
        assert(t.getIntersect(s, self.tol).equals(
            Point(Fraction(1, 4), Fraction(1, 4), 0), self.tol))


class TestFlatBoxes:
    """boxes that are flat along one axis"""

    tol = Exact(-12)

    def test_construction(self):
        x = AABBX(1, 0, 2, 0, 3)
        assert(x.x == 1 and x.getLo() == (1, 0, 0) and x.getHi() == (1, 2, 3))
        y = AABBY(2, 0, 1, 0, 1)
        assert(y.y == 2 and y.getLo() == (0, 2, 0))
        z = AABBZ(3, 0, 1, 0, 1)
        assert(z.z == 3 and z.getHi() == (1, 1, 3))
        fx = AABBX.fromPoints([Point(1, 0, 0), Point(1, 2, 3)])
        assert(isinstance(fx, AABBX) and fx.x == 1)
        with pytest.raises(DegenerateInputError):
            AABBX.fromPoints([Point(1, 0, 0), Point(2, 2, 3)])

    def test_edges_and_planes(self):
        z = AABBZ(3, 0, 1, 0, 1)
        assert(len(z.getPoints()) == 4)
        assert(len(z.getEdges()) == 4)
        assert(z.getPlane().isIntersectedBy(Point(7, 7, 3), self.tol))
        assert(AABBX(1, 0, 2, 0, 3).getPlane().n == Vector(1, 0, 0))
        assert(AABBY(2, 0, 1, 0, 1).getPlane().isIntersectedBy(
            Point(5, 2, 5), self.tol))

    def test_union_type(self):
        a = AABBX(1, 0, 1, 0, 1)
        b = AABBX(1, 2, 3, 2, 3)
        u = a.union(b)
        assert(type(u) is AABBX)
        assert(u.equals(AABBX(1, 0, 3, 0, 3)))
        c = AABBX(2, 0, 1, 0, 1)
        assert(type(a.union(c)) is AABB)
        assert(type(a.union(AABBZ(0, 0, 1, 0, 1))) is AABB)
        assert(type(a.union(AABB(0, 1, 0, 1, 0, 1))) is AABB)

    def test_overlap_type(self):
        a = AABBZ(0, 0, 2, 0, 2)
        g = a.getIntersect(AABBZ(0, 1, 3, 1, 3), self.tol)
        assert(type(g) is AABBZ)
        assert(g.equals(AABBZ(0, 1, 2, 1, 2)))
        assert(a.getIntersect(AABBZ(1, 0, 2, 0, 2), self.tol) is None)
