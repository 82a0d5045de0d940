## coplanar convex hulls for v3d

## Copyright (c) 2026 v3d contributors
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

"""coplanar convex hulls for **v3d**

A ``ConvexHull`` is a convex polygon: the hull of a set of coplanar
points, with its vertices ordered counter-clockwise when viewed from
the side its normal ``n`` points to.  Points that lie on a hull edge
are not vertices.

The hull is built quickhull style: start from the two extreme points
along the axis with the largest spread, then repeatedly split on the
point furthest outside the current edge.

``getGeometry`` reduces any set of coplanar points to the simplest
geometry covering them: ``None``, a ``Point``, a ``LineSegment``, a
``Triangle`` or a ``ConvexHull``.
"""

import logging

from v3d.errors import DegenerateInputError
from v3d.geometry import Geometry, _pointsMatch
from v3d.line import Line, Ray, isCollinear
from v3d.plane import Plane, getPlane
from v3d.point import Point, getCentroid, getUnique
from v3d.rotation import rotatePoint
from v3d.segment import LineSegment
from v3d.tolerance import STRICT, resolve
from v3d.triangle import Triangle
from v3d.vector import Vector

logger = logging.getLogger(__name__)


def _side(a, b, pt, n):
    ## positive if pt is left of a->b looking down n
    return (b - a).cross(pt - a).dot(n)


def _isRight(a, b, pt, n, tol):
    norm2 = (b - a).getMagnitudeSquared() * n.getMagnitudeSquared()
    return tol.signRelative(_side(a, b, pt, n), norm2) < 0


def _half(a, b, pts, n, tol):
    ## hull vertices strictly right of a->b, in order from a to b
    if not pts:
        return []
    c = min(pts, key=lambda pt: _side(a, b, pt, n))
    left = [pt for pt in pts if _isRight(a, c, pt, n, tol)]
    right = [pt for pt in pts if _isRight(c, b, pt, n, tol)]
    return _half(a, c, left, n, tol) + [c] + _half(c, b, right, n, tol)


def quickhull(points, n, tol=None):
    """Vertices of the convex hull of the coplanar ``points`` (with
    normal ``n``) in counter-clockwise order.  Returns fewer than three
    points if the input is a single point or collinear."""
    tol = resolve(tol)
    pts = getUnique(points, tol)
    if len(pts) < 2:
        return pts
    coords = [(p.x, p.y, p.z) for p in pts]
    spread = [max(c[i] for c in coords) - min(c[i] for c in coords)
              for i in range(3)]
    axis = spread.index(max(spread))

    def key(i):
        c = coords[i]
        return (c[axis], c[(axis + 1) % 3], c[(axis + 2) % 3])

    order = sorted(range(len(pts)), key=key)
    a = pts[order[0]]
    b = pts[order[-1]]
    below = [pt for pt in pts if _isRight(a, b, pt, n, tol)]
    above = [pt for pt in pts if _isRight(b, a, pt, n, tol)]
    return [a] + _half(a, b, below, n, tol) + [b] + _half(b, a, above, n, tol)


class ConvexHull(Geometry):
    """convex polygon with normal ``n``"""

    def __init__(self, n, points, tol=None):
        tol = resolve(tol)
        super().__init__()
        if not isinstance(n, Vector) or n.isZero(tol):
            raise DegenerateInputError('bad hull normal: '+str(n))
        pts = getUnique(points, tol)
        if len(pts) < 3:
            raise DegenerateInputError('hull needs three distinct points')
        pl = Plane(pts[0], n, tol=STRICT)
        if not all(pl.isIntersectedBy(p, tol) for p in pts):
            raise DegenerateInputError('hull points are not coplanar')
        vertices = quickhull(pts, n, tol)
        if len(vertices) < 3:
            raise DegenerateInputError('hull points are collinear')
        logger.debug('hull of %d points has %d vertices', len(pts),
                     len(vertices))
        self.__n = n
        self.__vertices = [v.getVector() for v in vertices]
        self.__pl = None
        self.__triangles = None

    @classmethod
    def fromPoints(cls, points, tol=None):
        """hull of coplanar ``points``, with the normal of the plane
        through the first three non-collinear ones"""
        tol = resolve(tol)
        return cls(getPlane(points, tol).n, points, tol)

    def _invalidate(self):
        super()._invalidate()
        self.__pl = None
        self.__triangles = None

    @property
    def n(self):
        return self.__n

    @property
    def pl(self):
        if self.__pl is None:
            self.__pl = Plane(self.getPoints()[0], self.__n, tol=STRICT)
        return self.__pl

    def __repr__(self):
        return f"ConvexHull({self.__n}, {self.getPoints()})"

    def getPoints(self):
        return [Point(v, offset=self.offset) for v in self.__vertices]

    def _rebuild(self, points, tol):
        return ConvexHull.fromPoints(points, tol)

    def _rotated(self, pt, uv, theta, tol):
        n = self.__n.rotate(uv, theta, tol)
        return ConvexHull(n, [rotatePoint(p, pt, uv, theta, tol)
                              for p in self.getPoints()], tol)

    def getEdges(self):
        pts = self.getPoints()
        return [LineSegment(pts[i], pts[(i + 1) % len(pts)], STRICT)
                for i in range(len(pts))]

    def getTriangles(self):
        """fan triangulation from the first vertex"""
        if self.__triangles is None:
            pts = self.getPoints()
            self.__triangles = [Triangle(pts[0], pts[i], pts[i + 1], STRICT)
                                for i in range(1, len(pts) - 1)]
        return self.__triangles

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        if not self.pl.isIntersectedBy(pt, tol):
            return False
        pts = self.getPoints()
        for i in range(len(pts)):
            if _isRight(pts[i], pts[(i + 1) % len(pts)], pt, self.__n, tol):
                return False
        return True

    def getArea(self, tol=None):
        tol = resolve(tol)
        pts = self.getPoints()
        s = Vector()
        for i in range(len(pts)):
            s = s + pts[i].getVector().cross(pts[(i + 1) % len(pts)].getVector())
        return tol.div(tol.sqrt(s.getMagnitudeSquared()), 2)

    def getPerimeter(self, tol=None):
        tol = resolve(tol)
        return sum(e.getLength(tol) for e in self.getEdges())

    def getCentroid(self, tol=None):
        return getCentroid(self.getPoints(), tol)

    def _handles(self, other):
        from v3d.rectangle import Rectangle
        return isinstance(other, (Line, Ray, LineSegment, Plane, Triangle,
                                  Rectangle, ConvexHull))

    def getIntersect(self, other, tol=None):
        from v3d.join import joinAll
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Plane) and self.pl.equalsIgnoreOrientation(other, tol):
            return self
        if not self._handles(other):
            return other.getIntersect(self, tol)
        if not isinstance(other, (Line, Ray, Plane)):
            if not self.getAABB().intersects(other.getAABB(), tol):
                return None
        return joinAll([t.getIntersect(other, tol)
                        for t in self.getTriangles()], tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point) or self._handles(other):
            if self.intersects(other, tol):
                return 0
            return min(t.getDistanceSquared(other, tol)
                       for t in self.getTriangles())
        return other.getDistanceSquared(self, tol)

    def equals(self, other, tol=None):
        if not isinstance(other, ConvexHull):
            return False
        return _pointsMatch(self.getPoints(), other.getPoints(), resolve(tol))


def getGeometry(points, tol=None):
    """the simplest geometry covering the coplanar ``points``"""
    tol = resolve(tol)
    pts = getUnique(points, tol)
    if not pts:
        return None
    if len(pts) == 1:
        return pts[0]
    if isCollinear(pts, tol):
        a = pts[0]
        v = pts[1] - a
        ordered = sorted(pts, key=lambda pt: v.dot(pt - a))
        return LineSegment(ordered[0], ordered[-1], tol)
    n = getPlane(pts, tol).n
    vertices = quickhull(pts, n, tol)
    if len(vertices) < 3:
        a = vertices[0]
        return LineSegment(a, vertices[-1], tol) if len(vertices) > 1 else a
    if len(vertices) == 3:
        return Triangle(vertices[0], vertices[1], vertices[2], tol)
    return ConvexHull(n, vertices, tol)
