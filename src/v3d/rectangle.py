## rectangles for v3d

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

"""rectangles for **v3d**

A ``Rectangle`` with corners ``p``, ``q``, ``r``, ``s`` (in order
around the boundary) is held as the two triangles ``pqr`` and ``rsp``
that share the diagonal ``r``-``p``.  Queries are answered by each
triangle and the partial results joined.

The corners must be coplanar, but whether they actually make a
rectangle is not checked on construction; use ``isRectangle`` for
that.
"""

from v3d.errors import DegenerateInputError
from v3d.geometry import Geometry, _pointsMatch
from v3d.join import joinAll
from v3d.line import Line, Ray
from v3d.plane import Plane
from v3d.point import Point, getCentroid
from v3d.segment import LineSegment
from v3d.tolerance import resolve
from v3d.triangle import Triangle


class Rectangle(Geometry):
    """four coplanar corners ``p``, ``q``, ``r`` and ``s``"""

    def __init__(self, p, q, r, s, tol=None):
        tol = resolve(tol)
        super().__init__()
        self.__pqr = Triangle(p, q, r, tol)
        if not self.__pqr.pl.isIntersectedBy(s, tol):
            raise DegenerateInputError('rectangle corners are not coplanar')
        self.__rsp = Triangle(r, s, p, tol)

    @staticmethod
    def isRectangle(p, q, r, s, tol=None):
        """True if ``pq`` and ``sr`` are equal and parallel and ``pq``
        is perpendicular to ``qr``"""
        tol = resolve(tol)
        pq = q - p
        return pq.equals(r - s, tol) and pq.isOrthogonal(r - q, tol)

    @property
    def pqr(self):
        return self.__pqr

    @property
    def rsp(self):
        return self.__rsp

    @property
    def p(self):
        return self.__pqr.p

    @property
    def q(self):
        return self.__pqr.q

    @property
    def r(self):
        return self.__pqr.r

    @property
    def s(self):
        return self.__rsp.q

    @property
    def pl(self):
        return self.__pqr.pl

    def __repr__(self):
        return f"Rectangle({self.p}, {self.q}, {self.r}, {self.s})"

    def translate(self, v):
        super().translate(v)
        self.__pqr.translate(v)
        self.__rsp.translate(v)

    def getPoints(self):
        return [self.p, self.q, self.r, self.s]

    def _rebuild(self, points, tol):
        return Rectangle(points[0], points[1], points[2], points[3], tol)

    def getArea(self, tol=None):
        tol = resolve(tol)
        return self.__pqr.getArea(tol) + self.__rsp.getArea(tol)

    def getPerimeter(self, tol=None):
        tol = resolve(tol)
        pts = self.getPoints()
        return sum((pts[(i + 1) % 4] - pts[i]).getMagnitude(tol)
                   for i in range(4))

    def getCentroid(self, tol=None):
        return getCentroid(self.getPoints(), tol)

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        return (self.__pqr.isIntersectedBy(pt, tol)
                or self.__rsp.isIntersectedBy(pt, tol))

    def getIntersect(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Plane) and self.pl.equalsIgnoreOrientation(other, tol):
            return self
        if not isinstance(other, (Line, Ray, LineSegment, Plane, Triangle,
                                  Rectangle)):
            return other.getIntersect(self, tol)
        if not isinstance(other, (Line, Ray, Plane)):
            if not self.getAABB().intersects(other.getAABB(), tol):
                return None
        return joinAll([self.__pqr.getIntersect(other, tol),
                        self.__rsp.getIntersect(other, tol)], tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, (Point, Line, Ray, LineSegment, Plane, Triangle,
                              Rectangle)):
            return min(self.__pqr.getDistanceSquared(other, tol),
                       self.__rsp.getDistanceSquared(other, tol))
        return other.getDistanceSquared(self, tol)

    def equals(self, other, tol=None):
        if not isinstance(other, Rectangle):
            return False
        return _pointsMatch(self.getPoints(), other.getPoints(), resolve(tol))
