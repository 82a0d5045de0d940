## tetrahedra for v3d

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

"""tetrahedra for **v3d**

A ``Tetrahedron`` is the solid bounded by the four triangular faces
``pqr``, ``qsr``, ``spr`` and ``psq``.  A point belongs to it if it is
on the same side of every face plane as the vertex opposite that
face, boundary included.

The intersection of a tetrahedron and a line, plane or flat shape is
convex, so it is found by collecting the points where the faces cut
the other shape, together with the other shape's own points that lie
inside, and reducing those to the simplest covering geometry.
"""

from v3d.errors import DegenerateInputError, UndefinedOperationError
from v3d.geometry import Geometry, _pointsMatch
from v3d.hull import ConvexHull, getGeometry
from v3d.line import Line, Ray
from v3d.plane import Plane, isCoplanar
from v3d.point import Point, getCentroid
from v3d.rectangle import Rectangle
from v3d.segment import LineSegment
from v3d.tolerance import resolve
from v3d.triangle import Triangle

_FLAT = (LineSegment, Triangle, Rectangle, ConvexHull)


class Tetrahedron(Geometry):
    """solid with vertices ``p``, ``q``, ``r`` and ``s``"""

    def __init__(self, p, q, r, s, tol=None):
        tol = resolve(tol)
        super().__init__()
        if isCoplanar([p, q, r, s], tol):
            raise DegenerateInputError('tetrahedron points are coplanar')
        self.__pqr = Triangle(p, q, r, tol)
        self.__qsr = Triangle(q, s, r, tol)
        self.__spr = Triangle(s, p, r, tol)
        self.__psq = Triangle(p, s, q, tol)

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
        return self.__qsr.q

    def __repr__(self):
        return f"Tetrahedron({self.p}, {self.q}, {self.r}, {self.s})"

    def getFaces(self):
        return [self.__pqr, self.__qsr, self.__spr, self.__psq]

    def _facesWithOpposite(self):
        return [(self.__pqr, self.s), (self.__qsr, self.p),
                (self.__spr, self.q), (self.__psq, self.r)]

    def translate(self, v):
        super().translate(v)
        for f in self.getFaces():
            f.translate(v)

    def getPoints(self):
        return [self.p, self.q, self.r, self.s]

    def _rebuild(self, points, tol):
        return Tetrahedron(points[0], points[1], points[2], points[3], tol)

    def getVolume(self, tol=None):
        tol = resolve(tol)
        p = self.p
        d = (self.q - p).dot((self.r - p).cross(self.s - p))
        return tol.div(abs(d), 6)

    def getArea(self, tol=None):
        tol = resolve(tol)
        return sum(f.getArea(tol) for f in self.getFaces())

    def getCentroid(self, tol=None):
        return getCentroid(self.getPoints(), tol)

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        return all(f.pl.isOnSameSide(pt, opposite, tol)
                   for f, opposite in self._facesWithOpposite())

    def getIntersect(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Tetrahedron):
            raise UndefinedOperationError(
                'the overlap of two tetrahedra is a solid; use intersects()')
        if not isinstance(other, (Line, Ray, Plane) + _FLAT):
            return other.getIntersect(self, tol)
        if isinstance(other, _FLAT):
            if not self.getAABB().intersects(other.getAABB(), tol):
                return None
            inner = other.getPoints()
        elif isinstance(other, Ray):
            inner = [other.p]
        else:
            inner = []
        pts = [pt for pt in inner if self.isIntersectedBy(pt, tol)]
        for f in self.getFaces():
            g = f.getIntersect(other, tol)
            if g is not None:
                pts.extend(g.getPoints())
        return getGeometry(pts, tol)

    def intersects(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Tetrahedron):
            if not self.getAABB().intersects(other.getAABB(), tol):
                return False
            if any(self.isIntersectedBy(pt, tol) for pt in other.getPoints()):
                return True
            if any(other.isIntersectedBy(pt, tol) for pt in self.getPoints()):
                return True
            return any(f.intersects(g, tol) for f in self.getFaces()
                       for g in other.getFaces())
        return super().intersects(other, tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, (Point, Line, Ray, Plane, Tetrahedron) + _FLAT):
            if self.intersects(other, tol):
                return 0
            return min(f.getDistanceSquared(other, tol)
                       for f in self.getFaces())
        return other.getDistanceSquared(self, tol)

    def equals(self, other, tol=None):
        if not isinstance(other, Tetrahedron):
            return False
        return _pointsMatch(self.getPoints(), other.getPoints(), resolve(tol))
