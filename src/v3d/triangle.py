## triangles for v3d

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

"""triangles for **v3d**

===============
Overview
===============

A ``Triangle`` is three non-collinear points ``p``, ``q`` and ``r``.
Its plane ``pl``, its edges and the planes through each edge
perpendicular to the triangle are computed lazily and cached.

A point is on the triangle if it is on ``pl`` and "aligned": on the
same side of every edge plane as the opposite vertex.

Triangle-triangle intersection
------------------------------

If the two planes are the same plane (in either orientation), the
answer is the convex hull of the vertices of each triangle that lie
in the other together with the points where the edges cross.
Otherwise each triangle is cut by the other's plane, giving a point
or a segment on the line where the planes meet, and the intersection
is the overlap of those two cuts.

"""

import logging

from v3d.errors import DegenerateInputError
from v3d.geometry import Geometry, _pointsMatch
from v3d.line import Line, Ray, isCollinear
from v3d.plane import Plane
from v3d.point import Point, getCentroid
from v3d.segment import LineSegment
from v3d.tolerance import STRICT, resolve

logger = logging.getLogger(__name__)


class Triangle(Geometry):
    """triangle with vertices ``p``, ``q`` and ``r``"""

    def __init__(self, p, q, r, tol=None):
        tol = resolve(tol)
        if isCollinear([p, q, r], tol):
            raise DegenerateInputError(
                f'triangle points are collinear: {p}, {q}, {r}')
        super().__init__(p.offset)
        self.__pv = p.rel
        self.__qv = q.getVector() - self.offset
        self.__rv = r.getVector() - self.offset
        self.__pl = None
        self.__edges = None
        self.__edgePlanes = None

    def _invalidate(self):
        super()._invalidate()
        self.__pl = None
        self.__edges = None
        self.__edgePlanes = None

    @property
    def p(self):
        return Point(self.__pv, offset=self.offset)

    @property
    def q(self):
        return Point(self.__qv, offset=self.offset)

    @property
    def r(self):
        return Point(self.__rv, offset=self.offset)

    @property
    def pl(self):
        """the plane of this triangle, normal ``(q-p) x (r-q)``"""
        if self.__pl is None:
            self.__pl = Plane(self.p, self.q, self.r, tol=STRICT)
        return self.__pl

    @property
    def n(self):
        return self.pl.n

    def __repr__(self):
        return f"Triangle({self.p}, {self.q}, {self.r})"

    def getPoints(self):
        return [self.p, self.q, self.r]

    def _rebuild(self, points, tol):
        return Triangle(points[0], points[1], points[2], tol)

    def getEdges(self):
        if self.__edges is None:
            p, q, r = self.getPoints()
            self.__edges = (LineSegment(p, q, STRICT),
                            LineSegment(q, r, STRICT),
                            LineSegment(r, p, STRICT))
        return self.__edges

    def getPQ(self):
        return self.getEdges()[0]

    def getQR(self):
        return self.getEdges()[1]

    def getRP(self):
        return self.getEdges()[2]

    def getEdgePlanes(self):
        """For each edge, the plane through it perpendicular to the
        triangle, paired with the opposite vertex."""
        if self.__edgePlanes is None:
            n = self.n
            p, q, r = self.getPoints()
            self.__edgePlanes = (
                (Plane(p, (q - p).cross(n), tol=STRICT), r),
                (Plane(q, (r - q).cross(n), tol=STRICT), p),
                (Plane(r, (p - r).cross(n), tol=STRICT), q))
        return self.__edgePlanes

    def isAligned(self, pt, tol=None):
        tol = resolve(tol)
        return all(epl.isOnSameSide(pt, opposite, tol)
                   for epl, opposite in self.getEdgePlanes())

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        return self.pl.isIntersectedBy(pt, tol) and self.isAligned(pt, tol)

    def getArea(self, tol=None):
        tol = resolve(tol)
        c = (self.q - self.p).cross(self.r - self.p)
        return tol.div(tol.sqrt(c.getMagnitudeSquared()), 2)

    def getPerimeter(self, tol=None):
        tol = resolve(tol)
        return sum(e.getLength(tol) for e in self.getEdges())

    def getCentroid(self, tol=None):
        return getCentroid(self.getPoints(), tol)

    def _coplanarIntersect(self, other, tol):
        from v3d.hull import getGeometry
        logger.debug('coplanar intersection of %s and %s', self, other)
        pts = [v for v in self.getPoints() if other.isIntersectedBy(v, tol)]
        pts += [v for v in other.getPoints() if self.isIntersectedBy(v, tol)]
        for e in self.getEdges():
            for f in other.getEdges():
                g = e.getIntersect(f, tol)
                if g is not None:
                    pts.extend(g.getPoints())
        return getGeometry(pts, tol)

    def getIntersect(self, other, tol=None):
        from v3d.join import joinAll
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Line):
            g = self.pl.getIntersect(other, tol)
            if g is None:
                return None
            if isinstance(g, Point):
                return g if self.isAligned(g, tol) else None
            return joinAll([e.getIntersect(other, tol)
                            for e in self.getEdges()], tol)
        if isinstance(other, Ray):
            return other.clip(self.getIntersect(other.l, tol), tol)
        if isinstance(other, LineSegment):
            if not self.getAABB().intersects(other.getAABB(), tol):
                return None
            g = self.getIntersect(other.l, tol)
            if g is None:
                return None
            return other.getIntersect(g, tol)
        if isinstance(other, Plane):
            if self.pl.equalsIgnoreOrientation(other, tol):
                return self
            if self.pl.isParallel(other, tol):
                return None
            return joinAll([other.getIntersect(e, tol)
                            for e in self.getEdges()], tol)
        if isinstance(other, Triangle):
            if not self.getAABB().intersects(other.getAABB(), tol):
                return None
            if self.pl.equalsIgnoreOrientation(other.pl, tol):
                return self._coplanarIntersect(other, tol)
            a = self.getIntersect(other.pl, tol)
            if a is None:
                return None
            b = other.getIntersect(self.pl, tol)
            if b is None:
                return None
            return a.getIntersect(b, tol)
        return other.getIntersect(self, tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            if self.isIntersectedBy(other, tol):
                return 0
            foot = self.pl.getPointOfProjectedIntersection(other, tol)
            if self.isAligned(foot, tol):
                return self.pl.getDistanceSquared(other, tol)
            return min(e.getDistanceSquared(other, tol)
                       for e in self.getEdges())
        if isinstance(other, (Line, Ray, LineSegment)):
            if self.intersects(other, tol):
                return 0
            ds = [e.getDistanceSquared(other, tol) for e in self.getEdges()]
            if isinstance(other, Ray):
                ds.append(self.getDistanceSquared(other.p, tol))
            elif isinstance(other, LineSegment):
                ds.append(self.getDistanceSquared(other.p, tol))
                ds.append(self.getDistanceSquared(other.q, tol))
            return min(ds)
        if isinstance(other, Plane):
            if self.intersects(other, tol):
                return 0
            return min(other.getDistanceSquared(v, tol)
                       for v in self.getPoints())
        if isinstance(other, Triangle):
            if self.intersects(other, tol):
                return 0
            ds = [e.getDistanceSquared(other, tol) for e in self.getEdges()]
            ds += [f.getDistanceSquared(self, tol) for f in other.getEdges()]
            return min(ds)
        return other.getDistanceSquared(self, tol)

    def equals(self, other, tol=None):
        if not isinstance(other, Triangle):
            return False
        return _pointsMatch(self.getPoints(), other.getPoints(), resolve(tol))
