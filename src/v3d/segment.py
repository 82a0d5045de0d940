## line segments for v3d

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

"""bounded line segments for **v3d**"""

from v3d.errors import DegenerateInputError
from v3d.geometry import Geometry
from v3d.line import Line, Ray, closestParams
from v3d.point import Point
from v3d.tolerance import STRICT, resolve


def segmentOrPoint(a, b, tol=None):
    """``a`` if the two points coincide, else the segment ``a``-``b``"""
    tol = resolve(tol)
    if a.equals(b, tol):
        return a
    return LineSegment(a, b, tol)


class LineSegment(Geometry):
    """The points of a line between ``p`` and ``q`` inclusive.

    A point is on the segment if it is on the line and "aligned",
    meaning it lies between the planes through ``p`` and ``q`` that are
    perpendicular to the segment.
    """

    def __init__(self, p, q, tol=None):
        tol = resolve(tol)
        if p.equals(q, tol):
            raise DegenerateInputError('segment end points coincide: '
                                       + str(p))
        super().__init__(p.offset)
        self.__pv = p.rel
        self.__qv = q.getVector() - self.offset
        self.__l = None

    def _invalidate(self):
        super()._invalidate()
        self.__l = None

    @property
    def p(self):
        return Point(self.__pv, offset=self.offset)

    @property
    def q(self):
        return Point(self.__qv, offset=self.offset)

    @property
    def v(self):
        return self.__qv - self.__pv

    @property
    def l(self):
        if self.__l is None:
            self.__l = Line(self.p, self.v, STRICT)
        return self.__l

    def __repr__(self):
        return f"LineSegment({self.p}, {self.q})"

    def getPoints(self):
        return [self.p, self.q]

    def _rebuild(self, points, tol):
        return LineSegment(points[0], points[1], tol)

    def getLengthSquared(self):
        return self.v.getMagnitudeSquared()

    def getLength(self, tol=None):
        return resolve(tol).sqrt(self.getLengthSquared())

    def getMidpoint(self, tol=None):
        return self.p + self.v.divide(2, tol)

    def getPPL(self):
        """plane through ``p`` with the segment direction as normal"""
        from v3d.plane import Plane
        return Plane(self.p, self.v, tol=STRICT)

    def getQPL(self):
        """plane through ``q`` with the segment direction as normal"""
        from v3d.plane import Plane
        return Plane(self.q, self.v, tol=STRICT)

    def isAligned(self, pt, tol=None):
        tol = resolve(tol)
        v = self.v
        norm2 = v.getMagnitudeSquared()
        return (tol.signRelative(v.dot(pt - self.p), norm2) >= 0
                and tol.signRelative(v.dot(pt - self.q), norm2) <= 0)

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        if pt.equals(self.p, tol) or pt.equals(self.q, tol):
            return True
        return self.l.isIntersectedBy(pt, tol) and self.isAligned(pt, tol)

    def _overlap(self, other, tol):
        ## other is collinear with self; order the end points along v
        v = self.v
        p = self.p

        def at(pt):
            return v.dot(pt - p)

        a = sorted([(0, p), (v.getMagnitudeSquared(), self.q)],
                   key=lambda e: e[0])
        b = sorted([(at(other.p), other.p), (at(other.q), other.q)],
                   key=lambda e: e[0])
        lo = a[0] if a[0][0] >= b[0][0] else b[0]
        hi = a[1] if a[1][0] <= b[1][0] else b[1]
        d = tol.signRelative(hi[0] - lo[0], v.getMagnitudeSquared())
        if d < 0:
            return None
        if d == 0:
            return lo[1]
        return LineSegment(lo[1], hi[1], tol)

    def getIntersect(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Line):
            g = self.l.getIntersect(other, tol)
            if isinstance(g, Line):
                return self
            if g is not None and self.isAligned(g, tol):
                return g
            return None
        if isinstance(other, Ray):
            return other.clip(self.getIntersect(other.l, tol), tol)
        if isinstance(other, LineSegment):
            if not self.getAABB().intersects(other.getAABB(), tol):
                return None
            g = self.l.getIntersect(other.l, tol)
            if g is None:
                return None
            if isinstance(g, Line):
                return self._overlap(other, tol)
            if self.isIntersectedBy(g, tol) and other.isIntersectedBy(g, tol):
                return g
            return None
        return other.getIntersect(self, tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            if self.isAligned(other, tol):
                return self.l.getDistanceSquared(other, tol)
            return min((other - self.p).getMagnitudeSquared(),
                       (other - self.q).getMagnitudeSquared())
        if isinstance(other, (Line, Ray, LineSegment)):
            if self.intersects(other, tol):
                return 0
            st = closestParams(self.p, self.v, other.p, other.v, tol)
            if isinstance(other, Line):
                if st is not None and 0 <= st[0] <= 1:
                    return self.l.getDistanceSquared(other, tol)
                return min(other.getDistanceSquared(self.p, tol),
                           other.getDistanceSquared(self.q, tol))
            if st is not None and 0 <= st[0] <= 1 and st[1] >= 0:
                if isinstance(other, Ray) or st[1] <= 1:
                    return self.l.getDistanceSquared(other.l, tol)
            candidates = [other.getDistanceSquared(self.p, tol),
                          other.getDistanceSquared(self.q, tol),
                          self.getDistanceSquared(other.p, tol)]
            if isinstance(other, LineSegment):
                candidates.append(self.getDistanceSquared(other.q, tol))
            return min(candidates)
        return other.getDistanceSquared(self, tol)

    def equals(self, other, tol=None):
        if not isinstance(other, LineSegment):
            return False
        tol = resolve(tol)
        p, q = self.p, self.q
        return ((p.equals(other.p, tol) and q.equals(other.q, tol))
                or (p.equals(other.q, tol) and q.equals(other.p, tol)))
