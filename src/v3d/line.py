## infinite lines and rays for v3d

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

"""infinite lines and rays for **v3d**

A ``Line`` is a point ``p`` and a non-zero direction ``v``; ``q`` is
``p + v``.  Equality of lines ignores direction.  A ``Ray`` is the
half of a line that starts at ``p`` and runs along ``v``.
"""

from v3d.errors import DegenerateInputError
from v3d.geometry import InfiniteGeometry
from v3d.point import Point, getUnique
from v3d.tolerance import STRICT, resolve
from v3d.vector import Vector


def _direction(p, q, tol):
    if isinstance(q, Vector):
        v = q
    elif isinstance(q, Point):
        v = q - p
    else:
        raise ValueError('bad direction: '+str(q))
    if v.isZero(tol):
        raise DegenerateInputError('zero direction vector')
    return v


def closestParams(p1, v1, p2, v2, tol):
    """Parameters ``(s, t)`` of the closest points ``p1 + s*v1`` and
    ``p2 + t*v2`` of two lines, or ``None`` if the lines are
    parallel."""
    if v1.isScalarMultiple(v2, tol):
        return None
    w0 = p1 - p2
    a = v1.dot(v1)
    b = v1.dot(v2)
    c = v2.dot(v2)
    d = v1.dot(w0)
    e = v2.dot(w0)
    den = a * c - b * b
    return tol.div(b * e - c * d, den), tol.div(a * e - b * d, den)


class Line(InfiniteGeometry):
    """infinite line through ``p`` with direction ``v``

    ``Line(p, q)`` takes a second point or a direction vector.
    """

    def __init__(self, p, q, tol=None):
        tol = resolve(tol)
        super().__init__(p.offset)
        self.__pv = p.rel
        self.__v = _direction(p, q, tol)

    @property
    def p(self):
        return Point(self.__pv, offset=self.offset)

    @property
    def q(self):
        return Point(self.__pv + self.__v, offset=self.offset)

    @property
    def v(self):
        return self.__v

    def __repr__(self):
        return f"Line({self.p}, {self.__v})"

    def getPoints(self):
        return [self.p, self.q]

    def _rebuild(self, points, tol):
        return Line(points[0], points[1], tol)

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        c = self.__v.cross(pt - self.p)
        norm2 = self.__v.getMagnitudeSquared()
        return all(tol.isZeroRelative(x, norm2) for x in c)

    def isParallel(self, other, tol=None):
        """True if ``other`` (a line, ray, segment or plane) is
        parallel to this line"""
        from v3d.plane import Plane
        if isinstance(other, Plane):
            return other.isParallel(self, tol)
        return self.__v.isScalarMultiple(other.v, tol)

    def getPointOfIntersect(self, pt, tol=None):
        """the point on this line closest to ``pt``"""
        tol = resolve(tol)
        if self.isIntersectedBy(pt, tol):
            return pt
        p = self.p
        t = tol.div(self.__v.dot(pt - p), self.__v.getMagnitudeSquared())
        return p + self.__v * t

    def getLineOfIntersect(self, other, tol=None):
        """Shortest segment joining this line and ``other``, or
        ``None`` if they are parallel or they intersect."""
        from v3d.segment import LineSegment
        tol = resolve(tol)
        st = closestParams(self.p, self.__v, other.p, other.v, tol)
        if st is None:
            return None
        a = self.p + self.__v * st[0]
        b = other.p + other.v * st[1]
        if a.equals(b, tol):
            return None
        return LineSegment(a, b, tol)

    def getIntersect(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Line):
            if self.isParallel(other, tol):
                return self if self.isIntersectedBy(other.p, tol) else None
            s, t = closestParams(self.p, self.__v, other.p, other.v, tol)
            a = self.p + self.__v * s
            b = other.p + other.v * t
            return a if a.equals(b, tol) else None
        return other.getIntersect(self, tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            if self.isIntersectedBy(other, tol):
                return 0
            return (other - self.getPointOfIntersect(other, tol)
                    ).getMagnitudeSquared()
        if isinstance(other, Line):
            st = closestParams(self.p, self.__v, other.p, other.v, tol)
            if st is None:
                return self.getDistanceSquared(other.p, tol)
            a = self.p + self.__v * st[0]
            b = other.p + other.v * st[1]
            if a.equals(b, tol):
                return 0
            return (b - a).getMagnitudeSquared()
        return other.getDistanceSquared(self, tol)

    def equals(self, other, tol=None):
        if not isinstance(other, Line):
            return False
        tol = resolve(tol)
        return (self.isParallel(other, tol)
                and self.isIntersectedBy(other.p, tol))


class Ray(InfiniteGeometry):
    """half line starting at ``p`` and running along ``v``"""

    def __init__(self, p, q, tol=None):
        tol = resolve(tol)
        super().__init__(p.offset)
        self.__pv = p.rel
        self.__v = _direction(p, q, tol)
        self.__l = None

    def _invalidate(self):
        super()._invalidate()
        self.__l = None

    @property
    def p(self):
        return Point(self.__pv, offset=self.offset)

    @property
    def v(self):
        return self.__v

    @property
    def l(self):
        """the line this ray lies on"""
        if self.__l is None:
            self.__l = Line(self.p, self.__v, STRICT)
        return self.__l

    def __repr__(self):
        return f"Ray({self.p}, {self.__v})"

    def getPoints(self):
        return [self.p, self.p + self.__v]

    def _rebuild(self, points, tol):
        return Ray(points[0], points[1], tol)

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        if not self.l.isIntersectedBy(pt, tol):
            return False
        return tol.signRelative(self.__v.dot(pt - self.p),
                                self.__v.getMagnitudeSquared()) >= 0

    def isParallel(self, other, tol=None):
        return self.l.isParallel(other, tol)

    def clip(self, g, tol=None):
        """Restrict ``g``, a geometry lying on this ray's line, to the
        ray."""
        from v3d.segment import LineSegment, segmentOrPoint
        tol = resolve(tol)
        if g is None:
            return None
        if isinstance(g, Point):
            return g if self.isIntersectedBy(g, tol) else None
        if isinstance(g, Line):
            return self
        if isinstance(g, Ray):
            if g.v.dot(self.__v) > 0:
                return g if self.isIntersectedBy(g.p, tol) else self
            if self.isIntersectedBy(g.p, tol):
                return segmentOrPoint(self.p, g.p, tol)
            return None
        if isinstance(g, LineSegment):
            pin = self.isIntersectedBy(g.p, tol)
            qin = self.isIntersectedBy(g.q, tol)
            if pin and qin:
                return g
            if pin:
                return segmentOrPoint(self.p, g.p, tol)
            if qin:
                return segmentOrPoint(self.p, g.q, tol)
            return None
        raise ValueError('bad geometry to clip: '+str(g))

    def getIntersect(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Line):
            return self.clip(self.l.getIntersect(other, tol), tol)
        if isinstance(other, Ray):
            g = self.l.getIntersect(other.l, tol)
            if isinstance(g, Line):
                return self.clip(other, tol)
            if g is not None and other.isIntersectedBy(g, tol):
                return self.clip(g, tol)
            return None
        return other.getIntersect(self, tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            w = other - self.p
            if tol.signRelative(self.__v.dot(w),
                                self.__v.getMagnitudeSquared()) <= 0:
                return w.getMagnitudeSquared()
            return self.l.getDistanceSquared(other, tol)
        if isinstance(other, Line):
            if self.intersects(other, tol):
                return 0
            st = closestParams(self.p, self.__v, other.p, other.v, tol)
            if st is None or st[0] < 0:
                return other.getDistanceSquared(self.p, tol)
            return self.l.getDistanceSquared(other, tol)
        if isinstance(other, Ray):
            if self.intersects(other, tol):
                return 0
            st = closestParams(self.p, self.__v, other.p, other.v, tol)
            if st is not None and st[0] >= 0 and st[1] >= 0:
                return self.l.getDistanceSquared(other.l, tol)
            return min(self.getDistanceSquared(other.p, tol),
                       other.getDistanceSquared(self.p, tol))
        return other.getDistanceSquared(self, tol)

    def equals(self, other, tol=None):
        if not isinstance(other, Ray):
            return False
        tol = resolve(tol)
        return (self.p.equals(other.p, tol)
                and self.__v.isScalarMultiple(other.v, tol)
                and self.__v.dot(other.v) > 0)


def isCollinear(points, tol=None):
    """True if all ``points`` lie on one line"""
    tol = resolve(tol)
    unique = getUnique(points, tol)
    if len(unique) < 3:
        return True
    l = Line(unique[0], unique[1], tol)
    return all(l.isIntersectedBy(p, tol) for p in unique[2:])
