## planes for v3d

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

"""infinite planes for **v3d**

A ``Plane`` is a point ``p`` and a non-zero normal ``n``.  The plane
equation ``a*x + b*y + c*z + d = 0``, with ``(a, b, c) = n`` and
``d = -n.p``, is computed on first use and dropped on ``translate``.

The orientation of ``n`` matters to ``equals`` and to the side tests,
but not to ``equalsIgnoreOrientation``.
"""

import logging

from v3d.errors import DegenerateInputError, UndefinedOperationError
from v3d.geometry import InfiniteGeometry
from v3d.line import Line, Ray, isCollinear
from v3d.point import Point, getUnique
from v3d.segment import LineSegment
from v3d.tolerance import STRICT, resolve
from v3d.vector import Vector

logger = logging.getLogger(__name__)


def _det3(m):
    return (m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
            - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
            + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0]))


def _det4(m):
    ## cofactor expansion along the first row
    d = 0
    for j in range(4):
        if m[0][j] == 0:
            continue
        minor = [[m[i][k] for k in range(4) if k != j] for i in range(1, 4)]
        term = m[0][j] * _det3(minor)
        d = d + term if j % 2 == 0 else d - term
    return d


class Plane(InfiniteGeometry):
    """Plane through ``p``.

    ``Plane(p, n)`` takes a normal vector; ``Plane(p, q, r)`` takes
    three points and uses ``n = (q - p) x (r - q)``.  If ``toward`` is
    given, ``n`` is flipped if needed so that ``toward`` is on the
    positive side.
    """

    def __init__(self, p, q, r=None, toward=None, tol=None):
        tol = resolve(tol)
        super().__init__(p.offset)
        self.__pv = p.rel
        if r is None:
            if not isinstance(q, Vector):
                raise ValueError('bad plane normal: '+str(q))
            if q.isZero(tol):
                raise DegenerateInputError('zero plane normal')
            n = q
        else:
            if p.equals(q, tol):
                raise DegenerateInputError('cannot define plane as p equals q')
            if q.equals(r, tol):
                raise DegenerateInputError('cannot define plane as q equals r')
            pq = q - p
            qr = r - q
            if pq.isScalarMultiple(qr, tol):
                raise DegenerateInputError('cannot define plane from collinear points')
            n = pq.cross(qr)
        if toward is not None and n.dot(toward - p) < 0:
            n = -n
        self.__n = n
        self.__equation = None

    def _invalidate(self):
        super()._invalidate()
        self.__equation = None

    @property
    def p(self):
        return Point(self.__pv, offset=self.offset)

    @property
    def n(self):
        return self.__n

    def getPV(self):
        """a non-zero vector in the plane"""
        n = self.__n
        v = Vector(n.dz, n.dz, -n.dx - n.dy)
        if v == Vector():
            v = Vector(-n.dy - n.dz, n.dx, n.dx)
        return v

    @property
    def q(self):
        return self.p + self.getPV()

    @property
    def r(self):
        return self.p + self.getPV().cross(self.__n)

    def __repr__(self):
        return f"Plane({self.p}, {self.__n})"

    def getPoints(self):
        p = self.p
        return [p, p + self.__n]

    def _rebuild(self, points, tol):
        return Plane(points[0], points[1] - points[0], tol=tol)

    def getEquation(self):
        """coefficients ``(a, b, c, d)`` of the plane equation"""
        if self.__equation is None:
            n = self.__n
            self.__equation = (n.dx, n.dy, n.dz,
                               -n.dot(self.p.getVector()))
        return self.__equation

    def _eval(self, pt):
        a, b, c, d = self.getEquation()
        return a * pt.x + b * pt.y + c * pt.z + d

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        return tol.isZeroRelative(self._eval(pt),
                                  self.__n.getMagnitudeSquared())

    def getSideOfPlane(self, pt, tol=None):
        """1 if ``pt`` is on the side ``n`` points to, -1 if on the
        other side, 0 if on the plane"""
        tol = resolve(tol)
        return tol.signRelative(self._eval(pt),
                                self.__n.getMagnitudeSquared())

    def isOnSameSide(self, a, b, tol=None):
        """True if ``a`` and ``b`` are on the same side, counting a
        point on the plane as on both sides"""
        tol = resolve(tol)
        sa = self.getSideOfPlane(a, tol)
        sb = self.getSideOfPlane(b, tol)
        return sa == 0 or sb == 0 or sa == sb

    def isOnSameSideNotOn(self, a, b, tol=None):
        tol = resolve(tol)
        sa = self.getSideOfPlane(a, tol)
        return sa != 0 and sa == self.getSideOfPlane(b, tol)

    def isParallel(self, other, tol=None):
        if isinstance(other, Plane):
            return self.__n.isScalarMultiple(other.n, tol)
        return self.__n.isOrthogonal(other.v, tol)

    def equalsIgnoreOrientation(self, other, tol=None):
        tol = resolve(tol)
        return (self.__n.isScalarMultiple(other.n, tol)
                and other.isIntersectedBy(self.p, tol)
                and self.isIntersectedBy(other.p, tol))

    def equals(self, other, tol=None):
        if not isinstance(other, Plane):
            return False
        tol = resolve(tol)
        return (self.__n.dot(other.n) > 0
                and self.equalsIgnoreOrientation(other, tol))

    def _lineIntersect(self, line, tol):
        if self.isParallel(line, tol):
            lp, lq = line.p, line.p + line.v
            if self.isIntersectedBy(lp, tol) and self.isIntersectedBy(lq, tol):
                return line
            return None
        lp = line.p
        if self.isIntersectedBy(lp, tol):
            return lp
        lq = lp + line.v
        if self.isIntersectedBy(lq, tol):
            return lq
        p, q, r = self.p, self.q, self.r
        v = line.v
        num = [[1, 1, 1, 1],
               [p.x, q.x, r.x, lp.x],
               [p.y, q.y, r.y, lp.y],
               [p.z, q.z, r.z, lp.z]]
        den = [[1, 1, 1, 0],
               [p.x, q.x, r.x, v.dx],
               [p.y, q.y, r.y, v.dy],
               [p.z, q.z, r.z, v.dz]]
        t = -tol.div(_det4(num), _det4(den))
        return lp + v * t

    def getPointOfProjectedIntersection(self, pt, tol=None):
        """the foot of the perpendicular from ``pt`` to this plane"""
        tol = resolve(tol)
        if self.isIntersectedBy(pt, tol):
            return pt
        return self._lineIntersect(Line(pt, self.__n, STRICT), tol)

    def getIntersect(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        if isinstance(other, Line):
            return self._lineIntersect(other, tol)
        if isinstance(other, Ray):
            return other.clip(self._lineIntersect(other.l, tol), tol)
        if isinstance(other, LineSegment):
            g = self._lineIntersect(other.l, tol)
            if isinstance(g, Line):
                return other
            if g is not None and other.isAligned(g, tol):
                return g
            return None
        if isinstance(other, Plane):
            if self.isParallel(other, tol):
                if other.isIntersectedBy(self.p, tol):
                    return self
                return None
            v = self.__n.cross(other.n)
            ## a line in this plane that crosses the intersection line
            w = v.cross(self.__n)
            pt = other._lineIntersect(Line(self.p, w, STRICT), tol)
            if not isinstance(pt, Point):
                logger.debug('no crossing point for %s and %s', self, other)
                raise UndefinedOperationError(
                    'plane intersection point not found')
            return Line(pt, v, STRICT)
        return other.getIntersect(self, tol)

    def getDistanceSquared(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            if self.isIntersectedBy(other, tol):
                return 0
            e = self._eval(other)
            return tol.div(e * e, self.__n.getMagnitudeSquared())
        if isinstance(other, Line):
            if self.isParallel(other, tol):
                return self.getDistanceSquared(other.p, tol)
            return 0
        if isinstance(other, Ray):
            if self.intersects(other, tol):
                return 0
            return self.getDistanceSquared(other.p, tol)
        if isinstance(other, LineSegment):
            if self.intersects(other, tol):
                return 0
            return min(self.getDistanceSquared(other.p, tol),
                       self.getDistanceSquared(other.q, tol))
        if isinstance(other, Plane):
            if self.isParallel(other, tol):
                return self.getDistanceSquared(other.p, tol)
            return 0
        return other.getDistanceSquared(self, tol)


def isBetweenPlanes(pl1, pl2, pt, tol=None):
    """True if ``pt`` lies between the planes ``pl1`` and ``pl2``
    (inclusive), judged from the point of each plane"""
    tol = resolve(tol)
    return (pl1.isOnSameSide(pt, pl2.p, tol)
            and pl2.isOnSameSide(pt, pl1.p, tol))


def getPlane(points, tol=None):
    """a plane through the first three non-collinear ``points``"""
    tol = resolve(tol)
    unique = getUnique(points, tol)
    if len(unique) < 3:
        raise DegenerateInputError('fewer than three distinct points')
    l = Line(unique[0], unique[1], tol)
    for p in unique[2:]:
        if not l.isIntersectedBy(p, tol):
            return Plane(unique[0], unique[1], p, tol=tol)
    raise DegenerateInputError('points are collinear')


def isCoplanar(points, tol=None):
    """True if all ``points`` lie on one plane"""
    tol = resolve(tol)
    if isCollinear(points, tol):
        return True
    pl = getPlane(points, tol)
    return all(pl.isIntersectedBy(p, tol) for p in points)
