## axis-aligned bounding boxes for v3d

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

"""axis-aligned bounding boxes for **v3d**

===============
Overview
===============

An ``AABB`` is a box given by per-axis ``[min, max]`` intervals, held
relative to an offset just as a ``Point`` is.  ``AABBX``, ``AABBY`` and
``AABBZ`` are flat boxes whose x, y or z interval is a single value.

Boxes are used to reject pairs of shapes that cannot meet before any
exact test is made.  All the box-box tests are interval tests per
axis:

* ``intersects``: every axis overlaps
* ``isBeyond``: some axis does not overlap
* ``contains``: every axis of the other box is inside this one

Against any other shape a box works with that shape's own bounding
box, so ``Triangle(...).intersects(box)`` is a bounds test.

Corner points, edges, bounding planes and the centroid are built on
first request and cached; ``translate`` drops them.

Corners are named by lower (``l``) or upper (``u``) bound in x, y and
z order, so ``lul`` is ``(xmin, ymax, zmin)``.  The bounding planes,
all with outward normals, are ``l`` (xmin), ``r`` (xmax), ``b`` (ymin),
``t`` (ymax), ``a`` (zmin) and ``f`` (zmax).

"""

from v3d.errors import DegenerateInputError, UndefinedOperationError
from v3d.geometry import Geometry
from v3d.point import Point, getUnique
from v3d.tolerance import STRICT, resolve
from v3d.vector import Vector

_CORNERS = ('lll', 'llu', 'lul', 'luu', 'ull', 'ulu', 'uul', 'uuu')


class AABB(Geometry):
    """axis-aligned box ``[xmin, xmax] x [ymin, ymax] x [zmin, zmax]``"""

    ## index of the fixed axis for the flat variants
    _axis = None

    def __init__(self, xmin, xmax, ymin, ymax, zmin, zmax, offset=None):
        super().__init__(offset)
        if xmin > xmax or ymin > ymax or zmin > zmax:
            raise ValueError(f'bad AABB bounds: {(xmin, xmax, ymin, ymax, zmin, zmax)}')
        self.__lo = (xmin, ymin, zmin)
        self.__hi = (xmax, ymax, zmax)
        self.__corners = None
        self.__edges = None
        self.__planes = None

    @classmethod
    def _fromBounds(cls, lo, hi):
        return AABB(lo[0], hi[0], lo[1], hi[1], lo[2], hi[2])

    @classmethod
    def fromPoints(cls, points):
        """smallest box of this class holding all ``points``"""
        points = list(points)
        if not points:
            raise ValueError('bad point list: empty')
        coords = [(p.x, p.y, p.z) for p in points]
        lo = tuple(min(c[i] for c in coords) for i in range(3))
        hi = tuple(max(c[i] for c in coords) for i in range(3))
        return cls._fromBounds(lo, hi)

    def _invalidate(self):
        super()._invalidate()
        self.__corners = None
        self.__edges = None
        self.__planes = None

    def getLo(self):
        o = self.offset
        return (o.dx + self.__lo[0], o.dy + self.__lo[1], o.dz + self.__lo[2])

    def getHi(self):
        o = self.offset
        return (o.dx + self.__hi[0], o.dy + self.__hi[1], o.dz + self.__hi[2])

    @property
    def xMin(self):
        return self.getLo()[0]

    @property
    def xMax(self):
        return self.getHi()[0]

    @property
    def yMin(self):
        return self.getLo()[1]

    @property
    def yMax(self):
        return self.getHi()[1]

    @property
    def zMin(self):
        return self.getLo()[2]

    @property
    def zMax(self):
        return self.getHi()[2]

    def __repr__(self):
        lo, hi = self.getLo(), self.getHi()
        return (f"{type(self).__name__}({lo[0]}, {hi[0]}, {lo[1]}, {hi[1]}, "
                f"{lo[2]}, {hi[2]})")

    def getAABB(self):
        return self

    def rotate(self, pt, axis, theta, tol=None):
        raise UndefinedOperationError(
            'an axis-aligned box cannot be rotated; rotate the shape instead')

    ## derived geometry

    def getCorners(self):
        """the eight corners, in ``lll`` ... ``uuu`` order"""
        if self.__corners is None:
            lo, hi = self.getLo(), self.getHi()
            self.__corners = [Point(hi[0] if c[0] == 'u' else lo[0],
                                    hi[1] if c[1] == 'u' else lo[1],
                                    hi[2] if c[2] == 'u' else lo[2])
                              for c in _CORNERS]
        return self.__corners

    def getCorner(self, name):
        """corner by name, for example ``getCorner('ulu')``"""
        try:
            return self.getCorners()[_CORNERS.index(name)]
        except ValueError:
            raise ValueError('bad corner name: '+repr(name)) from None

    def getPoints(self):
        return getUnique(self.getCorners(), STRICT)

    def getEdges(self):
        """the distinct, non-degenerate edges of the box"""
        from v3d.segment import LineSegment
        if self.__edges is None:
            corners = self.getCorners()
            edges = []
            for i in range(8):
                for bit in (4, 2, 1):
                    j = i | bit
                    if j == i or corners[i].equals(corners[j], STRICT):
                        continue
                    e = LineSegment(corners[i], corners[j], STRICT)
                    if not any(e.equals(f, STRICT) for f in edges):
                        edges.append(e)
            self.__edges = edges
        return self.__edges

    def getPlanes(self):
        """bounding planes keyed ``l``, ``r``, ``b``, ``t``, ``a``, ``f``"""
        from v3d.plane import Plane
        if self.__planes is None:
            lll = self.getCorners()[0]
            uuu = self.getCorners()[7]
            self.__planes = {
                'l': Plane(lll, Vector(-1, 0, 0)),
                'r': Plane(uuu, Vector(1, 0, 0)),
                'b': Plane(lll, Vector(0, -1, 0)),
                't': Plane(uuu, Vector(0, 1, 0)),
                'a': Plane(lll, Vector(0, 0, -1)),
                'f': Plane(uuu, Vector(0, 0, 1)),
            }
        return self.__planes

    def getCentroid(self, tol=None):
        tol = resolve(tol)
        lo, hi = self.getLo(), self.getHi()
        return Point(*[tol.div(lo[i] + hi[i], 2) for i in range(3)])

    ## box tests

    def _resultType(self, lo, hi):
        ax = self._axis
        if ax is not None and lo[ax] == hi[ax]:
            return type(self)
        return AABB

    def union(self, other):
        """smallest box holding both boxes"""
        lo1, hi1 = self.getLo(), self.getHi()
        lo2, hi2 = other.getLo(), other.getHi()
        lo = tuple(min(lo1[i], lo2[i]) for i in range(3))
        hi = tuple(max(hi1[i], hi2[i]) for i in range(3))
        cls = self._resultType(lo, hi) if type(self) is type(other) else AABB
        return cls._fromBounds(lo, hi)

    def intersects(self, other, tol=None):
        tol = resolve(tol)
        if isinstance(other, Point):
            return self.contains(other, tol)
        if isinstance(other, AABB):
            return not self.isBeyond(other, tol)
        return self.intersects(other.getAABB(), tol)

    def isBeyond(self, other, tol=None):
        """True if the boxes are separated on some axis"""
        tol = resolve(tol)
        lo1, hi1 = self.getLo(), self.getHi()
        lo2, hi2 = other.getLo(), other.getHi()
        return any(tol.compare(hi1[i], lo2[i]) < 0
                   or tol.compare(hi2[i], lo1[i]) < 0 for i in range(3))

    def contains(self, other, tol=None):
        """True if ``other`` (a box or a point) is inside this box"""
        tol = resolve(tol)
        lo, hi = self.getLo(), self.getHi()
        if isinstance(other, Point):
            c = (other.x, other.y, other.z)
            return all(tol.compare(lo[i], c[i]) <= 0
                       and tol.compare(c[i], hi[i]) <= 0 for i in range(3))
        lo2, hi2 = other.getLo(), other.getHi()
        return all(tol.compare(lo[i], lo2[i]) <= 0
                   and tol.compare(hi2[i], hi[i]) <= 0 for i in range(3))

    def getIntersect(self, other, tol=None):
        """The overlap of two boxes, or ``None``.  Any other shape is
        taken by its bounding box."""
        tol = resolve(tol)
        if isinstance(other, Point):
            return other if self.contains(other, tol) else None
        if not isinstance(other, AABB):
            other = other.getAABB()
        if not self.intersects(other, tol):
            return None
        lo1, hi1 = self.getLo(), self.getHi()
        lo2, hi2 = other.getLo(), other.getHi()
        lo = tuple(max(lo1[i], lo2[i]) for i in range(3))
        hi = tuple(max(lo[i], min(hi1[i], hi2[i])) for i in range(3))
        cls = self._resultType(lo, hi) if type(self) is type(other) else AABB
        return cls._fromBounds(lo, hi)

    def getDistanceSquared(self, other, tol=None):
        """squared gap to a point or another box; any other shape is
        taken by its bounding box"""
        tol = resolve(tol)
        lo1, hi1 = self.getLo(), self.getHi()
        if isinstance(other, Point):
            lo2 = hi2 = (other.x, other.y, other.z)
        else:
            box = other.getAABB()
            lo2, hi2 = box.getLo(), box.getHi()
        d2 = 0
        for i in range(3):
            gap = max(lo2[i] - hi1[i], lo1[i] - hi2[i], 0)
            if not tol.isZero(gap):
                d2 = d2 + gap * gap
        return d2

    def equals(self, other, tol=None):
        if not isinstance(other, AABB):
            return False
        tol = resolve(tol)
        lo1, hi1 = self.getLo(), self.getHi()
        lo2, hi2 = other.getLo(), other.getHi()
        return all(tol.equals(lo1[i], lo2[i]) and tol.equals(hi1[i], hi2[i])
                   for i in range(3))


def _flatBounds(cls, lo, hi):
    ax = cls._axis
    if lo[ax] != hi[ax]:
        raise DegenerateInputError(
            f'{cls.__name__} points do not share a {"xyz"[ax]} coordinate')


class AABBX(AABB):
    """flat box in the plane ``x = x``"""

    _axis = 0

    def __init__(self, x, ymin, ymax, zmin, zmax, offset=None):
        super().__init__(x, x, ymin, ymax, zmin, zmax, offset)

    @classmethod
    def _fromBounds(cls, lo, hi):
        _flatBounds(cls, lo, hi)
        return AABBX(lo[0], lo[1], hi[1], lo[2], hi[2])

    @property
    def x(self):
        return self.xMin

    def getPlane(self):
        """the plane the box lies in"""
        return self.getPlanes()['r']


class AABBY(AABB):
    """flat box in the plane ``y = y``"""

    _axis = 1

    def __init__(self, y, xmin, xmax, zmin, zmax, offset=None):
        super().__init__(xmin, xmax, y, y, zmin, zmax, offset)

    @classmethod
    def _fromBounds(cls, lo, hi):
        _flatBounds(cls, lo, hi)
        return AABBY(lo[1], lo[0], hi[0], lo[2], hi[2])

    @property
    def y(self):
        return self.yMin

    def getPlane(self):
        return self.getPlanes()['t']


class AABBZ(AABB):
    """flat box in the plane ``z = z``"""

    _axis = 2

    def __init__(self, z, xmin, xmax, ymin, ymax, offset=None):
        super().__init__(xmin, xmax, ymin, ymax, z, z, offset)

    @classmethod
    def _fromBounds(cls, lo, hi):
        _flatBounds(cls, lo, hi)
        return AABBZ(lo[2], lo[0], hi[0], lo[1], hi[1])

    @property
    def z(self):
        return self.zMin

    def getPlane(self):
        return self.getPlanes()['f']
