## points for v3d

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

"""points for **v3d**

A ``Point`` is an ``offset`` vector plus a ``rel`` vector; its
coordinates are ``offset + rel``.  ``translate`` changes only the
offset.  ``setOffset`` and ``setRel`` re-split the coordinates without
moving the point.
"""

from v3d.geometry import Geometry
from v3d.tolerance import resolve
from v3d.vector import Vector


class Point(Geometry):
    """A point in 3D space.

    ``Point(x, y, z)`` builds a point from coordinates, and
    ``Point(rel, offset=...)`` from a relative position vector.
    """

    def __init__(self, x=0, y=0, z=0, offset=None):
        super().__init__(offset)
        if isinstance(x, Vector):
            self.__rel = x
        elif isinstance(x, Point):
            self.__rel = x.getVector() - self.offset
        else:
            self.__rel = Vector(x, y, z)

    @property
    def rel(self):
        return self.__rel

    @property
    def x(self):
        return self.offset.dx + self.__rel.dx

    @property
    def y(self):
        return self.offset.dy + self.__rel.dy

    @property
    def z(self):
        return self.offset.dz + self.__rel.dz

    def getVector(self):
        """position vector of this point"""
        return self.offset + self.__rel

    def setOffset(self, offset):
        """change the offset, keeping the coordinates"""
        self.__rel = self.__rel + self.offset - offset
        self._setOffset(offset)

    def setRel(self, rel):
        """change the relative vector, keeping the coordinates"""
        offset = self.offset + self.__rel - rel
        self.__rel = rel
        self._setOffset(offset)

    def __add__(self, v):
        if not isinstance(v, Vector):
            return NotImplemented
        return Point(self.__rel + v, offset=self.offset)

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector.between(other, self)
        if isinstance(other, Vector):
            return Point(self.__rel - other, offset=self.offset)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x == other.x and self.y == other.y
                and self.z == other.z)

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f"Point({self.x}, {self.y}, {self.z})"

    def getPoints(self):
        return [self]

    def _rebuild(self, points, tol):
        return points[0]

    def getLocation(self):
        """octant of this point, 1 to 8, as ``Vector.getDirection``"""
        return self.getVector().getDirection()

    def equals(self, other, tol=None):
        if not isinstance(other, Point):
            return False
        tol = resolve(tol)
        return (tol.equals(self.x, other.x) and tol.equals(self.y, other.y)
                and tol.equals(self.z, other.z))

    def isIntersectedBy(self, pt, tol=None):
        return self.equals(pt, tol)

    def getIntersect(self, other, tol=None):
        if isinstance(other, Point):
            return self if self.equals(other, tol) else None
        return other.getIntersect(self, tol)

    def getDistanceSquared(self, other, tol=None):
        if isinstance(other, Point):
            return (other - self).getMagnitudeSquared()
        return other.getDistanceSquared(self, tol)


def getUnique(points, tol=None):
    """return ``points`` with duplicates (within tolerance) removed,
    keeping first occurrences in order"""
    tol = resolve(tol)
    unique = []
    for p in points:
        if not any(p.equals(u, tol) for u in unique):
            unique.append(p)
    return unique


def getCentroid(points, tol=None):
    """mean of ``points``"""
    tol = resolve(tol)
    if not points:
        raise ValueError('bad point list: empty')
    s = Vector()
    for p in points:
        s = s + p.getVector()
    return Point(s.divide(len(points), tol))
