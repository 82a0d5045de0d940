## three dimensional vectors for v3d

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

"""directionless vectors for **v3d**

A ``Vector`` is an immutable ``(dx, dy, dz)`` triple.  Components keep
whatever numeric type they were built from (``int``, ``Fraction`` or
``float``); only division and irrational functions go through a
``Tolerance``, so an exact computation stays exact.
"""

from v3d.errors import DegenerateInputError
from v3d.tolerance import resolve


class Vector:
    """immutable 3D vector"""

    def __init__(self, dx=0, dy=0, dz=0):
        self.__dx = dx
        self.__dy = dy
        self.__dz = dz

    @classmethod
    def between(cls, p, q):
        """vector from point ``p`` to point ``q``"""
        return cls(q.x - p.x, q.y - p.y, q.z - p.z)

    @property
    def dx(self):
        return self.__dx

    @property
    def dy(self):
        return self.__dy

    @property
    def dz(self):
        return self.__dz

    def __iter__(self):
        return iter((self.__dx, self.__dy, self.__dz))

    def __add__(self, v):
        return Vector(self.__dx + v.dx, self.__dy + v.dy, self.__dz + v.dz)

    def __sub__(self, v):
        return Vector(self.__dx - v.dx, self.__dy - v.dy, self.__dz - v.dz)

    def __neg__(self):
        return Vector(-self.__dx, -self.__dy, -self.__dz)

    def __mul__(self, s):
        if isinstance(s, Vector):
            raise ValueError('use dot() or cross() to multiply vectors')
        return Vector(self.__dx * s, self.__dy * s, self.__dz * s)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return (self.__dx == other.dx and self.__dy == other.dy
                and self.__dz == other.dz)

    def __hash__(self):
        return hash((self.__dx, self.__dy, self.__dz))

    def __repr__(self):
        return f"Vector({self.__dx}, {self.__dy}, {self.__dz})"

    def reverse(self):
        return -self

    def divide(self, s, tol=None):
        tol = resolve(tol)
        return Vector(tol.div(self.__dx, s), tol.div(self.__dy, s),
                      tol.div(self.__dz, s))

    def dot(self, v):
        return self.__dx * v.dx + self.__dy * v.dy + self.__dz * v.dz

    def cross(self, v):
        return Vector(self.__dy * v.dz - self.__dz * v.dy,
                      self.__dz * v.dx - self.__dx * v.dz,
                      self.__dx * v.dy - self.__dy * v.dx)

    def getMagnitudeSquared(self):
        return self.dot(self)

    def getMagnitude(self, tol=None):
        return resolve(tol).sqrt(self.getMagnitudeSquared())

    def getUnitVector(self, tol=None):
        """return a unit vector in the direction of this one; a zero
        vector has no direction and raises ``DegenerateInputError``"""
        tol = resolve(tol)
        if self.isZero(tol):
            raise DegenerateInputError('zero vector has no unit vector')
        return self.divide(self.getMagnitude(tol), tol)

    def isZero(self, tol=None):
        tol = resolve(tol)
        return (tol.isZero(self.__dx) and tol.isZero(self.__dy)
                and tol.isZero(self.__dz))

    def equals(self, v, tol=None):
        tol = resolve(tol)
        return (tol.equals(self.__dx, v.dx) and tol.equals(self.__dy, v.dy)
                and tol.equals(self.__dz, v.dz))

    def isScalarMultiple(self, v, tol=None):
        """True if ``self`` and ``v`` are parallel (or anti-parallel).
        The zero vector is a scalar multiple of anything."""
        tol = resolve(tol)
        if self.isZero(tol):
            return True
        if v.isZero(tol):
            return False
        c = self.cross(v)
        norm2 = self.getMagnitudeSquared() * v.getMagnitudeSquared()
        return all(tol.isZeroRelative(x, norm2) for x in c)

    def isOrthogonal(self, v, tol=None):
        tol = resolve(tol)
        return tol.isZeroRelative(self.dot(v), self.getMagnitudeSquared()
                                  * v.getMagnitudeSquared())

    def getAngle(self, v, tol=None):
        """angle between two vectors in radians, in [0, pi]"""
        tol = resolve(tol)
        if self.isZero(tol) or v.isZero(tol):
            raise DegenerateInputError('angle undefined for a zero vector')
        m = self.getMagnitude(tol) * v.getMagnitude(tol)
        return tol.acos(tol.div(self.dot(v), m))

    def getDirection(self):
        """octant of this vector, 1 to 8, with zero components counted
        as positive: 1 is (+,+,+), 2 is (+,+,-), 3 is (+,-,+) and so
        on through 8 which is (-,-,-)"""
        d = 1
        if self.__dx < 0:
            d += 4
        if self.__dy < 0:
            d += 2
        if self.__dz < 0:
            d += 1
        return d

    def rotate(self, uv, theta, tol=None):
        """rotate about the unit vector ``uv`` by ``theta`` radians
        using Rodrigues' formula"""
        tol = resolve(tol)
        c = tol.cos(theta)
        s = tol.sin(theta)
        return (self * c + uv.cross(self) * s
                + uv * (uv.dot(self) * (1 - c)))


ZERO = Vector(0, 0, 0)
I = Vector(1, 0, 0)
J = Vector(0, 1, 0)
K = Vector(0, 0, 1)
