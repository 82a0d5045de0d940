## geometry base class for v3d

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

"""base class for all **v3d** shapes

===============
Overview
===============

Every shape carries an ``offset`` vector.  The defining points of a
shape are stored relative to that offset, so ``translate`` is a single
vector addition no matter how large the shape is.

Derived properties (bounding boxes, plane equations, edges, convex
hulls) are computed lazily the first time they are asked for, then
cached.  Any method that moves a shape must call ``_invalidate`` so
that stale values are dropped; subclasses with caches of their own
extend ``_invalidate`` and call the base version.

Shapes are otherwise immutable.  ``rotate`` never changes the shape it
is called on: it rotates the defining points and builds a new shape
from them.

Intersection and distance methods dispatch on the type of the other
shape.  A shape answers queries against shapes of equal or lower rank
(point, line, ray, segment, plane, triangle, rectangle, hull,
tetrahedron) and hands anything higher to the other shape.

"""

import logging
from copy import deepcopy

from v3d.errors import UndefinedOperationError
from v3d.rotation import normalizeAngle, rotatePoint
from v3d.tolerance import resolve
from v3d.vector import Vector

logger = logging.getLogger(__name__)


class Geometry:
    """base class for shapes with an offset and lazily cached state"""

    def __init__(self, offset=None):
        if offset is None:
            offset = Vector()
        elif not isinstance(offset, Vector):
            raise ValueError('bad offset: '+str(offset))
        self.__offset = offset
        self.__aabb = None

    @property
    def offset(self):
        return self.__offset

    def _setOffset(self, offset):
        self.__offset = offset
        self._invalidate()

    def _invalidate(self):
        self.__aabb = None

    def translate(self, v):
        """move this shape by ``v``, in place"""
        self._setOffset(self.__offset + v)

    def getPoints(self):
        """the defining points of this shape"""
        raise NotImplementedError

    def _rebuild(self, points, tol):
        raise NotImplementedError

    def _computeAABB(self):
        from v3d.aabb import AABB
        return AABB.fromPoints(self.getPoints())

    def getAABB(self):
        """bounding box of this shape; the box is a copy, so moving it
        does not move the cached one"""
        if self.__aabb is None:
            self.__aabb = self._computeAABB()
        box = self.__aabb
        return type(box)._fromBounds(box.getLo(), box.getHi())

    def _rotated(self, pt, uv, theta, tol):
        return self._rebuild([rotatePoint(p, pt, uv, theta, tol)
                              for p in self.getPoints()], tol)

    def rotate(self, pt, axis, theta, tol=None):
        """Return a copy of this shape rotated by ``theta`` radians
        about the axis through point ``pt`` with direction ``axis``.

        ``axis`` need not be a unit vector, but must not be zero.
        """
        tol = resolve(tol)
        theta = normalizeAngle(theta, tol)
        if tol.isZero(theta):
            logger.debug('zero rotation of %s, returning a copy',
                         type(self).__name__)
            return deepcopy(self)
        uv = axis.getUnitVector(tol)
        return self._rotated(pt, uv, theta, tol)

    def getIntersect(self, other, tol=None):
        raise NotImplementedError

    def intersects(self, other, tol=None):
        return self.getIntersect(other, tol) is not None

    def getDistanceSquared(self, other, tol=None):
        raise NotImplementedError

    def getDistance(self, other, tol=None):
        tol = resolve(tol)
        return tol.sqrt(self.getDistanceSquared(other, tol))

    def equals(self, other, tol=None):
        raise NotImplementedError


class InfiniteGeometry(Geometry):
    """a shape with no finite bounds"""

    def _computeAABB(self):
        raise UndefinedOperationError(
            f'{type(self).__name__} has no finite bounding box')


def _pointsMatch(a, b, tol):
    """True if every point of ``a`` equals some point of ``b`` and vice
    versa"""
    return (all(any(p.equals(q, tol) for q in b) for p in a)
            and all(any(p.equals(q, tol) for q in a) for p in b))
