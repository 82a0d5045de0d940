## polygons with holes for v3d

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

"""polygons with holes for **v3d**

A ``Polygon`` is a set of coplanar convex ``parts`` (which may
overlap) minus a set of convex ``holes``.  A point is in the polygon
if it is in some part and in no hole: holes always win over parts.
"""

from v3d.errors import DegenerateInputError, UndefinedOperationError
from v3d.geometry import Geometry
from v3d.hull import ConvexHull
from v3d.point import Point
from v3d.tolerance import resolve


class Polygon(Geometry):
    """coplanar convex parts minus convex holes"""

    def __init__(self, parts, holes=None, tol=None):
        tol = resolve(tol)
        super().__init__()
        parts = list(parts)
        holes = list(holes or [])
        if not parts:
            raise DegenerateInputError('polygon needs at least one part')
        for h in parts + holes:
            if not isinstance(h, ConvexHull):
                raise ValueError('bad polygon part: '+str(h))
        pl = parts[0].pl
        for h in parts[1:] + holes:
            if not pl.equalsIgnoreOrientation(h.pl, tol):
                raise DegenerateInputError('polygon parts are not coplanar')
        self.__parts = parts
        self.__holes = holes
        self.__hulls = {}

    def _invalidate(self):
        super()._invalidate()
        self.__hulls = {}

    @property
    def parts(self):
        return list(self.__parts)

    @property
    def holes(self):
        return list(self.__holes)

    def __repr__(self):
        return f"Polygon({self.__parts}, {self.__holes})"

    def translate(self, v):
        super().translate(v)
        for h in self.__parts + self.__holes:
            h.translate(v)

    def getPoints(self):
        pts = []
        for h in self.__parts:
            pts.extend(h.getPoints())
        return pts

    def _rotated(self, pt, uv, theta, tol):
        return Polygon([h._rotated(pt, uv, theta, tol) for h in self.__parts],
                       [h._rotated(pt, uv, theta, tol) for h in self.__holes],
                       tol)

    def getConvexHull(self, tol=None):
        """convex hull of all the part points, cached per tolerance"""
        tol = resolve(tol)
        if tol not in self.__hulls:
            self.__hulls[tol] = ConvexHull(self.__parts[0].n,
                                           self.getPoints(), tol)
        return self.__hulls[tol]

    def isIntersectedBy(self, pt, tol=None):
        tol = resolve(tol)
        if not self.getConvexHull(tol).isIntersectedBy(pt, tol):
            return False
        if any(h.isIntersectedBy(pt, tol) for h in self.__holes):
            return False
        return any(h.isIntersectedBy(pt, tol) for h in self.__parts)

    def getIntersect(self, other, tol=None):
        if isinstance(other, Point):
            return other if self.isIntersectedBy(other, tol) else None
        raise UndefinedOperationError(
            'polygon intersection is only defined for points')

    def getDistanceSquared(self, other, tol=None):
        """Distance to a point.  A point in a hole is measured to the
        edges of the holes holding it."""
        tol = resolve(tol)
        if not isinstance(other, Point):
            raise UndefinedOperationError(
                'polygon distance is only defined for points')
        if self.isIntersectedBy(other, tol):
            return 0
        inside = [h for h in self.__holes if h.isIntersectedBy(other, tol)]
        if inside:
            return min(e.getDistanceSquared(other, tol)
                       for h in inside for e in h.getEdges())
        return min(h.getDistanceSquared(other, tol) for h in self.__parts)

    def equals(self, other, tol=None):
        if not isinstance(other, Polygon):
            return False
        tol = resolve(tol)

        def match(a, b):
            return (len(a) == len(b)
                    and all(any(x.equals(y, tol) for y in b) for x in a)
                    and all(any(x.equals(y, tol) for y in a) for x in b))

        return (match(self.__parts, other.parts)
                and match(self.__holes, other.holes))
