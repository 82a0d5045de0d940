## joining partial intersection results for v3d

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

"""Join the partial intersections of a composite shape's pieces.

A rectangle is two triangles and a hull is a fan of triangles.  To
intersect one with some other shape, each piece is intersected on its
own and the partial results are joined with ``join``.  The pieces of
a convex shape meet along shared edges, so the partial results always
touch; if two segments fail to touch, or are not collinear, the join
has no single-geometry answer and ``UndefinedOperationError`` is
raised.
"""

import logging
from functools import reduce

from v3d.errors import UndefinedOperationError
from v3d.hull import ConvexHull, getGeometry
from v3d.line import Line, Ray
from v3d.plane import Plane
from v3d.point import Point
from v3d.segment import LineSegment, segmentOrPoint
from v3d.tolerance import resolve
from v3d.triangle import Triangle

logger = logging.getLogger(__name__)


def _fail(a, b):
    logger.debug('cannot join %s and %s', a, b)
    return UndefinedOperationError(f'cannot join {a} and {b}')


def join(a, b, tol=None):
    """the smallest single geometry that is the union of ``a`` and
    ``b``"""
    tol = resolve(tol)
    if a is None:
        return b
    if b is None:
        return a
    if isinstance(b, (Line, Ray, Plane)) and not isinstance(a, (Line, Ray, Plane)):
        a, b = b, a
    if isinstance(a, (Line, Ray, Plane)):
        if isinstance(b, (Line, Ray, Plane)):
            if a.equals(b, tol):
                return a
        elif all(a.isIntersectedBy(pt, tol) for pt in b.getPoints()):
            return a
        raise _fail(a, b)
    if isinstance(a, Point) and isinstance(b, Point):
        return segmentOrPoint(a, b, tol)
    if isinstance(a, Point) and isinstance(b, LineSegment):
        a, b = b, a
    if isinstance(a, LineSegment) and isinstance(b, Point):
        if a.isIntersectedBy(b, tol):
            return a
        raise _fail(a, b)
    if isinstance(a, LineSegment) and isinstance(b, LineSegment):
        if not a.l.equals(b.l, tol) or not a.intersects(b, tol):
            raise _fail(a, b)
        logger.debug('merging collinear segments %s and %s', a, b)
        return getGeometry(a.getPoints() + b.getPoints(), tol)
    if isinstance(a, (Triangle, ConvexHull)) or isinstance(b, (Triangle, ConvexHull)):
        return getGeometry(a.getPoints() + b.getPoints(), tol)
    raise _fail(a, b)


def joinAll(items, tol=None):
    """``join`` over a sequence of partial results"""
    tol = resolve(tol)
    return reduce(lambda a, b: join(a, b, tol), items, None)
