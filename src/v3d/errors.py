## exception classes for the v3d geometry kernel

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

"""errors raised by **v3d** geometry operations

Bad geometry is reported with ``ValueError`` subclasses, so callers
that already guard against ``ValueError`` keep working.  An empty
intersection is never an error: it is ``None``.
"""


class GeometryError(ValueError):
    """base class for v3d geometry errors"""


class DegenerateInputError(GeometryError):
    """raised at construction time when the defining points or vectors
    cannot form the requested shape, for example coincident points,
    collinear triangle vertices, or a zero direction vector"""


class UndefinedOperationError(GeometryError):
    """raised when a query has no meaningful answer for the shapes
    involved, such as joining two disjoint partial intersections"""
