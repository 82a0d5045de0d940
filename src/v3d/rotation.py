## axis-angle rotation of points for v3d

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

"""rotation about an arbitrary axis"""

from v3d.tolerance import resolve


def normalizeAngle(theta, tol=None):
    """return ``theta`` reduced into [0, 2pi)"""
    tol = resolve(tol)
    theta = tol.num(theta)
    twopi = 2 * tol.pi()
    theta = theta % twopi
    if tol.equals(theta, twopi):
        return tol.num(0)
    return theta


def rotatePoint(pt, axisPoint, uv, theta, tol=None):
    """Rotate ``pt`` by ``theta`` radians about the axis through
    ``axisPoint`` with unit direction ``uv``.  The result keeps the
    offset of ``axisPoint``."""
    w = pt - axisPoint
    return axisPoint + w.rotate(uv, theta, tol)
