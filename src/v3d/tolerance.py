## exact and approximate numeric strategies for v3d

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

"""numeric tolerance strategies for **v3d**

===============
Overview
===============

Every predicate in v3d (is a point on a plane, are two lines
parallel, are two points the same point) is evaluated through a
``Tolerance`` object.  Two strategies are provided:

``Exact(oom, rounding)``
    Values are ``fractions.Fraction`` rationals and comparisons are
    exact.  Irrational results (square roots, sines, cosines) are
    evaluated with ``mpmath`` at enough working precision and then
    rounded to a multiple of ``10**oom`` using ``rounding``.

``Approximate(epsilon)``
    Values are floats.  Two values are equal if they differ by less
    than ``epsilon``, and anything within ``epsilon`` of zero has sign
    zero.

The strategies share one interface, so the geometry algorithms are
written once.  Pass a strategy as the ``tol`` argument of any
precision-sensitive method, or pass a float (taken as an epsilon) or
an int (taken as an order of magnitude).  ``None`` selects the module
defaults below, which may be overridden from the environment with
``V3D_EPSILON``, ``V3D_OOM``, ``V3D_ROUNDING`` and ``V3D_NUMERIC``.

"""

import enum
import logging
import math
import os
from fractions import Fraction

import mpmath as mpm

logger = logging.getLogger(__name__)


class Rounding(enum.Enum):
    """rounding modes for irrational results in exact mode"""
    UP = 'up'
    DOWN = 'down'
    CEILING = 'ceiling'
    FLOOR = 'floor'
    HALF_UP = 'half_up'
    HALF_DOWN = 'half_down'
    HALF_EVEN = 'half_even'


def _envfloat(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f'bad {name} value: {raw!r}') from None


def _envint(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'bad {name} value: {raw!r}') from None


def _envrounding(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return Rounding[raw.strip().upper()]
    except KeyError:
        raise ValueError(f'bad {name} value: {raw!r}') from None


## module defaults, used when a caller passes tol=None
epsilon = _envfloat('V3D_EPSILON', 0.000005)
oom = _envint('V3D_OOM', -20)
rounding = _envrounding('V3D_ROUNDING', Rounding.HALF_UP)
numeric = os.environ.get('V3D_NUMERIC', 'approximate').strip().lower()
if numeric not in ('approximate', 'exact'):
    raise ValueError(f'bad V3D_NUMERIC value: {numeric!r}')
logger.debug('numeric defaults: %s, epsilon=%s, oom=%s, rounding=%s',
             numeric, epsilon, oom, rounding.name)

## extra decimal digits carried by mpmath beyond what oom asks for
GUARD_DIGITS = 10


def roundToOOM(value, oom, rounding=Rounding.HALF_UP):
    """Round the rational ``value`` to an integer multiple of
    ``10**oom`` using ``rounding``, returning a ``Fraction``."""
    unit = Fraction(10) ** oom
    q = Fraction(value) / unit
    n = math.floor(q)
    rem = q - n
    if rem == 0:
        return n * unit
    positive = q > 0
    if rounding is Rounding.FLOOR:
        pass
    elif rounding is Rounding.CEILING:
        n += 1
    elif rounding is Rounding.DOWN:
        if not positive:
            n += 1
    elif rounding is Rounding.UP:
        if positive:
            n += 1
    elif rem > Fraction(1, 2):
        n += 1
    elif rem == Fraction(1, 2):
        if rounding is Rounding.HALF_UP:
            if positive:
                n += 1
        elif rounding is Rounding.HALF_DOWN:
            if not positive:
                n += 1
        elif n % 2:
            n += 1
    return n * unit


def _tofraction(r):
    ## man_exp drops the sign, so read it from the raw tuple
    sign, man, exp, _ = r._mpf_
    f = Fraction(int(man)) * Fraction(2) ** int(exp)
    return -f if sign else f


class Tolerance:
    """Interface shared by the numeric strategies.

    ``isZeroRelative(x, norm2)`` and ``signRelative(x, norm2)`` judge
    ``x / sqrt(norm2)`` without taking the square root.  They are how
    "point on plane" and "vectors parallel" become distance tests.
    """

    isExact = False

    def num(self, x):
        raise NotImplementedError

    def div(self, a, b):
        raise NotImplementedError

    def isZero(self, x):
        raise NotImplementedError

    def equals(self, a, b):
        return self.isZero(a - b)

    def sign(self, x):
        if self.isZero(x):
            return 0
        return 1 if x > 0 else -1

    def compare(self, a, b):
        return self.sign(a - b)

    def isZeroRelative(self, x, norm2):
        raise NotImplementedError

    def signRelative(self, x, norm2):
        if self.isZeroRelative(x, norm2):
            return 0
        return 1 if x > 0 else -1

    def sqrt(self, x):
        raise NotImplementedError

    def sin(self, x):
        raise NotImplementedError

    def cos(self, x):
        raise NotImplementedError

    def acos(self, x):
        raise NotImplementedError

    def pi(self):
        raise NotImplementedError


class Approximate(Tolerance):
    """double-precision arithmetic with an absolute epsilon"""

    def __init__(self, epsilon=None):
        if epsilon is None:
            epsilon = globals()['epsilon']
        if not epsilon > 0:
            raise ValueError('bad epsilon value: '+str(epsilon))
        self.__epsilon = float(epsilon)

    @property
    def epsilon(self):
        return self.__epsilon

    def num(self, x):
        return float(x)

    def div(self, a, b):
        return float(a) / float(b)

    def isZero(self, x):
        return abs(x) < self.__epsilon

    def isZeroRelative(self, x, norm2):
        if norm2 == 0:
            return self.isZero(x)
        return float(x) * float(x) < self.__epsilon * self.__epsilon * float(norm2)

    def sqrt(self, x):
        x = float(x)
        if x < 0:
            if x > -self.__epsilon:
                return 0.0
            raise ValueError('square root of negative value: '+str(x))
        return math.sqrt(x)

    def sin(self, x):
        return math.sin(float(x))

    def cos(self, x):
        return math.cos(float(x))

    def acos(self, x):
        return math.acos(max(-1.0, min(1.0, float(x))))

    def pi(self):
        return math.pi

    def __eq__(self, other):
        return isinstance(other, Approximate) and other.epsilon == self.epsilon

    def __hash__(self):
        return hash(('Approximate', self.__epsilon))

    def __repr__(self):
        return f"Approximate({self.__epsilon})"


class Exact(Tolerance):
    """rational arithmetic, with irrational results rounded to a
    multiple of ``10**oom``"""

    isExact = True

    def __init__(self, oom=None, rounding=None):
        if oom is None:
            oom = globals()['oom']
        if rounding is None:
            rounding = globals()['rounding']
        if isinstance(oom, bool) or not isinstance(oom, int):
            raise ValueError('bad oom value: '+str(oom))
        if not isinstance(rounding, Rounding):
            raise ValueError('bad rounding mode: '+str(rounding))
        self.__oom = oom
        self.__rounding = rounding

    @property
    def oom(self):
        return self.__oom

    @property
    def rounding(self):
        return self.__rounding

    def num(self, x):
        return Fraction(x)

    def div(self, a, b):
        return Fraction(a) / Fraction(b)

    def isZero(self, x):
        return x == 0

    def equals(self, a, b):
        return a == b

    def isZeroRelative(self, x, norm2):
        return x == 0

    def _dps(self, x):
        digits = len(str(abs(math.floor(x))))
        return max(-self.__oom, 0) + digits + GUARD_DIGITS

    def _round(self, r):
        return roundToOOM(_tofraction(r), self.__oom, self.__rounding)

    def sqrt(self, x):
        x = Fraction(x)
        if x < 0:
            raise ValueError('square root of negative value: '+str(x))
        rn = math.isqrt(x.numerator)
        rd = math.isqrt(x.denominator)
        if rn * rn == x.numerator and rd * rd == x.denominator:
            return Fraction(rn, rd)
        with mpm.workdps(self._dps(x)):
            r = mpm.sqrt(mpm.mpf(x.numerator) / x.denominator)
            return self._round(r)

    def sin(self, x):
        x = Fraction(x)
        if x == 0:
            return Fraction(0)
        with mpm.workdps(self._dps(x)):
            return self._round(mpm.sin(mpm.mpf(x.numerator) / x.denominator))

    def cos(self, x):
        x = Fraction(x)
        if x == 0:
            return Fraction(1)
        with mpm.workdps(self._dps(x)):
            return self._round(mpm.cos(mpm.mpf(x.numerator) / x.denominator))

    def acos(self, x):
        x = max(Fraction(-1), min(Fraction(1), Fraction(x)))
        if x == 1:
            return Fraction(0)
        with mpm.workdps(self._dps(4)):
            return self._round(mpm.acos(mpm.mpf(x.numerator) / x.denominator))

    def pi(self):
        with mpm.workdps(self._dps(4)):
            return self._round(+mpm.pi)

    def __eq__(self, other):
        return (isinstance(other, Exact) and other.oom == self.oom
                and other.rounding is self.rounding)

    def __hash__(self):
        return hash(('Exact', self.__oom, self.__rounding))

    def __repr__(self):
        return f"Exact({self.__oom}, {self.__rounding})"


def defaultTolerance():
    """return a tolerance built from the module defaults"""
    if numeric == 'exact':
        return Exact(oom, rounding)
    return Approximate(epsilon)


def resolve(tol=None):
    """Turn a ``tol`` argument into a ``Tolerance``.

    ``None`` gives the default strategy, a float is an epsilon for
    ``Approximate``, an int is an order of magnitude for ``Exact``.
    """
    if tol is None:
        return defaultTolerance()
    if isinstance(tol, Tolerance):
        return tol
    if isinstance(tol, bool):
        raise ValueError('bad tolerance: '+repr(tol))
    if isinstance(tol, float):
        return Approximate(tol)
    if isinstance(tol, int):
        return Exact(tol)
    raise ValueError('bad tolerance: '+repr(tol))


## for exact zero tests on values already validated by the caller
STRICT = Exact(0)
