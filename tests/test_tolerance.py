import pytest
from fractions import Fraction
from v3d.tolerance import *
from v3d.tolerance import _envfloat, _envint, _envrounding


class TestRounding:
    """rounding of rationals to a multiple of 10**oom"""

    def test_half_modes(self):
        assert(roundToOOM(Fraction(25, 10), 0, Rounding.HALF_UP) == 3)
        assert(roundToOOM(Fraction(-25, 10), 0, Rounding.HALF_UP) == -3)
        assert(roundToOOM(Fraction(25, 10), 0, Rounding.HALF_DOWN) == 2)
        assert(roundToOOM(Fraction(-25, 10), 0, Rounding.HALF_DOWN) == -2)
        assert(roundToOOM(Fraction(25, 10), 0, Rounding.HALF_EVEN) == 2)
        assert(roundToOOM(Fraction(35, 10), 0, Rounding.HALF_EVEN) == 4)
        assert(roundToOOM(Fraction(-25, 10), 0, Rounding.HALF_EVEN) == -2)

    def test_directed_modes(self):
        assert(roundToOOM(Fraction(-25, 10), 0, Rounding.FLOOR) == -3)
        assert(roundToOOM(Fraction(-25, 10), 0, Rounding.CEILING) == -2)
        assert(roundToOOM(Fraction(27, 10), 0, Rounding.DOWN) == 2)
        assert(roundToOOM(Fraction(-27, 10), 0, Rounding.DOWN) == -2)
        assert(roundToOOM(Fraction(21, 10), 0, Rounding.UP) == 3)
        assert(roundToOOM(Fraction(-21, 10), 0, Rounding.UP) == -3)

    def test_oom(self):
        r = roundToOOM(Fraction(12345, 1000), -2, Rounding.HALF_UP)
        assert(r == Fraction(1235, 100))
        assert(roundToOOM(Fraction(7, 4), 0) == 2)
        assert(roundToOOM(Fraction(1, 3), -3, Rounding.FLOOR) == Fraction(333, 1000))


class TestExact:
    """exact rational strategy"""

    tol = Exact(-6)

    def test_perfect_squares_are_exact(self):
        assert(self.tol.sqrt(Fraction(9, 4)) == Fraction(3, 2))
        assert(self.tol.sqrt(25) == 5)
        assert(self.tol.sqrt(0) == 0)

    def test_irrational_sqrt(self):
        assert(self.tol.sqrt(2) == Fraction(1414214, 10**6))
        assert(Exact(-6, Rounding.FLOOR).sqrt(2) == Fraction(1414213, 10**6))
        with pytest.raises(ValueError):
            self.tol.sqrt(-1)

    def test_trig(self):
        assert(self.tol.pi() == Fraction(3141593, 10**6))
        assert(self.tol.cos(0) == 1)
        assert(self.tol.sin(0) == 0)
        assert(self.tol.acos(1) == 0)
        assert(self.tol.sin(Fraction(1, 2)) == Fraction(479426, 10**6))

    def test_negative_trig(self):
        assert(self.tol.sin(-1) == Fraction(-841471, 10**6))
        assert(self.tol.cos(3) == Fraction(-989992, 10**6))
        assert(self.tol.sin(4) < 0)
        assert(self.tol.cos(self.tol.pi()) == -1)
        assert(Exact(-6, Rounding.FLOOR).sin(-1) == Fraction(-841471, 10**6))
        assert(Exact(-6, Rounding.CEILING).sin(-1) == Fraction(-841470, 10**6))
        assert(self.tol.acos(-1) == self.tol.pi())

    def test_predicates(self):
        assert(self.tol.isZero(Fraction(0)))
        assert(not self.tol.isZero(Fraction(1, 10**30)))
        assert(self.tol.equals(Fraction(1, 2), 0.5))
        assert(self.tol.sign(Fraction(-1, 10**30)) == -1)
        assert(self.tol.isZeroRelative(0, 100))
        assert(not self.tol.isZeroRelative(Fraction(1, 10**30), 1))
        assert(self.tol.div(1, 3) == Fraction(1, 3))

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            Exact(1.5)
        with pytest.raises(ValueError):
            Exact(-3, 'half_up')


class TestApproximate:
    """epsilon strategy"""

    tol = Approximate(0.001)

    def test_equals(self):
        assert(self.tol.equals(1.0, 1.0005))
        assert(not self.tol.equals(1.0, 1.002))

    def test_sign(self):
        assert(self.tol.sign(0.0005) == 0)
        assert(self.tol.sign(-0.01) == -1)
        assert(self.tol.compare(2.0, 1.0) == 1)

    def test_relative(self):
        ## 0.5 / sqrt(1e6) is well inside epsilon
        assert(self.tol.isZeroRelative(0.5, 1e6))
        assert(not self.tol.isZeroRelative(0.5, 1.0))
        assert(self.tol.signRelative(-0.5, 1.0) == -1)

    def test_sqrt_of_tiny_negative(self):
        assert(self.tol.sqrt(-0.0001) == 0.0)
        with pytest.raises(ValueError):
            self.tol.sqrt(-1.0)

    def test_bad_epsilon(self):
        with pytest.raises(ValueError):
            Approximate(0)


class TestResolve:
    """turning tol arguments into strategies"""

    def test_resolve(self):
        assert(resolve(0.01) == Approximate(0.01))
        assert(resolve(-5) == Exact(-5))
        t = Exact(-3)
        assert(resolve(t) is t)
        assert(isinstance(resolve(None), Tolerance))
        with pytest.raises(ValueError):
            resolve('tight')
        with pytest.raises(ValueError):
            resolve(True)

    def test_environment(self, monkeypatch):
        monkeypatch.setenv('V3D_TEST_VALUE', '0.25')
        assert(_envfloat('V3D_TEST_VALUE', 1.0) == 0.25)
        monkeypatch.setenv('V3D_TEST_VALUE', '-12')
        assert(_envint('V3D_TEST_VALUE', 0) == -12)
        monkeypatch.setenv('V3D_TEST_VALUE', 'half_even')
        assert(_envrounding('V3D_TEST_VALUE', Rounding.UP) is Rounding.HALF_EVEN)
        monkeypatch.setenv('V3D_TEST_VALUE', 'sideways')
        with pytest.raises(ValueError):
            _envrounding('V3D_TEST_VALUE', Rounding.UP)
        with pytest.raises(ValueError):
            _envint('V3D_TEST_VALUE', 0)
        monkeypatch.delenv('V3D_TEST_VALUE')
        assert(_envfloat('V3D_TEST_VALUE', 1.0) == 1.0)
