"""Tests for the monotone approximation scheme and its telescoping increments."""

from fractions import Fraction

import pytest

from lintegral_core import (
    MeasurableSpace, SimpleFunc, Approximator, approx, eapprox, approx_at, eapprox_diff, approx_sequence,
    CalkinWilfEnumeration, NaturalEnumeration, DyadicEnumeration, ENNReal, ZERO, TOP,
    NonMeasurableFunctionError,
)
from lintegral_core.pkgs.simple_func.approx import sum_eapprox_diff, _increment

ENUMS = [CalkinWilfEnumeration(), DyadicEnumeration(), NaturalEnumeration()]

TARGET_VALUES = {
    "p": 0,
    "q": Fraction(1, 3),
    "r": 2,
    "s": Fraction(7, 5),
    "t": TOP,
    "u": 0.3,
}


@pytest.fixture
def space():
    return MeasurableSpace(sorted(TARGET_VALUES))


def target(x):
    return TARGET_VALUES[x]


class TestScenarios:

    def test_natural_enumeration_on_infinite_target(self, abc_space):
        """enum(k) = k and target ≡ ∞ give approx(n) ≡ n - 1."""
        enum = NaturalEnumeration()
        assert approx(enum, lambda x: TOP, abc_space, 0) == SimpleFunc.zero(abc_space)
        for n in range(1, 12):
            f = approx(enum, lambda x: TOP, abc_space, n)
            assert f.range == (ENNReal(n - 1),)

    def test_calkin_wilf_on_infinite_target_is_unbounded(self, abc_space):
        for k in range(1, 7):
            f = eapprox(lambda x: TOP, abc_space, 2 ** k)
            assert f("a") >= k

    def test_exact_once_value_is_enumerated(self, abc_space):
        enum = CalkinWilfEnumeration()
        # 3/2 is enum(5)
        assert approx(enum, lambda x: Fraction(3, 2), abc_space, 5)("a") == 1
        assert approx(enum, lambda x: Fraction(3, 2), abc_space, 6)("a") == Fraction(3, 2)
        assert approx(enum, lambda x: Fraction(3, 2), abc_space, 40)("a") == Fraction(3, 2)


class TestMonotonicity:

    @pytest.mark.parametrize("enum", ENUMS, ids=lambda e: e.name)
    def test_nondecreasing(self, space, enum):
        previous = approx(enum, target, space, 0)
        for n in range(1, 40):
            current = approx(enum, target, space, n)
            assert previous <= current
            assert current.le(SimpleFunc.of_function(space, lambda x: ENNReal(target(x))))
            previous = current

    @pytest.mark.parametrize("enum", ENUMS, ids=lambda e: e.name)
    def test_matches_pointwise_definition(self, space, enum):
        for n in range(0, 30):
            f = approx(enum, target, space, n)
            for x in space:
                assert f(x) == approx_at(enum, target, x, n)

    def test_sequence_matches_direct_construction(self, space):
        enum = CalkinWilfEnumeration()
        seq = approx_sequence(enum, target, space)
        for n in range(25):
            assert next(seq) == approx(enum, target, space, n)

    def test_sequence_restarts_on_every_call(self, space):
        enum = DyadicEnumeration()
        first = [f for _, f in zip(range(10), approx_sequence(enum, target, space))]
        second = [f for _, f in zip(range(10), approx_sequence(enum, target, space))]
        assert first == second

    def test_negative_index(self, space):
        with pytest.raises(ValueError):
            eapprox(target, space, -1)


class TestTelescoping:

    @pytest.mark.parametrize("enum", ENUMS, ids=lambda e: e.name)
    def test_increments_sum_to_approximant(self, space, enum):
        for n in range(20):
            assert sum_eapprox_diff(enum, target, space, n) == approx(enum, target, space, n)

    def test_first_increment_is_first_approximant(self, space):
        enum = CalkinWilfEnumeration()
        assert eapprox_diff(enum, target, space, 0) == approx(enum, target, space, 0)

    def test_increments_are_nonnegative(self, space):
        enum = CalkinWilfEnumeration()
        for n in range(1, 20):
            diff = eapprox_diff(enum, target, space, n)
            assert all(v >= ZERO for v in diff.range)

    @pytest.mark.skipif(not __debug__, reason="assertions disabled")
    def test_decrease_is_an_invariant_violation(self):
        with pytest.raises(AssertionError):
            _increment(ENNReal(1), ENNReal(2))


class TestApproximator:

    def test_horizon_reaches_target(self, abc_space):
        values = {"a": 1, "b": 2, "c": 0}
        scheme = Approximator(values.get, abc_space)
        # 1 = enum(1), 2 = enum(3)
        assert scheme.horizon() == 4
        f = scheme(4)
        assert [f(x) for x in "abc"] == [1, 2, 0]
        assert scheme(3)("b") == 1

    def test_horizon_limit(self, abc_space):
        scheme = Approximator({"a": 1, "b": 2, "c": 0}.get, abc_space)
        assert scheme.horizon(limit=4) == 4
        assert scheme.horizon(limit=3) is None

    def test_horizon_undefined_outside_enumeration(self, abc_space):
        scheme = Approximator(lambda x: Fraction(1, 2), abc_space, NaturalEnumeration())
        assert scheme.horizon() is None

    def test_infinite_set(self, space):
        scheme = Approximator(target, space)
        assert scheme.infinite_set() == frozenset({"t"})
        assert ENNReal(Fraction(7, 5)) in scheme.finite_values()

    def test_delegates(self, space):
        scheme = Approximator(target, space, DyadicEnumeration())
        assert scheme(9) == approx(DyadicEnumeration(), target, space, 9)
        assert scheme.at("r", 9) == approx_at(DyadicEnumeration(), target, "r", 9)
        assert scheme.diff(3) == eapprox_diff(DyadicEnumeration(), target, space, 3)
        assert next(scheme.sequence(start=5)) == scheme(5)

    def test_non_measurable_target(self, atomic_space):
        with pytest.raises(NonMeasurableFunctionError):
            Approximator(lambda x: x, atomic_space)
        with pytest.raises(NonMeasurableFunctionError):
            eapprox(lambda x: x, atomic_space, 3)

    def test_measurable_target_on_atoms(self, atomic_space):
        f = eapprox(lambda x: 1 if x <= 2 else 3, atomic_space, 8)
        assert f.preimage(ENNReal(1)) == frozenset({1, 2})
        assert f(3) == 3
