"""Tests for exact extended nonnegative real arithmetic."""

import itertools
import math
from fractions import Fraction

import pytest

from lintegral_core import ENNReal, ennreal, ZERO, ONE, TOP


class TestConstruction:
    """Coercion from plain numbers."""

    def test_exact_values(self):
        assert ENNReal(3) == 3
        assert ENNReal(0.5) == Fraction(1, 2)
        assert ENNReal(Fraction(2, 6)) == Fraction(1, 3)
        assert ENNReal("3/4") == Fraction(3, 4)

    def test_infinity_spellings(self):
        assert ENNReal(float("inf")).is_top
        assert ENNReal("inf").is_top
        assert ENNReal.infinity() == TOP
        assert TOP == math.inf

    def test_rejects_negative_and_nan(self):
        with pytest.raises(ValueError):
            ENNReal(-1)
        with pytest.raises(ValueError):
            ENNReal(float("nan"))
        with pytest.raises(ValueError):
            ENNReal(-math.inf)

    def test_immutable(self):
        x = ENNReal(2)
        with pytest.raises(AttributeError):
            x._value = Fraction(3)

    def test_hash_matches_plain_numbers(self):
        table = {ENNReal(2): "two", TOP: "top"}
        assert table[2] == "two"
        assert table[Fraction(4, 2)] == "two"
        assert table[ENNReal(math.inf)] == "top"

    def test_inspection(self):
        assert float(TOP) == math.inf
        assert ENNReal(Fraction(1, 4)).to_float() == 0.25
        assert ENNReal(7).to_fraction() == 7
        with pytest.raises(ValueError):
            TOP.to_fraction()
        assert not ZERO
        assert ONE and TOP


class TestArithmetic:
    """Total operators including the point at infinity."""

    def test_zero_times_infinity_is_zero(self):
        # IEEE-754 disagrees: 0 * inf is NaN there
        assert math.isnan(0.0 * math.inf)
        assert ZERO * TOP == ZERO
        assert TOP * 0 == ZERO
        assert 0 * TOP == ZERO

    def test_positive_times_infinity(self):
        assert ENNReal(Fraction(1, 1000)) * TOP == TOP
        assert TOP * TOP == TOP

    def test_addition_absorbs(self):
        assert TOP + 1 == TOP
        assert 1 + TOP == TOP
        assert ENNReal(1) + Fraction(1, 2) == Fraction(3, 2)

    def test_truncated_subtraction(self):
        assert ENNReal(3) - 5 == ZERO
        assert ENNReal(5) - 2 == 3
        assert 5 - ENNReal(2) == 3
        assert TOP - 3 == TOP
        assert TOP - TOP == ZERO
        assert ENNReal(3).tsub(TOP) == ZERO

    def test_division(self):
        assert ENNReal(1) / 0 == TOP
        assert ZERO / 0 == ZERO
        assert TOP / TOP == ZERO
        assert ENNReal(3) / 4 == Fraction(3, 4)
        assert 1 / ENNReal(4) == Fraction(1, 4)
        assert TOP.inv() == ZERO

    def test_order(self):
        values = [TOP, ENNReal(2), ZERO, ENNReal(Fraction(1, 3))]
        assert sorted(values) == [ZERO, Fraction(1, 3), 2, TOP]
        assert TOP > 10 ** 100
        assert ENNReal(1) > -5
        assert ENNReal(2).max(TOP) == TOP
        assert ENNReal(2).min(TOP) == 2
        assert max(ENNReal(1), ENNReal(3)) == 3

    def test_distributes_over_addition(self):
        samples = [ZERO, ENNReal(Fraction(1, 2)), ENNReal(3), TOP]
        for a, b, c in itertools.product(samples, repeat=3):
            assert a * (b + c) == a * b + a * c


class TestReductions:
    """Sums and suprema."""

    def test_empty_sup_is_zero(self):
        assert ENNReal.sup([]) == ZERO

    def test_sum_is_order_independent(self):
        values = [1, Fraction(1, 3), TOP, 0, Fraction(2, 7)]
        results = {ENNReal.sum(p) for p in itertools.permutations(values)}
        assert results == {TOP}
        finite = [1, Fraction(1, 3), Fraction(2, 7), 5]
        assert len({ENNReal.sum(p) for p in itertools.permutations(finite)}) == 1

    def test_tsum_truncates_infinite_series(self):
        halves = (Fraction(1, 2 ** k) for k in itertools.count(1))
        assert ENNReal.tsum(halves, max_terms=10) == 1 - Fraction(1, 1024)

    def test_tsum_stops_at_infinity(self):
        assert ENNReal.tsum(itertools.repeat(TOP)) == TOP

    def test_ennreal_helper_is_identity_on_instances(self):
        x = ENNReal(4)
        assert ennreal(x) is x
        assert ennreal(4) == x
