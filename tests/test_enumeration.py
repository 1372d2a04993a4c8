"""Tests for the rational enumerations that drive the approximation."""

from fractions import Fraction

import pytest

from lintegral_core import (
    CalkinWilfEnumeration, NaturalEnumeration, DyadicEnumeration, get_enumeration, TOP,
)
from lintegral_core.pkgs.core_math.enumeration import fusc, cantor_pair, cantor_unpair


class TestFusc:

    def test_first_terms(self):
        assert [fusc(n) for n in range(10)] == [0, 1, 1, 2, 1, 3, 2, 3, 1, 4]

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            fusc(-1)

    def test_cantor_pairing_round_trip(self):
        for n in range(200):
            assert cantor_pair(*cantor_unpair(n)) == n


class TestCalkinWilf:
    """Bijection onto the nonnegative rationals."""

    def setup_method(self):
        self.enum = CalkinWilfEnumeration()

    def test_first_values(self):
        expected = [0, 1, Fraction(1, 2), 2, Fraction(1, 3), Fraction(3, 2), Fraction(2, 3), 3, Fraction(1, 4)]
        assert [self.enum(n) for n in range(9)] == expected

    def test_injective_prefix(self):
        values = [self.enum(n) for n in range(2000)]
        assert len(set(values)) == 2000

    def test_index_inverts_nth(self):
        for n in range(500):
            assert self.enum.index_of(self.enum(n)) == n

    def test_every_small_rational_is_enumerated(self):
        for num in range(0, 7):
            for den in range(1, 7):
                q = Fraction(num, den)
                assert self.enum(self.enum.index_of(q)) == q

    def test_integers_sit_at_mersenne_indices(self):
        for k in range(1, 8):
            assert self.enum.index_of(k) == 2 ** k - 1

    def test_infinity_is_not_enumerated(self):
        assert self.enum.index_of(TOP) is None

    def test_bound_cuts_off_deep_values(self):
        assert self.enum.index_of(3, bound=7) == 7
        assert self.enum.index_of(3, bound=6) is None
        # 2**-60 sits at index 2**60; the bound check answers without building it
        assert self.enum.index_of(Fraction(1, 2 ** 60), bound=4096) is None

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            self.enum(-1)

    def test_pure(self):
        assert self.enum(12345) == self.enum(12345)
        assert CalkinWilfEnumeration() == self.enum


class TestOtherEnumerations:

    def test_natural(self):
        enum = NaturalEnumeration()
        assert [enum(k) for k in range(5)] == [0, 1, 2, 3, 4]
        assert enum.index_of(7) == 7
        assert enum.index_of(Fraction(1, 2)) is None
        assert enum.index_of(7, bound=5) is None

    def test_dyadic_hits_dyadic_rationals(self):
        enum = DyadicEnumeration()
        for q in [0, Fraction(1, 2), Fraction(3, 4), 5, Fraction(7, 8), Fraction(1, 16)]:
            assert enum(enum.index_of(q)) == q
        assert enum.index_of(Fraction(1, 3)) is None
        assert enum(0) == 0
        assert enum(1) == 1

    def test_dyadic_values_are_dyadic(self):
        enum = DyadicEnumeration()
        for n in range(300):
            den = enum(n).to_fraction().denominator
            assert den & (den - 1) == 0

    def test_registry(self):
        assert isinstance(get_enumeration("natural"), NaturalEnumeration)
        assert isinstance(get_enumeration("calkin_wilf"), CalkinWilfEnumeration)
        with pytest.raises(ValueError):
            get_enumeration("primes")

    def test_density_flags(self):
        assert CalkinWilfEnumeration.dense
        assert DyadicEnumeration.dense
        assert not NaturalEnumeration.dense
