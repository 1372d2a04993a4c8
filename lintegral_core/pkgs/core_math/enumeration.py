"""
Deterministic enumerations ℕ → nonnegative rationals.

The approximation scheme only needs ``nth`` to hit every value of a dense
subset of [0, ∞) eventually. ``CalkinWilfEnumeration`` is a bijection onto
all of ℚ≥0 and is the default.
"""
import math
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Dict, Optional, Type

from .ennreal import ENNReal, ennreal


def fusc(n: int) -> int:
    """Stern's diatomic sequence: fusc(0)=0, fusc(1)=1, fusc(2n)=fusc(n), fusc(2n+1)=fusc(n)+fusc(n+1)."""
    if n < 0:
        raise ValueError("fusc is defined on nonnegative integers")
    a, b = 1, 0
    while n:
        if n & 1:
            b += a
        else:
            a += b
        n >>= 1
    return b


def cantor_pair(i: int, j: int) -> int:
    return (i + j) * (i + j + 1) // 2 + j


def cantor_unpair(n: int):
    w = (math.isqrt(8 * n + 1) - 1) // 2
    j = n - w * (w + 1) // 2
    return w - j, j


class RationalEnumeration(ABC):
    """Pure map ℕ → ℚ≥0. Implementations keep no state between calls."""

    name: str = "abstract"
    # every nonnegative real is a limit of enumerated values from below
    dense: bool = False

    @abstractmethod
    def nth(self, n: int) -> ENNReal:
        """Value at index ``n`` (always finite)."""

    def index_of(self, q, bound: Optional[int] = None) -> Optional[int]:
        """Smallest index whose value is ``q``, or None if ``q`` is never enumerated or its index exceeds ``bound``."""
        return None

    def __call__(self, n: int) -> ENNReal:
        if n < 0:
            raise ValueError(f"enumeration index must be nonnegative, got {n}")
        return self.nth(n)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


def _within(index: int, bound: Optional[int]) -> Optional[int]:
    return None if bound is not None and index > bound else index


class CalkinWilfEnumeration(RationalEnumeration):
    """
    Bijection ℕ → ℚ≥0: ``nth(0) = 0`` and ``nth(n) = fusc(n) / fusc(n+1)``.

    Every positive rational appears exactly once in the Calkin–Wilf
    sequence, so every nonnegative rational has a unique index. The integer
    ``k`` sits at index ``2**k - 1``.
    """

    name = "calkin_wilf"
    dense = True

    def nth(self, n: int) -> ENNReal:
        if n == 0:
            return ENNReal(0)
        return ENNReal(Fraction(fusc(n), fusc(n + 1)))

    def index_of(self, q, bound: Optional[int] = None) -> Optional[int]:
        q = ennreal(q)
        if q.is_top:
            return None
        frac = q.to_fraction()
        if frac == 0:
            return _within(0, bound)
        a, b = frac.numerator, frac.denominator
        # walk up the Calkin-Wilf tree to the root 1/1 in runs of equal moves
        runs = []
        depth = 0
        while a != b:
            if a < b:
                count = b // a - 1 if b % a == 0 else b // a
                b -= count * a
                runs.append((0, count))
            else:
                count = a // b - 1 if a % b == 0 else a // b
                a -= count * b
                runs.append((1, count))
            depth += count
            if bound is not None and depth >= max(bound, 1).bit_length():
                # index >= 2**depth > bound
                return None
        index = 1
        for bit, count in reversed(runs):
            index = (index << count) | (((1 << count) - 1) if bit else 0)
        return _within(index, bound)


class NaturalEnumeration(RationalEnumeration):
    """``nth(k) = k``. Not dense; approximants only ever take integer values."""

    name = "natural"

    def nth(self, n: int) -> ENNReal:
        return ENNReal(n)

    def index_of(self, q, bound: Optional[int] = None) -> Optional[int]:
        q = ennreal(q)
        if q.is_top or q.to_fraction().denominator != 1:
            return None
        return _within(int(q.to_fraction()), bound)


class DyadicEnumeration(RationalEnumeration):
    """Surjection onto the dyadic rationals ``m / 2**j`` via Cantor unpairing of ``n``."""

    name = "dyadic"
    dense = True

    def nth(self, n: int) -> ENNReal:
        m, j = cantor_unpair(n)
        return ENNReal(Fraction(m, 2 ** j))

    def index_of(self, q, bound: Optional[int] = None) -> Optional[int]:
        q = ennreal(q)
        if q.is_top:
            return None
        frac = q.to_fraction()
        den = frac.denominator
        if den & (den - 1):
            return None
        j = den.bit_length() - 1
        # unreduced forms m*2**i / 2**(j+i) also hit q, at larger pairing indices
        return _within(cantor_pair(frac.numerator, j), bound)


ENUMERATIONS: Dict[str, Type[RationalEnumeration]] = {
    CalkinWilfEnumeration.name: CalkinWilfEnumeration,
    NaturalEnumeration.name: NaturalEnumeration,
    DyadicEnumeration.name: DyadicEnumeration,
}


def get_enumeration(name: str) -> RationalEnumeration:
    """Instantiate an enumeration by its registered name."""
    try:
        return ENUMERATIONS[name]()
    except KeyError:
        raise ValueError(f"unknown enumeration {name!r}; choose from {sorted(ENUMERATIONS)}") from None


DEFAULT_ENUMERATION = CalkinWilfEnumeration()
