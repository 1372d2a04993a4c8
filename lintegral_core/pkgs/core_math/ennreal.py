"""
Extended nonnegative reals with exact, total arithmetic.

An ``ENNReal`` is either a finite nonnegative rational (stored as a
``fractions.Fraction``) or the single point at infinity. Every operator is
defined for every pair of inputs, including ``0 * ∞ = 0``, which IEEE-754
floats get wrong (they give NaN).
"""
import math
import itertools
from fractions import Fraction
from functools import total_ordering
from typing import Iterable, Optional, Union

Number = Union[int, float, Fraction, "ENNReal"]


def _to_fraction(x) -> Optional[Fraction]:
    """Convert a plain number to an exact Fraction, or None for +inf."""
    if isinstance(x, bool):
        return Fraction(int(x))
    if isinstance(x, (int, Fraction)):
        return Fraction(x)
    if isinstance(x, float):
        if math.isnan(x):
            raise ValueError("NaN is not an extended nonnegative real")
        if math.isinf(x):
            if x < 0:
                raise ValueError("-inf is not an extended nonnegative real")
            return None
        return Fraction(x)
    if isinstance(x, str):
        text = x.strip().lower()
        if text in ("inf", "+inf", "infinity", "∞", "top"):
            return None
        return Fraction(text)
    raise TypeError(f"cannot interpret {type(x).__name__} as an extended nonnegative real")


@total_ordering
class ENNReal:
    """Element of [0, ∞]: ``Finite(q)`` for rational ``q >= 0`` or ``Infinite``."""

    __slots__ = ("_value",)

    def __init__(self, value: Number = 0):
        if isinstance(value, ENNReal):
            frac = value._value
        else:
            frac = _to_fraction(value)
            if frac is not None and frac < 0:
                raise ValueError(f"negative value {value!r} is not an extended nonnegative real")
        object.__setattr__(self, "_value", frac)

    def __setattr__(self, name, value):
        raise AttributeError("ENNReal is immutable")

    @classmethod
    def infinity(cls) -> "ENNReal":
        return cls(math.inf)

    # ------------------------------------------------------------------
    # inspection
    # ------------------------------------------------------------------
    @property
    def is_top(self) -> bool:
        return self._value is None

    @property
    def is_finite(self) -> bool:
        return self._value is not None

    def to_fraction(self) -> Fraction:
        """Exact finite value. Raises ``ValueError`` for ∞."""
        if self._value is None:
            raise ValueError("∞ has no finite value")
        return self._value

    def to_float(self) -> float:
        return math.inf if self._value is None else float(self._value)

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self._value is None or self._value != 0

    def __repr__(self) -> str:
        return f"ENNReal({self})"

    def __str__(self) -> str:
        return "∞" if self._value is None else str(self._value)

    # ------------------------------------------------------------------
    # order
    # ------------------------------------------------------------------
    @staticmethod
    def _key(x):
        """Sort key comparable across ENNReal and signed plain numbers."""
        if isinstance(x, ENNReal):
            return (1, 0) if x._value is None else (0, x._value)
        if isinstance(x, float):
            if math.isnan(x):
                return None
            if math.isinf(x):
                return (1, 0) if x > 0 else (-1, 0)
            return (0, Fraction(x))
        if isinstance(x, (int, Fraction)):
            return (0, Fraction(x))
        return None

    def __eq__(self, other) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self._key(self) == key

    def __lt__(self, other) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self._key(self) < key

    def __hash__(self) -> int:
        return hash(math.inf) if self._value is None else hash(self._value)

    def max(self, other: Number) -> "ENNReal":
        other = ennreal(other)
        return other if other > self else self

    def min(self, other: Number) -> "ENNReal":
        other = ennreal(other)
        return other if other < self else self

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: Number) -> "ENNReal":
        try:
            other = ennreal(other)
        except (TypeError, ValueError):
            return NotImplemented
        if self._value is None or other._value is None:
            return TOP
        return ENNReal(self._value + other._value)

    __radd__ = __add__

    def __mul__(self, other: Number) -> "ENNReal":
        try:
            other = ennreal(other)
        except (TypeError, ValueError):
            return NotImplemented
        # 0 * ∞ = 0
        if not self or not other:
            return ZERO
        if self._value is None or other._value is None:
            return TOP
        return ENNReal(self._value * other._value)

    __rmul__ = __mul__

    def tsub(self, other: Number) -> "ENNReal":
        """Truncated subtraction ``max(self - other, 0)``; ``∞ - ∞ = 0``."""
        other = ennreal(other)
        if other._value is None:
            return ZERO
        if self._value is None:
            return TOP
        return ENNReal(max(self._value - other._value, Fraction(0)))

    def __sub__(self, other: Number) -> "ENNReal":
        try:
            return self.tsub(other)
        except (TypeError, ValueError):
            return NotImplemented

    def __rsub__(self, other: Number) -> "ENNReal":
        try:
            return ennreal(other).tsub(self)
        except (TypeError, ValueError):
            return NotImplemented

    def inv(self) -> "ENNReal":
        """Multiplicative inverse with ``0⁻¹ = ∞`` and ``∞⁻¹ = 0``."""
        if self._value is None:
            return ZERO
        if self._value == 0:
            return TOP
        return ENNReal(1 / self._value)

    def __truediv__(self, other: Number) -> "ENNReal":
        try:
            other = ennreal(other)
        except (TypeError, ValueError):
            return NotImplemented
        return self * other.inv()

    def __rtruediv__(self, other: Number) -> "ENNReal":
        try:
            return ennreal(other) * self.inv()
        except (TypeError, ValueError):
            return NotImplemented

    # ------------------------------------------------------------------
    # reductions
    # ------------------------------------------------------------------
    @staticmethod
    def sum(values: Iterable[Number]) -> "ENNReal":
        """Finite sum as a left fold from zero. Order never affects the result."""
        total = ZERO
        for v in values:
            total = total + v
        return total

    @staticmethod
    def sup(values: Iterable[Number]) -> "ENNReal":
        """Supremum of a finite collection; the empty supremum is zero."""
        best = ZERO
        for v in values:
            best = best.max(v)
        return best

    @staticmethod
    def tsum(values: Iterable[Number], max_terms: Optional[int] = None) -> "ENNReal":
        """
        Sum of a nonnegative series, read lazily.

        Partial sums are nondecreasing, so the value returned is the supremum
        of the partial sums actually read: exact for finite iterables, a lower
        bound when ``max_terms`` truncates an infinite one. Reading stops early
        once the partial sum reaches ∞.
        """
        total = ZERO
        for v in itertools.islice(values, max_terms):
            total = total + v
            if total.is_top:
                break
        return total


def ennreal(x: Number) -> ENNReal:
    """Coerce ``x`` to ``ENNReal`` (identity on ENNReal instances)."""
    return x if isinstance(x, ENNReal) else ENNReal(x)


ZERO = ENNReal(0)
ONE = ENNReal(1)
TOP = ENNReal(math.inf)
