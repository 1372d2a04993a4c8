"""
Simple functions: finitely many values, each attained on a measurable set.

A ``SimpleFunc`` stores its range together with one nonempty measurable
preimage per value. The preimages always form a partition of the domain.
Instances are immutable; every operation returns a new function.
"""
import logging
from typing import Callable, Dict, Hashable, Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from ..core_math.ennreal import ennreal, ZERO
from ..core_math.errors import NonMeasurableFunctionError, NonMeasurableSetError, SimpleFuncInvariantError
from ..measure_theory.space import MeasurableSpace, Point, PointSet

logger = logging.getLogger(__name__)

NONMEASURABLE_POLICIES = ("raise", "zero")


class SimpleFunc:
    """Finite-valued measurable function ``space -> values``."""

    def __init__(self, space: MeasurableSpace, preimages: Dict[Hashable, Iterable[Point]]):
        self.space = space
        self._preimages: Dict[Hashable, PointSet] = {}
        self._value_at: Dict[Point, Hashable] = {}
        for value, pre in preimages.items():
            pre = frozenset(pre)
            if not pre:
                raise SimpleFuncInvariantError(f"value {value!r} has an empty preimage")
            if not space.is_measurable(pre):
                raise SimpleFuncInvariantError(f"preimage of {value!r} is not measurable")
            for x in pre:
                if x in self._value_at:
                    raise SimpleFuncInvariantError(
                        f"point {x!r} lies in the preimages of both {self._value_at[x]!r} and {value!r}")
                self._value_at[x] = value
            self._preimages[value] = pre
        if len(self._value_at) != len(space):
            raise SimpleFuncInvariantError("preimages do not cover the domain")

    # ------------------------------------------------------------------
    # constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_pairs(cls, space: MeasurableSpace, pairs: Iterable[Tuple[Hashable, Iterable[Point]]]) -> "SimpleFunc":
        """Build from ``(value, set)`` pairs, merging sets by union when values collide. Empty sets are skipped."""
        merged: Dict[Hashable, PointSet] = {}
        for value, pre in pairs:
            pre = frozenset(pre)
            if not pre:
                continue
            merged[value] = merged.get(value, frozenset()) | pre
        return cls(space, merged)

    @classmethod
    def const(cls, space: MeasurableSpace, value: Hashable) -> "SimpleFunc":
        return cls.from_pairs(space, [(value, space.universe)])

    @classmethod
    def zero(cls, space: MeasurableSpace) -> "SimpleFunc":
        return cls.const(space, ZERO)

    @classmethod
    def of_function(cls, space: MeasurableSpace, f: Callable[[Point], Hashable]) -> "SimpleFunc":
        """Tabulate a measurable function on a finite space."""
        if not space.is_measurable_function(f):
            raise NonMeasurableFunctionError("function is not constant on every atom of its space")
        return cls.from_pairs(space, ((f(x), (x,)) for x in space))

    @classmethod
    def indicator(cls, space: MeasurableSpace, s: Iterable[Point], value: Hashable = 1,
                  zero: Hashable = ZERO, on_nonmeasurable: str = "raise") -> "SimpleFunc":
        """``value`` on ``s`` and ``zero`` elsewhere."""
        return cls.const(space, value).restrict(
            s, zero=zero, on_nonmeasurable=on_nonmeasurable)

    def piecewise(self, s: Iterable[Point], other: "SimpleFunc") -> "SimpleFunc":
        """``self`` on ``s`` and ``other`` off ``s``."""
        self._check_space(other)
        s = self.space.require_measurable(s)
        pairs = [(v, pre & s) for v, pre in self.items()]
        pairs += [(v, pre - s) for v, pre in other.items()]
        return SimpleFunc.from_pairs(self.space, pairs)

    # ------------------------------------------------------------------
    # inspection
    # ------------------------------------------------------------------
    def __call__(self, x: Point) -> Hashable:
        try:
            return self._value_at[x]
        except KeyError:
            raise ValueError(f"{x!r} is not a point of the domain") from None

    @property
    def range(self) -> Tuple[Hashable, ...]:
        return tuple(self._preimages)

    def preimage(self, value: Hashable) -> PointSet:
        """Set where the function equals ``value``; empty when ``value`` is not attained."""
        return self._preimages.get(value, frozenset())

    def items(self) -> Iterator[Tuple[Hashable, PointSet]]:
        return iter(self._preimages.items())

    def support(self, zero: Hashable = ZERO) -> PointSet:
        return frozenset(x for x, v in self._value_at.items() if v != zero)

    def evaluate_many(self, points: Optional[Sequence[Point]] = None) -> np.ndarray:
        """Values at ``points`` (default: all points) as floats, with ``inf`` for ∞."""
        pts = self.space.points if points is None else points
        return np.array([ennreal(self(x)).to_float() for x in pts], dtype=np.float64)

    def equivalent(self, other: "SimpleFunc") -> bool:
        """Same domain and the same value/preimage mapping."""
        return self.space == other.space and self._preimages == other._preimages

    def __eq__(self, other) -> bool:
        if not isinstance(other, SimpleFunc):
            return NotImplemented
        return self.equivalent(other)

    def __hash__(self) -> int:
        return hash(frozenset(self._preimages.items()))

    def __repr__(self) -> str:
        body = ", ".join(f"{v}: {sorted(map(repr, pre))}" for v, pre in self.items())
        return f"SimpleFunc({{{body}}})"

    # ------------------------------------------------------------------
    # structural operations
    # ------------------------------------------------------------------
    def _check_space(self, other: "SimpleFunc"):
        if self.space != other.space:
            raise ValueError("simple functions live on different measurable spaces")

    def map(self, g: Callable[[Hashable], Hashable]) -> "SimpleFunc":
        """``g ∘ self``. Values that ``g`` sends to the same output have their preimages merged."""
        return SimpleFunc.from_pairs(self.space, ((g(v), pre) for v, pre in self.items()))

    def pair(self, other: "SimpleFunc") -> "SimpleFunc":
        """``x ↦ (self(x), other(x))``, keeping only nonempty intersections."""
        self._check_space(other)
        return SimpleFunc.from_pairs(self.space, (
            ((v1, v2), p1 & p2) for v1, p1 in self.items() for v2, p2 in other.items()))

    def map2(self, op: Callable[[Hashable, Hashable], Hashable], other: "SimpleFunc") -> "SimpleFunc":
        return self.pair(other).map(lambda vw: op(*vw))

    def bind(self, k: Callable[[Hashable], "SimpleFunc"]) -> "SimpleFunc":
        """``x ↦ k(self(x))(x)``."""
        pairs = []
        for v, pre in self.items():
            g = k(v)
            self._check_space(g)
            pairs.extend((w, pre & gpre) for w, gpre in g.items())
        return SimpleFunc.from_pairs(self.space, pairs)

    def seq(self, arg: "SimpleFunc") -> "SimpleFunc":
        """Apply a simple function of callables to ``arg`` pointwise: ``x ↦ self(x)(arg(x))``."""
        return self.bind(lambda h: arg.map(h))

    def restrict(self, s: Iterable[Point], zero: Hashable = ZERO, on_nonmeasurable: str = "raise") -> "SimpleFunc":
        """
        ``self`` on ``s`` and ``zero`` off ``s``.

        A non-measurable ``s`` raises ``NonMeasurableSetError`` under the
        ``"raise"`` policy; under ``"zero"`` the result is the constant
        ``zero`` function.
        """
        if on_nonmeasurable not in NONMEASURABLE_POLICIES:
            raise ValueError(f"unknown non-measurable policy {on_nonmeasurable!r}")
        s = frozenset(s)
        if not self.space.is_measurable(s):
            if on_nonmeasurable == "raise":
                raise NonMeasurableSetError(s)
            logger.warning("restrict to a non-measurable set; falling back to the zero function")
            return SimpleFunc.const(self.space, zero)
        return self.piecewise(s, SimpleFunc.const(self.space, zero))

    # ------------------------------------------------------------------
    # pointwise algebra on ENNReal-valued functions
    # ------------------------------------------------------------------
    def __add__(self, other) -> "SimpleFunc":
        if isinstance(other, SimpleFunc):
            return self.map2(lambda a, b: ennreal(a) + b, other)
        c = ennreal(other)
        return self.map(lambda a: ennreal(a) + c)

    __radd__ = __add__

    def __mul__(self, other) -> "SimpleFunc":
        if isinstance(other, SimpleFunc):
            return self.map2(lambda a, b: ennreal(a) * b, other)
        return self.smul(other)

    __rmul__ = __mul__

    def smul(self, c) -> "SimpleFunc":
        """``x ↦ c · self(x)``; ``c = 0`` collapses the whole range to zero."""
        c = ennreal(c)
        return self.map(lambda a: c * a)

    def sup(self, other: "SimpleFunc") -> "SimpleFunc":
        return self.map2(lambda a, b: ennreal(a).max(b), other)

    def inf(self, other: "SimpleFunc") -> "SimpleFunc":
        return self.map2(lambda a, b: ennreal(a).min(b), other)

    def tsub(self, other: "SimpleFunc") -> "SimpleFunc":
        """Pointwise truncated difference ``max(self - other, 0)``."""
        return self.map2(lambda a, b: ennreal(a).tsub(b), other)

    def le(self, other: "SimpleFunc") -> bool:
        """Pointwise ``self ≤ other``."""
        return all(a <= b for a, b in self.pair(other).range)

    def __le__(self, other: "SimpleFunc") -> bool:
        if not isinstance(other, SimpleFunc):
            return NotImplemented
        return self.le(other)

    @staticmethod
    def sum(functions: Iterable["SimpleFunc"], space: MeasurableSpace) -> "SimpleFunc":
        total = SimpleFunc.zero(space)
        for f in functions:
            total = total + f
        return total

    @staticmethod
    def finite_sup(functions: Iterable["SimpleFunc"], space: MeasurableSpace) -> "SimpleFunc":
        """Pointwise supremum; the empty supremum is the zero function."""
        best = SimpleFunc.zero(space)
        for f in functions:
            best = best.sup(f)
        return best
