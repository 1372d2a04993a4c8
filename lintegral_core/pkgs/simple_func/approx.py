"""
Monotone simple-function approximation of nonnegative measurable functions.

``approx(n)(x) = max{enum(k) : k < n, enum(k) <= target(x)}`` (zero when the
set is empty). The sequence is pointwise nondecreasing in ``n`` and, for a
dense enumeration, converges to ``target`` at every point.
"""
import itertools
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from ..core_math.ennreal import ENNReal, ennreal, Number, ZERO
from ..core_math.enumeration import RationalEnumeration, DEFAULT_ENUMERATION
from ..core_math.errors import NonMeasurableFunctionError
from ..measure_theory.space import MeasurableSpace, Point, PointSet
from .simple_func import SimpleFunc

Target = Callable[[Point], Number]


def _require_measurable_target(target: Target, space: MeasurableSpace):
    if not space.is_measurable_function(lambda x: ennreal(target(x))):
        raise NonMeasurableFunctionError("target is not constant on every atom of its space")


def level_set(target: Target, space: MeasurableSpace, q: ENNReal) -> PointSet:
    """``{x : q <= target(x)}``."""
    return space.preimage(lambda x: ennreal(target(x)), lambda v: q <= v)


def _step(target: Target, space: MeasurableSpace, q: ENNReal) -> SimpleFunc:
    """``q`` on the level set ``{q <= target}``, zero elsewhere."""
    return SimpleFunc.const(space, q).restrict(level_set(target, space, q))


def approx(enum: RationalEnumeration, target: Target, space: MeasurableSpace, n: int) -> SimpleFunc:
    """Finite supremum over ``k < n`` of ``enum(k)`` restricted to ``{enum(k) <= target}``."""
    if n < 0:
        raise ValueError(f"approximation index must be nonnegative, got {n}")
    _require_measurable_target(target, space)
    return SimpleFunc.finite_sup((_step(target, space, enum(k)) for k in range(n)), space)


def eapprox(target: Target, space: MeasurableSpace, n: int) -> SimpleFunc:
    """``approx`` over the Calkin–Wilf enumeration of the nonnegative rationals."""
    return approx(DEFAULT_ENUMERATION, target, space, n)


def approx_at(enum: RationalEnumeration, target: Target, x: Point, n: int) -> ENNReal:
    """Pointwise value ``approx(n)(x)`` computed directly from its defining maximum."""
    t = ennreal(target(x))
    return ENNReal.sup(q for q in map(enum, range(n)) if q <= t)


def _increment(hi, lo) -> ENNReal:
    assert lo <= hi, f"approximation sequence decreased from {lo} to {hi}"
    return ennreal(hi).tsub(lo)


def eapprox_diff(enum: RationalEnumeration, target: Target, space: MeasurableSpace, n: int) -> SimpleFunc:
    """
    Telescoping increments: ``approx(0)`` for ``n = 0``, else ``approx(n) - approx(n-1)``.

    A negative increment means the monotonicity invariant is broken; it fails
    an assertion, and clamps to zero when assertions are disabled.
    """
    if n == 0:
        return approx(enum, target, space, 0)
    return approx(enum, target, space, n).map2(_increment, approx(enum, target, space, n - 1))


def sum_eapprox_diff(enum: RationalEnumeration, target: Target, space: MeasurableSpace, n: int) -> SimpleFunc:
    """``Σ_{k=0}^{n} eapprox_diff(k)``, which equals ``approx(n)``."""
    return SimpleFunc.sum((eapprox_diff(enum, target, space, k) for k in range(n + 1)), space)


def approx_sequence(enum: RationalEnumeration, target: Target, space: MeasurableSpace,
                    start: int = 0) -> Iterator[SimpleFunc]:
    """
    Lazily yield ``approx(start), approx(start+1), ...``.

    Each call returns a fresh generator; stopping iteration is all the
    cancellation needed.
    """
    current = approx(enum, target, space, start)
    for k in itertools.count(start):
        yield current
        current = current.sup(_step(target, space, enum(k)))


@dataclass(frozen=True)
class Approximator:
    """Approximation scheme for one target on one space."""

    target: Target
    space: MeasurableSpace
    enum: RationalEnumeration = DEFAULT_ENUMERATION

    def __post_init__(self):
        _require_measurable_target(self.target, self.space)

    def __call__(self, n: int) -> SimpleFunc:
        return approx(self.enum, self.target, self.space, n)

    def at(self, x: Point, n: int) -> ENNReal:
        return approx_at(self.enum, self.target, x, n)

    def diff(self, n: int) -> SimpleFunc:
        return eapprox_diff(self.enum, self.target, self.space, n)

    def sequence(self, start: int = 0) -> Iterator[SimpleFunc]:
        return approx_sequence(self.enum, self.target, self.space, start)

    def finite_values(self):
        return {v for v in (ennreal(self.target(x)) for x in self.space) if v.is_finite}

    def infinite_set(self) -> PointSet:
        return self.space.preimage(lambda x: ennreal(self.target(x)), lambda v: v.is_top)

    def horizon(self, limit: Optional[int] = None) -> Optional[int]:
        """
        Smallest ``n`` with ``approx(n) == target`` wherever the target is finite.

        None when some finite target value never appears in the enumeration,
        or (given ``limit``) only appears past index ``limit - 1``; the
        sequence then only converges in the limit.
        """
        bound = None if limit is None else limit - 1
        n = 0
        for v in self.finite_values():
            if v == ZERO:
                continue
            index = self.enum.index_of(v, bound)
            if index is None:
                return None
            n = max(n, index + 1)
        return n
