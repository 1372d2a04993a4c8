"""
Induction over nonnegative measurable functions as a fold.

A property that holds for ``value · indicator(s)``, is closed under sums of
functions with disjoint supports, and is closed under monotone suprema holds
for every nonnegative measurable function. ``Property`` packages the three
cases as hooks; ``fold_simple`` and ``fold_measurable`` drive them.
"""
import itertools
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from ..core_math.ennreal import ENNReal, ennreal, ZERO
from ..core_math.enumeration import RationalEnumeration, DEFAULT_ENUMERATION
from ..measure_theory.measure import Measure
from ..measure_theory.space import MeasurableSpace, PointSet
from ..simple_func.approx import Approximator, Target
from ..simple_func.simple_func import SimpleFunc
from .schemas import EngineConfig

T = TypeVar("T")


class Property(ABC, Generic[T]):
    """Visitor over the three cases of the induction scheme."""

    @abstractmethod
    def on_indicator(self, value: ENNReal, s: PointSet) -> T:
        """Result for the function equal to ``value`` on ``s`` and zero elsewhere."""

    @abstractmethod
    def on_disjoint_sum(self, left: T, right: T) -> T:
        """Combine results of two functions whose supports are disjoint."""

    @abstractmethod
    def on_monotone_sup(self, results: Sequence[T]) -> T:
        """Combine results along a pointwise nondecreasing sequence of functions."""


class HookProperty(Property[T]):
    """``Property`` assembled from three plain callables."""

    def __init__(self, on_indicator: Callable[[ENNReal, PointSet], T],
                 on_disjoint_sum: Callable[[T, T], T],
                 on_monotone_sup: Callable[[Sequence[T]], T]):
        self._on_indicator = on_indicator
        self._on_disjoint_sum = on_disjoint_sum
        self._on_monotone_sup = on_monotone_sup

    def on_indicator(self, value, s):
        return self._on_indicator(value, s)

    def on_disjoint_sum(self, left, right):
        return self._on_disjoint_sum(left, right)

    def on_monotone_sup(self, results):
        return self._on_monotone_sup(results)


class LIntegralProperty(Property[ENNReal]):
    """Reproduces the integral: ``v · μ(s)`` on indicators, ``+`` on sums, ``sup`` on sequences."""

    def __init__(self, mu: Measure):
        self.mu = mu

    def on_indicator(self, value, s):
        return ennreal(value) * self.mu.measure_of(s)

    def on_disjoint_sum(self, left, right):
        return left + right

    def on_monotone_sup(self, results):
        return ENNReal.sup(results)


def fold_simple(prop: Property[T], f: SimpleFunc) -> T:
    """
    Fold ``f`` as the disjoint sum of ``v · indicator(f⁻¹{v})`` over its range.

    Pieces are visited in increasing value order. A function on an empty
    domain is the single indicator ``0 · indicator(∅)``.
    """
    pieces = sorted(f.items(), key=lambda item: ennreal(item[0]))
    if not pieces:
        return prop.on_indicator(ZERO, frozenset())
    acc = prop.on_indicator(ennreal(pieces[0][0]), pieces[0][1])
    for value, pre in pieces[1:]:
        acc = prop.on_disjoint_sum(acc, prop.on_indicator(ennreal(value), pre))
    return acc


def fold_measurable(prop: Property[T], target: Target, space: MeasurableSpace,
                    enum: RationalEnumeration = DEFAULT_ENUMERATION,
                    steps: Optional[int] = None,
                    max_steps: Optional[int] = None) -> T:
    """
    Fold a measurable target through its approximants ``approx(0..steps)``.

    Each approximant is folded with ``fold_simple`` and the resulting
    monotone sequence goes to ``on_monotone_sup``. ``steps`` defaults to the
    horizon at which the approximants reach every finite target value; a
    horizon past ``max_steps`` (the engine default when not given) raises
    ``ValueError``, as does a target value outside the enumeration.
    """
    approximator = Approximator(target, space, enum)
    if steps is None:
        if max_steps is None:
            max_steps = EngineConfig().max_steps
        steps = approximator.horizon(limit=max_steps)
        if steps is None:
            raise ValueError(f"target is not reached within {max_steps} approximants; pass steps explicitly")
    results: List[T] = [fold_simple(prop, f) for f in itertools.islice(approximator.sequence(), steps + 1)]
    return prop.on_monotone_sup(results)
