"""
Almost-everywhere relations and a.e.-equivalence classes.

Two functions are a.e. equal when the set where they differ is null. The
class wrapper keeps one representative and exposes the relation through
``equiv`` rather than through ``==``.
"""
from typing import Callable, Union

from ..core_math.ennreal import ennreal
from .measure import Measure
from .space import Point, PointSet

Function = Callable[[Point], object]


def disagreement_set(f: Function, g: Function, mu: Measure) -> PointSet:
    """``{x : f(x) ≠ g(x)}``."""
    return frozenset(x for x in mu.space if f(x) != g(x))


def ae_eq(f: Function, g: Function, mu: Measure) -> bool:
    """``f = g`` outside a μ-null set."""
    return mu.is_null(disagreement_set(f, g, mu))


def ae_le(f: Function, g: Function, mu: Measure) -> bool:
    """``f ≤ g`` outside a μ-null set."""
    bad = frozenset(x for x in mu.space if not ennreal(f(x)) <= ennreal(g(x)))
    return mu.is_null(bad)


class AEEqClass:
    """Equivalence class of functions modulo μ-null sets, held through a representative."""

    def __init__(self, rep: Function, measure: Measure):
        self.rep = rep
        self.measure = measure

    def _check_measure(self, other: "AEEqClass"):
        if other.measure is not self.measure and other.measure != self.measure:
            raise ValueError("a.e. classes taken with respect to different measures")

    def equiv(self, other: Union["AEEqClass", Function]) -> bool:
        """Whether ``other`` (a class or a plain function) lies in this class."""
        if isinstance(other, AEEqClass):
            self._check_measure(other)
            other = other.rep
        return ae_eq(self.rep, other, self.measure)

    def le(self, other: "AEEqClass") -> bool:
        self._check_measure(other)
        return ae_le(self.rep, other.rep, self.measure)

    def __call__(self, x: Point):
        return self.rep(x)

    def __repr__(self) -> str:
        return f"AEEqClass({self.rep!r})"
