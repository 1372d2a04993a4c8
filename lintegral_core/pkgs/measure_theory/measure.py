"""
Measures on finite atomic spaces and their algebra.

A measure is determined by its value on each atom; the measure of a
measurable set is the sum over the atoms it contains. Sums, scalings and
restrictions are built lazily as wrappers around their operands, so every
measure is an immutable pure function of sets.
"""
import itertools
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence, Union

import numpy as np

from ..core_math.ennreal import ENNReal, ennreal, Number, ZERO
from .space import MeasurableSpace, Point, PointSet


class Measure(ABC):
    """Countably additive set function ``measurable set -> [0, ∞]``."""

    def __init__(self, space: MeasurableSpace):
        self.space = space

    @abstractmethod
    def atom_measure(self, atom: PointSet) -> ENNReal:
        """Mass of a single atom of ``self.space``."""

    def measure_of(self, s: Iterable[Point]) -> ENNReal:
        """μ(s) for a measurable ``s``; raises ``NonMeasurableSetError`` otherwise."""
        return ENNReal.sum(self.atom_measure(a) for a in self.space.atoms_of(s))

    def __call__(self, s: Iterable[Point]) -> ENNReal:
        return self.measure_of(s)

    def total(self) -> ENNReal:
        return self.measure_of(self.space.universe)

    def is_null(self, s: Iterable[Point]) -> bool:
        return not self.measure_of(s)

    def atom_weights(self) -> Dict[PointSet, ENNReal]:
        return {a: self.atom_measure(a) for a in self.space.atoms}

    # ------------------------------------------------------------------
    # algebra
    # ------------------------------------------------------------------
    def _check_space(self, other: "Measure"):
        if self.space != other.space:
            raise ValueError("measures live on different measurable spaces")

    def __add__(self, other: "Measure") -> "Measure":
        if not isinstance(other, Measure):
            return NotImplemented
        self._check_space(other)
        return SumMeasure.of([self, other])

    def __mul__(self, c: Number) -> "Measure":
        try:
            c = ennreal(c)
        except (TypeError, ValueError):
            return NotImplemented
        return ScaledMeasure(c, self)

    __rmul__ = __mul__

    def restrict(self, s: Iterable[Point]) -> "Measure":
        """``μ.restrict(s)(t) = μ(s ∩ t)``; ``s`` must be measurable."""
        return RestrictedMeasure(self, self.space.require_measurable(s))

    @staticmethod
    def sum(measures: Sequence["Measure"]) -> "Measure":
        return SumMeasure.of(measures)

    # ------------------------------------------------------------------
    # comparison
    # ------------------------------------------------------------------
    def le(self, other: "Measure") -> bool:
        """``μ ≤ ν`` as set functions (equivalently on every atom)."""
        self._check_space(other)
        return all(self.atom_measure(a) <= other.atom_measure(a) for a in self.space.atoms)

    def __le__(self, other: "Measure") -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.le(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.space == other.space and self.atom_weights() == other.atom_weights()

    __hash__ = None

    def __repr__(self) -> str:
        weights = ", ".join(f"{sorted(map(repr, a))}: {w}" for a, w in self.atom_weights().items())
        return f"{type(self).__name__}({{{weights}}})"


class AtomicMeasure(Measure):
    """Measure given by an explicit weight on each atom; unlisted atoms have weight zero."""

    def __init__(self, space: MeasurableSpace, weights: Mapping[Union[Point, PointSet], Number]):
        super().__init__(space)
        self._weights: Dict[PointSet, ENNReal] = {}
        for key, value in weights.items():
            atom = self._resolve_atom(key)
            if atom in self._weights:
                raise ValueError(f"weight given twice for atom {sorted(map(repr, atom))}")
            self._weights[atom] = ennreal(value)

    def _resolve_atom(self, key) -> PointSet:
        if isinstance(key, frozenset):
            if key not in self.space.atoms:
                raise ValueError(f"{sorted(map(repr, key))} is not an atom of the space")
            return key
        if key not in self.space:
            raise ValueError(f"{key!r} is not a point of the space")
        return self.space.atom_of(key)

    def atom_measure(self, atom: PointSet) -> ENNReal:
        return self._weights.get(atom, ZERO)

    @classmethod
    def counting(cls, space: MeasurableSpace) -> "AtomicMeasure":
        return cls(space, {a: len(a) for a in space.atoms})

    @classmethod
    def dirac(cls, space: MeasurableSpace, x: Point) -> "AtomicMeasure":
        return cls(space, {space.atom_of(x): 1})

    @classmethod
    def zero(cls, space: MeasurableSpace) -> "AtomicMeasure":
        return cls(space, {})

    @classmethod
    def from_weights(cls, space: MeasurableSpace, weights) -> "AtomicMeasure":
        """Build from an array aligned with ``space.atoms``; ``np.inf`` entries become ∞."""
        arr = np.asarray(weights, dtype=np.float64)
        if arr.shape != (len(space.atoms),):
            raise ValueError(f"expected {len(space.atoms)} weights, got shape {arr.shape}")
        if np.isnan(arr).any() or (arr < 0).any():
            raise ValueError("weights must be nonnegative numbers")
        return cls(space, {a: float(w) for a, w in zip(space.atoms, arr)})


class SumMeasure(Measure):
    """
    ``Σ_i μ_i`` over a finite or countable family.

    Countable families are given as a callable ``i -> Measure`` and are
    evaluated per atom with ``ENNReal.tsum`` over the first ``max_terms``
    members.
    """

    def __init__(self, space: MeasurableSpace, family: Union[Sequence[Measure], Callable[[int], Measure]],
                 max_terms: Optional[int] = None):
        super().__init__(space)
        if callable(family) and not isinstance(family, Sequence):
            if max_terms is None:
                raise ValueError("a countable measure family needs max_terms")
            self._family = family
            self._finite = False
        else:
            members = list(family)
            for m in members:
                if m.space != space:
                    raise ValueError("measures live on different measurable spaces")
            self._family = members
            self._finite = True
        self.max_terms = max_terms

    @classmethod
    def of(cls, measures: Sequence[Measure]) -> "SumMeasure":
        measures = list(measures)
        if not measures:
            raise ValueError("cannot infer the space of an empty measure sum")
        return cls(measures[0].space, measures)

    def members(self) -> Iterable[Measure]:
        if self._finite:
            return iter(self._family)
        return (self._family(i) for i in itertools.count())

    def atom_measure(self, atom: PointSet) -> ENNReal:
        return ENNReal.tsum((m.atom_measure(atom) for m in self.members()), self.max_terms)


class ScaledMeasure(Measure):
    """``c • μ``."""

    def __init__(self, c: ENNReal, base: Measure):
        super().__init__(base.space)
        self.c = c
        self.base = base

    def atom_measure(self, atom: PointSet) -> ENNReal:
        return self.c * self.base.atom_measure(atom)


class RestrictedMeasure(Measure):
    """``μ.restrict(s)``: mass of atoms outside ``s`` is dropped."""

    def __init__(self, base: Measure, s: PointSet):
        super().__init__(base.space)
        self.base = base
        self.set = s

    def atom_measure(self, atom: PointSet) -> ENNReal:
        return self.base.atom_measure(atom) if atom <= self.set else ZERO


def sum_measures(family: Union[Sequence[Measure], Iterable[Measure], Callable[[int], Measure]],
                 space: Optional[MeasurableSpace] = None,
                 max_terms: Optional[int] = None) -> SumMeasure:
    """
    Sum of a finite sequence of measures, or of a countable family.

    A countable family is either a callable ``i -> μ_i`` or a lazy iterable.
    An iterable is read once, up to ``max_terms`` members.
    """
    if isinstance(family, Sequence):
        return SumMeasure.of(family)
    if not callable(family):
        if max_terms is None:
            raise ValueError("a countable measure family needs max_terms")
        members = list(itertools.islice(family, max_terms))
        if space is None:
            if not members:
                raise ValueError("cannot infer the space of an empty measure sum")
            space = members[0].space
        return SumMeasure(space, members, max_terms=max_terms)
    if space is None:
        space = family(0).space
    return SumMeasure(space, family, max_terms=max_terms)
