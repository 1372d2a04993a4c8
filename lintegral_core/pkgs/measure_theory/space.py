"""
Finite measurable spaces generated by a partition into atoms.

A set is measurable exactly when it is a union of atoms. With the default
singleton atoms every subset of the domain is measurable.
"""
import logging
from typing import Any, Callable, Dict, FrozenSet, Hashable, Iterable, Iterator, List, Optional, Tuple

from ..core_math.errors import NonMeasurableSetError

logger = logging.getLogger(__name__)

Point = Hashable
PointSet = FrozenSet[Point]


class MeasurableSpace:
    """Domain plus the σ-algebra generated by a finite partition."""

    def __init__(self, points: Iterable[Point], atoms: Optional[Iterable[Iterable[Point]]] = None):
        ordered: List[Point] = []
        seen = set()
        for x in points:
            if x not in seen:
                seen.add(x)
                ordered.append(x)
        self._points: Tuple[Point, ...] = tuple(ordered)
        self.universe: PointSet = frozenset(ordered)

        if atoms is None:
            atom_list = [frozenset([x]) for x in self._points]
        else:
            atom_list = [frozenset(a) for a in atoms]
        self._atom_of: Dict[Point, PointSet] = {}
        for atom in atom_list:
            if not atom:
                raise ValueError("atoms must be nonempty")
            for x in atom:
                if x not in self.universe:
                    raise ValueError(f"atom contains {x!r}, which is not a point of the space")
                if x in self._atom_of:
                    raise ValueError(f"point {x!r} belongs to more than one atom")
                self._atom_of[x] = atom
        missing = self.universe - self._atom_of.keys()
        if missing:
            raise ValueError(f"atoms do not cover the points {sorted(map(repr, missing))}")
        # atoms in the order of their first point
        self.atoms: Tuple[PointSet, ...] = tuple(dict.fromkeys(self._atom_of[x] for x in self._points))
        logger.debug(f"MeasurableSpace with {len(self._points)} points and {len(self.atoms)} atoms")

    @classmethod
    def discrete(cls, points: Iterable[Point]) -> "MeasurableSpace":
        """Power-set σ-algebra on ``points``."""
        return cls(points)

    # ------------------------------------------------------------------
    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def empty(self) -> PointSet:
        return frozenset()

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, x) -> bool:
        return x in self.universe

    def __eq__(self, other) -> bool:
        if not isinstance(other, MeasurableSpace):
            return NotImplemented
        return self.universe == other.universe and set(self.atoms) == set(other.atoms)

    def __hash__(self) -> int:
        return hash((self.universe, frozenset(self.atoms)))

    def __repr__(self) -> str:
        return f"MeasurableSpace(points={len(self._points)}, atoms={len(self.atoms)})"

    # ------------------------------------------------------------------
    def atom_of(self, x: Point) -> PointSet:
        return self._atom_of[x]

    def is_measurable(self, s: Iterable[Point]) -> bool:
        s = frozenset(s)
        if not s <= self.universe:
            return False
        return all(self._atom_of[x] <= s for x in s)

    def require_measurable(self, s: Iterable[Point]) -> PointSet:
        """Return ``s`` as a frozenset, raising ``NonMeasurableSetError`` if it is not measurable."""
        s = frozenset(s)
        if not self.is_measurable(s):
            raise NonMeasurableSetError(s)
        return s

    def atoms_of(self, s: Iterable[Point]) -> Tuple[PointSet, ...]:
        """Atoms whose union is the measurable set ``s``."""
        s = self.require_measurable(s)
        return tuple(a for a in self.atoms if a <= s)

    def complement(self, s: Iterable[Point]) -> PointSet:
        return self.universe - frozenset(s)

    def preimage(self, f: Callable[[Point], Any], predicate: Callable[[Any], bool]) -> PointSet:
        """``{x : predicate(f(x))}``."""
        return frozenset(x for x in self._points if predicate(f(x)))

    def is_measurable_function(self, f: Callable[[Point], Any]) -> bool:
        """A function on a finite atomic space is measurable iff it is constant on every atom."""
        for atom in self.atoms:
            it = iter(atom)
            first = f(next(it))
            if any(f(x) != first for x in it):
                return False
        return True
