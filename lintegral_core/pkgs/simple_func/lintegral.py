"""
Integral of a simple function against a measure.

``lintegral(f, μ) = Σ_{v ∈ range f} v · μ(f⁻¹{v})``, accumulated exactly in
``ENNReal`` so that a zero value on an infinite-measure set contributes zero.
"""
from typing import Dict, Hashable, Iterable

from ..core_math.ennreal import ENNReal, ennreal
from ..measure_theory.ae import AEEqClass
from ..measure_theory.measure import Measure
from ..measure_theory.space import Point
from .simple_func import SimpleFunc


def _ordered_range(f: SimpleFunc):
    return sorted(f.range, key=ennreal)


def lintegral_terms(f: SimpleFunc, mu: Measure) -> Dict[Hashable, ENNReal]:
    """Per-value contributions ``v · μ(f⁻¹{v})``, ordered by value."""
    if f.space != mu.space:
        raise ValueError("simple function and measure live on different measurable spaces")
    return {v: ennreal(v) * mu.measure_of(f.preimage(v)) for v in _ordered_range(f)}


def lintegral(f: SimpleFunc, mu: Measure) -> ENNReal:
    """``Σ v · μ(f⁻¹{v})`` over the range of ``f``."""
    return ENNReal.sum(lintegral_terms(f, mu).values())


def lintegral_restrict(f: SimpleFunc, s: Iterable[Point], mu: Measure) -> ENNReal:
    """Integral of ``f`` over the measurable set ``s``: ``lintegral(f, μ.restrict(s))``."""
    return lintegral(f, mu.restrict(s))


lintegral_on = lintegral_restrict


def measure_preimage_sum(f: SimpleFunc, mu: Measure) -> ENNReal:
    """``Σ_v μ(f⁻¹{v})``, which is ``μ(univ)`` since the preimages partition the domain."""
    return ENNReal.sum(mu.measure_of(pre) for _, pre in f.items())


def fin_meas_supp(f: SimpleFunc, mu: Measure) -> bool:
    """Whether the support of ``f`` has finite measure."""
    return mu.measure_of(f.support()).is_finite


def lintegral_ae_class(cls: AEEqClass) -> ENNReal:
    """Integral of an a.e. class, evaluated on its representative."""
    if not isinstance(cls.rep, SimpleFunc):
        raise TypeError("a.e. class representative must be a SimpleFunc")
    return lintegral(cls.rep, cls.measure)
