"""
Measurable spaces, measures and a.e. relations consumed by the integration engine.
"""

from .space import MeasurableSpace
from .measure import Measure, AtomicMeasure, SumMeasure, ScaledMeasure, RestrictedMeasure, sum_measures
from .ae import ae_eq, ae_le, disagreement_set, AEEqClass

__all__ = [
    # Spaces
    'MeasurableSpace',
    # Measures
    'Measure', 'AtomicMeasure', 'SumMeasure', 'ScaledMeasure', 'RestrictedMeasure', 'sum_measures',
    # a.e.
    'ae_eq', 'ae_le', 'disagreement_set', 'AEEqClass',
]
