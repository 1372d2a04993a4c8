"""
Simple functions, their monotone approximation scheme and their integral.
"""

from .simple_func import SimpleFunc, NONMEASURABLE_POLICIES
from .approx import (
    Approximator, approx, eapprox, approx_at, eapprox_diff, sum_eapprox_diff, approx_sequence, level_set,
)
from .lintegral import (
    lintegral, lintegral_terms, lintegral_restrict, lintegral_on, measure_preimage_sum,
    fin_meas_supp, lintegral_ae_class,
)

__all__ = [
    # Simple functions
    'SimpleFunc', 'NONMEASURABLE_POLICIES',
    # Approximation
    'Approximator', 'approx', 'eapprox', 'approx_at', 'eapprox_diff', 'sum_eapprox_diff',
    'approx_sequence', 'level_set',
    # Integral
    'lintegral', 'lintegral_terms', 'lintegral_restrict', 'lintegral_on', 'measure_preimage_sum',
    'fin_meas_supp', 'lintegral_ae_class',
]
