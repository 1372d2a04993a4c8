"""
Simple-function approximation and Lebesgue-style integration over exact
extended nonnegative reals.
"""

from .pkgs.core_math import (
    ENNReal, ennreal, ZERO, ONE, TOP,
    RationalEnumeration, CalkinWilfEnumeration, NaturalEnumeration, DyadicEnumeration, get_enumeration,
    LIntegralError, NonMeasurableSetError, NonMeasurableFunctionError, SimpleFuncInvariantError,
    ConvergenceError, ConfigError,
)
from .pkgs.measure_theory import MeasurableSpace, Measure, AtomicMeasure, sum_measures, ae_eq, ae_le, AEEqClass
from .pkgs.simple_func import (
    SimpleFunc, Approximator, approx, eapprox, approx_at, eapprox_diff, approx_sequence, lintegral,
)
from .pkgs.engine_runtime import (
    EngineConfig, load_config, IntegralEngine, IntegralResult, integral,
    Property, LIntegralProperty, fold_simple, fold_measurable,
)
from .pkgs.observability import setup_logging, MetricsCollector

__version__ = "0.1.0"

__all__ = [
    'ENNReal', 'ennreal', 'ZERO', 'ONE', 'TOP',
    'RationalEnumeration', 'CalkinWilfEnumeration', 'NaturalEnumeration', 'DyadicEnumeration', 'get_enumeration',
    'LIntegralError', 'NonMeasurableSetError', 'NonMeasurableFunctionError', 'SimpleFuncInvariantError',
    'ConvergenceError', 'ConfigError',
    'MeasurableSpace', 'Measure', 'AtomicMeasure', 'sum_measures', 'ae_eq', 'ae_le', 'AEEqClass',
    'SimpleFunc', 'Approximator', 'approx', 'eapprox', 'approx_at', 'eapprox_diff', 'approx_sequence', 'lintegral',
    'EngineConfig', 'load_config', 'IntegralEngine', 'IntegralResult', 'integral',
    'Property', 'LIntegralProperty', 'fold_simple', 'fold_measurable',
    'setup_logging', 'MetricsCollector',
]
