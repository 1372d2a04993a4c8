"""
Exact arithmetic primitives for the integration engine.

Extended nonnegative reals, deterministic rational enumerations and the
engine's exception types.
"""

from .ennreal import ENNReal, ennreal, ZERO, ONE, TOP
from .enumeration import (
    RationalEnumeration, CalkinWilfEnumeration, NaturalEnumeration, DyadicEnumeration,
    DEFAULT_ENUMERATION, get_enumeration, fusc,
)
from .errors import (
    LIntegralError, NonMeasurableSetError, NonMeasurableFunctionError,
    SimpleFuncInvariantError, ConvergenceError, ConfigError,
)

__all__ = [
    # Extended reals
    'ENNReal', 'ennreal', 'ZERO', 'ONE', 'TOP',
    # Enumerations
    'RationalEnumeration', 'CalkinWilfEnumeration', 'NaturalEnumeration',
    'DyadicEnumeration', 'DEFAULT_ENUMERATION', 'get_enumeration', 'fusc',
    # Errors
    'LIntegralError', 'NonMeasurableSetError', 'NonMeasurableFunctionError',
    'SimpleFuncInvariantError', 'ConvergenceError', 'ConfigError',
]
