"""Engine runtime: the integral as a supremum, the induction fold and configuration.

This package coordinates the simple-function kernels without containing
approximation or accumulation logic itself.
"""

from .schemas import EngineConfig
from .config import load_config, save_config
from .engine import IntegralEngine, IntegralResult, integral
from .induction import Property, HookProperty, LIntegralProperty, fold_simple, fold_measurable

__all__ = [
    'EngineConfig', 'load_config', 'save_config',
    'IntegralEngine', 'IntegralResult', 'integral',
    'Property', 'HookProperty', 'LIntegralProperty', 'fold_simple', 'fold_measurable',
]
