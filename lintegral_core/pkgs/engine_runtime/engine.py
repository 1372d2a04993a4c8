"""
Integral of nonnegative measurable functions as a supremum over approximants.

``integral(target, μ) = sup_n lintegral(approx(n), μ)``. On a finite atomic
space a dense enumeration drives every approximant value up to the target
at each point, so the supremum is the integral of the target itself. For a
non-dense enumeration the supremum is reached in finitely many steps when
every finite target value is enumerated; the engine computes that step (the
horizon) up front instead of scanning the sequence. A target that is
infinite on a set of positive measure has integral ∞, since the
approximants grow without bound there.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence, Union

from ..core_math.ennreal import ENNReal, ennreal, ZERO, TOP, Number
from ..core_math.enumeration import RationalEnumeration, get_enumeration
from ..core_math.errors import ConvergenceError
from ..measure_theory.measure import Measure, SumMeasure, sum_measures
from ..measure_theory.space import MeasurableSpace, Point
from ..observability import MetricsCollector, setup_logging
from ..simple_func.approx import Approximator, Target
from ..simple_func.lintegral import lintegral
from ..simple_func.simple_func import SimpleFunc
from .schemas import EngineConfig

logger = logging.getLogger(__name__)


@dataclass
class IntegralResult:
    """Outcome of an integral evaluation; ``steps`` is None when the supremum is only a limit."""
    value: ENNReal
    steps: Optional[int]
    converged: bool


class IntegralEngine:
    """Approximation, simple-function integrals and their supremum under one configuration."""

    def __init__(self, config: Optional[EngineConfig] = None,
                 enum: Optional[RationalEnumeration] = None,
                 metrics: Optional[MetricsCollector] = None):
        self.config = config or EngineConfig()
        self.enum = enum or get_enumeration(self.config.enumeration)
        self.metrics = metrics or MetricsCollector()

        if self.config.configure_logging:
            setup_logging(self.config.log_level)
        logger.info(f"IntegralEngine initialized with {self.enum!r}, max_steps={self.config.max_steps}")

    # ------------------------------------------------------------------
    # simple functions
    # ------------------------------------------------------------------
    def restrict(self, f: SimpleFunc, s: Iterable[Point], zero=ZERO) -> SimpleFunc:
        """``f.restrict(s)`` under the configured non-measurable policy."""
        return f.restrict(s, zero=zero, on_nonmeasurable=self.config.nonmeasurable_policy)

    def indicator(self, space: MeasurableSpace, s: Iterable[Point], value: Number = 1) -> SimpleFunc:
        return SimpleFunc.indicator(space, s, value, on_nonmeasurable=self.config.nonmeasurable_policy)

    def approximator(self, target: Target, space: MeasurableSpace) -> Approximator:
        return Approximator(target, space, self.enum)

    def approx(self, target: Target, space: MeasurableSpace, n: int) -> SimpleFunc:
        self.metrics.increment_counter("approximants_built")
        return self.approximator(target, space)(n)

    def eapprox_diff(self, target: Target, space: MeasurableSpace, n: int) -> SimpleFunc:
        return self.approximator(target, space).diff(n)

    def lintegral(self, f: SimpleFunc, mu: Measure) -> ENNReal:
        self.metrics.increment_counter("lintegral_evaluations")
        return lintegral(f, mu)

    def sum_measures(self, family: Union[Sequence[Measure], Iterable[Measure], Callable[[int], Measure]],
                     space: Optional[MeasurableSpace] = None) -> SumMeasure:
        """Finite or countable sum of measures, truncated at ``tsum_max_terms`` members."""
        return sum_measures(family, space=space, max_terms=self.config.tsum_max_terms)

    # ------------------------------------------------------------------
    # supremum over the approximation sequence
    # ------------------------------------------------------------------
    def lintegral_sequence(self, target: Target, mu: Measure) -> Iterator[ENNReal]:
        """Lazily yield ``lintegral(approx(n), μ)`` for ``n = 0, 1, 2, ...``."""
        for f in self.approximator(target, mu.space).sequence():
            yield self.lintegral(f, mu)

    def integral_result(self, target: Target, mu: Measure) -> IntegralResult:
        """
        ``sup_n lintegral(approx(n), μ)`` with convergence information.

        Dense enumerations always converge. Otherwise, when the horizon
        exceeds ``max_steps`` (or does not exist), the value
        returned is ``lintegral(approx(max_steps), μ)``, a lower bound for the
        supremum; ``strict`` mode raises ``ConvergenceError`` instead.
        """
        self.metrics.increment_counter("integrals")
        with self.metrics.timed("integral"):
            result = self._integral(target, mu)
        self.metrics.set_metric("last_integral_steps", result.steps)
        return result

    def _integral(self, target: Target, mu: Measure) -> IntegralResult:
        approximator = self.approximator(target, mu.space)

        infinite_set = approximator.infinite_set()
        if not mu.is_null(infinite_set):
            logger.debug("Target is infinite on a set of positive measure; integral is ∞")
            return IntegralResult(value=TOP, steps=0, converged=True)

        horizon = approximator.horizon(limit=self.config.max_steps)
        if self.enum.dense:
            # approx(n) -> target pointwise on finitely many atoms, so the supremum is
            # the integral of the target itself; horizon is None when it is only a limit
            value = self.lintegral(SimpleFunc.of_function(mu.space, lambda x: ennreal(target(x))), mu)
            logger.debug(f"Integral of target under dense {self.enum!r}: {value} (horizon {horizon})")
            return IntegralResult(value=value, steps=horizon, converged=True)

        if horizon is not None:
            # the sequence is monotone, so the supremum over n <= horizon is its last term
            value = self.lintegral(self.approx(target, mu.space, horizon), mu)
            logger.debug(f"Integral reached its supremum at step {horizon}: {value}")
            return IntegralResult(value=value, steps=horizon, converged=True)

        steps = self.config.max_steps
        lower = self.lintegral(self.approx(target, mu.space, steps), mu)
        message = (f"approximation does not reach the target within {steps} steps; "
                   f"lower bound {lower}")
        if self.config.strict:
            raise ConvergenceError(message, lower_bound=lower, steps=steps)
        logger.warning(message)
        return IntegralResult(value=lower, steps=steps, converged=False)

    def integral(self, target: Target, mu: Measure) -> ENNReal:
        return self.integral_result(target, mu).value


def integral(target: Target, mu: Measure, enum: Optional[RationalEnumeration] = None,
             config: Optional[EngineConfig] = None) -> ENNReal:
    """``sup_n lintegral(approx(n), μ)`` with a throwaway engine."""
    return IntegralEngine(config=config, enum=enum).integral(target, mu)
