"""Exception types raised by the integration engine."""


class LIntegralError(Exception):
    """Base class for all engine errors."""


class NonMeasurableSetError(LIntegralError):
    """A set that is not a union of atoms was used where measurability is required."""

    def __init__(self, s, message: str = ""):
        self.set = s
        super().__init__(message or f"set {sorted(map(repr, s))} is not measurable")


class NonMeasurableFunctionError(LIntegralError):
    """A target function is not constant on some atom of its space."""


class SimpleFuncInvariantError(LIntegralError):
    """Preimages of a simple function are not a measurable partition of the domain."""


class ConvergenceError(LIntegralError):
    """The approximation sequence did not reach its limit within the step horizon."""

    def __init__(self, message: str, lower_bound=None, steps: int = 0):
        self.lower_bound = lower_bound
        self.steps = steps
        super().__init__(message)


class ConfigError(LIntegralError):
    """Engine configuration could not be parsed or validated."""
