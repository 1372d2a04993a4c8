"""Counters, gauges and timings recorded while integrating."""

import time
from contextlib import contextmanager
from typing import Any, Dict

import numpy as np


class MetricsCollector:
    """
    Per-engine run statistics.

    ``IntegralEngine`` counts ``integrals``, ``approximants_built`` and
    ``lintegral_evaluations``, keeps the ``last_integral_steps`` gauge and
    times each ``integral`` call.
    """

    def __init__(self):
        self.metrics: Dict[str, Any] = {}
        self.counters: Dict[str, int] = {}
        self.timers: Dict[str, float] = {}
        self.start_times: Dict[str, float] = {}

    def set_metric(self, name: str, value: Any):
        self.metrics[name] = value

    def increment_counter(self, name: str, delta: int = 1):
        self.counters[name] = self.counters.get(name, 0) + delta

    def start_timer(self, name: str):
        self.start_times[name] = time.perf_counter()

    def stop_timer(self, name: str) -> float:
        """Record the seconds since ``start_timer(name)``; 0.0 if it was never started."""
        if name not in self.start_times:
            return 0.0
        duration = time.perf_counter() - self.start_times.pop(name)
        self.timers[name] = duration
        return duration

    @contextmanager
    def timed(self, name: str):
        """Time the enclosed block under ``name``, also when it raises."""
        self.start_timer(name)
        try:
            yield
        finally:
            self.stop_timer(name)

    def get_all_metrics(self) -> Dict[str, Any]:
        return {
            "metrics": dict(self.metrics),
            "counters": dict(self.counters),
            "timers": dict(self.timers),
        }

    def reset(self):
        for store in (self.metrics, self.counters, self.timers, self.start_times):
            store.clear()

    def summary_stats(self) -> Dict[str, Any]:
        durations = np.fromiter(self.timers.values(), dtype=np.float64, count=len(self.timers))
        return {
            "total_metrics": len(self.metrics),
            "total_counters": len(self.counters),
            "total_timers": len(self.timers),
            "counter_sum": sum(self.counters.values()),
            "timer_total": float(durations.sum()) if durations.size else 0.0,
            "timer_mean": float(durations.mean()) if durations.size else 0.0,
        }
