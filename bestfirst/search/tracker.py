"""
Tracker Module - Optional instrumentation for long-running searches.

A Tracker counts completed operations (one per expanded state) and times
named sub-operations inside them. Every report_interval operations it logs
one summary line and starts a fresh measurement window:

    20000: successors 20000 (412ns)

NullTracker has the same interface and records nothing; the engine falls
back to it when no tracker is supplied.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass
class DurationCount:
    """
    Running count and total duration of one named sub-operation.

    Attributes:
        count: Number of timed calls in the current window
        duration_ns: Total time spent in those calls
    """
    count: int = 0
    duration_ns: int = 0

    def update(self, duration_ns: int) -> None:
        self.count += 1
        self.duration_ns += duration_ns

    def nanos_per_op(self) -> Optional[int]:
        """Mean duration per call, or None if nothing was timed."""
        if self.count > 0:
            return self.duration_ns // self.count
        return None

    def reset(self) -> None:
        self.count = 0
        self.duration_ns = 0


class OperationScope:
    """Handle yielded by Tracker.track_operation()."""

    def __init__(self, tracker: "Tracker"):
        self._tracker = tracker

    @contextmanager
    def track_duration(self, operation: str) -> Iterator[None]:
        """
        Time the body of the with-block under the given operation name.

        Args:
            operation: Label used in the progress report
        """
        start = time.perf_counter_ns()
        try:
            yield
        finally:
            self._tracker.report_duration(operation, time.perf_counter_ns() - start)


class Tracker:
    """
    Counts operations and reports per-operation timings through logging.

    Attributes:
        report_interval: Emit a report every this many operations
        count: Operations completed so far
    """

    def __init__(self, report_interval: int):
        if report_interval <= 0:
            raise ValueError(f"report_interval must be positive, got {report_interval}")
        self.report_interval = report_interval
        self.count = 0
        self.durations: Dict[str, DurationCount] = {}

    @contextmanager
    def track_operation(self) -> Iterator[OperationScope]:
        """
        Mark one operation. The operation counts as done when the block exits.

        Yields:
            OperationScope for timing sub-operations
        """
        try:
            yield OperationScope(self)
        finally:
            self.done()

    def report_duration(self, operation: str, duration_ns: int) -> None:
        self.durations.setdefault(operation, DurationCount()).update(duration_ns)

    def done(self) -> None:
        """Count a finished operation and report if the interval is reached."""
        self.count += 1

        if self.count % self.report_interval == 0:
            logger.info(f"{self.count}: {self.format_durations()}")
            for duration_count in self.durations.values():
                duration_count.reset()

    def format_durations(self) -> str:
        parts = []
        for operation, duration_count in self.durations.items():
            per_op = duration_count.nanos_per_op()
            per_op_str = f"{per_op}ns" if per_op is not None else "n/a"
            parts.append(f"{operation} {duration_count.count} ({per_op_str})")
        return ", ".join(parts)


class _NullScope:
    @contextmanager
    def track_duration(self, operation: str) -> Iterator[None]:
        yield


class NullTracker:
    """Tracker that does nothing."""

    _scope = _NullScope()

    @contextmanager
    def track_operation(self) -> Iterator[_NullScope]:
        yield self._scope
