"""Span profiler.

Records nested, named timing spans around pipeline stages. Used by the CLI to
print a timing report and to render an HTML flame chart.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Span:
    """One timed region."""

    name: str
    start: float
    """Seconds since the profiler was created."""

    depth: int
    duration: float = 0.0
    children: list["Span"] = field(default_factory=list)

    @property
    def end(self) -> float:
        return self.start + self.duration

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start": self.start,
            "duration": self.duration,
            "children": [child.to_dict() for child in self.children],
        }


class SpanProfiler:
    """Collects a tree of timing spans.

    A disabled profiler records nothing, so library code can always open
    spans without checking whether profiling was requested.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.roots: list[Span] = []
        self._stack: list[Span] = []
        self._origin = time.perf_counter()

    @contextmanager
    def span(self, name: str) -> Iterator[None]:
        """Time the enclosed block as a span named ``name``."""
        if not self.enabled:
            yield
            return

        span = Span(name=name, start=time.perf_counter() - self._origin, depth=len(self._stack))
        if self._stack:
            self._stack[-1].children.append(span)
        else:
            self.roots.append(span)

        self._stack.append(span)
        try:
            yield
        finally:
            span.duration = time.perf_counter() - self._origin - span.start
            self._stack.pop()

    def walk(self) -> Iterator[Span]:
        """Yield every recorded span depth-first, in start order."""
        pending = list(reversed(self.roots))
        while pending:
            span = pending.pop()
            yield span
            pending.extend(reversed(span.children))

    def get_stats(self) -> dict[str, dict[str, float]]:
        """Aggregate timings per span name.

        Returns:
            Mapping of span name to count/total/mean/min/max in seconds
        """
        durations: dict[str, list[float]] = {}
        for span in self.walk():
            durations.setdefault(span.name, []).append(span.duration)

        stats = {}
        for name, values in durations.items():
            stats[name] = {
                "count": len(values),
                "total": sum(values),
                "mean": sum(values) / len(values),
                "min": min(values),
                "max": max(values),
            }
        return stats
