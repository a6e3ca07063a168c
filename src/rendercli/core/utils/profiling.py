"""Span profiler used by the ``--profile`` CLI flag.

Spans are no-ops unless a profiler is active in the current context, so the
render path can be instrumented without cost in normal runs.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, Iterator, List


_ACTIVE_PROFILER: ContextVar["Profiler | None"] = ContextVar("_ACTIVE_PROFILER", default=None)


@dataclass(frozen=True)
class SpanRecord:
    name: str
    duration_ms: float
    depth: int
    meta: Dict[str, Any] = field(default_factory=dict)


class Profiler:
    """Collects nested timing spans."""

    def __init__(self) -> None:
        self._spans: List[SpanRecord] = []
        self._depth = 0

    @property
    def spans(self) -> List[SpanRecord]:
        return list(self._spans)

    @contextmanager
    def span(self, name: str, **meta: Any) -> Iterator[None]:
        start = perf_counter()
        depth = self._depth
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            self._spans.append(
                SpanRecord(
                    name=name,
                    duration_ms=(perf_counter() - start) * 1000.0,
                    depth=depth,
                    meta=dict(meta),
                )
            )

    def summary_ms(self) -> Dict[str, float]:
        """Total milliseconds per span name."""
        totals: Dict[str, float] = {}
        for record in self._spans:
            totals[record.name] = totals.get(record.name, 0.0) + record.duration_ms
        return totals

    def format_summary(self, limit: int = 20) -> str:
        top = sorted(self.summary_ms().items(), key=lambda kv: kv[1], reverse=True)[:limit]
        lines = ["Profiling (top spans):"]
        lines.extend(f"- {name}: {ms:.1f}ms" for name, ms in top)
        return "\n".join(lines)


@contextmanager
def enable_profiler(profiler: Profiler) -> Iterator[Profiler]:
    token = _ACTIVE_PROFILER.set(profiler)
    try:
        yield profiler
    finally:
        _ACTIVE_PROFILER.reset(token)


@contextmanager
def span(name: str, **meta: Any) -> Iterator[None]:
    profiler = _ACTIVE_PROFILER.get()
    if profiler is None:
        yield
        return
    with profiler.span(name, **meta):
        yield


__all__ = ["Profiler", "SpanRecord", "enable_profiler", "span"]
