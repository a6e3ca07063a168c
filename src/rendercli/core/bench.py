"""Repeated-render benchmark."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from rendercli.core.renderer import TemplateRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    template: str
    iterations: int
    elapsed_seconds: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "template": self.template,
            "iterations": self.iterations,
            "elapsed_seconds": self.elapsed_seconds,
        }


def run_benchmark(
    renderer: TemplateRenderer,
    context: Mapping[str, Any],
    iterations: int,
    emit: Optional[Callable[[str], None]] = None,
) -> BenchmarkResult:
    """Render ``iterations`` times in sequence and time the whole loop.

    Each iteration builds a new engine, loads the template and renders it,
    so the measurement covers all three. ``emit`` receives every rendered
    block. The first failure stops the loop and propagates.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")

    template = renderer.settings.template
    logger.info("Benchmarking %s for %d iterations", template, iterations)

    start = time.perf_counter()
    for _ in range(iterations):
        env = renderer.create_environment()
        output = renderer.render(context, env=env)
        if emit is not None:
            emit(output)
    elapsed = max(0.0, time.perf_counter() - start)

    logger.info("Benchmark of %s finished in %.6fs", template, elapsed)
    return BenchmarkResult(template=template, iterations=iterations, elapsed_seconds=elapsed)


__all__ = ["BenchmarkResult", "run_benchmark"]
