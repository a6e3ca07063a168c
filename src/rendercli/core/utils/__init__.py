"""Shared helpers for rendercli core modules."""

from .merge import deep_merge
from .profiling import Profiler, enable_profiler, span

__all__ = ["deep_merge", "Profiler", "enable_profiler", "span"]
