"""Emitter module."""

from .bridge import PerformanceEmitter, map_perf_event

__all__ = ["PerformanceEmitter", "map_perf_event"]
