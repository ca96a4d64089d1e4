"""Core data models for the performance emitter."""

from .channels import Channel
from .events import OutboundEvent, PerfEvent
from .timing import TIMING_FIELDS, CalculatedStats, ResourceEntry, TimingSnapshot

__all__ = [
    # Channels
    "Channel",
    # Events
    "PerfEvent",
    "OutboundEvent",
    # Timing
    "TIMING_FIELDS",
    "TimingSnapshot",
    "ResourceEntry",
    "CalculatedStats",
]
