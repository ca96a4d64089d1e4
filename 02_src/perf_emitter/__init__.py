"""Browser performance emitter."""

from .app import Application, IApplication
from .config import Settings, load_settings
from .emitter import PerformanceEmitter, map_perf_event
from .errors import MissingEventBusError, PerfEmitterError
from .event_bus import EventBus, EventHandler, IEventBus
from .models import (
    TIMING_FIELDS,
    CalculatedStats,
    Channel,
    OutboundEvent,
    PerfEvent,
    ResourceEntry,
    TimingSnapshot,
)
from .stats import compute_stats

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    "load_settings",
    # Models
    "Channel",
    "PerfEvent",
    "OutboundEvent",
    "ResourceEntry",
    "TimingSnapshot",
    "CalculatedStats",
    "TIMING_FIELDS",
    # Components
    "IEventBus",
    "EventBus",
    "EventHandler",
    "PerformanceEmitter",
    "map_perf_event",
    "compute_stats",
    # Errors
    "PerfEmitterError",
    "MissingEventBusError",
]
