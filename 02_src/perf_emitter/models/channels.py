"""EventBus channel names."""

from enum import Enum


class Channel(str, Enum):
    """EventBus channels used by the performance emitter."""

    BROWSER_ONLY = "browser-performance-emitter:stats:browser-only"
    STATS = "browser-performance-emitter:stats"
