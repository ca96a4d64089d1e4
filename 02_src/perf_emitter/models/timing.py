"""Navigation and resource timing data models."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Navigation-timing fields read by the stats calculator
TIMING_FIELDS = (
    "navigationStart",
    "fetchStart",
    "domainLookupStart",
    "domainLookupEnd",
    "connectStart",
    "connectEnd",
    "requestStart",
    "responseStart",
    "responseEnd",
    "domInteractive",
    "domContentLoadedEventStart",
    "domContentLoadedEventEnd",
    "loadEventStart",
    "loadEventEnd",
)

TimingSnapshot = Mapping[str, float]
CalculatedStats = dict[str, Any]


@dataclass(frozen=True)
class ResourceEntry:
    """Timing record for a single sub-resource fetched during page load."""

    name: str
    duration: float

    @classmethod
    def coerce(cls, entry: Any) -> "ResourceEntry":
        """Build a ResourceEntry from a mapping or a timing-like object."""
        if isinstance(entry, cls):
            return entry
        if isinstance(entry, Mapping):
            return cls(name=entry["name"], duration=entry["duration"])
        # PerformanceResourceTiming-style objects expose plain attributes
        return cls(name=entry.name, duration=entry.duration)
