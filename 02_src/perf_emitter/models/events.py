"""Inbound event envelope."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

OutboundEvent = dict[str, Any]


@dataclass
class PerfEvent:
    """Raw browser performance event as published on the browser-only channel."""

    timing: Mapping[str, float] | None = None
    resource_entries: list | None = None
    first_paint: float | None = None
    payload: Mapping[str, Any] | None = None
    tags: list | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PerfEvent":
        """Read the wire keys of an inbound event; missing keys become None."""
        return cls(
            timing=data.get("timing"),
            resource_entries=data.get("resourceEntries"),
            first_paint=data.get("firstPaint"),
            payload=data.get("payload"),
            tags=data.get("tags"),
        )
