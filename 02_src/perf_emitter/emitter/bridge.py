"""PerformanceEmitter: re-emits browser performance events with computed stats."""

from collections.abc import Mapping, Sized
from typing import Any

from ..errors import MissingEventBusError
from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import Channel, OutboundEvent, PerfEvent
from ..stats import compute_stats

logger = get_logger(__name__)


def map_perf_event(event: PerfEvent | Mapping[str, Any]) -> OutboundEvent:
    """Merge the payload fields with computed stats and the raw timing inputs."""
    if not isinstance(event, PerfEvent):
        event = PerfEvent.from_dict(event)

    resource_entries = event.resource_entries
    # A one-shot iterator would be drained by the calculation
    if resource_entries is not None and not isinstance(resource_entries, Sized):
        resource_entries = list(resource_entries)

    calculated_stats = compute_stats(
        event.timing,
        resource_entries,
        event.first_paint,
    )

    return {
        **(event.payload or {}),
        "calculatedStats": calculated_stats,
        "timingValues": event.timing,
        "resourceEntries": resource_entries,
        "tags": event.tags,
    }


class PerformanceEmitter:
    """Bridges the browser-only stats channel to the public stats channel."""

    def __init__(self, event_bus: IEventBus, validate: bool = True):
        if validate and not _is_event_bus(event_bus):
            raise MissingEventBusError(event_bus)

        self._event_bus = event_bus
        self._event_bus.subscribe(Channel.BROWSER_ONLY, self._handle_stats)

    def stop(self) -> None:
        """Unsubscribe from the browser-only channel if the bus supports it."""
        unsubscribe = getattr(self._event_bus, "unsubscribe", None)
        if unsubscribe is not None:
            unsubscribe(Channel.BROWSER_ONLY, self._handle_stats)

    def _handle_stats(self, event: PerfEvent | Mapping[str, Any], context: Any) -> None:
        """Handle a raw stats event and publish the augmented one."""
        outbound = map_perf_event(event)
        logger.debug(
            "Publishing %s calculated stats on %s",
            len(outbound["calculatedStats"]),
            Channel.STATS.value,
        )
        self._event_bus.publish(Channel.STATS, outbound, context)


def _is_event_bus(candidate: Any) -> bool:
    # Protocol isinstance only checks the attributes exist
    return (
        isinstance(candidate, IEventBus)
        and callable(getattr(candidate, "subscribe", None))
        and callable(getattr(candidate, "publish", None))
    )
