"""EventBus implementation for in-process pub/sub."""

from typing import Any, Callable, Protocol, runtime_checkable

from ..logging_config import get_logger

logger = get_logger(__name__)


EventHandler = Callable[[Any, Any], None]


@runtime_checkable
class IEventBus(Protocol):
    """Pub/sub capability the emitter is wired to."""

    def subscribe(self, channel: str, handler: EventHandler) -> None:
        """Subscribe a handler to a channel."""
        ...

    def publish(self, channel: str, event: Any, context: Any = None) -> None:
        """Deliver (event, context) to every handler on the channel."""
        ...


class EventBus:
    """Synchronous in-memory pub/sub event bus."""

    def __init__(self):
        self._subscribers: dict[str, list[EventHandler]] = {}

    def subscribe(self, channel: str, handler: EventHandler) -> None:
        """Subscribe a handler to a channel."""
        self._subscribers.setdefault(_channel_name(channel), []).append(handler)

    def unsubscribe(self, channel: str, handler: EventHandler) -> None:
        """Remove a previously subscribed handler. Unknown handlers are ignored."""
        handlers = self._subscribers.get(_channel_name(channel), [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, channel: str, event: Any, context: Any = None) -> None:
        """Call every subscriber of the channel in subscription order."""
        name = _channel_name(channel)
        # Copy so handlers may (un)subscribe while being dispatched
        for handler in list(self._subscribers.get(name, [])):
            try:
                handler(event, context)
            except Exception:
                logger.exception("Error in handler for channel %s", name)
                raise

    @property
    def subscriber_count(self) -> int:
        return sum(len(handlers) for handlers in self._subscribers.values())


def _channel_name(channel: str) -> str:
    # Channel members are str subclasses; key on the plain value
    return getattr(channel, "value", channel)
