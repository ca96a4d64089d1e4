"""Exceptions raised by the performance emitter."""


class PerfEmitterError(Exception):
    """Base class for emitter errors."""


class MissingEventBusError(PerfEmitterError):
    """Raised at construction when no usable event bus was supplied."""

    def __init__(self, event_bus: object):
        self.event_bus = event_bus
        super().__init__(f"EventBus is required, but was: {event_bus!r}")
