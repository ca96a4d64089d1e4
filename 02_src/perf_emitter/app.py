"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import Settings, load_settings
from .emitter import PerformanceEmitter
from .event_bus import EventBus, IEventBus
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    def start(self) -> None:
        """Wire the emitter to the event bus."""
        ...

    def stop(self) -> None:
        """Detach the emitter from the event bus."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        event_bus: IEventBus | None = None,
    ):
        self._settings = settings if settings is not None else load_settings()
        self._event_bus: IEventBus | None = event_bus
        self._emitter: PerformanceEmitter | None = None

    def start(self) -> None:
        """Initialize components in dependency order."""
        setup_logging(
            log_level=self._settings.log_level,
            log_file=self._settings.log_file,
        )
        logger.info("Starting performance emitter")

        # 1. EventBus (injected by the host, otherwise in-process)
        if self._event_bus is None:
            self._event_bus = EventBus()
            logger.info("In-process EventBus initialized")

        # 2. PerformanceEmitter (depends on EventBus)
        self._emitter = PerformanceEmitter(
            self._event_bus,
            validate=self._settings.validate_dependencies,
        )
        logger.info("PerformanceEmitter subscribed")

    def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._emitter:
            self._emitter.stop()
            self._emitter = None
            logger.info("PerformanceEmitter stopped")

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def event_bus(self) -> IEventBus:
        """Get event bus instance."""
        if not self._event_bus:
            raise RuntimeError("Application not started")
        return self._event_bus

    @property
    def emitter(self) -> PerformanceEmitter:
        """Get emitter instance."""
        if not self._emitter:
            raise RuntimeError("Application not started")
        return self._emitter
