"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def event_bus():
    """Create an in-process EventBus."""
    from perf_emitter.event_bus import EventBus

    return EventBus()


@pytest.fixture
def recorder(event_bus):
    """Record every (event, context) published on the public stats channel."""
    from perf_emitter.models import Channel

    calls = []

    def handler(event, context):
        calls.append((event, context))

    event_bus.subscribe(Channel.STATS, handler)
    return calls


@pytest.fixture
def emitter(event_bus):
    """Create PerformanceEmitter wired to the in-process bus."""
    from perf_emitter.emitter import PerformanceEmitter

    em = PerformanceEmitter(event_bus)
    yield em
    em.stop()


@pytest.fixture
def mock_bus():
    """Create mock event bus capability."""
    bus = Mock()
    bus.subscribe = Mock()
    bus.publish = Mock()
    return bus


@pytest.fixture
def full_timing():
    """Navigation timing snapshot with every field the calculator reads."""
    return {
        "navigationStart": 1000,
        "fetchStart": 1010,
        "domainLookupStart": 1015,
        "domainLookupEnd": 1040,
        "connectStart": 1040,
        "connectEnd": 1090,
        "requestStart": 1100,
        "responseStart": 1250,
        "responseEnd": 1300,
        "domInteractive": 1700,
        "domContentLoadedEventStart": 1750,
        "domContentLoadedEventEnd": 1780,
        "loadEventStart": 2400,
        "loadEventEnd": 2450,
    }


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after setup_logging() runs."""
    import logging

    root = logging.getLogger()
    old_handlers, old_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in old_handlers:
            handler.close()
    root.handlers = old_handlers
    root.setLevel(old_level)


@pytest.fixture
def settings(tmp_path, restore_logging):
    """Settings that log into a temporary directory."""
    from perf_emitter.config import Settings

    return Settings(log_file=str(tmp_path / "app.log"))
