"""Tests for Application."""

import json
import logging
from dataclasses import replace
from unittest.mock import Mock

import pytest

from perf_emitter.app import Application
from perf_emitter.errors import MissingEventBusError
from perf_emitter.event_bus import EventBus
from perf_emitter.models import Channel


class TestApplicationStart:
    """Tests for Application.start()."""

    def test_start_initializes_components(self, settings):
        """Test that start initializes all components."""
        app = Application(settings=settings)
        app.start()

        assert isinstance(app.event_bus, EventBus)
        assert app.emitter is not None
        assert app.emitter._event_bus is app.event_bus

    def test_start_uses_injected_bus(self, settings):
        bus = EventBus()
        app = Application(settings=settings, event_bus=bus)
        app.start()

        assert app.event_bus is bus
        assert bus.subscriber_count == 1

    def test_properties_before_start(self, settings):
        app = Application(settings=settings)

        with pytest.raises(RuntimeError, match="Application not started"):
            _ = app.emitter

    def test_validation_follows_settings(self, settings):
        """Test that validate_dependencies controls the bus check."""
        strict = Application(settings=settings, event_bus=Mock(spec=["subscribe"]))
        with pytest.raises(MissingEventBusError):
            strict.start()

        relaxed = Application(
            settings=replace(settings, validate_dependencies=False),
            event_bus=Mock(spec=["subscribe"]),
        )
        relaxed.start()
        assert relaxed.emitter is not None

    def test_start_configures_logging(self, settings, tmp_path):
        """Test that start writes JSON logs to the configured file at the configured level."""
        log_file = tmp_path / "nested" / "app.log"
        app = Application(settings=replace(settings, log_level="DEBUG", log_file=str(log_file)))

        app.start()
        app.event_bus.publish(Channel.BROWSER_ONLY, {"payload": {"userId": 1}}, None)
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [
            json.loads(line)
            for line in log_file.read_text(encoding="utf-8").splitlines()
        ]
        messages = [record["message"] for record in records]
        assert "Starting performance emitter" in messages
        assert any(record["level"] == "DEBUG" for record in records)
        assert logging.getLogger().level == logging.DEBUG


class TestApplicationStop:
    """Tests for Application.stop()."""

    def test_stop_detaches_emitter(self, settings):
        app = Application(settings=settings)
        app.start()
        bus = app.event_bus

        app.stop()

        assert bus.subscriber_count == 0
        with pytest.raises(RuntimeError):
            _ = app.emitter

    def test_stop_before_start(self, settings):
        Application(settings=settings).stop()


class TestApplicationFlow:
    """Tests for the wired event flow."""

    def test_round_trip(self, settings, full_timing):
        app = Application(settings=settings)
        app.start()
        received = []
        app.event_bus.subscribe(Channel.STATS, lambda e, c: received.append((e, c)))
        context = object()

        app.event_bus.publish(
            Channel.BROWSER_ONLY,
            {
                "timing": full_timing,
                "resourceEntries": [
                    {"name": "/a.css", "duration": 20},
                    {"name": "/b.css", "duration": 25},
                ],
                "firstPaint": 1500,
                "payload": {"route": "/"},
                "tags": ["web"],
            },
            context,
        )

        assert len(received) == 1
        event, ctx = received[0]
        assert ctx is context
        assert event["route"] == "/"
        assert event["calculatedStats"]["full_page_load"] == 1440
        assert event["calculatedStats"]["first_paint_time"] == 1500
        assert event["calculatedStats"]["resources_avg_load_time"] == {"css": 22}
