"""
Unit tests for the analytics service.
"""

import logging
from unittest.mock import patch

import pytest

from farmapp.core.telemetry import (
    AmplitudeBackend,
    AnalyticsBackend,
    AnalyticsService,
    MixpanelBackend,
    create_backend,
)


class RecordingBackend(AnalyticsBackend):
    name = "Recording"

    def __init__(self, key: str = "test"):
        super().__init__(key)
        self.events = []
        self.users = []
        self.resets = 0

    def track_event(self, event):
        self.events.append(event)

    def identify_user(self, user):
        self.users.append(user)

    def reset(self):
        self.resets += 1


class TestCreateBackend:

    def test_known_backends(self):
        assert isinstance(create_backend("amplitude", "k"), AmplitudeBackend)
        assert create_backend("mixpanel", "k").name == "Mixpanel"

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unsupported analytics service"):
            create_backend("segment", "k")


class TestAnalyticsService:

    def test_queues_until_initialized(self):
        service = AnalyticsService()
        service.track_event("screen_view", {"screen": "tree"})

        assert service.is_initialized is False
        assert [e.name for e in service.pending_events] == ["screen_view"]

    def test_initialize_flushes_queue(self):
        backend = RecordingBackend()
        service = AnalyticsService()
        service.track_event("first")
        service.track_event("second", {"n": 2})

        with patch("farmapp.core.telemetry.create_backend", return_value=backend):
            service.initialize("amplitude", "key")

        assert service.pending_events == []
        assert [e.name for e in backend.events] == ["first", "second"]
        assert backend.events[1].properties["n"] == 2

    def test_common_properties(self):
        backend = RecordingBackend()
        service = AnalyticsService(backend=backend, app_version="9.9.9")
        service.track_event("opened", {"screen": "graph"})

        props = backend.events[0].properties
        assert props["screen"] == "graph"
        assert props["app_version"] == "9.9.9"
        assert "platform" in props
        assert "timestamp" in props

    def test_identified_user_replayed_on_initialize(self):
        backend = RecordingBackend()
        service = AnalyticsService()
        service.identify_user("store-42", {"region": "CE"})

        with patch("farmapp.core.telemetry.create_backend", return_value=backend):
            service.initialize("mixpanel", "key")

        assert backend.users[0].id == "store-42"

    def test_reset(self):
        backend = RecordingBackend()
        service = AnalyticsService(backend=backend)
        service.identify_user("u1")
        service.reset()

        assert service.user is None
        assert backend.resets == 1

    def test_initialize_unknown_backend(self):
        with pytest.raises(ValueError):
            AnalyticsService().initialize("segment", "key")

    def test_instances_are_independent(self):
        first = AnalyticsService()
        second = AnalyticsService()
        first.track_event("only_first")
        assert second.pending_events == []

    def test_log_backend_warns_before_initialize(self, caplog):
        backend = MixpanelBackend("key")
        with caplog.at_level(logging.WARNING, logger="farmapp.core.telemetry"):
            backend.reset()
        assert "Mixpanel not initialized" in caplog.text
