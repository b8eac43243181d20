"""
Analytics service.

Tracks usage events through a pluggable backend. There is no process-wide
instance: callers construct an ``AnalyticsService`` and pass it where it is
needed, so tests can run several isolated services side by side.

Events tracked before ``initialize`` are queued and flushed once a backend
is available.
"""

import logging
import platform
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .. import __version__

logger = logging.getLogger(__name__)


class AnalyticsEvent(BaseModel):
    name: str
    properties: Dict[str, Any] = Field(default_factory=dict)


class IdentifiedUser(BaseModel):
    id: str
    properties: Dict[str, Any] = Field(default_factory=dict)


class AnalyticsBackend(ABC):
    """A vendor SDK wrapper."""

    def __init__(self, key: str):
        self.key = key
        self.initialized = False

    def initialize(self) -> None:
        if self.initialized:
            return
        logger.info("%s initialized", self.name)
        self.initialized = True

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def track_event(self, event: AnalyticsEvent) -> None:
        ...

    @abstractmethod
    def identify_user(self, user: IdentifiedUser) -> None:
        ...

    @abstractmethod
    def reset(self) -> None:
        ...


class _LoggingBackend(AnalyticsBackend):
    """Log-only backend; the vendor SDK call goes here."""

    def _ready(self) -> bool:
        if not self.initialized:
            logger.warning("%s not initialized", self.name)
        return self.initialized

    def track_event(self, event: AnalyticsEvent) -> None:
        if self._ready():
            logger.info("%s track event: %s %s", self.name, event.name, event.properties)

    def identify_user(self, user: IdentifiedUser) -> None:
        if self._ready():
            logger.info("%s identify user: %s", self.name, user.id)

    def reset(self) -> None:
        if self._ready():
            logger.info("%s reset", self.name)


class AmplitudeBackend(_LoggingBackend):
    name = "Amplitude"


class MixpanelBackend(_LoggingBackend):
    name = "Mixpanel"


BACKENDS = {
    "amplitude": AmplitudeBackend,
    "mixpanel": MixpanelBackend,
}


def create_backend(kind: str, key: str) -> AnalyticsBackend:
    """
    Raises:
        ValueError: for an unsupported backend name.
    """
    try:
        backend_cls = BACKENDS[kind]
    except KeyError:
        raise ValueError(f"Unsupported analytics service: {kind}") from None
    return backend_cls(key)


class AnalyticsService:
    """
    Front door for analytics.

    Adds common properties to every event and remembers the identified user
    so it can be replayed on a backend initialized later.
    """

    def __init__(self, backend: Optional[AnalyticsBackend] = None, app_version: str = __version__):
        self.backend = backend
        self.app_version = app_version
        self.user: Optional[IdentifiedUser] = None
        self._pending: List[AnalyticsEvent] = []
        if backend is not None:
            backend.initialize()

    @property
    def is_initialized(self) -> bool:
        return self.backend is not None

    @property
    def pending_events(self) -> List[AnalyticsEvent]:
        return list(self._pending)

    def initialize(self, kind: str, key: str) -> None:
        """Create and start the backend, then flush queued events."""
        if self.backend is not None:
            return
        self.backend = create_backend(kind, key)
        self.backend.initialize()

        pending, self._pending = self._pending, []
        for event in pending:
            self.track_event(event.name, event.properties)

        if self.user is not None:
            self.backend.identify_user(self.user)

    def track_event(self, name: str, properties: Optional[Dict[str, Any]] = None) -> None:
        if self.backend is None:
            self._pending.append(AnalyticsEvent(name=name, properties=properties or {}))
            return

        event = AnalyticsEvent(
            name=name,
            properties={
                **(properties or {}),
                "platform": platform.system(),
                "app_version": self.app_version,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )
        self.backend.track_event(event)

    def identify_user(self, user_id: str, properties: Optional[Dict[str, Any]] = None) -> None:
        self.user = IdentifiedUser(id=user_id, properties=properties or {})
        if self.backend is not None:
            self.backend.identify_user(self.user)

    def reset(self) -> None:
        self.user = None
        if self.backend is not None:
            self.backend.reset()
