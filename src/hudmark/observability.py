"""
Structured event sinks.

Build, emit and routing code reports what it did through an injected sink
instead of a module-level logger, so a host can capture, forward or silence
those reports per interface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class EventSink(Protocol):
    """Receives structured observability events."""

    def emit(self, event: str, **fields: Any) -> None: ...


class LoggingEventSink:
    """Forward events to a stdlib logger.

    Drops and dispatches are routine, so they go out at DEBUG; build and
    update milestones go out at INFO.
    """

    INFO_EVENTS = frozenset({"build.start", "interface.updated", "interface.visibility"})

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def emit(self, event: str, **fields: Any) -> None:
        level = logging.INFO if event in self.INFO_EVENTS else logging.DEBUG
        if not self._logger.isEnabledFor(level):
            return
        detail = " ".join(f"{key}={value!r}" for key, value in fields.items())
        self._logger.log(level, "%s %s", event, detail)


@dataclass
class RecordedEvent:
    """An event captured by RecordingEventSink."""

    name: str
    fields: dict[str, Any] = field(default_factory=dict)


class RecordingEventSink:
    """Keep every event in memory, in arrival order."""

    def __init__(self) -> None:
        self.events: list[RecordedEvent] = []

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append(RecordedEvent(name=event, fields=dict(fields)))

    def named(self, event: str) -> list[RecordedEvent]:
        """Return the recorded events with the given name."""
        return [e for e in self.events if e.name == event]

    def clear(self) -> None:
        self.events.clear()


def default_sink() -> EventSink:
    """Sink used when the caller does not inject one."""
    return LoggingEventSink()
