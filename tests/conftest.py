"""Shared pytest fixtures for hudmark tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from hudmark.emit.program import Program
from hudmark.observability import RecordingEventSink
from hudmark.specs.kinds import ElementKind
from hudmark.specs.node import ElementNode
from hudmark.specs.values import Value, ValueLookup


@dataclass
class RecordingTransport:
    """UpdateSink that keeps every pushed program."""

    pushes: list[tuple[Program, bool]] = field(default_factory=list)

    def push(self, program: Program, *, clear: bool) -> None:
        self.pushes.append((program, clear))


@dataclass
class CallbackRecorder:
    """Listener callback that records its arguments."""

    calls: list[tuple[Value, ValueLookup]] = field(default_factory=list)

    def __call__(self, value: Value, context: ValueLookup) -> None:
        self.calls.append((value, context))

    @property
    def values(self) -> list[Value]:
        return [value for value, _ in self.calls]


@pytest.fixture
def sink() -> RecordingEventSink:
    """Return an in-memory event sink."""
    return RecordingEventSink()


@pytest.fixture
def transport() -> RecordingTransport:
    """Return a transport that records pushed programs."""
    return RecordingTransport()


@pytest.fixture
def recorder() -> CallbackRecorder:
    """Return a callback recorder."""
    return CallbackRecorder()


@pytest.fixture
def panel(recorder: CallbackRecorder) -> ElementNode:
    """
    Return a small HUD tree.

    HudRoot (group)
      Label "Volume"
      volume (slider, initial 50, value listener)
      mute (checkbox, initial false, value listener)
      ok (button, activation listener)
    """
    return (
        ElementNode(ElementKind.GROUP, user_id="HudRoot")
        .with_layout_mode("Top")
        .add_child(ElementNode(ElementKind.LABEL).with_text("Volume"))
        .add_child(
            ElementNode(ElementKind.SLIDER, user_id="volume")
            .with_value(50)
            .on_value_changed(recorder)
        )
        .add_child(
            ElementNode(ElementKind.CHECKBOX, user_id="mute")
            .with_value(False)
            .on_value_changed(recorder)
        )
        .add_child(ElementNode(ElementKind.BUTTON, user_id="ok").with_text("OK").on_activate(recorder))
    )
