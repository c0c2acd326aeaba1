"""
Program model: the ordered command sequence handed to the rendering engine.

Three command kinds exist, each replayable on its own:

- append: load a DSL file
- append_inline: append a DSL fragment into the element addressed by a scope
  selector (empty scope means the document root)
- set: assign a literal to a property path such as ``#Panel #Ok.Background``

Event bindings travel alongside the commands so the engine knows which
elements report activations and value changes.
"""

from __future__ import annotations

import json
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from hudmark.specs.node import EventKind


class CommandKind(StrEnum):
    APPEND = "append"
    APPEND_INLINE = "append_inline"
    SET = "set"


class Command(BaseModel):
    """
    One program command.

    Example:
        Command(kind=CommandKind.SET, target="#Panel.Background", text="#202020")
    """

    model_config = ConfigDict(frozen=True)

    kind: CommandKind = Field(description="Command kind")
    target: str = Field(description="File path, scope selector or property path")
    text: str | None = Field(default=None, description="Fragment or literal")

    def render(self) -> str:
        """Render as one line of program text."""
        if self.kind == CommandKind.APPEND:
            return f"append {json.dumps(self.target)}"
        if self.kind == CommandKind.APPEND_INLINE:
            return f"inline {json.dumps(self.target)} {json.dumps(self.text)}"
        return f"set {json.dumps(self.target)} {json.dumps(self.text)}"


class EventBinding(BaseModel):
    """
    Event wiring for one listener.

    Example:
        EventBinding(
            kind=EventKind.VALUE_CHANGED,
            selector="#Panel #volume",
            data={"Action": "ValueChanged", "Target": "volume", "@Value": "#Panel #volume.Value"},
        )
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind = Field(description="Binding kind")
    selector: str = Field(description="Element selector")
    data: dict[str, str] = Field(default_factory=dict, description="Payload template")


class Program(BaseModel):
    """A complete interface description."""

    model_config = ConfigDict(frozen=True)

    commands: list[Command] = Field(default_factory=list)
    bindings: list[EventBinding] = Field(default_factory=list)

    def to_text(self) -> str:
        return "\n".join(command.render() for command in self.commands)


class CommandBuilder:
    """Accumulates commands and bindings in order."""

    def __init__(self) -> None:
        self._commands: list[Command] = []
        self._bindings: list[EventBinding] = []

    def append(self, path: str) -> CommandBuilder:
        self._commands.append(Command(kind=CommandKind.APPEND, target=path))
        return self

    def append_inline(self, scope: str, text: str) -> CommandBuilder:
        self._commands.append(Command(kind=CommandKind.APPEND_INLINE, target=scope, text=text))
        return self

    def set(self, path: str, literal: str) -> CommandBuilder:
        self._commands.append(Command(kind=CommandKind.SET, target=path, text=literal))
        return self

    def bind(self, kind: EventKind, selector: str, data: dict[str, str]) -> CommandBuilder:
        self._bindings.append(EventBinding(kind=kind, selector=selector, data=data))
        return self

    def build(self) -> Program:
        return Program(commands=list(self._commands), bindings=list(self._bindings))
