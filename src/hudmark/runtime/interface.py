"""
Live interface: owns one element tree, its value cache and its program.

An interface is driven by one caller at a time; hosts that receive events
and updates from several threads must serialise them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from hudmark.config import HudmarkConfig
from hudmark.emit.emitter import DslEmitter, InjectedBlock
from hudmark.emit.program import Program
from hudmark.errors import ContractViolation
from hudmark.events.actions import EventPayload
from hudmark.events.cache import ValueCache
from hudmark.events.router import Dispatch, EventRouter
from hudmark.observability import EventSink, default_sink
from hudmark.specs.node import ElementNode
from hudmark.specs.tree import find_by_user_id, prepare_tree
from hudmark.specs.values import Value


class UpdateSink(Protocol):
    """Delivers programs to the host session."""

    def push(self, program: Program, *, clear: bool) -> None: ...


class HudInterface:
    """
    A built interface.

    Example:
        hud = InterfaceBuilder().add_element(panel).build(transport=session)
        program = hud.build()
        hud.handle_event({"Action": "ValueChanged", "Target": "volume", "Value": "42"})
        hud.get_value("volume")  # 42
    """

    def __init__(
        self,
        elements: Sequence[ElementNode] | None,
        edit_blocks: Sequence[InjectedBlock] = (),
        base_file: str | None = None,
        *,
        config: HudmarkConfig | None = None,
        sink: EventSink | None = None,
        transport: UpdateSink | None = None,
    ) -> None:
        self.config = config or HudmarkConfig()
        self._sink = sink or default_sink()
        self._transport = transport
        self._cache = ValueCache()
        self._emitter = DslEmitter(
            root_selector=self.config.root_selector,
            style_var_prefix=self.config.style_var_prefix,
            sink=self._sink,
        )
        self._router = EventRouter(self._cache, sink=self._sink)

        self._elements = _install(elements)
        self._edit_blocks = list(edit_blocks)
        self._base_file = base_file if base_file is not None else self.config.base_file
        marker = find_by_user_id(self._elements, self.config.root_marker_id)
        self._hidden = marker is not None and not marker.visible
        self._program: Program | None = None

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def elements(self) -> list[ElementNode]:
        return list(self._elements)

    @property
    def base_file(self) -> str | None:
        return self._base_file

    @property
    def cache(self) -> ValueCache:
        return self._cache

    @property
    def program(self) -> Program | None:
        """Program of the most recent full build."""
        return self._program

    @property
    def hidden(self) -> bool:
        return self._hidden

    def get_value(self, user_id: str) -> Value:
        return self._cache.get_value(user_id)

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------

    def build(self) -> Program:
        """Full pass: rebuild the value cache from initial values, then emit."""
        self._sink.emit("build.start", base_file=self._base_file, elements=len(self._elements))
        self._cache.rebuild(self._elements)
        self._program = self._emitter.emit(self._elements, self._edit_blocks, self._base_file)
        self._sink.emit("build.done", commands=len(self._program.commands), values=len(self._cache))
        return self._program

    def handle_event(self, event: EventPayload | Mapping[str, Any]) -> list[Dispatch]:
        return self._router.route(event, self._elements, context=self)

    def update(
        self,
        elements: Sequence[ElementNode],
        edit_blocks: Sequence[InjectedBlock] = (),
        base_file: str | None = None,
    ) -> Program:
        """
        Replace the whole tree and push the new program.

        The new tree is validated and emitted before anything is swapped in;
        if that fails the current tree stays live.
        """
        installed = _install(elements)
        blocks = list(edit_blocks)
        base = base_file if base_file is not None else self.config.base_file

        staged = ValueCache()
        staged.rebuild(installed)
        program = self._emitter.emit(installed, blocks, base)

        self._elements = installed
        self._edit_blocks = blocks
        self._base_file = base
        self._cache.load(staged.snapshot())
        self._program = program
        self._sink.emit("interface.updated", elements=len(installed), commands=len(program.commands))
        self._push(program)
        return program

    # -------------------------------------------------------------------------
    # Visibility
    # -------------------------------------------------------------------------

    def show(self) -> Program:
        return self._set_root_visibility(True)

    def hide(self) -> Program:
        return self._set_root_visibility(False)

    def _set_root_visibility(self, visible: bool) -> Program:
        marker = self.config.root_marker_id
        root = find_by_user_id(self._elements, marker)
        if root is None:
            raise ContractViolation(f"no element with id '{marker}' to toggle visibility on")
        root.with_visible(visible)
        self._hidden = not visible
        self._sink.emit("interface.visibility", visible=visible)
        program = self.build()
        self._push(program)
        return program

    def _push(self, program: Program) -> None:
        if self._transport is not None:
            self._transport.push(program, clear=True)


def _install(elements: Sequence[ElementNode] | None) -> list[ElementNode]:
    """Validate a tree, assign internal ids and freeze its structure."""
    if elements is None:
        raise ContractViolation("interface has no element list")
    roots = list(elements)
    for root in roots:
        if root.parent is not None:
            raise ContractViolation("top-level element is attached to a parent", root.kind.value)
    prepare_tree(roots)
    for root in roots:
        root.seal()
    return roots
