"""
DSL emitter.

Walks element trees in document order and produces a Program. Emission only
reads the tree, so emitting an unchanged tree twice yields identical output.

Per node the order is:

1. the node's ``pre_emit`` hooks
2. the hoisted style definition (interactive kinds with a style)
3. the node's own definition, appended into its parent's selector
4. its event bindings
5. its children, recursively
6. the hoisted style reference assignment
7. the node's ``post_emit`` hooks

Hoisted style variables are named ``<prefix><digest>`` where digest is the
first 12 hex digits of the SHA-1 of the node selector. The selector is
stable across rebuilds, so the name is too.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Sequence

from hudmark.emit.button_style import generate_text_button_style
from hudmark.emit.literals import element_definition
from hudmark.emit.program import CommandBuilder, Program
from hudmark.errors import ContractViolation
from hudmark.events.actions import ActionKind
from hudmark.observability import EventSink, default_sink
from hudmark.specs.kinds import ValueField
from hudmark.specs.node import ElementNode, EventKind

# Whole-page edit run before any node is emitted
InjectedBlock = Callable[[CommandBuilder], None]


def node_selector(scope: str, node: ElementNode) -> str:
    """Selector of a node appended into ``scope``."""
    if node.internal_id is None:
        raise ContractViolation(
            "node has no internal id; it was never placed in a prepared tree",
            node.kind.value,
        )
    return f"{scope} #{node.internal_id}".strip()


def style_var_name(selector: str, prefix: str = "CustomStyle") -> str:
    digest = hashlib.sha1(selector.encode("utf-8")).hexdigest()[:12]
    return f"{prefix}{digest}"


class DslEmitter:
    """Serialises element trees into programs."""

    def __init__(
        self,
        *,
        root_selector: str = "",
        style_var_prefix: str = "CustomStyle",
        sink: EventSink | None = None,
    ) -> None:
        self.root_selector = root_selector
        self.style_var_prefix = style_var_prefix
        self._sink = sink or default_sink()

    def emit(
        self,
        roots: ElementNode | Sequence[ElementNode],
        injected_blocks: Sequence[InjectedBlock] = (),
        base_file: str | None = None,
    ) -> Program:
        """
        Produce the program for a tree.

        Args:
            roots: Top-level node or nodes, already prepared
            injected_blocks: Whole-page edits, run in order after the base file
            base_file: DSL file loaded first, if any

        Returns:
            Program with commands and event bindings

        Raises:
            ContractViolation: If a node has no internal id, or two nodes map
                to the same hoisted style name
        """
        if isinstance(roots, ElementNode):
            roots = [roots]

        builder = CommandBuilder()
        if base_file:
            builder.append(base_file)
        for block in injected_blocks:
            block(builder)

        hoisted: dict[str, str] = {}
        for root in roots:
            self._emit_node(builder, root, self.root_selector, hoisted)

        program = builder.build()
        self._sink.emit(
            "emit.done",
            commands=len(program.commands),
            bindings=len(program.bindings),
        )
        return program

    def _emit_node(
        self,
        builder: CommandBuilder,
        node: ElementNode,
        scope: str,
        hoisted: dict[str, str],
    ) -> None:
        selector = node_selector(scope, node)

        for hook in node.pre_emit:
            hook(builder, selector)

        var_name = self._hoist_style(builder, node, scope, selector, hoisted)

        builder.append_inline(scope, element_definition(node))
        for listener in node.listeners:
            data = self._binding_data(node, listener.event_kind, selector)
            builder.bind(listener.event_kind, selector, data)

        for child in node.children:
            self._emit_node(builder, child, selector, hoisted)

        if var_name is not None:
            builder.set(f"{selector}.Style", f"$.{var_name}")

        for hook in node.post_emit:
            hook(builder, selector)

    def _hoist_style(
        self,
        builder: CommandBuilder,
        node: ElementNode,
        scope: str,
        selector: str,
        hoisted: dict[str, str],
    ) -> str | None:
        if not node.traits.interactive or node.style is None:
            return None
        literal = generate_text_button_style(node.style)
        if literal is None:
            return None

        name = style_var_name(selector, self.style_var_prefix)
        owner = hoisted.setdefault(name, selector)
        if owner != selector:
            raise ContractViolation(f"style variable '{name}' already defined for {owner}", selector)
        builder.append_inline(scope, f"@{name} = {literal};")
        return name

    @staticmethod
    def _binding_data(node: ElementNode, kind: EventKind, selector: str) -> dict[str, str]:
        if kind == EventKind.ACTIVATING:
            return {"Action": ActionKind.BUTTON_CLICKED.value, "Target": node.internal_id or ""}
        field = node.traits.value_field
        key = "@RefValue" if field == ValueField.REF_VALUE else "@Value"
        return {
            "Action": ActionKind.VALUE_CHANGED.value,
            "Target": node.internal_id or "",
            key: f"{selector}.Value",
        }
