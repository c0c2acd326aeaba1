"""
Event router.

Matches an inbound event against every listener in the tree, in document
order. Matching does not stop at the first hit and unmatched events are
dropped silently.

- Activating listeners fire with a null value on ``ButtonClicked`` when the
  node's internal id equals the event target.
- ValueChanged listeners fire on ``ValueChanged`` when the ids match and the
  raw value, read from the node kind's value field, parses. The cache entry
  of the node's user id is written before the callback runs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from hudmark.events.actions import ActionKind, EventPayload
from hudmark.events.cache import ValueCache
from hudmark.observability import EventSink, default_sink
from hudmark.specs.node import ElementNode, EventKind, ListenerBinding
from hudmark.specs.tree import walk_all
from hudmark.specs.values import Value, ValueLookup


@dataclass(frozen=True)
class Dispatch:
    """A callback invocation made while routing one event."""

    node: ElementNode
    listener: ListenerBinding
    value: Value


class EventRouter:
    """Routes inbound events to listeners and keeps the value cache current."""

    def __init__(self, cache: ValueCache, *, sink: EventSink | None = None) -> None:
        self.cache = cache
        self._sink = sink or default_sink()

    def route(
        self,
        event: EventPayload | Mapping[str, Any],
        roots: ElementNode | Sequence[ElementNode],
        context: ValueLookup | None = None,
    ) -> list[Dispatch]:
        """
        Route one event through a tree.

        Args:
            event: Payload, or the engine's flat event map
            roots: Top-level node or nodes
            context: Passed to callbacks; defaults to the cache

        Returns:
            Dispatches in the order the callbacks ran
        """
        payload = event if isinstance(event, EventPayload) else EventPayload.from_wire(event)
        if isinstance(roots, ElementNode):
            roots = [roots]
        lookup: ValueLookup = self.cache if context is None else context

        self._sink.emit(
            "event.received",
            action=payload.action,
            target=payload.target,
            fields=sorted(payload.values),
        )

        dispatched: list[Dispatch] = []
        for node in walk_all(roots):
            if node.internal_id is None or node.internal_id != payload.target:
                continue
            for listener in node.listeners:
                dispatch = self._match(node, listener, payload)
                if dispatch is None:
                    continue
                listener.callback(dispatch.value, lookup)
                dispatched.append(dispatch)
                self._sink.emit(
                    "event.dispatched",
                    target=node.internal_id,
                    listener=listener.event_kind.value,
                )

        if not dispatched:
            self._sink.emit(
                "event.dropped",
                action=payload.action,
                target=payload.target,
                reason="no listener matched",
            )
        return dispatched

    def _match(
        self,
        node: ElementNode,
        listener: ListenerBinding,
        payload: EventPayload,
    ) -> Dispatch | None:
        if listener.event_kind == EventKind.ACTIVATING:
            if payload.action == ActionKind.BUTTON_CLICKED:
                return Dispatch(node=node, listener=listener, value=None)
            return None

        if payload.action != ActionKind.VALUE_CHANGED:
            return None
        raw = payload.get_value(node.traits.value_field.value)
        if raw is None:
            return None
        value = node.parse_value(raw)
        if value is None:
            self._sink.emit(
                "event.dropped",
                action=payload.action,
                target=node.internal_id,
                reason="unparseable value",
                raw=raw,
            )
            return None
        if node.user_id is not None:
            self.cache.set_value(node.user_id, value)
        return Dispatch(node=node, listener=listener, value=value)
