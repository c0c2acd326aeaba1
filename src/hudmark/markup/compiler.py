"""
Markup compiler.

Walks a markup tree and hands each element to the first registered tag
handler that accepts it. Elements no handler accepts are skipped and their
children are compiled in their place.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from hudmark.markup.handlers import TagHandler
from hudmark.markup.tree import MarkupElement, parse_markup
from hudmark.observability import EventSink, default_sink
from hudmark.specs.node import ElementNode

logger = logging.getLogger(__name__)


class MarkupCompiler:
    """Compiles markup into top-level element nodes."""

    def __init__(
        self,
        handlers: Sequence[TagHandler] = (),
        *,
        sink: EventSink | None = None,
    ) -> None:
        self.handlers: list[TagHandler] = list(handlers)
        self.sink = sink or default_sink()

    def register(self, handler: TagHandler) -> MarkupCompiler:
        self.handlers.append(handler)
        return self

    def handler_for(self, element: MarkupElement) -> TagHandler | None:
        for handler in self.handlers:
            if handler.can_handle(element):
                return handler
        return None

    def compile(self, markup: str | MarkupElement) -> list[ElementNode]:
        """Compile a markup string or an already-parsed tree."""
        root = parse_markup(markup) if isinstance(markup, str) else markup
        return self.compile_children(root)

    def compile_children(self, element: MarkupElement) -> list[ElementNode]:
        """Compile the children of one element, in document order."""
        nodes: list[ElementNode] = []
        for child in element.children:
            nodes.extend(self.compile_element(child))
        return nodes

    def compile_element(self, element: MarkupElement) -> list[ElementNode]:
        handler = self.handler_for(element)
        if handler is None:
            logger.debug("No handler for <%s>, compiling its children in place", element.tag)
            return self.compile_children(element)
        node = handler.handle(element, self)
        return [node] if node is not None else []
