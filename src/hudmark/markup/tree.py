"""
Lightweight markup tree.

Builds a nested element tree from markup with the stdlib ``html.parser``.
There is no validation: unclosed tags are closed at the end of input and
stray end tags are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass
class MarkupElement:
    """One markup element: tag, attributes, children and direct text."""

    tag: str
    attrs: dict[str, str | None] = field(default_factory=dict)
    children: list[MarkupElement] = field(default_factory=list)
    text: str = ""

    def has_attr(self, name: str) -> bool:
        return name in self.attrs

    def get_attr(self, name: str, default: str = "") -> str:
        return self.attrs.get(name, default) or default

    def get_text(self) -> str:
        """Get all text content recursively."""
        parts = [self.text]
        for child in self.children:
            parts.append(child.get_text())
        return "".join(parts)

    def find_all(self, tag: str) -> list[MarkupElement]:
        """Recursively find all descendants with the given tag."""
        result: list[MarkupElement] = []
        for child in self.children:
            if child.tag == tag:
                result.append(child)
            result.extend(child.find_all(tag))
        return result


class _TreeBuilder(HTMLParser):
    """Build a MarkupElement tree from raw markup."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = MarkupElement(tag="root")
        self._stack: list[MarkupElement] = [self.root]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        elem = MarkupElement(tag=tag, attrs=dict(attrs))
        self._stack[-1].children.append(elem)
        if tag not in VOID_TAGS:
            self._stack.append(elem)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._stack[-1].children.append(MarkupElement(tag=tag, attrs=dict(attrs)))

    def handle_endtag(self, tag: str) -> None:
        # Pop back to the matching open tag, if there is one
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self._stack[-1].text += data


def parse_markup(markup: str) -> MarkupElement:
    """Parse a markup string into a tree under a synthetic ``root`` element."""
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    return builder.root
