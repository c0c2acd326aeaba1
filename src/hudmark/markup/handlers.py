"""
Tag handler contract and the attributes every element understands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from hudmark.markup.tree import MarkupElement
from hudmark.observability import EventSink
from hudmark.specs.node import ElementNode
from hudmark.styles.parser import parse_style_attribute
from hudmark.styles.resolver import apply_styles, parse_int_token

if TYPE_CHECKING:
    from hudmark.markup.compiler import MarkupCompiler

TOOLTIP_ATTR = "data-hyui-tooltiptext"
FLEX_WEIGHT_ATTR = "data-hyui-flexweight"


@runtime_checkable
class TagHandler(Protocol):
    """
    Turns one kind of markup element into element nodes.

    ``handle`` may return None to produce nothing; it can compile the
    element's children through ``compiler.compile_children``.
    """

    def can_handle(self, element: MarkupElement) -> bool: ...

    def handle(self, element: MarkupElement, compiler: MarkupCompiler) -> ElementNode | None: ...


def apply_common_attributes(
    node: ElementNode,
    element: MarkupElement,
    *,
    sink: EventSink | None = None,
) -> ElementNode:
    """
    Apply ``id``, tooltip, flex weight and ``style`` attributes to a node.

    An unparseable flex weight is ignored. The style attribute runs through
    the cascade resolver last, so a ``flex-weight`` style property wins over
    the data attribute.
    """
    user_id = element.get_attr("id").strip()
    if user_id:
        node.with_id(user_id)

    if element.has_attr(TOOLTIP_ATTR):
        node.with_tooltip(element.get_attr(TOOLTIP_ATTR))

    if element.has_attr(FLEX_WEIGHT_ATTR):
        weight = parse_int_token(element.get_attr(FLEX_WEIGHT_ATTR))
        if weight is not None:
            node.with_flex_weight(weight)

    style = element.get_attr("style")
    if style:
        apply_styles(node, parse_style_attribute(style), sink=sink)
    return node
