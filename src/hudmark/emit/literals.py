"""
DSL literal serialisation for records and element definitions.
"""

from __future__ import annotations

from hudmark.specs.node import ElementNode
from hudmark.specs.style import AnchorRecord, EdgeRecord, StyleBucket
from hudmark.specs.values import format_literal


def format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def text_fields(
    text_color: str | None,
    font_size: int | float | None,
    bold: bool | None,
    uppercase: bool | None,
) -> list[str]:
    """Text properties in their fixed order: colour, size, bold, uppercase."""
    fields: list[str] = []
    if text_color is not None:
        fields.append(f"TextColor: {text_color}")
    if font_size is not None:
        fields.append(f"FontSize: {format_number(font_size)}")
    if bold:
        fields.append("RenderBold: true")
    if uppercase:
        fields.append("RenderUppercase: true")
    return fields


def inline_style_literal(bucket: StyleBucket) -> str | None:
    """
    Serialise a default-state bucket as an inline style constructor.

    Returns:
        ``(TextColor: #fff, FontSize: 16, ...)`` or None if nothing applies
    """
    fields = text_fields(bucket.text_color, bucket.font_size, bucket.bold, bucket.uppercase)
    if bucket.vertical_alignment is not None:
        fields.append(f"VerticalAlignment: {bucket.vertical_alignment}")
    if bucket.horizontal_alignment is not None:
        fields.append(f"HorizontalAlignment: {bucket.horizontal_alignment}")
    if bucket.alignment is not None:
        fields.append(f"Alignment: {bucket.alignment}")
    if not fields:
        return None
    return f"({', '.join(fields)})"


def anchor_literal(anchor: AnchorRecord) -> str | None:
    fields: list[str] = []
    for name in ("full", "left", "top", "right", "bottom", "width", "height"):
        value = getattr(anchor, name)
        if value is not None:
            fields.append(f"{name.capitalize()}: {value}")
    if not fields:
        return None
    return f"({', '.join(fields)})"


def padding_literal(edges: EdgeRecord) -> str:
    return f"(Left: {edges.left}, Top: {edges.top}, Right: {edges.right}, Bottom: {edges.bottom})"


def element_definition(node: ElementNode) -> str:
    """
    Serialise a node's own definition, without its children.

    Interactive kinds never carry an inline style; theirs is hoisted into a
    named variable by the emitter.

    Example:
        ``Label #Title { Text: "Hello"; Style: (FontSize: 20); }``
    """
    traits = node.traits
    props: list[str] = []
    if node.text is not None:
        props.append(f"Text: {format_literal(node.text)}")
    if node.initial_value is not None:
        props.append(f"Value: {format_literal(node.initial_value)}")
    if not node.visible:
        props.append("Visible: false")
    if node.flex_weight is not None:
        props.append(f"FlexWeight: {node.flex_weight}")
    if node.layout_mode is not None and traits.container:
        props.append(f"LayoutMode: {node.layout_mode}")
    if node.tooltip_text is not None:
        props.append(f"TooltipText: {format_literal(node.tooltip_text)}")
    if node.anchor is not None:
        anchor = anchor_literal(node.anchor)
        if anchor is not None:
            props.append(f"Anchor: {anchor}")
    if node.style is not None and not traits.interactive and node.style.default is not None:
        style = inline_style_literal(node.style.default)
        if style is not None:
            props.append(f"Style: {style}")

    header = f"{traits.dsl_type} #{node.internal_id}"
    if not props:
        return f"{header} {{}}"
    return f"{header} {{ {' '.join(prop + ';' for prop in props)} }}"
