"""
Generates TextButtonStyle DSL from a resolved button style record.

Button styles cannot be passed as inline constructor arguments, so the
emitter defines them as a named variable next to the button.
"""

from __future__ import annotations

from hudmark.emit.literals import text_fields
from hudmark.specs.style import LabelStyle, StyleBucket, StyleRecord


def generate_text_button_style(style: StyleRecord) -> str | None:
    """
    Generate a complete TextButtonStyle literal.

    States appear in the fixed order Default, Hovered, Pressed, Disabled;
    states with nothing to render are left out.

    Args:
        style: Resolved style record of an interactive node

    Returns:
        ``TextButtonStyle(Default: (...), Hovered: (...))`` or None if no
        state has content
    """
    sections: list[str] = []
    for state in style.populated_states():
        body = _state_properties(style.states[state])
        if body:
            sections.append(f"{state.value}: ({body})")
    if not sections:
        return None
    return f"TextButtonStyle({', '.join(sections)})"


def _state_properties(bucket: StyleBucket) -> str:
    """
    Properties for a single button state.

    Format: ``Background: #color, LabelStyle: (TextColor: #color, FontSize: N)``
    """
    parts: list[str] = []
    if bucket.background is not None:
        parts.append(f"Background: {bucket.background}")
    label = label_style_literal(bucket.label_style) if bucket.label_style else None
    if label is not None:
        parts.append(f"LabelStyle: {label}")
    return ", ".join(parts)


def label_style_literal(label: LabelStyle) -> str | None:
    fields = text_fields(label.text_color, label.font_size, label.bold, label.uppercase)
    if not fields:
        return None
    return f"({', '.join(fields)})"
