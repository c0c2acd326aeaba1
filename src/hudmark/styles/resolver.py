"""
Cascade resolver for hudmark elements.

Maps an already-parsed property bag onto the records of one element,
applying the eligibility rules of the element's kind:

1. Interactive kinds bucket ``--hover-*``, ``--pressed-*``/``--active-*`` and
   ``--disabled-*`` properties into their pseudo-state; other kinds drop them.
2. Interactive kinds keep background in the style record and nest text
   styling under a label style; font fields are never set directly.
3. Other kinds turn background into a post-emission ``Background`` set, and
   containers do the same for padding.

Anything that cannot be parsed or does not apply is dropped on its own and
reported to the event sink; resolution of the remaining properties continues.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from hudmark.emit.literals import padding_literal
from hudmark.observability import EventSink, default_sink
from hudmark.specs.kinds import ElementKind, KindTraits, traits_for
from hudmark.specs.node import ElementNode
from hudmark.specs.style import (
    STATE_ORDER,
    AnchorRecord,
    EdgeRecord,
    LabelStyle,
    StyleBucket,
    StyleRecord,
    StyleState,
)
from hudmark.specs.values import INTEGER_TOKEN, parse_number

if TYPE_CHECKING:
    from hudmark.emit.program import CommandBuilder

# =============================================================================
# Vocabulary
# =============================================================================

STATE_PREFIXES: tuple[tuple[str, StyleState], ...] = (
    ("--hover-", StyleState.HOVERED),
    ("--pressed-", StyleState.PRESSED),
    ("--active-", StyleState.PRESSED),
    ("--disabled-", StyleState.DISABLED),
)

BACKGROUND_KEYS = frozenset({"background", "background-color"})
LAYOUT_KEYS = frozenset({"text-align", "layout", "layout-mode"})
ALIGNMENT_KEYS: dict[str, str] = {
    "vertical-align": "vertical_alignment",
    "horizontal-align": "horizontal_alignment",
    "align": "alignment",
}
ANCHOR_KEYS: dict[str, str] = {
    "anchor": "full",
    "anchor-left": "left",
    "anchor-right": "right",
    "anchor-top": "top",
    "anchor-bottom": "bottom",
    "anchor-width": "width",
    "anchor-height": "height",
}

# Multi-word engine names that plain capitalisation would get wrong
CANONICAL_SPELLINGS: dict[str, str] = {
    "topscrolling": "TopScrolling",
    "bottomscrolling": "BottomScrolling",
    "middlecenter": "MiddleCenter",
    "centermiddle": "CenterMiddle",
    "leftcenterwrap": "LeftCenterWrap",
}


def canonical_name(value: str) -> str:
    """Map an informal layout/alignment name to the engine's spelling."""
    value = value.strip()
    if not value:
        return value
    known = CANONICAL_SPELLINGS.get(value.lower())
    if known is not None:
        return known
    return value[0].upper() + value[1:]


def parse_int_token(raw: str) -> int | None:
    """Parse an integer, tolerating a trailing ``px``."""
    token = raw.strip()
    if token.lower().endswith("px"):
        token = token[:-2].strip()
    if not INTEGER_TOKEN.match(token):
        return None
    return int(token)


def parse_size_token(raw: str) -> int | float | None:
    token = raw.strip()
    if token.lower().endswith("px"):
        token = token[:-2]
    size = parse_number(token)
    if isinstance(size, bool) or not isinstance(size, int | float):
        return None
    return size


# =============================================================================
# Results
# =============================================================================


class PropertyEdit(BaseModel):
    """A property set emitted right after the element's subtree."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Property name, appended to the element selector")
    literal: str = Field(description="Literal to assign")


class Resolution(BaseModel):
    """Everything one property bag resolved to."""

    model_config = ConfigDict(frozen=True)

    style: StyleRecord | None = None
    anchor: AnchorRecord | None = None
    edits: list[PropertyEdit] = Field(default_factory=list)
    visible: bool | None = None
    flex_weight: int | None = None
    layout_mode: str | None = None
    dropped: list[str] = Field(default_factory=list, description="Names of dropped properties")


@dataclass(frozen=True)
class SetPropertyHook:
    """Post-emission hook that assigns one property on the node's selector."""

    name: str
    literal: str

    def __call__(self, builder: CommandBuilder, selector: str) -> None:
        builder.set(f"{selector}.{self.name}", self.literal)


# =============================================================================
# Resolution
# =============================================================================


def split_state_prefix(key: str) -> tuple[StyleState | None, str]:
    """Split ``--hover-color`` into (HOVERED, "color")."""
    for prefix, state in STATE_PREFIXES:
        if key.startswith(prefix):
            return state, key[len(prefix) :]
    return None, key


def resolve(
    kind: ElementKind,
    properties: Mapping[str, str],
    *,
    sink: EventSink | None = None,
) -> Resolution:
    """
    Resolve a property bag for one element kind.

    Args:
        kind: Kind of the element being styled
        properties: Lower-cased property names to raw values, in declaration order
        sink: Receives a ``style.dropped`` event per dropped property

    Returns:
        Resolution; style and anchor are None unless at least one of their
        properties resolved
    """
    sink = sink or default_sink()
    traits = traits_for(kind)
    dropped: list[str] = []

    def drop(key: str, value: str, reason: str) -> None:
        dropped.append(key)
        sink.emit("style.dropped", kind=kind.value, property=key, value=value, reason=reason)

    state_props: dict[StyleState, dict[str, str]] = {state: {} for state in STATE_ORDER}
    anchor: dict[str, int] = {}
    edits: list[PropertyEdit] = []
    visible: bool | None = None
    flex_weight: int | None = None
    layout_mode: str | None = None

    for key, value in properties.items():
        state, prop = split_state_prefix(key)
        if state is not None:
            if traits.interactive:
                state_props[state][prop] = value
            else:
                drop(key, value, "pseudo-state on non-interactive kind")
            continue

        if key in ANCHOR_KEYS:
            number = parse_int_token(value)
            if number is None:
                drop(key, value, "not an integer")
            else:
                anchor[ANCHOR_KEYS[key]] = number
        elif key == "flex-weight":
            number = parse_int_token(value)
            if number is None:
                drop(key, value, "not an integer")
            else:
                flex_weight = number
        elif key == "visibility":
            lowered = value.lower()
            if lowered == "hidden":
                visible = False
            elif lowered in ("shown", "visible"):
                visible = True
            else:
                drop(key, value, "unknown visibility")
        elif key == "display":
            lowered = value.lower()
            if lowered == "none":
                visible = False
            elif lowered == "block":
                visible = True
            else:
                drop(key, value, "unknown display")
        elif key in LAYOUT_KEYS:
            if traits.container:
                layout_mode = canonical_name(value)
            else:
                drop(key, value, "layout on non-container kind")
        elif key == "padding":
            edges = _resolve_padding(value) if traits.container else None
            if edges is None:
                reason = "bad padding" if traits.container else "padding on non-container kind"
                drop(key, value, reason)
            else:
                edits.append(PropertyEdit(name="Padding", literal=padding_literal(edges)))
        elif key in BACKGROUND_KEYS and not traits.interactive:
            edits.append(PropertyEdit(name="Background", literal=value))
        else:
            state_props[StyleState.DEFAULT][key] = value

    buckets: dict[StyleState, StyleBucket] = {}
    for state in STATE_ORDER:
        bucket = _map_state(traits, state_props[state], drop)
        if bucket is not None:
            buckets[state] = bucket

    return Resolution(
        style=StyleRecord(states=buckets) if buckets else None,
        anchor=AnchorRecord(**anchor) if anchor else None,
        edits=edits,
        visible=visible,
        flex_weight=flex_weight,
        layout_mode=layout_mode,
        dropped=dropped,
    )


def _resolve_padding(value: str) -> EdgeRecord | None:
    numbers: list[int] = []
    for token in value.split():
        number = parse_int_token(token)
        if number is None:
            return None
        numbers.append(number)
    return EdgeRecord.from_shorthand(numbers)


def _map_state(
    traits: KindTraits,
    props: Mapping[str, str],
    drop: Callable[[str, str, str], None],
) -> StyleBucket | None:
    """
    Map one state's properties onto a bucket.

    Interactive kinds route text styling into the nested label style; the
    control primitive has no direct font fields.
    """
    fields: dict[str, object] = {}
    label: dict[str, object] = {}
    text = label if traits.interactive else fields

    for key, value in props.items():
        if key == "color":
            text["text_color"] = value
        elif key in BACKGROUND_KEYS:
            fields["background"] = value
        elif key == "font-size":
            size = parse_size_token(value)
            if size is None:
                drop(key, value, "not a number")
            else:
                text["font_size"] = size
        elif key == "font-weight":
            if value.lower() == "bold":
                text["bold"] = True
            else:
                drop(key, value, "only bold is supported")
        elif key == "text-transform":
            if value.lower() == "uppercase":
                text["uppercase"] = True
            else:
                drop(key, value, "only uppercase is supported")
        elif key in ALIGNMENT_KEYS and not traits.interactive:
            fields[ALIGNMENT_KEYS[key]] = canonical_name(value)
        else:
            drop(key, value, "unsupported property")

    if label:
        fields["label_style"] = LabelStyle(**label)
    if not fields:
        return None
    return StyleBucket(**fields)


def apply_resolution(node: ElementNode, resolution: Resolution) -> ElementNode:
    """Install a resolution on a node and return the node."""
    if resolution.style is not None:
        node.with_style(resolution.style)
    if resolution.anchor is not None:
        node.with_anchor(resolution.anchor)
    if resolution.visible is not None:
        node.with_visible(resolution.visible)
    if resolution.flex_weight is not None:
        node.with_flex_weight(resolution.flex_weight)
    if resolution.layout_mode is not None:
        node.with_layout_mode(resolution.layout_mode)
    for edit in resolution.edits:
        node.edit_after(SetPropertyHook(name=edit.name, literal=edit.literal))
    return node


def apply_styles(
    node: ElementNode,
    properties: Mapping[str, str],
    *,
    sink: EventSink | None = None,
) -> Resolution:
    """Resolve a property bag for a node and install the result on it."""
    resolution = resolve(node.kind, properties, sink=sink)
    apply_resolution(node, resolution)
    return resolution
