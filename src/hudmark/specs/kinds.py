"""
Element kinds and the traits table that drives kind-specific behaviour.

Style eligibility, value-field routing and value parsing are looked up here
by kind instead of being spread over per-element classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from hudmark.specs.values import (
    ValueParser,
    parse_bool,
    parse_integer,
    parse_number,
    parse_text,
)


class ElementKind(StrEnum):
    """Closed set of element categories."""

    GROUP = "group"
    BUTTON = "button"
    LABEL = "label"
    TEXT_FIELD = "text_field"
    NUMBER_FIELD = "number_field"
    SLIDER = "slider"
    CHECKBOX = "checkbox"


class ValueField(StrEnum):
    """Event payload field a value-change is read from."""

    VALUE = "Value"
    REF_VALUE = "RefValue"


@dataclass(frozen=True)
class KindTraits:
    """Static facts about one element kind."""

    dsl_type: str  # element type name in the target DSL
    interactive: bool = False  # button-like: pseudo-state styles, hoisted style literal
    container: bool = False  # accepts layout mode and padding
    value_field: ValueField = ValueField.VALUE
    parser: ValueParser | None = None  # None: the kind never reports a value


KIND_TRAITS: dict[ElementKind, KindTraits] = {
    ElementKind.GROUP: KindTraits(dsl_type="Group", container=True),
    ElementKind.BUTTON: KindTraits(dsl_type="TextButton", interactive=True),
    ElementKind.LABEL: KindTraits(dsl_type="Label"),
    ElementKind.TEXT_FIELD: KindTraits(dsl_type="TextField", parser=parse_text),
    ElementKind.NUMBER_FIELD: KindTraits(dsl_type="NumberField", parser=parse_number),
    ElementKind.SLIDER: KindTraits(dsl_type="Slider", parser=parse_integer),
    ElementKind.CHECKBOX: KindTraits(
        dsl_type="CheckBox",
        value_field=ValueField.REF_VALUE,
        parser=parse_bool,
    ),
}


def traits_for(kind: ElementKind) -> KindTraits:
    """Get the traits of a kind."""
    return KIND_TRAITS[kind]
