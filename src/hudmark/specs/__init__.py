"""
Element tree type definitions.

This module exports the node, record and value types.
"""

from hudmark.specs.kinds import KIND_TRAITS, ElementKind, KindTraits, ValueField, traits_for
from hudmark.specs.node import (
    ElementNode,
    EmitHook,
    EventKind,
    ListenerBinding,
    ListenerCallback,
)
from hudmark.specs.style import (
    STATE_ORDER,
    AnchorRecord,
    EdgeRecord,
    LabelStyle,
    StyleBucket,
    StyleRecord,
    StyleState,
)
from hudmark.specs.tree import find_by_user_id, prepare_tree, walk_all
from hudmark.specs.values import Value, ValueLookup, ValueParser, format_literal

__all__ = [
    # Kinds
    "ElementKind",
    "KindTraits",
    "KIND_TRAITS",
    "ValueField",
    "traits_for",
    # Nodes
    "ElementNode",
    "EmitHook",
    "EventKind",
    "ListenerBinding",
    "ListenerCallback",
    # Records
    "AnchorRecord",
    "EdgeRecord",
    "LabelStyle",
    "StyleBucket",
    "StyleRecord",
    "StyleState",
    "STATE_ORDER",
    # Tree
    "find_by_user_id",
    "prepare_tree",
    "walk_all",
    # Values
    "Value",
    "ValueLookup",
    "ValueParser",
    "format_literal",
]
