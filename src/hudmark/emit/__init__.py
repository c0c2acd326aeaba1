"""
Program emission.

Exports the command model, literal serialisers and the tree emitter.
"""

from hudmark.emit.program import Command, CommandBuilder, CommandKind, EventBinding, Program
from hudmark.emit.literals import (
    anchor_literal,
    element_definition,
    inline_style_literal,
    padding_literal,
)
from hudmark.emit.button_style import generate_text_button_style
from hudmark.emit.emitter import DslEmitter, InjectedBlock, node_selector, style_var_name

__all__ = [
    "Command",
    "CommandBuilder",
    "CommandKind",
    "EventBinding",
    "Program",
    "anchor_literal",
    "element_definition",
    "inline_style_literal",
    "padding_literal",
    "generate_text_button_style",
    "DslEmitter",
    "InjectedBlock",
    "node_selector",
    "style_var_name",
]
