"""
Markup front end: tree, tag-handler contract and compiler.
"""

from hudmark.markup.tree import MarkupElement, parse_markup
from hudmark.markup.handlers import TagHandler, apply_common_attributes
from hudmark.markup.compiler import MarkupCompiler

__all__ = [
    "MarkupCompiler",
    "MarkupElement",
    "TagHandler",
    "apply_common_attributes",
    "parse_markup",
]
