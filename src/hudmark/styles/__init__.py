"""
Style attribute parsing and cascade resolution.
"""

from hudmark.styles.parser import parse_style_attribute
from hudmark.styles.resolver import (
    PropertyEdit,
    Resolution,
    SetPropertyHook,
    apply_resolution,
    apply_styles,
    canonical_name,
    resolve,
)

__all__ = [
    "parse_style_attribute",
    "PropertyEdit",
    "Resolution",
    "SetPropertyHook",
    "apply_resolution",
    "apply_styles",
    "canonical_name",
    "resolve",
]
