"""Parse inline ``style`` attributes into an ordered property bag."""

from __future__ import annotations


def parse_style_attribute(style: str) -> dict[str, str]:
    """
    Split ``name: value; name: value`` declarations.

    Keys are trimmed and lower-cased, values trimmed. Only the first colon
    separates name from value, so ``background: url(a:b)`` survives.
    Declarations without a colon are ignored; a repeated name keeps its last
    value but its first position.
    """
    properties: dict[str, str] = {}
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep:
            continue
        key = name.strip().lower()
        if not key:
            continue
        properties[key] = value.strip()
    return properties
