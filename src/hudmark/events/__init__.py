"""
Inbound event handling: payloads, value cache and routing.
"""

from hudmark.events.actions import ActionKind, EventPayload
from hudmark.events.cache import ValueCache
from hudmark.events.router import Dispatch, EventRouter

__all__ = [
    "ActionKind",
    "EventPayload",
    "ValueCache",
    "Dispatch",
    "EventRouter",
]
