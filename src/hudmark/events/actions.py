"""
Inbound event actions and payloads.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActionKind(StrEnum):
    """Actions reported by the rendering engine."""

    BUTTON_CLICKED = "ButtonClicked"
    VALUE_CHANGED = "ValueChanged"


class EventPayload(BaseModel):
    """
    One inbound event.

    Example:
        EventPayload(action="ValueChanged", target="volume", values={"Value": "42"})
    """

    model_config = ConfigDict(frozen=True)

    action: str = Field(description="Action kind; unknown actions match nothing")
    target: str | None = Field(default=None, description="Internal id of the target element")
    values: dict[str, str] = Field(default_factory=dict, description="Named payload fields")

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> EventPayload:
        """
        Build a payload from the engine's flat event map.

        ``Action`` and ``Target`` are lifted out; every other non-null field
        is kept as a string.
        """
        values = {
            key: str(value)
            for key, value in data.items()
            if key not in ("Action", "Target") and value is not None
        }
        target = data.get("Target")
        return cls(
            action=str(data.get("Action", "")),
            target=str(target) if target is not None else None,
            values=values,
        )

    def get_value(self, name: str) -> str | None:
        return self.values.get(name)
