"""
Error types for hudmark tree construction, emission and configuration.

Malformed markup and style input never raises: it is dropped and reported to
the event sink. The types below are reserved for caller misuse and for
configuration files that cannot be read.
"""

from __future__ import annotations


class HudmarkError(Exception):
    """Base exception for all hudmark errors."""

    def __init__(self, message: str, element: str | None = None):
        self.message = message
        self.element = element
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending element if known."""
        if self.element:
            return f"{self.element}: {self.message}"
        return self.message


class ContractViolation(HudmarkError):
    """
    Raised when a structural precondition is broken by the caller.

    Examples:
    - Emitting a node that was never placed in a tree (no internal id)
    - Attaching a node that already has a parent
    - Toggling visibility on an interface without a root marker node
    """

    pass


class DuplicateElementIdError(ContractViolation):
    """
    Raised when two nodes in one tree share an identity.

    Both developer-assigned ids and internal ids must be unique within a
    tree snapshot; the tree is rejected before anything is emitted.
    """

    def __init__(self, element_id: str, field: str = "id"):
        self.element_id = element_id
        self.field = field
        super().__init__(f"duplicate {field} '{element_id}' in element tree")


class ConfigError(HudmarkError):
    """
    Raised when a hudmark.toml file cannot be used.

    Examples:
    - Invalid TOML syntax
    - A known key holding a value of the wrong type
    """

    pass
