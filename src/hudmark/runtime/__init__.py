"""
Live interfaces and the builder that assembles them.
"""

from hudmark.runtime.interface import HudInterface, UpdateSink
from hudmark.runtime.builder import InterfaceBuilder

__all__ = ["HudInterface", "InterfaceBuilder", "UpdateSink"]
