"""
hudmark: compile markup and styles into rendering-engine UI programs.

Element trees are resolved against a closed set of style properties, emitted
as an ordered program of DSL commands, and wired back to callbacks through
the event router.
"""

from hudmark._version import get_version
from hudmark.config import HudmarkConfig, load_config
from hudmark.emit import CommandBuilder, DslEmitter, Program
from hudmark.errors import ConfigError, ContractViolation, DuplicateElementIdError, HudmarkError
from hudmark.events import EventPayload, EventRouter, ValueCache
from hudmark.markup import MarkupCompiler, TagHandler, apply_common_attributes, parse_markup
from hudmark.observability import EventSink, LoggingEventSink, RecordingEventSink
from hudmark.runtime import HudInterface, InterfaceBuilder, UpdateSink
from hudmark.specs import ElementKind, ElementNode, EventKind
from hudmark.styles import apply_styles, parse_style_attribute, resolve

__version__ = get_version()

__all__ = [
    "__version__",
    # Configuration
    "HudmarkConfig",
    "load_config",
    # Errors
    "HudmarkError",
    "ContractViolation",
    "DuplicateElementIdError",
    "ConfigError",
    # Observability
    "EventSink",
    "LoggingEventSink",
    "RecordingEventSink",
    # Element tree
    "ElementKind",
    "ElementNode",
    "EventKind",
    # Styles
    "parse_style_attribute",
    "resolve",
    "apply_styles",
    # Emission
    "CommandBuilder",
    "DslEmitter",
    "Program",
    # Events
    "EventPayload",
    "EventRouter",
    "ValueCache",
    # Runtime
    "HudInterface",
    "InterfaceBuilder",
    "UpdateSink",
    # Markup
    "MarkupCompiler",
    "TagHandler",
    "apply_common_attributes",
    "parse_markup",
]
