"""
Interface builder.

Collects top-level elements, whole-page edits and an optional base file,
then produces a live HudInterface or updates an existing one.
"""

from __future__ import annotations

from hudmark.config import HudmarkConfig
from hudmark.emit.emitter import InjectedBlock
from hudmark.emit.program import Program
from hudmark.observability import EventSink
from hudmark.runtime.interface import HudInterface, UpdateSink
from hudmark.specs.node import ElementNode


class InterfaceBuilder:
    """
    A convenient builder to assemble an interface.

    Example:
        hud = (
            InterfaceBuilder(config)
            .from_file("Pages/Placeholder.ui")
            .add_element(panel)
            .edit_element(lambda program: program.set("#Title.Text", '"Hi"'))
            .build(transport=session)
        )
    """

    def __init__(self, config: HudmarkConfig | None = None) -> None:
        self.config = config or HudmarkConfig()
        self.base_file: str | None = self.config.base_file
        self.elements: list[ElementNode] = []
        self.edit_blocks: list[InjectedBlock] = []

    def from_file(self, path: str) -> InterfaceBuilder:
        """Load this DSL file before anything else."""
        self.base_file = path
        return self

    def add_element(self, element: ElementNode) -> InterfaceBuilder:
        self.elements.append(element)
        return self

    def edit_element(self, block: InjectedBlock) -> InterfaceBuilder:
        """
        Add a whole-page edit, run after the base file and before any element.

        Use ``ElementNode.edit_before``/``edit_after`` to edit around one
        element instead.
        """
        self.edit_blocks.append(block)
        return self

    def build(
        self,
        *,
        sink: EventSink | None = None,
        transport: UpdateSink | None = None,
    ) -> HudInterface:
        return HudInterface(
            self.elements,
            self.edit_blocks,
            self.base_file,
            config=self.config,
            sink=sink,
            transport=transport,
        )

    def update_existing(self, interface: HudInterface) -> Program:
        """Replace an existing interface's content with this builder's."""
        return interface.update(self.elements, self.edit_blocks, self.base_file)
