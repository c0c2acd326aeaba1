"""
hudmark developer CLI.

    hudmark resolve button "background: #202020; --hover-color: #ffcc00"
    hudmark version
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from hudmark._version import get_version
from hudmark.config import load_config
from hudmark.emit.emitter import DslEmitter
from hudmark.errors import HudmarkError
from hudmark.observability import RecordingEventSink
from hudmark.specs.kinds import ElementKind
from hudmark.specs.node import ElementNode
from hudmark.specs.tree import prepare_tree
from hudmark.styles.parser import parse_style_attribute
from hudmark.styles.resolver import apply_resolution, resolve

app = typer.Typer(
    help="hudmark: compile markup and styles into rendering-engine UI programs",
    no_args_is_help=True,
)

console = Console()

PREVIEW_ID = "Preview"


@app.command(name="resolve")
def resolve_command(
    kind: Annotated[ElementKind, typer.Argument(help="Element kind to resolve for")],
    style: Annotated[str, typer.Argument(help="Raw style attribute, e.g. 'color: #fff; padding: 4'")],
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="hudmark.toml file or directory"),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Resolve a style string for one element kind and show the emitted program."""
    try:
        config = load_config(config_path)
        config.apply_logging()
    except HudmarkError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    sink = RecordingEventSink()
    resolution = resolve(kind, parse_style_attribute(style), sink=sink)

    node = apply_resolution(ElementNode(kind, user_id=PREVIEW_ID), resolution)
    prepare_tree([node])
    emitter = DslEmitter(
        root_selector=config.root_selector,
        style_var_prefix=config.style_var_prefix,
        sink=sink,
    )
    program = emitter.emit(node)

    if output_json:
        payload = {
            "resolution": resolution.model_dump(mode="json", exclude_none=True),
            "program": program.model_dump(mode="json"),
        }
        console.print_json(json.dumps(payload))
        return

    table = Table(title=f"{kind.value} resolution")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    if resolution.style is not None:
        for state, bucket in resolution.style.states.items():
            fields = bucket.model_dump(mode="json", exclude_none=True)
            table.add_row(f"style.{state.value}", json.dumps(fields))
    if resolution.anchor is not None:
        table.add_row("anchor", json.dumps(resolution.anchor.model_dump(exclude_none=True)))
    for field_name in ("visible", "flex_weight", "layout_mode"):
        value = getattr(resolution, field_name)
        if value is not None:
            table.add_row(field_name, str(value))
    for edit in resolution.edits:
        table.add_row(f"set .{edit.name}", edit.literal)
    console.print(table)

    for event in sink.named("style.dropped"):
        console.print(
            f"[yellow]dropped[/yellow] {event.fields['property']}: "
            f"{event.fields['value']} ({event.fields['reason']})"
        )

    console.print("\n[bold]Program[/bold]")
    console.print(program.to_text(), markup=False, highlight=False)


@app.command(name="version")
def version_command() -> None:
    """Show the hudmark version."""
    console.print(f"hudmark {get_version()}")


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
