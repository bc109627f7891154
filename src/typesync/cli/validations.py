from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typesync.cli.helpers import load_reflection, resolve_document
from typesync.core.naming import snake_case
from typesync.core.ports.reflection import ModelReflection
from typesync.core.reconcile import find_interfaces
from typesync.core.sync import sync_validations
from typesync.settings import get_settings

console = Console()


def validations(
    name: Annotated[str, typer.Argument(help="Model whose presence validations changed.")],
    models: Annotated[
        str | None, typer.Option(help="Module with SQLAlchemy models (default: $TYPESYNC_MODELS).")
    ] = None,
    document: Annotated[Path | None, typer.Option(help="Definitions document (default: $TYPESYNC_DOCUMENT).")] = None,
) -> None:
    """Sync optional markers of a model's interface with its validations."""
    doc = resolve_document(document)
    try:
        reflection = load_reflection(models)
        result = sync_validations(doc, reflection, name)
    except (ValueError, LookupError, ImportError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    interface = result.interface
    if not result.located:
        console.print(f"[yellow]No interface {interface} in {doc.path}; nothing to update.[/yellow]")
    elif result.changed:
        console.print(f"[green]Updated[/green] {result.changed_lines} field(s) of {interface} in {doc.path}")
    else:
        console.print(f"Interface {interface} already matches its validations.")

    if result.unbalanced:
        console.print(f"[yellow]Interface {interface} has unbalanced braces; check {doc.path}.[/yellow]")


def _render_models(reflection: ModelReflection, interfaces: set[str]) -> None:
    table = Table(show_lines=False)
    table.add_column("model")
    table.add_column("name")
    table.add_column("interface")
    for model_name in reflection.model_names():
        status = "[green]present[/green]" if model_name in interfaces else "[yellow]missing[/yellow]"
        table.add_row(model_name, snake_case(model_name), status)
    console.print(table)


def show(
    models: Annotated[
        str | None, typer.Option(help="Also list the models in this module (default: $TYPESYNC_MODELS).")
    ] = None,
    document: Annotated[Path | None, typer.Option(help="Definitions document (default: $TYPESYNC_DOCUMENT).")] = None,
) -> None:
    """List the interfaces in the definitions document."""
    doc = resolve_document(document)
    interfaces: list[tuple[int, str]] = []
    if doc.exists():
        interfaces = find_interfaces(doc.read())
        seen: set[str] = set()
        table = Table(show_lines=False)
        table.add_column("line")
        table.add_column("interface")
        table.add_column("note")
        for line, interface in interfaces:
            note = "duplicate" if interface in seen else ""
            seen.add(interface)
            table.add_row(str(line), interface, note)
        console.print(table)
        console.print(f"({len(interfaces)} interfaces)")
    else:
        console.print(f"[yellow]Document does not exist yet: {doc.path}[/yellow]")

    module_path = models or get_settings().models_module
    if module_path is None:
        return
    try:
        reflection = load_reflection(module_path)
    except ImportError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None
    _render_models(reflection, {name for _, name in interfaces})
