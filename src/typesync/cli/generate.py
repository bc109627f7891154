"""Commands that append generated declarations to the definitions document."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from typesync.cli.helpers import load_reflection, resolve_document
from typesync.core.naming import pascal_case
from typesync.core.normalize import parse_attributes
from typesync.core.sync import append_migration_fields, generate_interface
from typesync.models import FieldSpec
from typesync.settings import get_settings

console = Console()

DocumentOption = Annotated[Path | None, typer.Option(help="Definitions document (default: $TYPESYNC_DOCUMENT).")]


def _model_fields(name: str, attributes: list[str] | None, models: str | None) -> tuple[str, list[FieldSpec]]:
    """Return the interface name and its fields.

    Reflected models are named after their class, so a table name such as
    ``posts`` yields the same interface the validations command anchors on.
    """
    if attributes:
        return name, parse_attributes(attributes)
    models = models or get_settings().models_module
    if models is None:
        return name, []
    schema = load_reflection(models).reflect(name)
    return schema.name, list(schema.fields)


def model(
    name: Annotated[str, typer.Argument(help="Model name, e.g. post or BlogPost.")],
    attributes: Annotated[
        list[str] | None, typer.Argument(help="Attributes as name:type, e.g. title:string author:references.")
    ] = None,
    models: Annotated[
        str | None, typer.Option(help="Module with SQLAlchemy models, reflected when no attributes are given.")
    ] = None,
    document: DocumentOption = None,
) -> None:
    """Append a new interface for a model."""
    try:
        model_name, fields = _model_fields(name, attributes, models)
        doc = resolve_document(document)
        generate_interface(doc, model_name, fields)
    except (ValueError, LookupError, ImportError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    interface = pascal_case(model_name)
    console.print(f"[green]Appended[/green] interface {interface} ({len(fields)} attribute(s)) to {doc.path}")


def migration(
    label: Annotated[str, typer.Argument(help="Migration name, e.g. AddPublishedToPosts.")],
    attributes: Annotated[list[str], typer.Argument(help="Attributes as name:type.")],
    document: DocumentOption = None,
) -> None:
    """Append migration attributes at the end of the document."""
    try:
        fields = parse_attributes(attributes)
        doc = resolve_document(document)
        append_migration_fields(doc, label, fields)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    console.print(f"[green]Appended[/green] {len(fields)} attribute(s) from migration {label} to {doc.path}")
    console.print("[yellow]Declarations were appended after the last interface; move them into place.[/yellow]")
