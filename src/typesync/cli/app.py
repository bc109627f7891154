import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from typesync.cli.generate import migration, model
from typesync.cli.validations import show, validations
from typesync.settings import get_settings

app = typer.Typer(
    name="typesync",
    help="Typesync CLI: keep TypeScript interfaces in step with backend models.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("model")(model)
app.command("migration")(migration)
app.command("validations")(validations)
app.command("show")(show)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def main() -> None:
    app()
