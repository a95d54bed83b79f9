"""wikimenu - Wiki navigation menu generator for static sites.

Scans a wiki content directory, writes one [[menu.wiki]] entry per folder
into the site config and fills the folder placeholder in content files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.markup import escape

from wikimenu.errors import ContentIOError, SettingsError
from wikimenu.models import MessageType
from wikimenu.runner import display_message, run_wiki_menu
from wikimenu.settings import load_settings


# Initialize Typer app
app = typer.Typer(
    name="wikimenu",
    help="Generate a wiki navigation menu from a content directory and inject it into a static-site config",
    add_completion=False,
    rich_markup_mode="rich",
)


def handle_error(error: Exception, user_message: str | None = None) -> NoReturn:
    """Handle and display errors in a user-friendly way.

    Args:
        error: The exception that occurred
        user_message: Optional user-friendly explanation

    Raises:
        typer.Exit: Always, with exit code 1
    """
    error_msg = escape(user_message or str(error))
    display_message(error_msg, MessageType.ERROR)
    raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from wikimenu import __version__

    display_message(
        f"[bold cyan]wikimenu[/bold cyan] version [bold green]{__version__}[/bold green]",
        MessageType.INFO,
        title="Version Information",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--directory", help="The directory for the wiki [default: content/wiki]", rich_help_panel="Paths"
        ),
    ] = None,
    replace: Annotated[
        str | None,
        typer.Option(
            "--replace",
            help="The placeholder string to replace in content files [default: DIRECTORY]",
            rich_help_panel="Content",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="Path to the config file [default: src/config.toml]", rich_help_panel="Paths"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Also show a table of the menu entries written to the config")
    ] = False,
) -> None:
    """Update the wiki menu in the site config and fill content placeholders.

    Options not given on the command line are read from the [tool.wikimenu]
    table of ./pyproject.toml, then fall back to the defaults.

    Args:
        ctx: Typer context
        directory: Wiki root directory
        replace: Placeholder token
        config: Config file to splice menu entries into
        verbose: Also show the menu entry table
    """
    ctx.obj = {"verbose": verbose}
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = load_settings(Path.cwd(), directory=directory, replace=replace, config=config)
    except SettingsError as e:
        handle_error(e)

    try:
        _ = run_wiki_menu(settings, verbose=verbose)
    except ContentIOError as e:
        handle_error(e, f"Content rewrite failed: {e}")


if __name__ == "__main__":
    app()
