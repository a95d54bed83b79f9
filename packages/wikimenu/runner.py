"""End-to-end wiki menu update: scan, build, rewrite, splice."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wikimenu.errors import ConfigReadError, ConfigWriteError
from wikimenu.menu import build_menu
from wikimenu.models import MenuEntry, MessageType, RewriteResult, SpliceResult, WikiMenuSettings
from wikimenu.rewriter import rewrite_tokens
from wikimenu.scanner import scan_tree
from wikimenu.splicer import check_toml, splice_config

# Initialize Rich console
console = Console()


@dataclass
class RunReport:
    """Summary of one run.

    Attributes:
        menu: Menu entries written to the config
        rewrites: Content files whose token was replaced
        splice: Splice outcome, None if the config could not be written
        walk_errors: Number of traversal errors reported
    """

    menu: list[MenuEntry] = field(default_factory=list)
    rewrites: list[RewriteResult] = field(default_factory=list)
    splice: SpliceResult | None = None
    walk_errors: int = 0


def display_message(message: str, message_type: MessageType = MessageType.INFO, title: str | None = None) -> None:
    """Display a formatted message panel.

    Args:
        message: The message text to display
        message_type: Type of message (affects styling)
        title: Optional panel title (defaults to message type)
    """
    color, default_title = message_type.value
    panel_title = title or default_title

    console.print(
        Panel(message, title=f"[bold {color}]{panel_title}[/bold {color}]", border_style=color, padding=(1, 2))
    )


def display_menu(menu: list[MenuEntry], config_name: str) -> None:
    """Show the menu entries written to the config as a table.

    Args:
        menu: Menu entries in config order
        config_name: Config file name for the table title
    """
    if not menu:
        return

    table = Table(
        title=f":page_facing_up: Menu entries in {escape(config_name)}",
        box=box.MINIMAL_DOUBLE_HEAD,
        title_style="bold blue",
    )
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Parent", style="green")

    for entry in menu:
        table.add_row(escape(entry.name), escape(entry.parent) if entry.parent else "[dim](top level)[/dim]")

    console.print(table)


def _report_rewrite(result: RewriteResult) -> None:
    path = escape(str(result.path))
    console.print(f"replacing: {path} ({result.occurrences}x) with: [bold]{escape(repr(result.parent))}[/bold]")


def _report_config_read_error(error: ConfigReadError) -> None:
    display_message(
        f"{escape(str(error))}\nWriting menu entries to a new file.", MessageType.WARNING, title="Config Not Read"
    )


def run_wiki_menu(settings: WikiMenuSettings, verbose: bool = False) -> RunReport:
    """Update the wiki menu and content placeholders.

    Walk errors, config read errors and config write errors are reported
    and do not stop the run.

    Args:
        settings: Resolved run settings
        verbose: Also print the table of menu entries

    Returns:
        Summary of the run

    Raises:
        ContentIOError: If a content file cannot be read or rewritten
    """
    report = RunReport()
    console.print(f"searching: [bold cyan]{escape(str(settings.directory))}[/bold cyan]")

    scan = scan_tree(settings.directory)
    for error in scan.errors:
        display_message(escape(str(error)), MessageType.WARNING, title="Walk Error")
    report.walk_errors = len(scan.errors)

    report.menu = build_menu(scan.entries, settings.root_name, settings.anchor)
    report.rewrites = rewrite_tokens(
        scan.entries,
        settings.replace,
        settings.root_name,
        settings.anchor,
        on_rewrite=_report_rewrite,
    )

    config_name = escape(str(settings.config))
    console.print(f"writing to [bold cyan]{config_name}[/bold cyan]")
    try:
        report.splice = splice_config(
            settings.config,
            report.menu,
            settings.start_marker,
            settings.end_marker,
            on_error=_report_config_read_error,
        )
    except ConfigWriteError as e:
        display_message(escape(str(e)), MessageType.ERROR, title="Config Not Written")
        return report

    if problem := check_toml("".join(report.splice.lines)):
        display_message(
            f"{config_name} is not valid TOML after the update:\n{escape(problem)}",
            MessageType.WARNING,
            title="TOML Check",
        )

    if verbose:
        display_menu(report.menu, settings.config.name)

    display_message(
        f"Wrote [bold]{len(report.menu)}[/bold] menu entries to [bold cyan]{config_name}[/bold cyan]\n"
        f"Replaced [bold]{escape(settings.replace)}[/bold] in [bold]{len(report.rewrites)}[/bold] files",
        MessageType.SUCCESS,
        title="Wiki Menu Updated",
    )
    return report
