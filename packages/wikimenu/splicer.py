"""Splice rendered menu entries into the marked region of config.toml.

The region sits between a line containing the start marker and a line
containing the end marker. Both marker lines survive every run, which is
what makes repeated runs replace the previous block instead of stacking
new ones.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import tomlkit
from jinja2 import Environment
from tomlkit import exceptions

from wikimenu.errors import ConfigReadError, ConfigWriteError
from wikimenu.models import MenuEntry, SpliceResult
from wikimenu.templates import MENU_ENTRY_TEMPLATE

START_MARKER = "WIKI_MENUS_START"
END_MARKER = "END"


def render_menu_entries(entries: Iterable[MenuEntry]) -> list[str]:
    """Render menu entries as config lines.

    The identifier line repeats the entry name.

    Args:
        entries: Menu entries to render

    Returns:
        Four newline-terminated lines per entry
    """
    env = Environment(keep_trailing_newline=True, autoescape=False)
    template = env.from_string(MENU_ENTRY_TEMPLATE)

    lines: list[str] = []
    for entry in entries:
        lines.extend(template.render(name=entry.name, parent=entry.parent).splitlines(keepends=True))
    return lines


def split_lines(text: str) -> list[str]:
    """Split text into lines that all end with a newline.

    Only ``\\n`` separates lines. A last line without a newline gets one.

    Args:
        text: File content

    Returns:
        Lines with their trailing newline
    """
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [f"{piece}\n" for piece in pieces]


def read_config_lines(path: Path) -> list[str]:
    """Read the config file as a list of lines.

    Args:
        path: Config file

    Returns:
        Lines with their trailing newline

    Raises:
        ConfigReadError: If the file is missing or unreadable
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Cannot read config file {path}: {e}") from e
    return split_lines(text)


def write_config_lines(path: Path, lines: Iterable[str]) -> None:
    """Overwrite the config file with ``lines``.

    Args:
        path: Config file
        lines: Newline-terminated lines

    Raises:
        ConfigWriteError: If the file cannot be written
    """
    try:
        _ = path.write_text("".join(lines), encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(f"Cannot write config file {path}: {e}") from e


def locate_region(lines: list[str], start_marker: str = START_MARKER, end_marker: str = END_MARKER) -> tuple[int, int]:
    """Find the marked region.

    Markers match anywhere inside a line. When a marker appears more than
    once the last match wins.

    Args:
        lines: Config lines
        start_marker: Substring of the start line
        end_marker: Substring of the end line

    Returns:
        Tuple of (index after the start line, index of the end line),
        each 0 when the marker is absent
    """
    start = 0
    end = 0
    for index, line in enumerate(lines):
        if start_marker in line:
            start = index + 1
        if end_marker in line:
            end = index
    return start, end


def splice_lines(
    lines: list[str], rendered: list[str], start_marker: str = START_MARKER, end_marker: str = END_MARKER
) -> SpliceResult:
    """Replace the marked region of ``lines`` with ``rendered``.

    Without a region the rendered lines go to the top and nothing is
    removed.

    Args:
        lines: Current config lines
        rendered: Lines to insert
        start_marker: Substring of the start line
        end_marker: Substring of the end line

    Returns:
        The splice outcome, holding a new line list
    """
    start, end = locate_region(lines, start_marker, end_marker)

    removed: list[str] = []
    kept = list(lines)
    if start > 0 and end > 0:
        removed = kept[start:end]
        del kept[start:end]

    spliced = kept[:start] + list(rendered) + kept[start:]
    return SpliceResult(lines=spliced, start=start, end=end, removed=removed, inserted=list(rendered))


def check_toml(text: str) -> str | None:
    """Check that spliced config text still parses as TOML.

    Args:
        text: Config content

    Returns:
        The parse error message, or None if the text is valid TOML
    """
    try:
        _ = tomlkit.parse(text)
    except exceptions.TOMLKitError as e:
        return str(e)
    return None


def splice_config(
    path: Path,
    entries: Iterable[MenuEntry],
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
    on_error: Callable[[ConfigReadError], None] | None = None,
) -> SpliceResult:
    """Render ``entries`` into the config file at ``path``.

    A config file that cannot be read is treated as empty, so the rendered
    entries are still written out.

    Args:
        path: Config file
        entries: Menu entries to render
        start_marker: Substring of the start line
        end_marker: Substring of the end line
        on_error: Called with the read error when the file cannot be read

    Returns:
        The splice outcome

    Raises:
        ConfigReadError: If the file cannot be read and no ``on_error`` is given
        ConfigWriteError: If the result cannot be written
    """
    try:
        lines = read_config_lines(path)
    except ConfigReadError as e:
        if on_error is None:
            raise
        on_error(e)
        lines = []

    result = splice_lines(lines, render_menu_entries(entries), start_marker, end_marker)
    write_config_lines(path, result.lines)
    return result
