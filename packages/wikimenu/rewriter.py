"""Placeholder token replacement in wiki content files."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from wikimenu.errors import ContentIOError
from wikimenu.menu import DEFAULT_ANCHOR, is_menu_candidate, parent_name
from wikimenu.models import RewriteResult, ScannedEntry


def rewrite_file(path: Path, parent: str, token: str) -> RewriteResult | None:
    """Replace every occurrence of ``token`` in a file with ``parent``.

    The file is compared and rewritten as bytes, so non-text assets pass
    through untouched. Files without the token are not written.

    Args:
        path: Content file
        parent: Replacement value
        token: Placeholder to look for

    Returns:
        The rewrite record, or None if the token was absent

    Raises:
        ContentIOError: If the file cannot be read or written
    """
    needle = token.encode("utf-8")
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ContentIOError(f"Cannot read {path}: {e}") from e

    occurrences = content.count(needle)
    if not occurrences:
        return None

    try:
        _ = path.write_bytes(content.replace(needle, parent.encode("utf-8")))
    except OSError as e:
        raise ContentIOError(f"Cannot write {path}: {e}") from e
    return RewriteResult(path=path, parent=parent, occurrences=occurrences)


def rewrite_tokens(
    entries: Iterable[ScannedEntry],
    token: str,
    root_name: str,
    anchor: str = DEFAULT_ANCHOR,
    on_rewrite: Callable[[RewriteResult], None] | None = None,
) -> list[RewriteResult]:
    """Replace the placeholder token in every scanned content file.

    Each file gets the same parent name its directory would get in the menu.

    Args:
        entries: Scanned entries in walk order
        token: Placeholder to replace
        root_name: Base name of the wiki root
        anchor: Segment the menu depth is measured from
        on_rewrite: Called once per rewritten file

    Returns:
        One record per rewritten file

    Raises:
        ContentIOError: On the first file that cannot be read or written
    """
    results: list[RewriteResult] = []
    for entry in entries:
        if entry.is_dir or not is_menu_candidate(entry, root_name):
            continue
        result = rewrite_file(entry.path, parent_name(entry.parts, anchor), token)
        if result is None:
            continue
        results.append(result)
        if on_rewrite is not None:
            on_rewrite(result)
    return results
