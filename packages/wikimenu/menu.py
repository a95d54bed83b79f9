"""Menu inference from the wiki directory structure."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from wikimenu.models import MenuEntry, ScannedEntry

DEFAULT_ANCHOR = "wiki"


def parent_name(parts: Sequence[str], anchor: str = DEFAULT_ANCHOR) -> str:
    """Compute the menu parent for a path.

    Paths more than two segments past the ``anchor`` segment are nested
    under their immediate parent folder. Anything shallower is top level.
    When the anchor is missing its index counts as -1.

    Args:
        parts: Path segments
        anchor: Segment the menu depth is measured from

    Returns:
        Parent folder name, or an empty string for top level entries
    """
    try:
        anchor_index = list(parts).index(anchor)
    except ValueError:
        anchor_index = -1

    if len(parts) - anchor_index > 2:
        return parts[-2]
    return ""


def is_menu_candidate(entry: ScannedEntry, root_name: str) -> bool:
    """Check whether an entry takes part in menu building and rewriting.

    The wiki root itself and single-segment paths are left out.

    Args:
        entry: Scanned entry
        root_name: Base name of the wiki root

    Returns:
        True if the entry should be processed
    """
    parts = entry.parts
    return len(parts) > 1 and parts[-1] != root_name


def build_menu(entries: Iterable[ScannedEntry], root_name: str, anchor: str = DEFAULT_ANCHOR) -> list[MenuEntry]:
    """Derive menu entries from scanned directories.

    One entry per directory name. When two directories share a base name
    only the first one seen is kept.

    Args:
        entries: Scanned entries in walk order
        root_name: Base name of the wiki root
        anchor: Segment the menu depth is measured from

    Returns:
        Menu entries in walk order
    """
    menu: list[MenuEntry] = []
    seen: set[str] = set()
    for entry in entries:
        if not entry.is_dir or not is_menu_candidate(entry, root_name):
            continue
        name = entry.parts[-1]
        if name in seen:
            continue
        seen.add(name)
        menu.append(MenuEntry(name=name, parent=parent_name(entry.parts, anchor), identifier=name))
    return menu
