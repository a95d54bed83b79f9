"""Directory walk for the wiki root."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from wikimenu.errors import WalkError
from wikimenu.models import ScanResult, ScannedEntry


def _walk(path: Path, errors: list[WalkError]) -> Iterator[ScannedEntry]:
    """Yield the children of ``path`` depth-first in lexical order.

    Args:
        path: Directory to list
        errors: Collector for listing failures

    Yields:
        Scanned entries below ``path``
    """
    try:
        with os.scandir(path) as it:
            children = sorted(it, key=lambda child: child.name)
    except OSError as e:
        errors.append(WalkError(path, e.strerror or str(e)))
        return

    for child in children:
        child_path = path / child.name
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError as e:
            errors.append(WalkError(child_path, e.strerror or str(e)))
            continue
        yield ScannedEntry(child_path, is_dir)
        if is_dir:
            yield from _walk(child_path, errors)


def scan_tree(root: Path) -> ScanResult:
    """Walk ``root`` and collect every entry below it, the root included.

    Errors never abort the walk. They are collected in the result and the
    entries that could be reached are still returned.

    Args:
        root: Wiki root directory

    Returns:
        Scanned entries in walk order and the errors met on the way
    """
    if not root.exists():
        return ScanResult(errors=(WalkError(root, "no such file or directory"),))

    errors: list[WalkError] = []
    root_is_dir = root.is_dir()
    entries = [ScannedEntry(root, root_is_dir)]
    if root_is_dir:
        entries.extend(_walk(root, errors))
    return ScanResult(entries=tuple(entries), errors=tuple(errors))
