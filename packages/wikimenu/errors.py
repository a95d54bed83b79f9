"""Exceptions raised by wikimenu.

Walk and config errors are reported and the run continues. Only
ContentIOError stops the run.
"""

from __future__ import annotations

from pathlib import Path


class WikiMenuError(Exception):
    """Base exception for wikimenu errors."""


class SettingsError(WikiMenuError):
    """Invalid [tool.wikimenu] table or option value."""


class WalkError(WikiMenuError):
    """A directory could not be traversed.

    Attributes:
        path: The path whose traversal failed
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigReadError(WikiMenuError):
    """The config file is missing or unreadable."""


class ConfigWriteError(WikiMenuError):
    """The spliced config file could not be written."""


class ContentIOError(WikiMenuError):
    """A content file could not be read or rewritten."""
