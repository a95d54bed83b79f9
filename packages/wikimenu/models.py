"""Data models for wikimenu."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from wikimenu.errors import WalkError

MENU_TITLE = "[menu.wiki]"


class MessageType(Enum):
    """Message types with associated display styles."""

    ERROR = ("red", "Error")
    SUCCESS = ("green", "Success")
    INFO = ("blue", "Info")
    WARNING = ("yellow", "Warning")


@dataclass(frozen=True)
class ScannedEntry:
    """One file system entry found under the wiki root.

    Attributes:
        path: Path of the entry, joined onto the root as given
        is_dir: Whether the entry is a directory
    """

    path: Path
    is_dir: bool

    @property
    def parts(self) -> tuple[str, ...]:
        """Path segments of the entry."""
        return self.path.parts


@dataclass(frozen=True)
class ScanResult:
    """Everything a walk produced, including the errors it swallowed."""

    entries: tuple[ScannedEntry, ...] = ()
    errors: tuple[WalkError, ...] = ()


@dataclass(frozen=True)
class MenuEntry:
    """A navigation node for one wiki directory.

    Attributes:
        name: Directory base name
        parent: Name of the parent menu entry, empty for top level entries
        identifier: Menu identifier, the directory name
        title: TOML table the entry belongs to
    """

    name: str
    parent: str
    identifier: str
    title: str = MENU_TITLE


@dataclass
class RewriteResult:
    """A content file whose placeholder token was replaced."""

    path: Path
    parent: str
    occurrences: int


@dataclass
class SpliceResult:
    """Outcome of splicing rendered menu lines into a config file.

    Attributes:
        lines: The full resulting line list
        start: Index of the line after the start marker (0 if absent)
        end: Index of the end marker line (0 if absent)
        removed: Lines dropped from the marked region
        inserted: Rendered lines inserted at ``start``
    """

    lines: list[str]
    start: int = 0
    end: int = 0
    removed: list[str] = field(default_factory=list)
    inserted: list[str] = field(default_factory=list)


class WikiMenuSettings(BaseModel):
    """Resolved run settings.

    Values come from CLI options, then the [tool.wikimenu] table of
    pyproject.toml, then the defaults below.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    directory: Path = Path("content/wiki")
    replace: str = "DIRECTORY"
    config: Path = Path("src/config.toml")
    start_marker: str = "WIKI_MENUS_START"
    end_marker: str = "END"
    anchor: str = "wiki"

    @field_validator("replace", "start_marker", "end_marker", "anchor")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @property
    def root_name(self) -> str:
        """Base name of the wiki root directory."""
        return self.directory.name
