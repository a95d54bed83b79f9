"""Configuration loading for wikimenu."""

from __future__ import annotations

from pathlib import Path
from typing import cast

import tomlkit
from pydantic import ValidationError
from tomlkit import exceptions

from wikimenu.errors import SettingsError
from wikimenu.models import WikiMenuSettings

PYPROJECT_FILE = "pyproject.toml"
TOOL_TABLE = "wikimenu"


def read_tool_table(project_dir: Path) -> dict[str, object]:
    """Read the [tool.wikimenu] table from pyproject.toml.

    Args:
        project_dir: Directory holding pyproject.toml

    Returns:
        The table contents, empty if the file or table does not exist

    Raises:
        SettingsError: If pyproject.toml is not valid TOML
    """
    pyproject_path = project_dir / PYPROJECT_FILE
    if not pyproject_path.exists():
        return {}

    try:
        with open(pyproject_path, encoding="utf-8") as f:
            data = tomlkit.load(f).unwrap()
    except exceptions.TOMLKitError as e:
        raise SettingsError(f"Invalid TOML in {pyproject_path}: {e}") from e

    tool = data.get("tool")
    if not isinstance(tool, dict):
        return {}
    table = cast(dict[str, object], tool).get(TOOL_TABLE)
    if not isinstance(table, dict):
        return {}
    # pyproject keys are kebab-case by convention
    return {str(key).replace("-", "_"): value for key, value in cast(dict[str, object], table).items()}


def load_settings(project_dir: Path, **overrides: object) -> WikiMenuSettings:
    """Resolve run settings.

    CLI overrides win over the [tool.wikimenu] table, which wins over the
    built-in defaults. Overrides that are None are ignored.

    Args:
        project_dir: Directory holding pyproject.toml
        **overrides: Values given on the command line

    Returns:
        Validated settings

    Raises:
        SettingsError: If the merged values are invalid
    """
    values = read_tool_table(project_dir)
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return WikiMenuSettings.model_validate(values)
    except ValidationError as e:
        raise SettingsError(f"Invalid wikimenu settings: {e}") from e
