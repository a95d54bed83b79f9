"""Pytest configuration for wikimenu."""

from __future__ import annotations

from pathlib import Path

import pytest

CONFIG_TEMPLATE = """baseURL = "https://example.org/"
title = "Example"

# WIKI_MENUS_START
[[menu.wiki]]
name="stale"
parent=""
identifier="stale"
# END

[params]
author = "someone"
"""


@pytest.fixture
def wiki_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Build a small wiki under ``tmp_path`` and chdir into it.

    Layout::

        content/wiki/guides/intro.md              (contains DIRECTORY)
        content/wiki/guides/advanced/detail.md    (contains DIRECTORY twice)
        content/wiki/reference/api.md             (no token)
        src/config.toml                           (marked region)

    Args:
        tmp_path: pytest temporary directory
        monkeypatch: pytest fixture for changing the working directory

    Returns:
        The project directory (also the working directory)
    """
    wiki = tmp_path / "content" / "wiki"
    (wiki / "guides" / "advanced").mkdir(parents=True)
    (wiki / "reference").mkdir()
    _ = (wiki / "guides" / "intro.md").write_text('+++\nparent = "DIRECTORY"\n+++\nIntro\n')
    _ = (wiki / "guides" / "advanced" / "detail.md").write_text("DIRECTORY / DIRECTORY\n")
    _ = (wiki / "reference" / "api.md").write_text("No placeholder here\n")

    (tmp_path / "src").mkdir()
    _ = (tmp_path / "src" / "config.toml").write_text(CONFIG_TEMPLATE)

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def wiki_root(wiki_tree: Path) -> Path:
    """Relative path of the wiki root inside ``wiki_tree``.

    Args:
        wiki_tree: Project directory fixture

    Returns:
        ``content/wiki`` relative to the working directory
    """
    return Path("content") / "wiki"
