"""wikimenu - Wiki navigation menu generator for static sites.

This package scans a wiki content tree, infers a nested navigation menu
from its folders and splices the menu into a site config file.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Export main CLI app for entry point
from wikimenu.cli import app

__all__ = ["__version__", "app"]
