"""Templates rendered into the site configuration."""

from wikimenu.templates.menu_entry_template import MENU_ENTRY_TEMPLATE

__all__ = ["MENU_ENTRY_TEMPLATE"]
