"""Template for one [[menu.wiki]] block in config.toml."""

MENU_ENTRY_TEMPLATE = """[[menu.wiki]]
name="{{ name }}"
parent="{{ parent }}"
identifier="{{ name }}"
"""
