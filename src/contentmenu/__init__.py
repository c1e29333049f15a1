"""contentmenu — render editor-defined menus as dynamic page content."""

__version__ = "0.1.0"
