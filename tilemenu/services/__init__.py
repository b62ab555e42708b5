# tilemenu Services Package
"""
Desktop collaborators used while resolving the menu.

The protocols in platform.py are GTK-free; gtk.py holds the GTK4/Gio
implementations and is imported only when a display is needed.
"""

from .platform import ApplicationDatabase, AppRecord, IconTheme, KeySymbols

__all__ = ["ApplicationDatabase", "AppRecord", "IconTheme", "KeySymbols"]
