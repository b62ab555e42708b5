# tilemenu Utilities Package
"""
Shared utility functions and helpers for tilemenu.
"""

from .helpers import configure_logging, css_path, load_settings, menu_path

__all__ = ["configure_logging", "css_path", "load_settings", "menu_path"]
