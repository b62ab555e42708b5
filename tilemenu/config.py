"""
tilemenu - Main Ignis Configuration

This file is the entry point for Ignis. It resolves the menu document and
creates the grid panel window.

Usage:
  tilemenu open ~/.config/tilemenu/menu.json
  (or directly: TILEMENU_CONFIG=menu.json ignis init -c /path/to/tilemenu/config.py)
"""

import sys

from ignis.app import IgnisApp
from loguru import logger

from tilemenu.errors import TilemenuError, format_error_chain
from tilemenu.panels.grid import MenuPanel
from tilemenu.resolve import MenuResolver
from tilemenu.utils.helpers import configure_logging, css_path, load_settings, menu_path

settings = load_settings()
configure_logging(settings["logging"]["level"])

# Resolve before any window exists so a broken menu never shows up half-built
try:
    resolver = MenuResolver.from_display(folder_icon=settings["icons"]["folder"])
    menu = resolver.resolve_file(menu_path(settings))
except TilemenuError as e:
    logger.error(f"Error:\n{format_error_chain(e)}")
    sys.exit(1)

# Get Ignis app instance
app = IgnisApp.get_default()

stylesheet = css_path(settings)
try:
    app.apply_css(str(stylesheet))
except Exception as e:
    logger.warning(f"Could not load stylesheet {stylesheet}: {e}")

panel = MenuPanel(menu)
window = panel.create_window()
window.panel = panel

logger.info("tilemenu initialized")
