"""
Menu Panel - Full-screen grid of tiles for a resolved menu.

Features:
- Layer-shell window on the top layer with exclusive keyboard focus
- One grid per folder level, stacked in a Gtk.Stack
- Bound key or click opens a folder or launches an application
- Escape or a click outside the tiles closes the menu
"""

import sys

from gi.repository import Gdk, Gtk
from ignis import widgets
from loguru import logger

from tilemenu.errors import LaunchFailed, format_error_chain
from tilemenu.models import KeyBinding, ResolvedFolder, ResolvedMenu
from tilemenu.panels.layout import grid_positions, ordered_entries, tile_label
from tilemenu.resolve.keys import KeyCodec
from tilemenu.services.gtk import GdkKeySymbols


class MenuPanel:
    """
    Panel displaying a ResolvedMenu as nested grids.

    Args:
        menu: Fully resolved menu tree
    """

    def __init__(self, menu: ResolvedMenu):
        self.menu = menu
        self.keys = KeyCodec(GdkKeySymbols())
        self.window = None
        self.stack = None
        self.focus_target = None

    def create_window(self):
        """
        Create the menu window.

        Returns:
            widgets.Window anchored to the configured edges
        """
        self.stack = Gtk.Stack(
            valign=Gtk.Align.CENTER,
            halign=Gtk.Align.CENTER,
            interpolate_size=True,
            vhomogeneous=False,
        )
        self._push_grid(self.menu.applications)

        self.window = widgets.Window(
            namespace="tilemenu",
            css_classes=["tilemenu-window"],
            anchor=self.menu.anchors.as_edges(),
            exclusivity="ignore",
            kb_mode="exclusive",
            layer="top",
            child=self.stack,
        )
        if self.focus_target is not None:
            self.window.set_focus(self.focus_target)

        # Any click that reaches the window (outside a tile) closes the menu
        click = Gtk.GestureClick()
        click.set_button(0)
        click.connect("released", lambda *args: self.close())
        self.window.add_controller(click)

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-pressed", self._on_window_key_press)
        self.window.add_controller(key_controller)

        return self.window

    def close(self):
        """Quit the launcher."""
        from ignis.app import IgnisApp
        IgnisApp.get_default().quit()

    def _push_grid(self, entries):
        """Build a grid for one folder level and make it the visible page."""
        grid = Gtk.Grid(
            row_spacing=20,
            column_spacing=20,
            row_homogeneous=True,
            column_homogeneous=True,
            css_classes=["tile-grid"],
        )

        ordered = ordered_entries(entries)
        positions = grid_positions(len(ordered), self.menu.width)
        tiles = [self._create_tile(binding, entry) for binding, entry in ordered]
        for tile, (col, row) in zip(tiles, positions):
            grid.attach(tile, col, row, 1, 1)

        key_controller = Gtk.EventControllerKey()
        key_controller.connect(
            "key-pressed",
            lambda c, keyval, keycode, state, entries=entries: self._on_grid_key_press(entries, keyval),
        )
        grid.add_controller(key_controller)

        self.stack.add_child(grid)
        self.stack.set_visible_child(grid)
        if tiles:
            self._focus_tile(tiles[0])

    def _focus_tile(self, tile):
        """Give keyboard focus to a tile, or remember it until the window exists."""
        self.focus_target = tile
        if self.window is not None:
            tile.grab_focus()

    def _create_tile(self, binding, entry):
        """
        Create a button for one entry.

        Args:
            binding: KeyBinding of the entry
            entry: ResolvedFolder or ResolvedApplication

        Returns:
            widgets.Button with image and "(key) name" label
        """
        image = Gtk.Image.new_from_paintable(entry.image.paintable)
        image.set_pixel_size(self.menu.icon_size)
        image.add_css_class("tile-icon")

        css_classes = ["tile"]
        if isinstance(entry, ResolvedFolder):
            css_classes.append("tile-folder")

        return widgets.Button(
            css_classes=css_classes,
            on_click=lambda x, entry=entry: self._activate(entry),
            child=widgets.Box(
                vertical=True,
                spacing=5,
                child=[
                    image,
                    widgets.Label(
                        label=tile_label(self.keys.format(binding), entry.name),
                        css_classes=["tile-name"],
                        ellipsize="end",
                    ),
                ],
            ),
        )

    def _on_grid_key_press(self, entries, keyval):
        """Open or launch the entry bound to the pressed key."""
        entry = entries.get(KeyBinding(keyval=keyval))
        if entry is None:
            return False
        self._activate(entry)
        return True

    def _on_window_key_press(self, controller, keyval, keycode, state):
        if keyval == Gdk.KEY_Escape:
            self.close()
            return True
        return False

    def _activate(self, entry):
        if isinstance(entry, ResolvedFolder):
            logger.debug(f"Opening folder {entry.name}")
            self._push_grid(entry.applications)
            return

        try:
            entry.launch.invoke()
        except LaunchFailed as e:
            logger.error(f"Error launching application:\n{format_error_chain(e)}")
            sys.exit(1)
