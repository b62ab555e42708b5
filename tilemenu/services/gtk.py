"""
GTK Services - GTK4/Gio implementations of the platform interfaces.

Wraps Gdk key symbols, Gtk.IconTheme and Gio.DesktopAppInfo. Importing this
module requires PyGObject with GTK 4 introspection data.
"""

import gi

gi.require_version("Gdk", "4.0")
gi.require_version("Gtk", "4.0")

from gi.repository import Gdk, Gio, GLib, Gtk
from loguru import logger

from tilemenu.errors import DisplayUnavailable, LaunchFailed


class GdkKeySymbols:
    """Key names as understood by Gdk.keyval_from_name()."""

    def from_name(self, name: str):
        keyval = Gdk.keyval_from_name(name)
        if keyval in (0, Gdk.KEY_VoidSymbol):
            return None
        return keyval

    def to_name(self, keyval: int):
        return Gdk.keyval_name(keyval)


class GtkIconTheme:
    """
    Icon lookups against the icon theme of a display.

    Args:
        display: Gdk.Display to take the theme from
    """

    def __init__(self, display):
        self.theme = Gtk.IconTheme.get_for_display(display)

    def lookup_icon(self, name: str, size: int):
        # Falls back to the theme's "missing image" glyph, never None
        return self.theme.lookup_icon(
            name, [], size, 1, Gtk.TextDirection.LTR, Gtk.IconLookupFlags(0)
        )

    def load_image(self, path: str):
        try:
            return Gdk.Texture.new_from_filename(path)
        except GLib.Error as e:
            raise OSError(f"{path}: {e.message}") from e

    def empty_image(self, width: int, height: int):
        return Gdk.Paintable.new_empty(width, height)


class DesktopAppRecord:
    """AppRecord backed by a Gio.DesktopAppInfo."""

    def __init__(self, info):
        self.info = info

    @property
    def id(self) -> str:
        return self.info.get_id() or ""

    @property
    def name(self) -> str:
        return self.info.get_name() or ""

    @property
    def icon_name(self):
        icon = self.info.get_icon()
        if icon is None:
            return None
        return icon.to_string()

    def launch(self, context=None) -> None:
        try:
            launched = self.info.launch([], context)
        except GLib.Error as e:
            raise LaunchFailed(f"failed to launch application: {e.message}") from e
        if not launched:
            raise LaunchFailed(f"failed to launch application: {self.id}")


class GioApplicationDatabase:
    """Desktop files found through Gio's application database."""

    def __init__(self, display=None):
        self.display = display

    def lookup(self, desktop_id: str):
        info = Gio.DesktopAppInfo.new(desktop_id)
        if info is None:
            logger.debug(f"No desktop file for {desktop_id}")
            return None
        return DesktopAppRecord(info)

    def launch_context(self):
        display = self.display or Gdk.Display.get_default()
        if display is None:
            raise LaunchFailed("failed to open display")
        return display.get_app_launch_context()


def default_display():
    """
    Initialize GTK and return the default display.

    Raises:
        DisplayUnavailable: If no display server can be reached
    """
    if not Gtk.init_check():
        raise DisplayUnavailable()
    display = Gdk.Display.get_default()
    if display is None:
        raise DisplayUnavailable()
    return display
