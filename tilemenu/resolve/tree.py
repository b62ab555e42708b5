"""
Tree Resolution Driver - From a menu document on disk to a ResolvedMenu.

Usage:
    resolver = MenuResolver.from_display()
    menu = resolver.resolve_file("~/.config/tilemenu/menu.json")
"""

import json
from pathlib import Path
from typing import Any, Mapping

import toml
from loguru import logger

from tilemenu.errors import ConfigParseFailed, ConfigReadFailed, ResolutionError
from tilemenu.models import Anchors, MenuConfig, ResolvedMenu
from tilemenu.resolve.entries import DEFAULT_FOLDER_ICON, EntryResolver
from tilemenu.resolve.icons import IconResolver
from tilemenu.resolve.keys import KeyCodec
from tilemenu.services.platform import ApplicationDatabase, IconTheme, KeySymbols

# Top-level document field -> Anchors attribute
ANCHOR_FIELDS = {
    "anchor_left": "left",
    "anchor_right": "right",
    "anchor_up": "up",
    "anchor_down": "down",
}


def load_menu_config(path) -> MenuConfig:
    """
    Read and parse a menu document.

    Files ending in .toml are parsed as TOML, everything else as JSON.

    Args:
        path: Location of the document ("~" is expanded)

    Returns:
        MenuConfig with the entry tree left unvalidated

    Raises:
        ConfigReadFailed: If the file can't be read
        ConfigParseFailed: If it isn't valid JSON/TOML or lacks required fields
    """
    path = Path(path).expanduser()

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseFailed(path, f"not valid UTF-8: {e.reason}") from e
    except OSError as e:
        raise ConfigReadFailed(path) from e

    try:
        if path.suffix == ".toml":
            data = toml.loads(text)
        else:
            data = json.loads(text)
    except (ValueError, toml.TomlDecodeError) as e:
        raise ConfigParseFailed(path, str(e)) from e

    return parse_menu_config(data, path)


def parse_menu_config(data: Any, path="<memory>") -> MenuConfig:
    """Build a MenuConfig from already-decoded document data."""
    if not isinstance(data, Mapping):
        raise ConfigParseFailed(path, "top level must be a mapping")

    sizes = {}
    for field_name in ("width", "height", "icon_size"):
        if field_name not in data:
            raise ConfigParseFailed(path, f"missing field '{field_name}'")
        value = data[field_name]
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigParseFailed(
                path, f"'{field_name}' must be a positive integer, got {value!r}"
            )
        sizes[field_name] = value

    anchors = {}
    for field_name, attr in ANCHOR_FIELDS.items():
        value = data.get(field_name, True)
        if not isinstance(value, bool):
            raise ConfigParseFailed(path, f"'{field_name}' must be true or false")
        anchors[attr] = value

    applications = data.get("applications")
    if not isinstance(applications, Mapping):
        raise ConfigParseFailed(path, "missing field 'applications' (a mapping)")

    return MenuConfig(
        width=sizes["width"],
        height=sizes["height"],
        icon_size=sizes["icon_size"],
        applications=dict(applications),
        anchors=Anchors(**anchors),
    )


class MenuResolver:
    """
    Top-level entry point of menu resolution.

    Args:
        symbols: Platform key-symbol table
        theme: Icon theme / image loader
        database: Desktop application database
        folder_icon: Theme icon for folders whose own icon fails
    """

    def __init__(
        self,
        symbols: KeySymbols,
        theme: IconTheme,
        database: ApplicationDatabase,
        folder_icon: str = DEFAULT_FOLDER_ICON,
    ):
        self.keys = KeyCodec(symbols)
        self.theme = theme
        self.database = database
        self.folder_icon = folder_icon

    @classmethod
    def from_display(cls, display=None, folder_icon: str = DEFAULT_FOLDER_ICON) -> "MenuResolver":
        """Resolver backed by GTK/Gio for the given (or default) display."""
        from tilemenu.services.gtk import (
            GdkKeySymbols,
            GioApplicationDatabase,
            GtkIconTheme,
            default_display,
        )

        display = display or default_display()
        return cls(
            GdkKeySymbols(),
            GtkIconTheme(display),
            GioApplicationDatabase(display),
            folder_icon=folder_icon,
        )

    def resolve(self, config: MenuConfig) -> ResolvedMenu:
        """
        Validate a whole menu document.

        Raises:
            ResolutionError: "failed to validate config", chained to the
                error of the entry that could not be resolved
        """
        entries = EntryResolver(
            self.keys,
            IconResolver(self.theme, config.icon_size),
            self.database,
            folder_icon=self.folder_icon,
        )

        try:
            applications = entries.resolve_collection(config.applications)
        except ResolutionError as e:
            raise ResolutionError("failed to validate config") from e

        menu = ResolvedMenu(
            width=config.width,
            height=config.height,
            icon_size=config.icon_size,
            anchors=config.anchors,
            applications=applications,
        )
        logger.info(
            f"Resolved menu: {len(applications)} top-level entries, "
            f"{menu.count_leaves()} applications"
        )
        return menu

    def resolve_file(self, path) -> ResolvedMenu:
        """Load a menu document from disk and resolve it."""
        return self.resolve(load_menu_config(path))

