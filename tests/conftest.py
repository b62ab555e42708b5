"""
Shared test fixtures for the tilemenu test suite.

Provides in-memory stand-ins for the platform collaborators (key-symbol
table, icon theme, desktop application database) so resolution can be
tested without a display, plus real menu documents written to tmp_path.
"""

import json

import pytest
import toml

from tilemenu.resolve import MenuResolver

# Named keys known to the fake key table (single characters map to ord())
NAMED_KEYS = {
    "space": 0x020,
    "Return": 0xff0d,
    "Escape": 0xff1b,
    "Prior": 0xff55,
    "Page_Up": 0xff55,
    "F1": 0xffbe,
}


class FakeKeySymbols:
    """Key table: printable characters plus a handful of named keys."""

    def from_name(self, name):
        if name in NAMED_KEYS:
            return NAMED_KEYS[name]
        if len(name) == 1 and name.isprintable():
            return ord(name)
        return None

    def to_name(self, keyval):
        for name, value in NAMED_KEYS.items():
            if value == keyval:
                return name
        if 0x20 < keyval < 0x7f:
            return chr(keyval)
        return None


class FakeIconTheme:
    """Theme whose images are tuples describing how they were made."""

    def __init__(self):
        self.lookups = []

    def lookup_icon(self, name, size):
        self.lookups.append((name, size))
        return ("icon", name, size)

    def load_image(self, path):
        with open(path, "rb") as f:
            f.read(1)
        return ("file", path)

    def empty_image(self, width, height):
        return ("empty", width, height)


class FakeAppRecord:
    """Desktop record that remembers launch requests."""

    def __init__(self, name, icon_name=None, fail=False):
        self.name = name
        self.icon_name = icon_name
        self.fail = fail
        self.launches = []

    def launch(self, context=None):
        if self.fail:
            raise RuntimeError("no such executable")
        self.launches.append(context)


class FakeAppDatabase:
    """Desktop database backed by a dict, counting every lookup."""

    def __init__(self, records=None):
        self.records = dict(records or {})
        self.lookups = []

    def lookup(self, desktop_id):
        self.lookups.append(desktop_id)
        return self.records.get(desktop_id)

    def launch_context(self):
        return "launch-context"


@pytest.fixture
def key_symbols():
    return FakeKeySymbols()


@pytest.fixture
def theme():
    return FakeIconTheme()


@pytest.fixture
def app_db():
    """Database with a few installed applications."""
    return FakeAppDatabase({
        "vlc.desktop": FakeAppRecord("VLC media player", "vlc"),
        "firefox.desktop": FakeAppRecord("Firefox", "firefox"),
        "noicon.desktop": FakeAppRecord("No Icon"),
        "nameless.desktop": FakeAppRecord("", "nameless"),
    })


@pytest.fixture
def resolver(key_symbols, theme, app_db):
    return MenuResolver(key_symbols, theme, app_db)


@pytest.fixture
def menu_document():
    """A small but complete menu document."""
    return {
        "width": 4,
        "height": 3,
        "icon_size": 64,
        "anchor_up": False,
        "applications": {
            "t": {"name": "Term", "command": "foot", "icon": "utilities-terminal"},
            "m": {
                "name": "Media",
                "icon": "folder-music",
                "applications": {
                    "v": {"application": "vlc"},
                },
            },
        },
    }


@pytest.fixture
def tmp_menu_json(tmp_path, menu_document):
    """Menu document written as JSON."""
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(menu_document, indent=2))
    return path


@pytest.fixture
def tmp_menu_toml(tmp_path, menu_document):
    """Menu document written as TOML."""
    path = tmp_path / "menu.toml"
    path.write_text(toml.dumps(menu_document))
    return path


@pytest.fixture
def tmp_image(tmp_path):
    """A readable image file (content isn't decoded by the fake theme)."""
    path = tmp_path / "icon.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n")
    return path
