"""
Tests for menu document loading and the MenuResolver driver.

Uses real JSON/TOML files on disk (no mocking of the filesystem).
"""

import json

import pytest

from tilemenu.errors import (
    ConfigParseFailed,
    ConfigReadFailed,
    EntryResolutionError,
    InvalidKeyName,
    ResolutionError,
    find_cause,
    format_error_chain,
)
from tilemenu.models import Anchors, KeyBinding, ResolvedFolder
from tilemenu.resolve.tree import load_menu_config, parse_menu_config


class TestLoadMenuConfig:
    """Test reading menu documents from disk."""

    def test_loads_json(self, tmp_menu_json):
        config = load_menu_config(tmp_menu_json)
        assert config.width == 4
        assert config.height == 3
        assert config.icon_size == 64
        assert set(config.applications) == {"t", "m"}

    def test_loads_toml(self, tmp_menu_toml):
        config = load_menu_config(tmp_menu_toml)
        assert config.width == 4
        assert config.applications["m"]["applications"]["v"] == {"application": "vlc"}

    def test_anchors_default_to_true(self, tmp_menu_json):
        config = load_menu_config(tmp_menu_json)
        assert config.anchors == Anchors(left=True, right=True, up=False, down=True)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigReadFailed) as exc_info:
            load_menu_config(tmp_path / "nope.json")
        assert "nope.json" in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "menu.json"
        path.write_text("{ not json")
        with pytest.raises(ConfigParseFailed):
            load_menu_config(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "menu.toml"
        path.write_text("width = = 3")
        with pytest.raises(ConfigParseFailed):
            load_menu_config(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "menu.json"
        path.write_bytes(b'{"width": "\xff"}')
        with pytest.raises(ConfigParseFailed, match="UTF-8"):
            load_menu_config(path)


class TestParseMenuConfig:
    """Test structural validation of the top-level document."""

    def _document(self, **overrides):
        data = {"width": 4, "height": 3, "icon_size": 64, "applications": {}}
        data.update(overrides)
        return data

    @pytest.mark.parametrize("field", ["width", "height", "icon_size", "applications"])
    def test_required_fields(self, field):
        data = self._document()
        del data[field]
        with pytest.raises(ConfigParseFailed, match=field):
            parse_menu_config(data)

    @pytest.mark.parametrize("value", [0, -1, "4", 2.5, True])
    def test_width_must_be_positive_integer(self, value):
        with pytest.raises(ConfigParseFailed):
            parse_menu_config(self._document(width=value))

    def test_anchor_must_be_bool(self):
        with pytest.raises(ConfigParseFailed, match="anchor_left"):
            parse_menu_config(self._document(anchor_left="yes"))

    def test_top_level_must_be_mapping(self):
        with pytest.raises(ConfigParseFailed):
            parse_menu_config(["width", 4])

    def test_entries_are_not_validated_while_parsing(self):
        config = parse_menu_config(self._document(applications={"NotAKey": 7}))
        assert config.applications == {"NotAKey": 7}


class TestMenuResolver:
    """Test the top-level driver."""

    def test_resolves_file(self, resolver, tmp_menu_json, app_db):
        menu = resolver.resolve_file(tmp_menu_json)

        assert menu.width == 4
        assert menu.height == 3
        assert menu.icon_size == 64
        assert menu.anchors.up is False
        assert menu.count_leaves() == 2

        media = menu.applications[KeyBinding(keyval=ord("m"))]
        assert isinstance(media, ResolvedFolder)
        assert app_db.lookups == ["vlc.desktop"]

    def test_icon_size_reaches_theme(self, resolver, tmp_menu_json, theme):
        resolver.resolve_file(tmp_menu_json)
        assert all(size == 64 for _, size in theme.lookups)

    def test_invalid_key_fails_with_context(self, resolver, tmp_path):
        path = tmp_path / "menu.json"
        path.write_text(json.dumps({
            "width": 2, "height": 2, "icon_size": 32,
            "applications": {"NotAKey": {"name": "X", "command": "x"}},
        }))

        with pytest.raises(ResolutionError) as exc_info:
            resolver.resolve_file(path)

        assert str(exc_info.value) == "failed to validate config"
        assert find_cause(exc_info.value, EntryResolutionError).key_path == "NotAKey"
        assert find_cause(exc_info.value, InvalidKeyName) is not None
        assert format_error_chain(exc_info.value).splitlines() == [
            "failed to validate config",
            "caused by: failed to resolve entry 'NotAKey'",
            "caused by: no key named 'NotAKey'",
        ]

    def test_resolution_is_repeatable(self, resolver, tmp_menu_json):
        def summary(entries):
            result = {}
            for binding, entry in entries.items():
                children = summary(entry.applications) if isinstance(entry, ResolvedFolder) else None
                result[binding.keyval] = (entry.name, entry.image.is_placeholder, children)
            return result

        first = resolver.resolve_file(tmp_menu_json)
        second = resolver.resolve_file(tmp_menu_json)
        assert summary(first.applications) == summary(second.applications)

    def test_parse_errors_are_not_wrapped(self, resolver, tmp_path):
        path = tmp_path / "menu.json"
        path.write_text("[]")
        with pytest.raises(ConfigParseFailed):
            resolver.resolve_file(path)
