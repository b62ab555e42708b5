"""
Helper utilities for tilemenu.

Provides common functions used by the CLI and the Ignis entry point:
- Settings loading
- Logging setup
- Menu/stylesheet path selection
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

CONFIG_DIR = Path.home() / ".config" / "tilemenu"

# Bundled stylesheet, used when no css path is configured
DEFAULT_CSS = Path(__file__).parent.parent / "styles" / "main.css"


def default_settings() -> Dict[str, Any]:
    """Fresh copy of the built-in settings."""
    return {
        "menu": {
            "path": str(CONFIG_DIR / "menu.json"),
            "css": "",
        },
        "icons": {
            "folder": "folder",
        },
        "logging": {
            "level": "INFO",
        },
    }


def settings_path() -> Path:
    """Location of settings.toml ($TILEMENU_SETTINGS wins)."""
    override = os.environ.get("TILEMENU_SETTINGS")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.toml"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load tilemenu settings from TOML file.

    Args:
        path: Settings file; defaults to settings_path()

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "menu": {
                "path": "~/.config/tilemenu/menu.json",
                "css": ""
            },
            "icons": {
                "folder": "folder"
            },
            "logging": {
                "level": "INFO"
            }
        }
    """
    defaults = default_settings()
    path = path or settings_path()

    if not path.exists():
        logger.debug(f"Settings file not found at {path}, using defaults")
        return defaults

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        logger.warning("Using default settings")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def configure_logging(level: str = "INFO") -> None:
    """
    Send loguru output to stderr at the given level.

    Unknown levels (or non-string values from a hand-edited settings file)
    fall back to INFO with a warning; the existing sink is kept until the
    replacement level is known to be valid.
    """
    try:
        level = str(level).upper()
        logger.level(level)
    except ValueError:
        logger.warning(f"Unknown log level {level!r}, using INFO")
        level = "INFO"

    logger.remove()
    logger.add(sys.stderr, level=level)


def menu_path(settings: Dict[str, Any], override: Optional[str] = None) -> Path:
    """
    Pick the menu document to load.

    Order: explicit override, $TILEMENU_CONFIG, settings["menu"]["path"].
    """
    chosen = override or os.environ.get("TILEMENU_CONFIG") or settings["menu"]["path"]
    return Path(chosen).expanduser()


def css_path(settings: Dict[str, Any], override: Optional[str] = None) -> Path:
    """Stylesheet to apply: override, $TILEMENU_CSS, settings, or the bundled one."""
    chosen = override or os.environ.get("TILEMENU_CSS") or settings["menu"].get("css")
    if not chosen:
        return DEFAULT_CSS
    return Path(chosen).expanduser()
