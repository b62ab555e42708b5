# tilemenu Resolution Package
"""
Menu resolution engine.

Turns the declarative menu document into a validated tree of
ResolvedFolder / ResolvedApplication nodes.
"""

from .entries import EntryResolver
from .icons import IconResolver
from .keys import KeyCodec
from .launch import DesktopLaunch, LaunchAction, ShellCommand
from .metadata import ApplicationMetadataCache
from .tree import MenuResolver, load_menu_config, parse_menu_config

__all__ = [
    "ApplicationMetadataCache",
    "DesktopLaunch",
    "EntryResolver",
    "IconResolver",
    "KeyCodec",
    "LaunchAction",
    "MenuResolver",
    "ShellCommand",
    "load_menu_config",
    "parse_menu_config",
]
