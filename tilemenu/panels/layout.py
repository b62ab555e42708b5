"""
Grid layout helpers for the menu panel (no GTK dependency).
"""

from typing import Mapping

from tilemenu.models import KeyBinding, ResolvedEntry


def ordered_entries(entries: Mapping[KeyBinding, ResolvedEntry]) -> list[tuple[KeyBinding, ResolvedEntry]]:
    """Entries in a stable display order (by key name)."""
    return sorted(entries.items(), key=lambda item: (item[0].name.lower(), item[0].name))


def grid_positions(count: int, width: int) -> list[tuple[int, int]]:
    """
    Cell (column, row) for each of `count` tiles, filled row by row.

    Args:
        count: Number of tiles
        width: Number of columns (values below 1 are treated as 1)

    Returns:
        List of (column, row) tuples
    """
    width = max(1, width)
    return [(index % width, index // width) for index in range(count)]


def tile_label(key_name: str, name: str) -> str:
    """Label shown under a tile's image, e.g. "(a) Terminal"."""
    return f"({key_name}) {name}"
