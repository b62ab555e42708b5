"""
Platform - Interfaces of the desktop collaborators used during resolution.

The resolver only talks to these protocols. tilemenu.services.gtk provides
the GTK4/Gio implementations; tests provide in-memory fakes.
"""

from typing import Any, Optional, Protocol


class KeySymbols(Protocol):
    """The platform key-symbol table."""

    def from_name(self, name: str) -> Optional[int]:
        """Return the keyval for a key name, or None if unknown."""
        ...

    def to_name(self, keyval: int) -> Optional[str]:
        """Return the canonical name of a keyval, or None."""
        ...


class IconTheme(Protocol):
    """Icon theme and image loading."""

    def lookup_icon(self, name: str, size: int) -> Any:
        """Themed icon at the given pixel size. Never fails."""
        ...

    def load_image(self, path: str) -> Any:
        """Load an image file. Raises OSError if it can't be read."""
        ...

    def empty_image(self, width: int, height: int) -> Any:
        """A blank image of the given size."""
        ...


class AppRecord(Protocol):
    """An installed desktop application."""

    @property
    def name(self) -> str:
        ...

    @property
    def icon_name(self) -> Optional[str]:
        ...

    def launch(self, context: Any = None) -> None:
        """Start the application. Raises on failure."""
        ...


class ApplicationDatabase(Protocol):
    """The OS desktop application database."""

    def lookup(self, desktop_id: str) -> Optional[AppRecord]:
        """Find an application by desktop file id ("firefox.desktop")."""
        ...

    def launch_context(self) -> Any:
        """Launch context for the active display. Raises LaunchFailed."""
        ...
