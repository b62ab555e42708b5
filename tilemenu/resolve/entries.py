"""
Entry Resolver - Turns the declarative menu tree into resolved nodes.

Walks the document depth-first. Every entry gets a key binding, a display
name and an image; applications also get a launch action.

Failure policy:
  - Fatal (wrapped with the entry's key path and re-raised): unknown or
    duplicate key names, malformed entries, folders without a name,
    applications that can't be named or launched.
  - Recovered with a warning: every kind of icon failure. Folders fall back
    to the themed folder glyph; applications fall back to their desktop
    file's icon and then to a blank placeholder.
"""

from types import MappingProxyType
from typing import Any, Mapping

from loguru import logger

from tilemenu.errors import (
    AmbiguousEntryShape,
    DuplicateKeyBinding,
    EntryResolutionError,
    IconError,
    InvalidEntry,
    MissingDisplayName,
    ResolutionError,
)
from tilemenu.models import (
    EntrySpec,
    ImageOrigin,
    KeyBinding,
    ResolvedApplication,
    ResolvedEntry,
    ResolvedFolder,
    ResolvedImage,
)
from tilemenu.resolve.icons import IconResolver
from tilemenu.resolve.keys import KeyCodec
from tilemenu.resolve.launch import DesktopLaunch, LaunchAction, ShellCommand
from tilemenu.resolve.metadata import ApplicationMetadataCache
from tilemenu.services.platform import ApplicationDatabase

DEFAULT_FOLDER_ICON = "folder"


class EntryResolver:
    """
    Recursive resolver for one menu document.

    Args:
        keys: Key codec for entry key names
        icons: Icon resolver at the menu's pixel size
        database: Desktop application database
        folder_icon: Theme icon used when a folder's own icon fails
    """

    def __init__(
        self,
        keys: KeyCodec,
        icons: IconResolver,
        database: ApplicationDatabase,
        folder_icon: str = DEFAULT_FOLDER_ICON,
    ):
        self.keys = keys
        self.icons = icons
        self.database = database
        self.folder_icon = folder_icon

    def resolve_collection(
        self, entries: Mapping[str, Any], path: tuple[str, ...] = ()
    ) -> Mapping[KeyBinding, ResolvedEntry]:
        """
        Resolve a mapping of key name -> declarative entry.

        Args:
            entries: Mapping from the document
            path: Key names of the enclosing folders, for error context

        Returns:
            Read-only mapping of KeyBinding -> ResolvedFolder/ResolvedApplication

        Raises:
            EntryResolutionError: Wrapping the fatal error of the first
                entry that could not be resolved
        """
        resolved: dict[KeyBinding, ResolvedEntry] = {}

        for key_name, raw in entries.items():
            entry_path = path + (str(key_name),)
            try:
                binding = self.keys.parse(key_name)
                if binding in resolved:
                    previous = next(b for b in resolved if b == binding)
                    raise DuplicateKeyBinding(key_name, previous.name)
                resolved[binding] = self.resolve_entry(raw, entry_path)
            except EntryResolutionError:
                # Already carries the path of the nested entry that failed
                raise
            except ResolutionError as e:
                raise EntryResolutionError("/".join(entry_path)) from e

        return MappingProxyType(resolved)

    def resolve_entry(self, raw: Any, path: tuple[str, ...]) -> ResolvedEntry:
        """Classify a raw entry and resolve it as a folder or application."""
        if not isinstance(raw, Mapping):
            raise InvalidEntry(f"expected a mapping, got {type(raw).__name__}")

        entry = EntrySpec.from_mapping(raw)
        if entry.unknown:
            logger.warning(
                f"Ignoring unknown fields in '{'/'.join(path)}': {', '.join(entry.unknown)}"
            )

        _check_types(entry)

        if entry.is_folder:
            conflicting = [
                name for name in ("command", "application")
                if getattr(entry, name) is not None
            ]
            if conflicting:
                raise AmbiguousEntryShape(conflicting)
            return self._resolve_folder(entry, path)

        return self._resolve_application(entry, path)

    def _resolve_folder(self, entry: EntrySpec, path: tuple[str, ...]) -> ResolvedFolder:
        if not entry.name:
            raise MissingDisplayName("folder has no name")

        try:
            image = self.icons.resolve(entry.image, entry.icon)
        except IconError as e:
            logger.warning(f"Couldn't load icon for folder '{entry.name}': {e}")
            image = self.icons.themed(self.folder_icon, ImageOrigin.FALLBACK)

        logger.debug(f"Resolving folder '{entry.name}' ({len(entry.applications)} entries)")
        children = self.resolve_collection(entry.applications, path)

        return ResolvedFolder(name=entry.name, image=image, applications=children)

    def _resolve_application(
        self, entry: EntrySpec, path: tuple[str, ...]
    ) -> ResolvedApplication:
        metadata = ApplicationMetadataCache(entry.application, self.database)

        image = self._resolve_application_image(entry, metadata)
        launch = self._resolve_launch(entry, metadata)
        name = self._resolve_application_name(entry, metadata, path)

        return ResolvedApplication(name=name, image=image, launch=launch)

    def _resolve_application_image(
        self, entry: EntrySpec, metadata: ApplicationMetadataCache
    ) -> ResolvedImage:
        has_explicit_icon_source = entry.image is not None or entry.icon is not None

        if has_explicit_icon_source:
            try:
                return self.icons.resolve(entry.image, entry.icon)
            except IconError as e:
                logger.warning(
                    f"Failed to load preferred image: {e}, attempting to load fallback"
                )

        try:
            return self.icons.themed(metadata.icon_name(), ImageOrigin.APPLICATION)
        except ResolutionError as e:
            logger.warning(f"Couldn't load fallback icon: {e}")
            return self.icons.placeholder()

    def _resolve_launch(
        self, entry: EntrySpec, metadata: ApplicationMetadataCache
    ) -> LaunchAction:
        if entry.command is not None:
            return ShellCommand(entry.command)
        return DesktopLaunch(metadata.get(), self.database.launch_context)

    def _resolve_application_name(
        self, entry: EntrySpec, metadata: ApplicationMetadataCache, path: tuple[str, ...]
    ) -> str:
        if entry.name:
            return entry.name
        if entry.name is not None:
            logger.warning(f"Empty name for '{'/'.join(path)}', using the desktop file's name")
        return metadata.display_name()


def _check_types(entry: EntrySpec) -> None:
    """Reject field values of the wrong type."""
    for field_name in ("name", "icon", "image", "command", "application"):
        value = getattr(entry, field_name)
        if value is not None and not isinstance(value, str):
            raise InvalidEntry(
                f"'{field_name}' must be a string, got {type(value).__name__}"
            )

    if entry.applications is not None and not isinstance(entry.applications, Mapping):
        raise InvalidEntry(
            f"'applications' must be a mapping, got {type(entry.applications).__name__}"
        )
