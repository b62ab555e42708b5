"""
Application Metadata Cache - Lazy, write-once desktop record per entry.

Icon, name and launch resolution of one application entry may each need
the entry's desktop record. The cache performs the database lookup on the
first get() and hands the same result to every later caller. A failed
lookup is remembered as well, so the database is consulted at most once
per entry.
"""

from typing import Optional

from loguru import logger

from tilemenu.errors import (
    ApplicationNotFound,
    MissingApplicationIcon,
    MissingDisplayName,
    NoApplicationReference,
)
from tilemenu.services.platform import ApplicationDatabase, AppRecord

DESKTOP_SUFFIX = ".desktop"

_UNSET = object()


class ApplicationMetadataCache:
    """
    Memoized lookup of one entry's desktop application record.

    Args:
        ref_name: Application id from the entry ("firefox"), or None
        database: Application database to query
    """

    def __init__(self, ref_name: Optional[str], database: ApplicationDatabase):
        self.ref_name = ref_name
        self.database = database
        self._record = _UNSET
        self._error: Optional[Exception] = None

    @property
    def populated(self) -> bool:
        return self._record is not _UNSET

    def get(self) -> AppRecord:
        """
        Return the desktop record, looking it up on first use.

        Raises:
            NoApplicationReference: If the entry names no application
            ApplicationNotFound: If no desktop file matches
        """
        if self._record is not _UNSET:
            return self._record
        if self._error is not None:
            raise self._error

        try:
            self._record = self._lookup()
        except (NoApplicationReference, ApplicationNotFound) as e:
            self._error = e
            raise
        return self._record

    def _lookup(self) -> AppRecord:
        if not self.ref_name:
            raise NoApplicationReference()

        desktop_id = f"{self.ref_name}{DESKTOP_SUFFIX}"
        logger.debug(f"Looking up {desktop_id}")
        record = self.database.lookup(desktop_id)
        if record is None:
            raise ApplicationNotFound(self.ref_name)
        return record

    def icon_name(self) -> str:
        """Icon name declared by the desktop file."""
        icon = self.get().icon_name
        if not icon:
            raise MissingApplicationIcon(self.ref_name)
        return icon

    def display_name(self) -> str:
        """Display name declared by the desktop file."""
        name = self.get().name
        if not name:
            raise MissingDisplayName(f"desktop file for {self.ref_name} has no name")
        return name
