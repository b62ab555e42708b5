"""
Errors - Exception hierarchy for menu loading, resolution and launching.

Context is attached by chaining: a wrapper is raised ``from`` the error it
explains, so the full story can be printed with format_error_chain():

    failed to validate config
    caused by: failed to resolve entry 'media/v'
    caused by: no key named 'NotAKey'
"""

from typing import Iterator, Optional, Type, TypeVar

E = TypeVar("E", bound=BaseException)


class TilemenuError(Exception):
    """Base class for every error raised by tilemenu."""


# --- Document ---------------------------------------------------------------

class ConfigError(TilemenuError):
    """The menu document could not be turned into a MenuConfig."""


class ConfigReadFailed(ConfigError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"failed to read config at {self.path}")


class ConfigParseFailed(ConfigError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"failed to parse config (path: {self.path}): {reason}")


# --- Resolution -------------------------------------------------------------

class ResolutionError(TilemenuError):
    """A fatal problem found while validating the menu tree."""


class EntryResolutionError(ResolutionError):
    """Context wrapper naming the entry whose resolution failed."""

    def __init__(self, key_path: str):
        self.key_path = key_path
        super().__init__(f"failed to resolve entry '{key_path}'")


class InvalidKeyName(ResolutionError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"no key named {name!r}")


class DuplicateKeyBinding(ResolutionError):
    def __init__(self, name: str, previous: str):
        self.name = name
        self.previous = previous
        super().__init__(f"key {name!r} is bound twice (already bound as {previous!r})")


class InvalidEntry(ResolutionError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid entry: {reason}")


class AmbiguousEntryShape(ResolutionError):
    def __init__(self, fields):
        self.fields = sorted(fields)
        super().__init__(
            "entry has 'applications' so it is a folder, but also sets "
            + ", ".join(repr(f) for f in self.fields)
        )


class MissingDisplayName(ResolutionError):
    def __init__(self, detail: str = "no display name"):
        super().__init__(detail)


class NoApplicationReference(ResolutionError):
    def __init__(self):
        super().__init__("no application reference given")


class ApplicationNotFound(ResolutionError):
    def __init__(self, app_id: str):
        self.app_id = app_id
        super().__init__(f"couldn't find desktop file for: {app_id}")


class MissingApplicationIcon(ResolutionError):
    def __init__(self, app_id: str):
        self.app_id = app_id
        super().__init__(f"couldn't find icon name for application: {app_id}")


# --- Icons (always recovered by the caller) -------------------------------

class IconError(TilemenuError):
    """Icon resolution failed; callers substitute a contextual default."""


class AmbiguousIconSource(IconError):
    def __init__(self, image: str, icon: str):
        self.image = image
        self.icon = icon
        super().__init__(
            f"both image ({image}) and icon ({icon}) specified, refusing to choose one"
        )


class NoIconSpecified(IconError):
    def __init__(self):
        super().__init__("no image or icon specified")


class ImageLoadFailed(IconError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"couldn't load file {self.path}")


# --- Runtime ------------------------------------------------------------------

class LaunchFailed(TilemenuError):
    def __init__(self, detail: str):
        super().__init__(detail)


class DisplayUnavailable(TilemenuError):
    def __init__(self):
        super().__init__("could not connect to a display")


# --- Chain helpers ------------------------------------------------------------

def iter_error_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield err followed by each error it was raised from."""
    seen = set()
    current: Optional[BaseException] = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or (
            None if current.__suppress_context__ else current.__context__
        )


def find_cause(err: BaseException, kind: Type[E]) -> Optional[E]:
    """Return the first error of the given kind in err's chain, if any."""
    for item in iter_error_chain(err):
        if isinstance(item, kind):
            return item
    return None


def format_error_chain(err: BaseException) -> str:
    """
    Render an error and all of its causes, outermost first.

    Args:
        err: The error caught at the top level

    Returns:
        One line per error in the chain, causes prefixed with "caused by: "
    """
    lines = []
    for index, item in enumerate(iter_error_chain(err)):
        message = str(item) or type(item).__name__
        lines.append(message if index == 0 else f"caused by: {message}")
    return "\n".join(lines)
