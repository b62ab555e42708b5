"""
Models - Declarative (input) and resolved (output) menu types.

The menu document is read into permissive records (EntrySpec, MenuConfig)
whose fields are checked only at resolution time. Resolution produces
frozen ResolvedFolder / ResolvedApplication nodes that are never mutated
afterwards and can be shared freely with the panel's navigation stack.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Union

if TYPE_CHECKING:
    from tilemenu.resolve.launch import LaunchAction

# Fields understood on a declarative entry
ENTRY_FIELDS = ("name", "icon", "image", "applications", "command", "application")


@dataclass(frozen=True)
class KeyBinding:
    """A platform key value plus the name it was written as.

    Only the keyval takes part in equality, so two spellings of the same key
    ("Prior" and "Page_Up") are the same binding.
    """
    keyval: int
    name: str = field(default="", compare=False)


@dataclass
class EntrySpec:
    """One node of the menu document with every field optional.

    Values are kept exactly as they appeared in the document; whether the
    node is a folder or an application is decided by the resolver.
    """
    name: Any = None
    icon: Any = None
    image: Any = None
    applications: Any = None
    command: Any = None
    application: Any = None
    unknown: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EntrySpec":
        known = {k: v for k, v in data.items() if k in ENTRY_FIELDS}
        unknown = tuple(sorted(k for k in data if k not in ENTRY_FIELDS))
        return cls(unknown=unknown, **known)

    @property
    def is_folder(self) -> bool:
        return self.applications is not None


@dataclass(frozen=True)
class Anchors:
    """Which screen edges the menu window is anchored to."""
    left: bool = True
    right: bool = True
    up: bool = True
    down: bool = True

    def as_edges(self) -> list[str]:
        """Edge names in the form layer-shell windows expect."""
        edges = []
        if self.left:
            edges.append("left")
        if self.right:
            edges.append("right")
        if self.up:
            edges.append("top")
        if self.down:
            edges.append("bottom")
        return edges


@dataclass
class MenuConfig:
    """Top-level menu document."""
    width: int
    height: int
    icon_size: int
    applications: dict[str, Any]
    anchors: Anchors = field(default_factory=Anchors)


class ImageOrigin(str, Enum):
    """How a resolved image was obtained."""
    FILE = "file"
    THEME = "theme"
    APPLICATION = "application"
    FALLBACK = "fallback"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class ResolvedImage:
    paintable: Any
    origin: ImageOrigin

    @property
    def is_placeholder(self) -> bool:
        return self.origin is ImageOrigin.PLACEHOLDER


@dataclass(frozen=True)
class ResolvedFolder:
    name: str
    image: ResolvedImage
    applications: Mapping[KeyBinding, "ResolvedEntry"]


@dataclass(frozen=True)
class ResolvedApplication:
    name: str
    image: ResolvedImage
    launch: "LaunchAction"


ResolvedEntry = Union[ResolvedFolder, ResolvedApplication]


@dataclass(frozen=True)
class ResolvedMenu:
    """The validated tree plus the global settings the panel needs."""
    width: int
    height: int
    icon_size: int
    anchors: Anchors
    applications: Mapping[KeyBinding, ResolvedEntry]

    def count_leaves(self) -> int:
        """Number of applications anywhere in the tree."""
        return _count_leaves(self.applications)


def _count_leaves(entries: Mapping[KeyBinding, ResolvedEntry]) -> int:
    total = 0
    for entry in entries.values():
        if isinstance(entry, ResolvedFolder):
            total += _count_leaves(entry.applications)
        else:
            total += 1
    return total

