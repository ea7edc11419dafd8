from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# One flag per ancestor level, outermost first: True if that ancestor was the last visible sibling
AncestorLineage = Tuple[bool, ...]


class EntryKind(Enum):
    """Enumeration of entry kinds produced by directory listing.

    Attributes:
        FILE: Anything that is not a directory (regular files, devices, links to files)
        DIRECTORY: Directory, or a symbolic link pointing at one
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirEntry:
    """A single child of a directory as reported by a directory lister.

    Attributes:
        name: Base name of the entry.
        path: Full path of the entry.
        kind: Whether the entry is a file or a directory.
        is_symlink: True if the entry itself is a symbolic link.
    """

    name: str
    path: Path
    kind: EntryKind
    is_symlink: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
