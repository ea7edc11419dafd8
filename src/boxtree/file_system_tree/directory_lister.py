"""Directory listing capability used by the tree walker.

The walker never touches the filesystem directly. It asks a lister for the children of
each directory it expands, which lets tests substitute an in-memory tree.
"""

import os
import stat
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from boxtree.types import DirEntry, EntryKind


class BaseDirectoryLister(ABC):
    """Abstract interface for enumerating directories.

    Implementations report direct children only. Ordering is not part of the contract;
    the walker sorts entries itself.
    """

    @abstractmethod
    def list_entries(self, path: Path) -> List[DirEntry]:
        """Return the direct children of a directory.

        Args:
            path: Directory to enumerate.

        Returns:
            One DirEntry per child, in any order.

        Raises:
            OSError: If the directory cannot be read (PermissionError, NotADirectoryError, etc.).
        """
        pass

    @abstractmethod
    def kind_of(self, path: Path) -> Optional[EntryKind]:
        """Classify a path, following symbolic links.

        Args:
            path: Path to classify.

        Returns:
            The entry kind, or None if nothing exists at the path.

        Raises:
            OSError: If the path exists but cannot be inspected.
        """
        pass


class OsDirectoryLister(BaseDirectoryLister):
    """Directory lister backed by ``os.scandir``.

    Symbolic links are classified by their target, so a link to a directory is reported
    as a directory with ``is_symlink`` set. Entries whose type cannot be determined (for
    example dangling links) are reported as files.

    Example:
        >>> lister = OsDirectoryLister()
        >>> lister.kind_of(Path("."))
        <EntryKind.DIRECTORY: 'directory'>
    """

    def list_entries(self, path: Path) -> List[DirEntry]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_symlink = entry.is_symlink()
                    is_dir = entry.is_dir()
                except OSError:
                    # If we can't inspect it, treat as a non-directory
                    is_symlink = False
                    is_dir = False
                kind = EntryKind.DIRECTORY if is_dir else EntryKind.FILE
                entries.append(DirEntry(entry.name, path / entry.name, kind, is_symlink))
        return entries

    def kind_of(self, path: Path) -> Optional[EntryKind]:
        try:
            mode = os.stat(path).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return None
        return EntryKind.DIRECTORY if stat.S_ISDIR(mode) else EntryKind.FILE
