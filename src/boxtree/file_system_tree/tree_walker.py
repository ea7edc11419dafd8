"""Depth-first directory walker producing tree lines.

This module provides the TreeWalker class, which lists a directory recursively and
renders it one line at a time in the style of the Unix ``tree`` command, together
with the running directory and file counts for the summary.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from boxtree.config import WalkConfig
from boxtree.exceptions import PathError, SubtreeReadError
from boxtree.file_system_tree.directory_lister import BaseDirectoryLister, OsDirectoryLister
from boxtree.file_system_tree.tree_renderer import render_line, render_root
from boxtree.types import AncestorLineage, DirEntry, EntryKind

# Appended to the line of a directory whose contents could not be listed
ERROR_SUFFIX = "  [error opening dir]"


@dataclass
class TraversalState:
    """Counters and recovered errors accumulated during one walk.

    Attributes:
        dir_count: Directories printed so far, excluding the root.
        file_count: Files printed so far.
        errors: Directories below the root that could not be listed.
    """

    dir_count: int = 0
    file_count: int = 0
    errors: List[SubtreeReadError] = field(default_factory=list)


@dataclass
class _Frame:
    """Visible children of one expanded directory and the position reached in them."""

    entries: List[DirEntry]
    depth: int
    lineage: AncestorLineage
    index: int = 0


class TreeWalker:
    """Walks a directory depth-first and renders it as a box-drawing tree.

    The walk is pre-order and uses an explicit stack, so tree depth is not limited by the
    interpreter's recursion limit. Each directory is listed once, just before its own line
    is produced; its children are filtered (exclusion patterns, directories-only) and
    sorted by name before any of them is rendered, which makes "last sibling" refer to
    the last visible child.

    Symbolic links are never descended into. A link to a directory is printed and counted
    as a directory.

    Permission Handling:
        A directory below the root that cannot be listed is still printed and counted,
        with ERROR_SUFFIX appended to its line. A SubtreeReadError is recorded in
        ``errors`` and the walk continues with its siblings. Problems with the root
        itself raise PathError before any line is produced.

    Attributes:
        config (WalkConfig): The walk configuration.
        lister (BaseDirectoryLister): Capability used to enumerate directories.
        state (TraversalState): Counts and errors for the walk.

    Example:
        >>> walker = TreeWalker(WalkConfig(".", max_depth=1))  # doctest: +SKIP
        >>> for line in walker.stream_tree_representation():  # doctest: +SKIP
        ...     print(line)
        .
        ├── Cargo.toml
        └── src
        >>> walker.directory_count, walker.file_count  # doctest: +SKIP
        (1, 1)
    """

    def __init__(self, config: WalkConfig, lister: Optional[BaseDirectoryLister] = None) -> None:
        """Initialize a TreeWalker.

        Args:
            config: What to walk and how.
            lister: Directory lister to use. Defaults to an OsDirectoryLister.

        Raises:
            ConfigError: If the exclusion patterns cannot be compiled.
        """
        self.config = config
        self.lister = lister if lister is not None else OsDirectoryLister()
        self.state = TraversalState()
        self._exclusion_rules = config.exclusion_rules()
        self._streamed = False

    @property
    def directory_count(self) -> int:
        """Number of directories rendered so far (root excluded)."""
        return self.state.dir_count

    @property
    def file_count(self) -> int:
        """Number of files rendered so far."""
        return self.state.file_count

    @property
    def errors(self) -> List[SubtreeReadError]:
        """Subtrees that could not be listed during the walk."""
        return self.state.errors

    def stream_tree_representation(self) -> Iterator[str]:
        """Validate the root and return an iterator over the tree lines.

        The root is checked and listed before this method returns, so PathError is
        raised here and not from the middle of the iteration. The returned iterator is
        single-pass: it is tied to live directory listings and counts.

        Returns:
            An iterator yielding the root label followed by one line per visible entry.

        Raises:
            PathError: If the root does not exist, is not a directory, or cannot be read.
            RuntimeError: If the tree has already been streamed by this walker.
        """
        if self._streamed:
            raise RuntimeError("The tree can only be streamed once per walker")
        self._streamed = True
        return self._stream(self._list_root())

    def get_tree_representation(self) -> str:
        """Get the complete tree as a single string, lines joined by newlines."""
        return "\n".join(self.stream_tree_representation())

    def _stream(self, root_entries: List[DirEntry]) -> Iterator[str]:
        yield render_root(self.config.root_path)

        stack = [_Frame(root_entries, 1, ())] if root_entries else []
        while stack:
            frame = stack[-1]
            if frame.index == len(frame.entries):
                stack.pop()
                continue

            entry = frame.entries[frame.index]
            frame.index += 1
            is_last = frame.index == len(frame.entries)

            if entry.is_dir:
                self.state.dir_count += 1
            else:
                self.state.file_count += 1

            children: List[DirEntry] = []
            suffix = ""
            if entry.is_dir and not entry.is_symlink and self._within_depth(frame.depth + 1):
                try:
                    children = self._visible_children(entry.path)
                except OSError as e:
                    self.state.errors.append(SubtreeReadError(entry.path, e))
                    suffix = ERROR_SUFFIX

            yield render_line(frame.lineage, is_last, entry.name) + suffix

            if children:
                stack.append(_Frame(children, frame.depth + 1, frame.lineage + (is_last,)))

    def _list_root(self) -> List[DirEntry]:
        root = Path(self.config.root_path)
        try:
            kind = self.lister.kind_of(root)
        except OSError as e:
            raise PathError(self.config.root_path, f"cannot be accessed: {e.strerror or e}") from e

        if kind is None:
            raise PathError(self.config.root_path, "does not exist")
        if kind is not EntryKind.DIRECTORY:
            raise PathError(self.config.root_path, "is not a directory")

        if not self._within_depth(1):
            return []
        try:
            return self._visible_children(root)
        except OSError as e:
            raise PathError(self.config.root_path, f"cannot be opened: {e.strerror or e}") from e

    def _visible_children(self, path: Path) -> List[DirEntry]:
        """List a directory, drop excluded and filtered entries, and sort by name."""
        visible = []
        for entry in self.lister.list_entries(path):
            if self._exclusion_rules.exclude(entry.name, is_dir=entry.is_dir):
                continue
            if self.config.directories_only and not entry.is_dir:
                continue
            visible.append(entry)
        return sorted(visible, key=lambda e: e.name)

    def _within_depth(self, depth: int) -> bool:
        return self.config.max_depth is None or depth <= self.config.max_depth


def walk(config: WalkConfig, lister: Optional[BaseDirectoryLister] = None) -> Tuple[Iterator[str], TraversalState]:
    """Walk a directory tree as described by ``config``.

    Args:
        config: What to walk and how.
        lister: Directory lister to use. Defaults to an OsDirectoryLister.

    Returns:
        A pair of the single-pass line iterator and the traversal state. The counts in
        the state are final once the iterator is exhausted.

    Raises:
        PathError: If the root cannot be listed. Raised before any line is produced.
    """
    walker = TreeWalker(config, lister)
    return walker.stream_tree_representation(), walker.state
