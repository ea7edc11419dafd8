"""Fixtures for walking in-memory directory trees."""

from pathlib import Path

import pytest

from boxtree.file_system_tree.directory_lister import BaseDirectoryLister
from boxtree.types import DirEntry, EntryKind


class InMemoryDirectoryLister(BaseDirectoryLister):
    """Serves a nested dict as a directory tree.

    Dict values are directories, None is a file, and an OSError instance is a directory
    that raises that error when listed. Entries are returned in reverse insertion order
    so that tests notice when the walker forgets to sort.
    """

    def __init__(self, root_path, tree):
        self.root = Path(root_path)
        self.tree = tree
        self.listed = []

    def _lookup(self, path):
        node = self.tree
        for part in Path(path).relative_to(self.root).parts:
            if not isinstance(node, dict) or part not in node:
                raise KeyError(part)
            node = node[part]
        return node

    def list_entries(self, path):
        node = self._lookup(path)
        if isinstance(node, OSError):
            raise node
        if not isinstance(node, dict):
            raise NotADirectoryError(20, "Not a directory", str(path))
        self.listed.append(Path(path))
        entries = []
        for name, child in reversed(list(node.items())):
            kind = EntryKind.FILE if child is None else EntryKind.DIRECTORY
            entries.append(DirEntry(name, Path(path) / name, kind))
        return entries

    def kind_of(self, path):
        try:
            node = self._lookup(path)
        except KeyError:
            return None
        return EntryKind.FILE if node is None else EntryKind.DIRECTORY


@pytest.fixture
def sample_tree():
    """The tree used in the examples: three files and src/main.rs."""
    return {
        "Cargo.toml": None,
        "LICENSE": None,
        "README.md": None,
        "src": {"main.rs": None},
    }


@pytest.fixture
def memory_lister():
    """Factory building an InMemoryDirectoryLister rooted at '.' by default."""

    def make(tree, root_path="."):
        return InMemoryDirectoryLister(root_path, tree)

    return make
