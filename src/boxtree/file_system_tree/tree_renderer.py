"""Formatting of individual tree lines."""

from boxtree.types import AncestorLineage, PathType

BRANCH = "├── "
CORNER = "└── "
VERTICAL = "│   "
SPACE = "    "


def render_root(root_path: PathType) -> str:
    """Render the root label: the path exactly as given, with no connector."""
    return str(root_path)


def render_line(lineage: AncestorLineage, is_last: bool, name: str) -> str:
    """Render the tree line for a non-root entry.

    Each ancestor level contributes a four-column segment: a continuation bar when that
    ancestor still has siblings below it, blank space when it was the last one. The
    entry itself gets a corner connector if it is the last visible sibling and a branch
    connector otherwise. The name is appended verbatim.

    Args:
        lineage: Last-sibling flags of the ancestors above the entry, outermost first.
        is_last: Whether the entry is the last visible child of its parent.
        name: The entry's base name.

    Returns:
        The complete line, without a trailing newline.

    Example:
        >>> render_line((), False, "Cargo.toml")
        '├── Cargo.toml'
        >>> render_line((True,), True, "main.rs")
        '    └── main.rs'
        >>> render_line((False, True), False, "mod.rs")
        '│       ├── mod.rs'
    """
    prefix = "".join(SPACE if ancestor_is_last else VERTICAL for ancestor_is_last in lineage)
    return f"{prefix}{CORNER if is_last else BRANCH}{name}"
