"""Exclusion rules that prune entries by base name using glob patterns."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from boxtree.exceptions import ConfigError
from boxtree.types import PathType


def _as_wildmatch(glob: str) -> str:
    """Rewrite a shell glob so that gitignore line syntax leaves it alone.

    A gitignore line treats a leading ``#`` as a comment, a leading ``!`` as a negation
    and strips surrounding whitespace. In a glob those characters are literals, so a
    leading ``#``/``!`` is escaped and whitespace at either end is wrapped in a
    one-character class.
    """
    if glob[:1] in ("#", "!"):
        glob = "\\" + glob
    elif glob[:1].isspace():
        glob = f"[{glob[0]}]{glob[1:]}"
    if glob[-1:].isspace():
        glob = f"{glob[:-1]}[{glob[-1]}]"
    return glob


class PatternExclusionRules:
    """Exclusion rules matched against the base name of each entry.

    Patterns are shell-style globs (``*``, ``?``, ``[abc]``, every other character
    matching itself) compiled through the pathspec library. A name is excluded when it
    matches any pattern. One addition: a pattern ending in ``/`` only matches
    directories (``build/``), which cannot be confused with a literal because names
    never contain a slash.

    Patterns are compiled as they are added, so invalid syntax raises ConfigError
    immediately rather than during traversal.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.
        patterns (List[str]): The patterns as given, in the order they were added.

    Example:
        >>> rules = PatternExclusionRules(["*.toml", "*.md"])
        >>> rules.exclude("Cargo.toml")
        True
        >>> rules.exclude("LICENSE")
        False
        >>> rules.add_rule("target/")
        >>> rules.exclude("target", is_dir=True)
        True
        >>> rules.exclude("target")
        False
        >>> rules.add_rule("!*")
        >>> rules.exclude("!important")
        True
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize the rules with an optional ordered sequence of patterns.

        Args:
            patterns: Glob patterns to add, in order.

        Raises:
            ConfigError: If any pattern has invalid syntax.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.patterns: List[str] = []

        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check whether an entry with the given base name should be pruned.

        Args:
            name: Base name of the entry (never a full path).
            is_dir: Whether the entry is a directory. Directory names are matched with a
                trailing slash so that directory-only patterns apply to them.

        Returns:
            bool: True if the entry should be excluded.
        """
        if not self.patterns:
            return False
        return bool(self.spec.match_file(name + "/" if is_dir else name))

    def add_rule(self, rule: str) -> None:
        """Add a single pattern after the existing ones.

        Args:
            rule: A glob pattern such as ``*.pyc`` or ``node_modules/``.

        Raises:
            ConfigError: If the pattern has invalid syntax.
        """
        try:
            new_pattern = GitWildMatchPattern(_as_wildmatch(rule))
        except ValueError as e:
            raise ConfigError(f"Invalid exclude pattern {rule!r}: {e}") from e

        # Ensure patterns is a list that supports append
        if not hasattr(self.spec.patterns, "append"):
            self.spec.patterns = list(self.spec.patterns)

        self.spec.patterns.append(new_pattern)
        self.patterns.append(rule)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load patterns from one or more pattern files.

        Files are read as UTF-8. Each non-blank line that does not start with ``#`` is
        added as a glob pattern, in file order.

        Args:
            rules_files: Path to a file or sequence of paths containing patterns.

        Raises:
            ConfigError: If a file does not exist, cannot be read or decoded, or
                contains an invalid pattern.
        """
        # Convert to list if it's a single path
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise ConfigError(f"Pattern file not found: {path}")

            try:
                with open(path, "r", encoding="utf-8") as f:
                    lines = f.read().splitlines()
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigError(f"Cannot read pattern file {path}: {e}") from e

            for line in lines:
                if line.strip() and not line.startswith("#"):
                    self.add_rule(line)


def matches(name: str, patterns: Sequence[str]) -> bool:
    """Return True if ``name`` matches any of ``patterns``.

    Args:
        name: Base name of a file or directory.
        patterns: Glob patterns. An empty sequence never matches.

    Returns:
        bool: Whether the name is matched.

    Raises:
        ConfigError: If any pattern has invalid syntax.

    Example:
        >>> matches("README.md", ["*.toml", "*.md"])
        True
        >>> matches("main.rs", ["ma?n.r"])
        False
        >>> matches("#notes#", ["#*"])
        True
        >>> matches("anything", [])
        False
    """
    return PatternExclusionRules(patterns).exclude(name)
