"""Immutable configuration for a single tree walk."""

from dataclasses import dataclass
from typing import Optional, Tuple

from boxtree.exceptions import ConfigError
from boxtree.exclusion_rules import PatternExclusionRules
from boxtree.types import PathType


@dataclass(frozen=True)
class WalkConfig:
    """Configuration for one invocation of the tree walker.

    The configuration is validated on construction: a negative maximum depth or an
    exclusion pattern with invalid syntax raises ConfigError, so a bad configuration is
    rejected before any traversal starts.

    Attributes:
        root_path: Directory to list. It is rendered exactly as given on the root line,
            so "." stays "." and "src/" keeps its trailing slash.
        max_depth: Deepest level to print (root is level 0, so 0 lists nothing below the
            root). None means unlimited.
        directories_only: If True, files are neither printed nor counted.
        exclude_patterns: Glob patterns matched against entry base names, in order.

    Example:
        >>> config = WalkConfig(".", max_depth=2, exclude_patterns=("*.pyc",))
        >>> config.max_depth
        2
        >>> WalkConfig(".", max_depth=-1)
        Traceback (most recent call last):
            ...
        boxtree.exceptions.ConfigError: Maximum depth must be a non-negative integer, got -1
    """

    root_path: PathType = "."
    max_depth: Optional[int] = None
    directories_only: bool = False
    exclude_patterns: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.max_depth is not None and (isinstance(self.max_depth, bool) or self.max_depth < 0):
            raise ConfigError(f"Maximum depth must be a non-negative integer, got {self.max_depth}")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))
        self.exclusion_rules()

    def exclusion_rules(self) -> PatternExclusionRules:
        """Compile the exclude patterns into a matcher.

        Returns:
            PatternExclusionRules: Rules holding every pattern, in order.

        Raises:
            ConfigError: If any pattern has invalid syntax.
        """
        return PatternExclusionRules(self.exclude_patterns)
