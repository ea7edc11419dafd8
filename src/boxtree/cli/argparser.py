"""Command-line argument parsing for boxtree.

This module defines the command-line interface for boxtree,
handling argument parsing and conversion into a WalkConfig.
"""

import argparse
from typing import Any, List, Optional, Sequence, Type, Union

from boxtree import __version__
from boxtree.config import WalkConfig
from boxtree.exceptions import ConfigError
from boxtree.exclusion_rules import PatternExclusionRules


def create_exclusion_action(exclusion_rules: PatternExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion patterns.

    This factory function creates an action class that will update the provided
    exclusion rules object as arguments are processed. This preserves the exact
    order of -I/--exclude and --exclude-from options as they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed.

        Patterns are compiled as soon as they are seen, so an invalid pattern raises
        ConfigError during parsing.
        """

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string == "--exclude-from":
                exclusion_rules.load_rules(str(values))
            else:  # -I/--exclude
                exclusion_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: PatternExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with boxtree's options.
    """
    description = """
    boxtree: list the contents of a directory as a tree.

    Directories are walked depth-first and drawn with box-drawing characters, with
    entries sorted by name. A summary of the number of directories and files listed
    is printed after the tree.

    Symbolic links are listed but never followed: a link to a directory is shown and
    counted as a directory, without its contents.
    """

    epilog = """
    Examples:
      # List the current directory
      boxtree

      # Descend at most two levels
      boxtree -L 2 /path/to/project

      # Show directories only
      boxtree -d /path/to/project

      # Exclude entries whose name matches a pattern (repeatable)
      boxtree -I "*.pyc" -I "__pycache__" /path/to/project

      # Exclude directories only, and load patterns from a file
      boxtree -I "build/" --exclude-from .treeignore /path/to/project

      # Write the tree to a file without the summary line
      boxtree --noreport -o tree.txt /path/to/project

      # Display version information and exit
      boxtree -V
    """

    parser = argparse.ArgumentParser(
        prog="boxtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"boxtree {__version__}", help="Show the version and exit"
    )

    # Create the exclusion rules action class
    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        metavar="DIRECTORY",
        help="The directory to list (default: the current directory).",
    )
    parser.add_argument(
        "-L",
        "--max-depth",
        type=int,
        metavar="LEVEL",
        help="Descend only LEVEL directories deep. LEVEL must be greater than 0.",
    )
    parser.add_argument(
        "-d",
        "--directories-only",
        action="store_true",
        help="List directories only.",
    )
    parser.add_argument(
        "-I",
        "--exclude",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Do not list files or directories whose name matches the glob PATTERN (*, ?, [abc]). "
            "A trailing slash matches directories only (build/). Excluded directories are not "
            "descended into. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "--exclude-from",
        type=str,
        metavar="FILE",
        action=ExclusionAction,
        help=(
            "Read exclusion patterns from FILE, one glob per line. Blank lines and lines "
            "starting with # are skipped (can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--noreport",
        action="store_true",
        help="Omit the directory and file count report at the end of the tree.",
    )

    return parser


def build_config(args: argparse.Namespace, exclusion_rules: PatternExclusionRules) -> WalkConfig:
    """Convert parsed command-line arguments into a WalkConfig.

    Performs validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.
        exclusion_rules: Exclusion rules populated during parsing.

    Returns:
        The configuration for the walk.

    Raises:
        ConfigError: If any arguments fail validation.
    """
    if args.max_depth is not None and args.max_depth < 1:
        raise ConfigError(f"Invalid level {args.max_depth}, must be greater than 0")

    return WalkConfig(
        root_path=args.directory,
        max_depth=args.max_depth,
        directories_only=args.directories_only,
        exclude_patterns=tuple(exclusion_rules.patterns),
    )
