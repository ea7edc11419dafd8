"""Command-line interface for boxtree.

This module provides the ``boxtree`` command, which prints a directory as a tree drawn
with box-drawing characters followed by a count of the directories and files listed.

Key Features:
    - Depth limiting (-L/--max-depth)
    - Directory-only listings (-d/--directories-only)
    - Exclusion patterns, given directly or loaded from files
    - Output redirection to a file
    - Signal handling (SIGPIPE on Unix systems, SIGINT)

Configuration and root path problems are reported before any output is written.
Directories below the root that cannot be read are marked in the tree and reported as
warnings on stderr after it; they do not change the exit code.

Exit Codes:
    0: Successful completion (including unreadable subdirectories)
    1: Root directory missing, not a directory or unreadable, or other runtime error
    2: Invalid command line or configuration
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List the current directory two levels deep, ignoring compiled files
    $ boxtree -L 2 -I "*.pyc"

    # Display version information
    $ boxtree --version
"""

import sys
from typing import Optional, Sequence

from boxtree.cli.argparser import build_config, create_parser
from boxtree.cli.output import EXIT_BROKEN_PIPE, Interrupts, open_output
from boxtree.exceptions import ConfigError, PathError
from boxtree.exclusion_rules import PatternExclusionRules
from boxtree.file_system_tree.tree_walker import TreeWalker
from boxtree.summary import format_summary


def run(argv: Optional[Sequence[str]] = None, interrupts: Optional[Interrupts] = None) -> int:
    """Parse arguments, print the tree and return the process exit code.

    Args:
        argv: Command-line arguments without the program name. Defaults to sys.argv[1:].
        interrupts: Installed signal recorder that stops the output early. Without one,
            only a closed pipe stops it.

    Returns:
        The exit code (see the module documentation).
    """
    # Populated by the parser as -I/--exclude-from options are seen
    exclusion_rules = PatternExclusionRules()
    parser = create_parser(exclusion_rules)

    try:
        args = parser.parse_args(argv)
        config = build_config(args, exclusion_rules)
        walker = TreeWalker(config)
        lines = walker.stream_tree_representation()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except PathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    stopped = False
    try:
        with open_output(args.output, interrupts) as writer:
            try:
                writer.write_lines(lines)
                if not args.noreport:
                    summary = format_summary(walker.directory_count, walker.file_count, config.directories_only)
                    writer.write_line()
                    writer.write_line(summary)
            except BrokenPipeError:
                stopped = True
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for error in walker.errors:
        print(f"Warning: {error}", file=sys.stderr)

    if interrupts is not None and interrupts.exit_code is not None:
        return interrupts.exit_code
    return EXIT_BROKEN_PIPE if stopped else 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the boxtree command-line interface.

    Runs the command with SIGINT and SIGPIPE caught and exits with its status code.
    argparse exits with status 2 on usage errors and 0 for --help/--version.
    """
    with Interrupts() as interrupts:
        exit_code = run(argv, interrupts)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
