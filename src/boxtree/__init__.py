"""Directory tree listing utilities.

This package renders a directory's contents as a tree drawn with box-drawing
characters, in the manner of the Unix ``tree`` command.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("boxtree")
except PackageNotFoundError:
    __version__ = "unknown"
