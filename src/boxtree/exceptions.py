from typing import Optional

from boxtree.types import PathType


class BoxtreeError(Exception):
    """Base class for all errors raised by boxtree."""

    pass


class ConfigError(BoxtreeError):
    """
    Exception raised when the walk configuration is invalid.

    This covers everything that can be checked before traversal starts: a maximum depth
    that is not a positive integer, an exclusion pattern with invalid syntax, or a pattern
    file that cannot be found. It is always raised before any tree output is produced.

    Example:
        >>> error = ConfigError("Maximum depth must be a positive integer, got 0")
        >>> str(error)
        'Maximum depth must be a positive integer, got 0'
    """

    pass


class PathError(BoxtreeError):
    """
    Exception raised when the root path cannot be listed as a tree.

    Raised when the root does not exist, is not a directory, or cannot be enumerated.
    Like ConfigError, it is raised before any tree output is produced.

    Attributes:
        path (str): The root path as given.
        reason (str): Short description of what is wrong with the path.

    Example:
        >>> error = PathError("missing", "does not exist")
        >>> str(error)
        "Directory 'missing' does not exist"
    """

    def __init__(self, path: PathType, reason: str) -> None:
        """
        Initialize the exception with the offending path and the reason.

        Args:
            path (PathType): The root path as given by the caller.
            reason (str): What is wrong with it, e.g. "does not exist".
        """
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Directory '{self.path}' {reason}")


class SubtreeReadError(BoxtreeError):
    """
    Exception describing a directory below the root that could not be enumerated.

    The walker never lets this exception escape. It records one instance per unreadable
    directory on the traversal state and carries on with the remaining siblings.

    Attributes:
        path (str): Path of the directory that could not be read.
        cause (Optional[OSError]): The underlying operating system error, if any.

    Example:
        >>> error = SubtreeReadError("src/private", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot open directory src/private: Permission denied'
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        """
        Initialize the exception with the unreadable directory and its cause.

        Args:
            path (PathType): Path of the directory that could not be read.
            cause (Optional[OSError]): The error raised while listing it.
        """
        self.path = str(path)
        self.cause = cause
        detail = (cause.strerror or str(cause)) if cause is not None else "unknown error"
        super().__init__(f"Cannot open directory {self.path}: {detail}")
