"""Formatting of the trailing directory/file count line."""


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_summary(dir_count: int, file_count: int, directories_only: bool = False) -> str:
    """Format the summary line printed after the tree.

    Args:
        dir_count: Number of directories listed, excluding the root.
        file_count: Number of files listed. Ignored when directories_only is set.
        directories_only: Whether files were filtered out of the listing.

    Returns:
        The summary text, e.g. ``"1 directory, 3 files"``.

    Example:
        >>> format_summary(1, 3)
        '1 directory, 3 files'
        >>> format_summary(0, 0)
        '0 directories, 0 files'
        >>> format_summary(2, 0, directories_only=True)
        '2 directories'
    """
    directories = _plural(dir_count, "directory", "directories")
    if directories_only:
        return directories
    return f"{directories}, {_plural(file_count, 'file', 'files')}"
