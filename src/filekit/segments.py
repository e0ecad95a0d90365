"""String helpers for slash-separated pathnames.

These functions operate on plain strings and never touch the filesystem.
Their results follow POSIX ``dirname``/``basename`` conventions, so trailing
separators are ignored when locating the final component.
"""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = "/"
EXTENSION_SEPARATOR = "."


def split(pathname: str, sep: str = SEPARATOR) -> list[str]:
    """Split a pathname into its non-empty segments.

    Leading, trailing and doubled separators do not produce empty segments.

    Args:
        pathname: The pathname to split.
        sep: Segment separator.

    Returns:
        Segments in left-to-right order.

    Example:
        >>> split("/usr//local/bin/")
        ['usr', 'local', 'bin']
    """
    return [segment for segment in pathname.split(sep) if segment]


def join(segments: Iterable[str], sep: str = SEPARATOR) -> str:
    """Join segments back into a pathname."""
    return sep.join(segments)


def dirname(pathname: str) -> str:
    """Return the parent directory portion of a pathname.

    Args:
        pathname: The pathname to inspect.

    Returns:
        The parent portion, ``"."`` if the pathname has no separator,
        ``"/"`` for children of the root, and ``""`` for an empty pathname.
    """
    if not pathname:
        return ""
    stripped = pathname.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR
    index = stripped.rfind(SEPARATOR)
    if index == -1:
        return "."
    return stripped[:index].rstrip(SEPARATOR) or SEPARATOR


def basename(pathname: str) -> str:
    """Return the final component of a pathname, ignoring trailing separators."""
    stripped = pathname.rstrip(SEPARATOR)
    return stripped.rsplit(SEPARATOR, 1)[-1]


def extension(pathname: str) -> str:
    """Return the text after the last dot of the basename, or ``""``."""
    name = basename(pathname)
    _, sep, ext = name.rpartition(EXTENSION_SEPARATOR)
    return ext if sep else ""


def stem(pathname: str) -> str:
    """Return the basename without its extension."""
    name = basename(pathname)
    head, sep, _ = name.rpartition(EXTENSION_SEPARATOR)
    return head if sep else name
