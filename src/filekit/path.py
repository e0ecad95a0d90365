"""Path value object and its segment algebra.

A Path wraps a pathname string, optionally prefixed by a stream scheme such
as ``vfs://``. All transformations return new Path instances; a Path is never
modified after construction.

Only ``is_absolute`` and ``equals`` consult the filesystem, through an
injectable ``PathResolver``.
"""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING

from filekit import segments as seg

if TYPE_CHECKING:
    from filekit.descriptor import FileDescriptor
    from filekit.protocols import PathResolver
    from filekit.types import PathInput

__all__ = ["Path", "pathname_of"]

STREAM_PATTERN = re.compile(r"^[a-zA-Z]+://")
DRIVE_PATTERN = re.compile(r"^[a-zA-Z]:\\")


def _default_resolver() -> PathResolver:
    """Create the default real-path resolver."""
    from filekit.filesystem import RealFileSystem

    return RealFileSystem()


def pathname_of(value: object) -> str:
    """Convert any accepted path input into a pathname string."""
    if isinstance(value, Path):
        return value.pathname
    if isinstance(value, str):
        return value
    if value is None:
        raise TypeError("Path requires a pathname, got None")
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return str(value)


class Path:
    """An immutable pathname with stream awareness.

    Attributes:
        raw_pathname: Pathname with any stream scheme removed.
        stream_scheme: Scheme prefix including ``://``, or ``""``.

    Example:
        >>> p = Path("vfs://root/dir/file.ext")
        >>> p.stream_scheme, p.raw_pathname, p.extension
        ('vfs://', 'root/dir/file.ext', 'ext')
    """

    __slots__ = ("raw_pathname", "stream_scheme", "_segments", "_anchored")

    def __init__(self, pathname: PathInput | object) -> None:
        """Initialize a path.

        Args:
            pathname: A string, another Path, an ``os.PathLike`` or any object
                whose ``str()`` is a pathname.

        Raises:
            TypeError: If pathname is None.
        """
        text = pathname_of(pathname)
        scheme = ""
        match = STREAM_PATTERN.match(text)
        if match:
            scheme = match.group(0)
            text = text[match.end():]

        object.__setattr__(self, "stream_scheme", scheme)
        object.__setattr__(self, "raw_pathname", text)
        object.__setattr__(self, "_segments", tuple(seg.split(text)))
        object.__setattr__(self, "_anchored", text.startswith(seg.SEPARATOR))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable: cannot delete '{name}'")

    def _with_raw(self, raw: str) -> Path:
        """Build a path sharing this path's stream scheme."""
        return Path(self.stream_scheme + raw)

    def _from_segments(self, parts: tuple[str, ...], keep_anchor: bool) -> Path:
        """Build a path from segments, optionally keeping scheme and root."""
        joined = seg.join(parts)
        if not keep_anchor:
            return Path(joined)
        if self._anchored:
            joined = seg.SEPARATOR + joined
        return self._with_raw(joined)

    # Naming

    @property
    def extension(self) -> str:
        """Extension of the final component, without the dot."""
        return seg.extension(self.raw_pathname)

    @property
    def filename(self) -> str:
        """Final component of the path."""
        return seg.basename(self.raw_pathname)

    @property
    def dirname(self) -> str:
        """Parent portion of the path, including the stream scheme."""
        return self.stream_scheme + seg.dirname(self.raw_pathname)

    @property
    def pathname(self) -> str:
        """Full pathname, including the stream scheme."""
        return self.stream_scheme + self.raw_pathname

    def is_stream(self) -> bool:
        """Return True if the path carries a stream scheme."""
        return self.stream_scheme != ""

    def is_empty(self) -> bool:
        """Return True if the pathname after the scheme is empty."""
        return self.raw_pathname == ""

    # Extension handling

    def set_extension(self, extension: str) -> Path:
        """Return a path whose final component has the given extension.

        Args:
            extension: New extension, without the leading dot.

        Returns:
            New Path. A trailing separator on this path is not kept.
        """
        head = self.raw_pathname.rstrip(seg.SEPARATOR)
        index = head.rfind(seg.SEPARATOR)
        prefix = head[: index + 1] if index != -1 else ""
        return self._with_raw(f"{prefix}{seg.stem(head)}.{extension}")

    def remove_extension(self) -> Path:
        """Return a path with the first occurrence of ``.<extension>`` removed.

        The removal is a literal substring match on the raw pathname, so a
        directory segment containing the same text is affected first.
        """
        extension = self.extension
        if not extension:
            return self._with_raw(self.raw_pathname)
        return self._with_raw(self.raw_pathname.replace(f".{extension}", "", 1))

    # Trailing separator

    def has_trailing_separator(self) -> bool:
        """Return True if the pathname ends with a separator."""
        return self.raw_pathname.endswith(seg.SEPARATOR)

    def add_trailing_separator(self) -> Path:
        """Return this path with a trailing separator, adding one if missing."""
        if self.has_trailing_separator():
            return self._with_raw(self.raw_pathname)
        return self._with_raw(self.raw_pathname + seg.SEPARATOR)

    def remove_trailing_separator(self) -> Path:
        """Return this path with one trailing separator removed, if present."""
        if self.has_trailing_separator():
            return self._with_raw(self.raw_pathname[:-1])
        return self._with_raw(self.raw_pathname)

    # Composition

    def append(self, other: PathInput | object) -> Path:
        """Return the concatenation of this path and another.

        Args:
            other: Path or pathname to add after a separator. A Path argument
                contributes its full pathname, stream scheme included.

        Returns:
            New Path.
        """
        return Path(self.add_trailing_separator().pathname + pathname_of(other))

    def __truediv__(self, other: PathInput | object) -> Path:
        return self.append(other)

    def make_relative_to(self, base: PathInput | object) -> Path:
        """Strip a base path from the front of this path.

        The base loses one trailing separator, then its first occurrence in
        this pathname is removed. No ``..`` segments are ever produced, and
        the result keeps the separator that followed the base.

        Example:
            >>> str(Path("this/is/the/path").make_relative_to("this/is/"))
            '/the/path'
        """
        prefix = Path(base).remove_trailing_separator().pathname
        return Path(self.pathname.replace(prefix, "", 1))

    # Segments

    def segments(self) -> tuple[str, ...]:
        """Return the non-empty segments of the raw pathname, in order."""
        return self._segments

    def segment_count(self) -> int:
        """Return the number of segments."""
        return len(self._segments)

    def segment(self, index: int) -> str | None:
        """Return the segment at ``index``, or None if there is no such segment.

        Negative indexes are out of range.
        """
        if 0 <= index < len(self._segments):
            return self._segments[index]
        return None

    def last_segment(self) -> str:
        """Return the last segment.

        Raises:
            IndexError: If the path has no segments.
        """
        if not self._segments:
            raise IndexError(f"Path '{self}' has no segments")
        return self._segments[-1]

    def up_to_segment(self, count: int) -> Path:
        """Return the path truncated after ``count`` segments.

        The stream scheme and a leading root separator are kept.
        """
        return self._from_segments(self._segments[: max(count, 0)], keep_anchor=True)

    def remove_first_segments(self, count: int) -> Path:
        """Return a relative path without the first ``count`` segments.

        The result is always rebuilt from segments, so even ``count == 0``
        drops the stream scheme, the root separator and empty segments.
        """
        return self._from_segments(self._segments[max(count, 0) :], keep_anchor=False)

    def remove_last_segments(self, count: int) -> Path:
        """Return the path without the last ``count`` segments."""
        keep = max(len(self._segments) - max(count, 0), 0)
        return self._from_segments(self._segments[:keep], keep_anchor=True)

    def matching_first_segments(self, other: PathInput | object) -> int:
        """Count leading segments shared with another path.

        Comparison stops at the first mismatch or at the end of the shorter
        path.
        """
        theirs = Path(other).segments()
        count = 0
        for mine, their in zip(self._segments, theirs):
            if mine != their:
                break
            count += 1
        return count

    def is_prefix_of(self, other: PathInput | object) -> bool:
        """Return True if the other raw pathname starts with this raw pathname.

        This is a string comparison; no canonicalization happens.
        """
        return Path(other).raw_pathname.startswith(self.raw_pathname)

    # Filesystem queries

    def is_absolute(self, resolver: PathResolver | None = None) -> bool:
        """Return whether this path is absolute.

        Stream paths are always absolute. Otherwise a path is absolute if it
        is already canonical, starts with a Windows drive such as ``c:\\``,
        or starts with ``/`` or ``\\``. Empty paths and paths starting with
        ``.`` are relative.

        Args:
            resolver: Real-path resolver. Defaults to the real filesystem.
        """
        if self.is_stream():
            return True

        raw = self.raw_pathname
        resolver = resolver or _default_resolver()
        if raw and resolver.realpath(raw) == raw:
            return True

        if not raw or raw.startswith("."):
            return False

        if DRIVE_PATTERN.match(raw):
            return True

        return raw.startswith(("/", "\\"))

    def equals(self, other: PathInput | object, resolver: PathResolver | None = None) -> bool:
        """Check whether both paths point to the same location.

        Stream paths are compared by their full string. Filesystem paths are
        compared by their real paths; a path that cannot be resolved equals
        nothing.

        Args:
            other: Path or pathname to compare with.
            resolver: Real-path resolver. Defaults to the real filesystem.
        """
        other = other if isinstance(other, Path) else Path(other)

        if self.is_stream() or other.is_stream():
            return self.is_stream() and other.is_stream() and self.pathname == other.pathname

        resolver = resolver or _default_resolver()
        mine = resolver.realpath(self.raw_pathname)
        if mine is None:
            return False
        return mine == resolver.realpath(other.raw_pathname)

    def to_file_descriptor(self) -> FileDescriptor:
        """Return a FileDescriptor for this path."""
        from filekit.descriptor import FileDescriptor

        return FileDescriptor(self.pathname)

    # Python value protocol

    def __str__(self) -> str:
        return self.pathname

    def __fspath__(self) -> str:
        return self.pathname

    def __repr__(self) -> str:
        return f"Path({self.pathname!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self.pathname == other.pathname
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.pathname)

    def __reduce__(self) -> tuple[type[Path], tuple[str]]:
        # copy and pickle rebuild through __init__ instead of setattr
        return (Path, (self.pathname,))
