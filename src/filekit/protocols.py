"""Protocol definitions for the OS capabilities filekit consumes.

Path only needs real-path resolution, so that capability is split out as
``PathResolver``. The file wrappers need the full ``FileSystem``. Both are
satisfied structurally by ``filekit.filesystem.RealFileSystem`` and by test
doubles such as ``MagicMock``.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class PathResolver(Protocol):
    """Protocol for resolving pathnames to their canonical form."""

    def realpath(self, pathname: str) -> str | None:
        """Resolve a pathname to its absolute, symlink-free form.

        Args:
            pathname: Pathname to resolve.

        Returns:
            The canonical pathname, or None if the path does not exist.
        """
        ...


@runtime_checkable
class FileSystem(PathResolver, Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    Every method takes plain pathname strings. Failing calls raise
    ``OSError`` subclasses; translating them is the caller's job.
    """

    def exists(self, pathname: str) -> bool:
        """Check if a path exists.

        Returns False for symlinks pointing to missing targets.
        """
        ...

    def is_file(self, pathname: str) -> bool:
        """Check if a path is a regular file."""
        ...

    def is_dir(self, pathname: str) -> bool:
        """Check if a path is a directory."""
        ...

    def is_link(self, pathname: str) -> bool:
        """Check if a path is a symbolic link."""
        ...

    def access(self, pathname: str, mode: int) -> bool:
        """Check access permissions.

        Args:
            pathname: Path to check.
            mode: One of ``os.R_OK``, ``os.W_OK``, ``os.X_OK``.

        Returns:
            True if the path exists and grants the access.
        """
        ...

    def stat(self, pathname: str, follow_symlinks: bool = True) -> os.stat_result:
        """Return status information for a path.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
        ...

    def readlink(self, pathname: str) -> str:
        """Return the target of a symbolic link."""
        ...

    def read_text(self, pathname: str) -> str:
        """Read text content from a file.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_text(self, pathname: str, content: str) -> None:
        """Write text content to a file, replacing existing content."""
        ...

    def append_text(self, pathname: str, content: str) -> None:
        """Append text content to the end of a file."""
        ...

    def touch(self, pathname: str, times: tuple[float, float]) -> None:
        """Create a file if missing and set its access and modification times.

        Args:
            pathname: Path to touch.
            times: ``(accessed, modified)`` epoch seconds.
        """
        ...

    def mkdir(
        self, pathname: str, mode: int = 0o777, parents: bool = False, exist_ok: bool = False
    ) -> None:
        """Create a directory.

        Args:
            pathname: Path to create.
            mode: Permission bits, subject to the process umask.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def rmdir(self, pathname: str) -> None:
        """Remove an empty directory."""
        ...

    def unlink(self, pathname: str) -> None:
        """Remove a file or symbolic link."""
        ...

    def scandir(self, pathname: str) -> Sequence[os.DirEntry[str]]:
        """List the entries of a directory, excluding ``.`` and ``..``."""
        ...

    def copy(self, src: str, dst: str) -> None:
        """Copy a file, overwriting the destination."""
        ...

    def move(self, src: str, dst: str) -> None:
        """Rename a path to exactly ``dst``.

        An existing directory at ``dst`` is never entered: the source ends up
        at ``dst`` itself or the call fails.
        """
        ...

    def symlink(self, target: str, link: str) -> None:
        """Create a symbolic link at ``link`` pointing to ``target``."""
        ...

    def chmod(self, pathname: str, mode: int) -> None:
        """Change permission bits."""
        ...

    def chown(self, pathname: str, uid: int, gid: int, follow_symlinks: bool = True) -> None:
        """Change owner and group. ``-1`` leaves the id unchanged."""
        ...
