"""Filesystem abstraction for testability.

This module provides the production implementation of the FileSystem
protocol. RealFileSystem wraps standard library ``os`` and ``shutil``
operations and lets their ``OSError`` propagate.
"""

from __future__ import annotations

import errno
import os
import shutil


class RealFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem and PathResolver protocols structurally.
    """

    def realpath(self, pathname: str) -> str | None:
        """Resolve a pathname, returning None if it does not exist."""
        if not pathname or not os.path.exists(pathname):
            return None
        return os.path.realpath(pathname)

    def exists(self, pathname: str) -> bool:
        """Check if a path exists."""
        return os.path.exists(pathname)

    def is_file(self, pathname: str) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(pathname)

    def is_dir(self, pathname: str) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(pathname)

    def is_link(self, pathname: str) -> bool:
        """Check if a path is a symbolic link."""
        return os.path.islink(pathname)

    def access(self, pathname: str, mode: int) -> bool:
        """Check access permissions."""
        return os.access(pathname, mode)

    def stat(self, pathname: str, follow_symlinks: bool = True) -> os.stat_result:
        """Return status information for a path."""
        return os.stat(pathname, follow_symlinks=follow_symlinks)

    def readlink(self, pathname: str) -> str:
        """Return the target of a symbolic link."""
        return os.readlink(pathname)

    def read_text(self, pathname: str) -> str:
        """Read text content from a file."""
        with open(pathname, encoding="utf-8") as handle:
            return handle.read()

    def write_text(self, pathname: str, content: str) -> None:
        """Write text content to a file."""
        with open(pathname, "w", encoding="utf-8") as handle:
            handle.write(content)

    def append_text(self, pathname: str, content: str) -> None:
        """Append text content to a file."""
        with open(pathname, "a", encoding="utf-8") as handle:
            handle.write(content)

    def touch(self, pathname: str, times: tuple[float, float]) -> None:
        """Create the file if needed and set its timestamps."""
        with open(pathname, "a", encoding="utf-8"):
            pass
        os.utime(pathname, times)

    def mkdir(
        self, pathname: str, mode: int = 0o777, parents: bool = False, exist_ok: bool = False
    ) -> None:
        """Create a directory."""
        if parents:
            os.makedirs(pathname, mode=mode, exist_ok=exist_ok)
        elif exist_ok and os.path.isdir(pathname):
            return
        else:
            os.mkdir(pathname, mode)

    def rmdir(self, pathname: str) -> None:
        """Remove an empty directory."""
        os.rmdir(pathname)

    def unlink(self, pathname: str) -> None:
        """Remove a file or symbolic link."""
        os.unlink(pathname)

    def scandir(self, pathname: str) -> list[os.DirEntry[str]]:
        """List directory entries."""
        with os.scandir(pathname) as entries:
            return list(entries)

    def copy(self, src: str, dst: str) -> None:
        """Copy a file with its metadata."""
        shutil.copy2(src, dst)

    def move(self, src: str, dst: str) -> None:
        """Rename a path to exactly ``dst``, never into a directory at ``dst``.

        Falls back to copy and delete across devices.
        """
        try:
            os.replace(src, dst)
        except OSError as e:
            if e.errno != errno.EXDEV or os.path.isdir(dst):
                raise
            shutil.move(src, dst)

    def symlink(self, target: str, link: str) -> None:
        """Create a symbolic link."""
        os.symlink(target, link)

    def chmod(self, pathname: str, mode: int) -> None:
        """Change permission bits."""
        os.chmod(pathname, mode)

    def chown(self, pathname: str, uid: int, gid: int, follow_symlinks: bool = True) -> None:
        """Change owner and group."""
        os.chown(pathname, uid, gid, follow_symlinks=follow_symlinks)
