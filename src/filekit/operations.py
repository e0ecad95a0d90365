"""Operations shared by files, directories and descriptors.

FileOperation holds a pathname and an injected FileSystem. It exposes naming
helpers, metadata queries and the copy/move/link operations. Every OS failure
is translated into FileError.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, TypeVar

from filekit import segments as seg
from filekit.path import Path, pathname_of
from filekit.types import FileError

if TYPE_CHECKING:
    from filekit.protocols import FileSystem
    from filekit.types import PathInput

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FileOperation")


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from filekit.filesystem import RealFileSystem

    return RealFileSystem()


def _resolve_uid(user: int | str) -> int:
    """Map a user name or id to a uid."""
    if isinstance(user, int):
        return user
    import pwd

    try:
        return pwd.getpwnam(user).pw_uid
    except KeyError as e:
        raise FileError(f"Unknown user: {user}") from e


def _resolve_gid(group: int | str) -> int:
    """Map a group name or id to a gid."""
    if isinstance(group, int):
        return group
    import grp

    try:
        return grp.getgrnam(group).gr_gid
    except KeyError as e:
        raise FileError(f"Unknown group: {group}") from e


class FileOperation(ABC):
    """Base class for filesystem entries addressed by pathname.

    Follows Separate Use from Creation: the filesystem is injected, and
    defaults to the real one when omitted.
    """

    def __init__(self, pathname: PathInput | object, filesystem: FileSystem | None = None) -> None:
        """Initialize with a pathname.

        Args:
            pathname: String, Path, ``os.PathLike`` or other wrapper.
            filesystem: Filesystem abstraction (defaults to RealFileSystem).
        """
        self._pathname = pathname_of(pathname)
        self.fs = filesystem or _default_filesystem()

    @classmethod
    def create(cls: type[T], pathname: PathInput | object, filesystem: FileSystem | None = None) -> T:
        """Factory method mirroring the constructor."""
        return cls(pathname, filesystem)

    # Naming

    @property
    def pathname(self) -> str:
        """Pathname this entry refers to."""
        return self._pathname

    @property
    def filename(self) -> str:
        """Final component of the pathname."""
        return seg.basename(self._pathname)

    @property
    def dirname(self) -> str:
        """Parent portion of the pathname."""
        return Path(self._pathname).dirname

    @property
    def extension(self) -> str:
        """Extension of the final component."""
        return seg.extension(self._pathname)

    def to_path(self) -> Path:
        """Convert the pathname into a Path."""
        return Path(self._pathname)

    def __str__(self) -> str:
        return self._pathname

    def __fspath__(self) -> str:
        return self._pathname

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pathname!r})"

    # Metadata

    def _stat(self, follow_symlinks: bool = True) -> os.stat_result:
        try:
            return self.fs.stat(self._pathname, follow_symlinks=follow_symlinks)
        except OSError as e:
            raise FileError(f"Failed to stat {self._pathname}: {e}", self._pathname) from e

    @property
    def last_accessed_at(self) -> datetime:
        """Last access time.

        Raises:
            FileError: If the entry cannot be inspected.
        """
        return datetime.fromtimestamp(self._stat().st_atime)

    @property
    def created_at(self) -> datetime:
        """Creation time. On POSIX this is the last metadata change.

        Raises:
            FileError: If the entry cannot be inspected.
        """
        return datetime.fromtimestamp(self._stat().st_ctime)

    @property
    def modified_at(self) -> datetime:
        """Last modification time.

        Raises:
            FileError: If the entry cannot be inspected.
        """
        return datetime.fromtimestamp(self._stat().st_mtime)

    @property
    def inode(self) -> int | None:
        """Inode number, or None on failure."""
        try:
            return self.fs.stat(self._pathname).st_ino
        except OSError:
            return None

    @property
    def group(self) -> int | None:
        """Group id, or None on failure."""
        try:
            return self.fs.stat(self._pathname).st_gid
        except OSError:
            return None

    @property
    def owner(self) -> int | None:
        """Owner uid, or None on failure."""
        try:
            return self.fs.stat(self._pathname).st_uid
        except OSError:
            return None

    @property
    def permissions(self) -> int:
        """Numeric mode, including the file type bits.

        Raises:
            FileError: If the entry cannot be inspected.
        """
        return self._stat().st_mode

    def exists(self) -> bool:
        """Return True if the entry exists. Dangling symlinks do not."""
        return self.fs.exists(self._pathname)

    def is_executable(self) -> bool:
        """Return True if the entry exists and is executable."""
        return self.fs.access(self._pathname, os.X_OK)

    def is_readable(self) -> bool:
        """Return True if the entry exists and is readable."""
        return self.fs.access(self._pathname, os.R_OK)

    def is_writable(self) -> bool:
        """Return True if the entry exists and is writable."""
        return self.fs.access(self._pathname, os.W_OK)

    def is_link(self) -> bool:
        """Return True if the entry is a symbolic link."""
        return self.fs.is_link(self._pathname)

    def link_target(self) -> Path | None:
        """Return the link target, or None if this is not a symbolic link."""
        if not self.is_link():
            return None
        try:
            return Path(self.fs.readlink(self._pathname))
        except OSError as e:
            raise FileError(f"Failed to read link {self._pathname}: {e}", self._pathname) from e

    # Ownership and mode

    def set_group(self, group: int | str) -> None:
        """Change the group. Links are changed themselves, not their target.

        Args:
            group: A group name or id.

        Raises:
            FileError: If the change is not permitted.
        """
        gid = _resolve_gid(group)
        try:
            self.fs.chown(self._pathname, -1, gid, follow_symlinks=not self.is_link())
        except OSError as e:
            raise FileError(f"Failed to change group of {self._pathname}: {e}", self._pathname) from e

    def set_owner(self, user: int | str) -> None:
        """Change the owner. Links are changed themselves, not their target.

        Args:
            user: A user name or id.

        Raises:
            FileError: If the change is not permitted.
        """
        uid = _resolve_uid(user)
        try:
            self.fs.chown(self._pathname, uid, -1, follow_symlinks=not self.is_link())
        except OSError as e:
            raise FileError(f"Failed to change owner of {self._pathname}: {e}", self._pathname) from e

    def set_mode(self, mode: int) -> None:
        """Change permission bits, e.g. ``0o644``."""
        try:
            self.fs.chmod(self._pathname, mode)
        except OSError as e:
            raise FileError(f"Failed to change mode of {self._pathname}: {e}", self._pathname) from e

    # Copy, move, link

    def _destination(self, destination: PathInput | object) -> Path:
        """Turn a destination into a Path and make sure its parent exists."""
        from filekit.directory import Directory

        target = destination if isinstance(destination, Path) else Path(destination)
        Directory(target.dirname, self.fs).make()
        return target

    def copy(self, destination: PathInput | object) -> None:
        """Copy this entry, overwriting an existing destination file.

        The destination names the copy itself; a directory there is refused
        rather than copied into.

        Raises:
            FileError: If the destination is a directory or the copy fails.
        """
        target = self._destination(destination)
        if self.fs.is_dir(target.pathname):
            raise FileError(
                f"Failed to copy {self._pathname} to {target}: destination is a directory",
                self._pathname,
            )
        try:
            self.fs.copy(self._pathname, target.pathname)
        except OSError as e:
            raise FileError(f"Failed to copy {self._pathname} to {target}", self._pathname) from e
        logger.debug("Copied %s to %s", self._pathname, target)

    def move(self, destination: PathInput | object) -> None:
        """Move this entry. On success this wrapper refers to the destination.

        The entry is renamed to the destination itself, never moved into a
        directory found there.

        Raises:
            FileError: If the move fails.
        """
        target = self._destination(destination)
        try:
            self.fs.move(self._pathname, target.pathname)
        except OSError as e:
            raise FileError(f"Failed to move {self._pathname} to {target}", self._pathname) from e
        logger.debug("Moved %s to %s", self._pathname, target)
        self._pathname = target.pathname

    def link_to(self, destination: PathInput | object) -> None:
        """Create a symbolic link at ``destination`` pointing to this entry.

        An existing link at the destination is kept when it already points
        here and replaced otherwise.

        Raises:
            FileError: If the link cannot be created.
        """
        from filekit.descriptor import FileDescriptor

        target = FileDescriptor(pathname_of(destination), self.fs)
        self._destination(target.pathname)

        current = target.link_target()
        if current is not None:
            # Relative link targets are relative to the link's directory.
            if not current.is_stream() and not current.pathname.startswith(seg.SEPARATOR):
                current = Path(target.dirname).append(current)
            if current.pathname == self._pathname or current.equals(self._pathname, self.fs):
                logger.debug("Link %s already points to %s", target, self._pathname)
                return
            target.delete()

        try:
            self.fs.symlink(self._pathname, target.pathname)
        except OSError as e:
            raise FileError(
                f"Failed to create symbolic link from {self._pathname} to {target}", self._pathname
            ) from e
        logger.debug("Linked %s to %s", target, self._pathname)

    @abstractmethod
    def delete(self) -> None:
        """Delete this entry from the filesystem."""
        ...
