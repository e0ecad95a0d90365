"""Directory wrapper."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from filekit.descriptor import FileDescriptor
from filekit.operations import FileOperation
from filekit.types import FileError

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o777


class Directory(FileOperation):
    """A directory addressed by pathname.

    Iterating a Directory yields a FileDescriptor for every entry, without
    ``.`` and ``..``.
    """

    def make(self, mode: int = DEFAULT_MODE) -> None:
        """Create the directory and any missing parents.

        Does nothing if the directory already exists.

        Args:
            mode: Permission bits, subject to the process umask.

        Raises:
            FileError: If the directory cannot be created.
        """
        if self.exists():
            return
        try:
            self.fs.mkdir(self.pathname, mode=mode, parents=True, exist_ok=True)
        except OSError as e:
            raise FileError(f'Failed to create directory "{self.pathname}"', self.pathname) from e
        logger.debug("Created directory %s", self.pathname)

    def delete(self) -> None:
        """Recursively delete the directory.

        Raises:
            FileError: If any entry or the directory itself cannot be removed.
        """
        for entry in self:
            entry.delete()
        try:
            self.fs.rmdir(self.pathname)
        except OSError as e:
            raise FileError(f'Failed to delete directory "{self.pathname}"', self.pathname) from e
        logger.debug("Deleted directory %s", self.pathname)

    def __iter__(self) -> Iterator[FileDescriptor]:
        try:
            entries = self.fs.scandir(self.pathname)
        except OSError as e:
            raise FileError(f'Failed to read directory "{self.pathname}"', self.pathname) from e
        for entry in entries:
            yield FileDescriptor.from_entry(entry, self.fs)
