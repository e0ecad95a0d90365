"""Regular file wrapper."""

from __future__ import annotations

import logging
import time
from datetime import datetime

from filekit.operations import FileOperation
from filekit.types import FileError

logger = logging.getLogger(__name__)


def _timestamp(value: datetime | float | None) -> float:
    """Normalize a datetime or epoch value, defaulting to now."""
    if value is None:
        return time.time()
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


class File(FileOperation):
    """A regular file addressed by pathname."""

    def read(self) -> str:
        """Read the file contents.

        Returns:
            File content as string.

        Raises:
            FileError: If the file is missing, unreadable or cannot be read.
        """
        if not self.exists():
            raise FileError(f"File does not exist: {self.filename}", self.pathname)
        if not self.is_readable():
            raise FileError(
                f"You don't have permissions to access {self.filename} file", self.pathname
            )
        try:
            return self.fs.read_text(self.pathname)
        except OSError as e:
            raise FileError(f"Failed to read {self.pathname}: {e}", self.pathname) from e

    def write(self, contents: object) -> File:
        """Write contents, creating the parent directory if needed.

        Args:
            contents: Text to write; other objects are converted with ``str()``.

        Returns:
            This file.

        Raises:
            FileError: If the file exists but is not writable, or writing fails.
        """
        from filekit.directory import Directory

        Directory(self.dirname, self.fs).make()
        if self.exists() and not self.is_writable():
            raise FileError(
                f"Impossible to write the file `{self.pathname}`: do you have enough permissions?",
                self.pathname,
            )
        try:
            self.fs.write_text(self.pathname, str(contents))
        except OSError as e:
            raise FileError(f"Failed to write {self.pathname}: {e}", self.pathname) from e
        logger.debug("Wrote %s", self.pathname)
        return self

    def append(self, contents: object) -> File:
        """Append contents to the end of an existing file.

        Returns:
            This file.

        Raises:
            FileError: If the file does not exist or is not writable.
        """
        if not self.exists() or not self.is_writable():
            raise FileError(
                f"Impossible to write the file `{self.pathname}`: do you have enough permissions?",
                self.pathname,
            )
        try:
            self.fs.append_text(self.pathname, str(contents))
        except OSError as e:
            raise FileError(f"Failed to append to {self.pathname}: {e}", self.pathname) from e
        return self

    def touch(
        self,
        modified: datetime | float | None = None,
        accessed: datetime | float | None = None,
    ) -> None:
        """Create the file if needed and set its timestamps.

        Args:
            modified: Modification time, defaults to now.
            accessed: Access time, defaults to now.

        Raises:
            FileError: If the file cannot be touched.
        """
        times = (_timestamp(accessed), _timestamp(modified))
        try:
            self.fs.touch(self.pathname, times)
        except OSError as e:
            raise FileError(f"Failed to touch file at {self.pathname}", self.pathname) from e

    def delete(self) -> None:
        """Delete the file.

        Raises:
            FileError: If the file cannot be removed.
        """
        try:
            self.fs.unlink(self.pathname)
        except OSError as e:
            raise FileError(f"Failed to delete file at {self.pathname}", self.pathname) from e
        logger.debug("Deleted file %s", self.pathname)

    def size(self) -> int:
        """Return the size of the file in bytes.

        Raises:
            FileError: If the file does not exist or is not accessible.
        """
        try:
            return self.fs.stat(self.pathname).st_size
        except OSError as e:
            reason = e.strerror or str(e)
            raise FileError(f"Impossible to get the file size: {reason}.", self.pathname) from e
