"""Descriptor for a filesystem entry of unknown kind."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from filekit.operations import FileOperation

if TYPE_CHECKING:
    from filekit.directory import Directory
    from filekit.file import File
    from filekit.protocols import FileSystem


class FileDescriptor(FileOperation):
    """A pathname that may be a file, a directory or a link.

    Directory iteration yields descriptors; convert them with ``to_file()``
    or ``to_directory()`` once the kind is known.
    """

    @classmethod
    def from_entry(
        cls, entry: os.DirEntry[str], filesystem: FileSystem | None = None
    ) -> FileDescriptor:
        """Create a descriptor from a directory entry."""
        return cls(entry.path, filesystem)

    def is_file(self) -> bool:
        """Return True if the entry exists and is a regular file."""
        return self.fs.is_file(self.pathname)

    def is_dir(self) -> bool:
        """Return True if the entry exists and is a directory."""
        return self.fs.is_dir(self.pathname)

    def is_dot(self) -> bool:
        """Return True if the filename is ``.`` or ``..``."""
        return self.filename in (".", "..")

    def to_file(self) -> File:
        """Convert into a File."""
        from filekit.file import File

        return File(self.pathname, self.fs)

    def to_directory(self) -> Directory:
        """Convert into a Directory."""
        from filekit.directory import Directory

        return Directory(self.pathname, self.fs)

    def delete(self) -> None:
        """Delete the entry.

        Directories are deleted recursively. Links are removed without
        touching their target.

        Raises:
            FileError: If deletion fails.
        """
        if self.is_dir() and not self.is_link():
            self.to_directory().delete()
        else:
            self.to_file().delete()
