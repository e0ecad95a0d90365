"""Object-oriented access to files, directories and path strings."""

__version__ = "0.1.0"

from filekit.descriptor import FileDescriptor
from filekit.directory import Directory
from filekit.file import File
from filekit.path import Path
from filekit.protocols import FileSystem, PathResolver
from filekit.types import FileError

__all__ = [
    "__version__",
    "Directory",
    "File",
    "FileDescriptor",
    "FileError",
    "FileSystem",
    "Path",
    "PathResolver",
]
