"""Shared types for filekit."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from filekit.path import Path

__all__ = ["FileError", "PathInput"]

# Anything a Path can be built from. Other objects are accepted through str().
PathInput = Union[str, "os.PathLike[str]", "Path"]


class FileError(Exception):
    """Error during a file or directory operation.

    Raised by the file wrappers whenever the underlying OS call fails. The
    originating ``OSError`` is chained as ``__cause__`` when there is one.
    """

    def __init__(self, message: str, pathname: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human readable description.
            pathname: Path the failed operation targeted, if known.
        """
        super().__init__(message)
        self.pathname = pathname
