"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands can
be tested with a fake filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from filekit.config import Settings, load_settings
from filekit.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from filekit.filesystem import RealFileSystem

    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    The filesystem is typed with the FileSystem protocol, so test doubles
    can be injected without inheritance.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    settings: Settings = field(default_factory=Settings)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        config_path: Override settings file (for testing).

    Returns:
        Configured AppContext.

    Raises:
        ValueError: If the settings file is invalid.
    """
    from filekit.filesystem import RealFileSystem

    return AppContext(filesystem=RealFileSystem(), settings=load_settings(config_path))
