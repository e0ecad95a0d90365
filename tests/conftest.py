"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a small project tree.

    Layout::

        prj/
            composer.json
            vendor/autoload.php
            dir/
    """
    prj = tmp_path / "prj"
    (prj / "vendor").mkdir(parents=True)
    (prj / "dir").mkdir()
    (prj / "composer.json").write_text("{}")
    (prj / "vendor" / "autoload.php").write_text("// autoload")
    return prj


# ============================================================================
# Mock FileSystem Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.realpath.return_value = None
    fs.exists.return_value = False
    fs.is_file.return_value = False
    fs.is_dir.return_value = False
    fs.is_link.return_value = False
    fs.access.return_value = False
    fs.read_text.return_value = ""
    fs.scandir.return_value = []
    return fs


@pytest.fixture
def resolver() -> MagicMock:
    """Create a resolver mapping a fixed set of paths to real paths."""
    real = {
        "/etc": "/etc",
        "/var/log": "/var/log",
        "/var/./log": "/var/log",
        "/tmp/link": "/var/log",
    }
    fake = MagicMock()
    fake.realpath.side_effect = real.get
    return fake
