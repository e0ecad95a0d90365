"""Rich output helpers for the command line."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from filekit.descriptor import FileDescriptor
from filekit.path import Path


class Output:
    """Text output for filekit commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_path(self, path: Path) -> None:
        """Display the decomposition of a path.

        Args:
            path: Path to describe.
        """
        table = Table(title=str(path) or "(empty)", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("Pathname", path.pathname)
        table.add_row("Stream", path.stream_scheme or "-")
        table.add_row("Dirname", path.dirname)
        table.add_row("Filename", path.filename)
        table.add_row("Extension", path.extension or "-")
        table.add_row("Absolute", "yes" if path.is_absolute() else "no")
        table.add_row("Segments", str(path.segment_count()))

        self.console.print(table)

    def show_segments(self, path: Path) -> None:
        """Display the segments of a path, one per line with its index."""
        if not path.segment_count():
            self.console.print("[yellow]No segments[/yellow]")
            return
        for index, segment in enumerate(path.segments()):
            self.console.print(f"[dim]{index}[/dim] {segment}")

    def show_entries(self, entries: Iterable[FileDescriptor]) -> None:
        """Display directory entries.

        Args:
            entries: Descriptors to list.
        """
        table = Table()
        table.add_column("Name", style="cyan")
        table.add_column("Type")

        count = 0
        for entry in sorted(entries, key=lambda e: e.filename):
            if entry.is_link():
                kind = "link"
            elif entry.is_dir():
                kind = "dir"
            else:
                kind = "file"
            table.add_row(entry.filename, kind)
            count += 1

        if not count:
            self.console.print("[yellow]Directory is empty[/yellow]")
            return
        self.console.print(table)

    def show_text(self, text: str) -> None:
        """Print text without markup processing."""
        self.console.print(text, markup=False, highlight=False)

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")


def configure_logging(level: int) -> None:
    """Route library logging through rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
