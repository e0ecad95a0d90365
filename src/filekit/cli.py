"""CLI commands using Typer."""

from __future__ import annotations

import logging
from typing import Annotated, NoReturn

import typer

from filekit import __version__
from filekit.config import load_settings
from filekit.console import Output, configure_logging
from filekit.context import create_context
from filekit.descriptor import FileDescriptor
from filekit.directory import Directory
from filekit.file import File
from filekit.path import Path
from filekit.types import FileError

app = typer.Typer(
    name="filekit",
    help="Inspect paths and manage files and directories",
    no_args_is_help=True,
)

path_app = typer.Typer(help="Path string operations (no filesystem changes)")
app.add_typer(path_app, name="path")

output = Output()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"filekit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
) -> None:
    """Inspect paths and manage files and directories."""
    if verbose:
        configure_logging(logging.DEBUG)
        return
    try:
        configure_logging(load_settings().logging_level)
    except ValueError as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    """Report an error and exit with status 1."""
    output.show_error(message)
    raise typer.Exit(1)


# ============================================================================
# Path Commands
# ============================================================================


@path_app.command("info")
def path_info(
    pathname: Annotated[str, typer.Argument(help="Pathname to describe")],
) -> None:
    """Show the components of a pathname."""
    output.show_path(Path(pathname))


@path_app.command("segments")
def path_segments(
    pathname: Annotated[str, typer.Argument(help="Pathname to split")],
) -> None:
    """List the segments of a pathname."""
    output.show_segments(Path(pathname))


@path_app.command("relative")
def path_relative(
    pathname: Annotated[str, typer.Argument(help="Pathname to shorten")],
    base: Annotated[str, typer.Argument(help="Base pathname to strip")],
) -> None:
    """Strip a base pathname from the front of a pathname."""
    output.show_text(str(Path(pathname).make_relative_to(base)))


@path_app.command("join")
def path_join(
    pathname: Annotated[str, typer.Argument(help="Leading pathname")],
    others: Annotated[list[str], typer.Argument(help="Pathnames to append")],
) -> None:
    """Append pathnames to a pathname."""
    result = Path(pathname)
    for other in others:
        result = result.append(other)
    output.show_text(str(result))


@path_app.command("equals")
def path_equals(
    first: Annotated[str, typer.Argument(help="First pathname")],
    second: Annotated[str, typer.Argument(help="Second pathname")],
    _context=None,
) -> None:
    """Check whether two pathnames point to the same location."""
    ctx = _context or create_context()
    if Path(first).equals(second, ctx.filesystem):
        output.show_success(f"{first} and {second} are the same location")
    else:
        _fail(f"{first} and {second} are different locations")


# ============================================================================
# File Commands
# ============================================================================


@app.command("cat")
def cat(
    pathname: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Print the contents of a file."""
    ctx = _context or create_context()
    try:
        output.show_text(File(pathname, ctx.filesystem).read())
    except FileError as e:
        _fail(str(e))


@app.command("write")
def write(
    pathname: Annotated[str, typer.Argument(help="File to write")],
    content: Annotated[str, typer.Argument(help="Text to write")],
    append: Annotated[
        bool, typer.Option("--append", "-a", help="Append instead of replacing")
    ] = False,
    _context=None,
) -> None:
    """Write text to a file, creating parent directories."""
    ctx = _context or create_context()
    file = File(pathname, ctx.filesystem)
    try:
        if append:
            file.append(content)
        else:
            file.write(content)
    except FileError as e:
        _fail(str(e))
    output.show_success(f"Wrote {pathname}")


@app.command("ls")
def ls(
    pathname: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    _context=None,
) -> None:
    """List the entries of a directory."""
    ctx = _context or create_context()
    directory = Directory(pathname, ctx.filesystem)
    if not ctx.filesystem.is_dir(directory.pathname):
        _fail(f"Not a directory: {pathname}")
    try:
        output.show_entries(list(directory))
    except FileError as e:
        _fail(str(e))


@app.command("mkdir")
def mkdir(
    pathname: Annotated[str, typer.Argument(help="Directory to create")],
    _context=None,
) -> None:
    """Create a directory and its parents."""
    ctx = _context or create_context()
    try:
        Directory(pathname, ctx.filesystem).make(ctx.settings.directory_mode)
    except FileError as e:
        _fail(str(e))
    output.show_success(f"Created {pathname}")


@app.command("rm")
def rm(
    pathname: Annotated[str, typer.Argument(help="File or directory to delete")],
    _context=None,
) -> None:
    """Delete a file, link or directory tree."""
    ctx = _context or create_context()
    entry = FileDescriptor(pathname, ctx.filesystem)
    if not entry.exists() and not entry.is_link():
        _fail(f"No such file or directory: {pathname}")
    try:
        entry.delete()
    except FileError as e:
        _fail(str(e))
    output.show_success(f"Deleted {pathname}")


@app.command("cp")
def cp(
    source: Annotated[str, typer.Argument(help="File to copy")],
    destination: Annotated[str, typer.Argument(help="Target pathname")],
    _context=None,
) -> None:
    """Copy a file, creating the destination directory."""
    ctx = _context or create_context()
    try:
        File(source, ctx.filesystem).copy(destination)
    except FileError as e:
        _fail(str(e))
    output.show_success(f"Copied {source} to {destination}")


@app.command("mv")
def mv(
    source: Annotated[str, typer.Argument(help="Entry to move")],
    destination: Annotated[str, typer.Argument(help="Target pathname")],
    _context=None,
) -> None:
    """Move a file or directory, creating the destination directory."""
    ctx = _context or create_context()
    try:
        FileDescriptor(source, ctx.filesystem).move(destination)
    except FileError as e:
        _fail(str(e))
    output.show_success(f"Moved {source} to {destination}")


@app.command("ln")
def ln(
    source: Annotated[str, typer.Argument(help="Entry the link points to")],
    destination: Annotated[str, typer.Argument(help="Link pathname")],
    _context=None,
) -> None:
    """Create a symbolic link, replacing a stale one."""
    ctx = _context or create_context()
    try:
        FileDescriptor(source, ctx.filesystem).link_to(destination)
    except FileError as e:
        _fail(str(e))
    output.show_success(f"Linked {destination} to {source}")
