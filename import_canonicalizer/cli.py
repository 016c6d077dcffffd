#!/usr/bin/env python3
"""Command-line interface for import-canonicalizer using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import Sequence

import click
from import_canonicalizer import config
from import_canonicalizer import core


try:
    VERSION = f"import-canonicalizer {metadata.version('import_canonicalizer')}"
except metadata.PackageNotFoundError:
    VERSION = "import-canonicalizer"


def _required_imports(path: Path, overrides: Sequence[str]) -> list:
    if overrides:
        return list(overrides)
    root = path if path.is_dir() else path.parent
    return config.read_required_imports(str(root))


def _handle_files(path: Path, required_overrides: Sequence[str], apply_changes: bool) -> int:
    """Canonicalize Python files and report or rewrite them.

    Args:
        path: File or directory to process.
        required_overrides: Required imports given on the command line.
        apply_changes: If True, rewrite files in place.
    Returns:
        0 if no changes, 1 if changes required, 2 if error occurred.
    """
    required = _required_imports(path, required_overrides)
    try:
        core.seed_imports(required)
    except ValueError as exc:
        logging.error("ERROR: %s", exc)
        return 2

    exit_code = 0

    # Handle single file or directory
    if path.is_file():
        file_paths = [path]
    else:
        file_paths = list(core.iter_python_files(str(path)))

    for file_path in file_paths:
        try:
            modified = core.process_file(str(file_path), required, apply=apply_changes)
        except (OSError, ValueError) as exc:
            logging.error("[%s] ERROR: %s", file_path, exc)
            exit_code = max(exit_code, 2)
            continue

        if modified:
            msg = "file updated." if apply_changes else "imports would be modified."
            logging.info("[%s] %s", file_path, msg)
            exit_code = max(exit_code, 1)
        else:
            logging.debug("[%s] already canonical.", file_path)

    return exit_code


required_import_option = click.option(
    "--required-import",
    "required_imports",
    multiple=True,
    help="Import statement seeded into every file (repeatable).",
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.version_option(version=VERSION, prog_name="import-canonicalizer CLI")
def cli(verbose: bool, quiet: bool) -> None:
    """Merge, split and sort the leading import block of Python files."""
    # Configure logging only once
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


@cli.command(help="Print the canonical form of FILE (default: stdin).")
@click.argument("source", type=click.File("rb"), default="-")
@required_import_option
def show(source, required_imports: Sequence[str]) -> None:
    required = list(required_imports) or config.read_required_imports(".")
    try:
        output = core.canonicalize_bytes(source.read(), required)
    except ValueError as exc:
        logging.error("ERROR: %s", exc)
        sys.exit(2)
    click.echo(output, nl=False)


@cli.command(help="Report files whose imports are not canonical.")
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@required_import_option
def check(path: str, required_imports: Sequence[str]) -> None:
    exit_code = _handle_files(Path(path), required_imports, apply_changes=False)
    sys.exit(exit_code)


@cli.command(help="Rewrite imports in place.")
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@required_import_option
def fix(path: str, required_imports: Sequence[str]) -> None:
    exit_code = _handle_files(Path(path), required_imports, apply_changes=True)
    sys.exit(exit_code)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
