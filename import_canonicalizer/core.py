#!/usr/bin/env python3
"""Core pipeline for import-canonicalizer. This module ties the parser,
the normalization passes and the renderer together: it parses the leading
import block, seeds the required imports, merges, splits and sorts the
result, and glues the untouched remainder back on.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence

from import_canonicalizer.config import REQUIRED_IMPORT
from import_canonicalizer.model import Import
from import_canonicalizer.parser import parse
from import_canonicalizer.parser import remainder
from import_canonicalizer.render import render_import
from import_canonicalizer.transforms import combine_relative_imports
from import_canonicalizer.transforms import separate_absolute_imports
from import_canonicalizer.transforms import sort_imports

LOG = logging.getLogger(__name__)


class InvalidSourceError(ValueError):
    """Raised when the input is not UTF-8 text."""


def seed_imports(statements: Sequence[str] = (REQUIRED_IMPORT,)) -> List[Import]:
    """Parse each required statement into exactly one import."""
    seeds: List[Import] = []
    for statement in statements:
        buffer = statement.encode("utf-8")
        imports, block_end = parse(buffer)
        if len(imports) != 1 or block_end != len(buffer):
            raise ValueError(f"Not a single import statement: {statement!r}")
        seeds.extend(imports)
    return seeds


def normalize(imports: List[Import]) -> None:
    """Merge, split and sort ``imports`` in place."""
    combine_relative_imports(imports)
    separate_absolute_imports(imports)
    sort_imports(imports)


def canonicalize(source: str, required: Sequence[str] = (REQUIRED_IMPORT,)) -> str:
    """Return ``source`` with its leading import block in canonical form.

    The block is followed by two blank lines and then the rest of the
    source exactly as it was.
    """
    buffer = source.encode("utf-8")
    imports, block_end = parse(buffer)
    imports.extend(seed_imports(required))
    normalize(imports)
    lines = [render_import(entry) + "\n" for entry in imports]
    rest = remainder(buffer, block_end).decode("utf-8")
    return "".join(lines) + "\n\n" + rest


def canonicalize_bytes(data: bytes, required: Sequence[str] = (REQUIRED_IMPORT,)) -> str:
    try:
        source = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidSourceError(f"Input is not valid UTF-8: {exc}") from exc
    return canonicalize(source, required)


def process_file(file_path: str, required: Sequence[str] = (REQUIRED_IMPORT,), apply: bool = False) -> bool:
    """Canonicalize a single file.

    Returns True when the file content differs from its canonical form. The
    file is rewritten only when ``apply`` is set.
    """
    path_obj = Path(file_path)
    original = path_obj.read_bytes()
    new_source = canonicalize_bytes(original, required)
    modified = new_source.encode("utf-8") != original
    if modified and apply:
        path_obj.write_text(new_source, encoding="utf-8", newline="")
        LOG.debug("Rewrote %s", file_path)
    return modified


def iter_python_files(root: str, ignore: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield Python files under the given root directory, excluding specified patterns."""
    ignore_set = set(ignore or [])
    root_path = Path(root)
    for path in sorted(root_path.rglob('*.py')):
        if any(str(path).startswith(str(root_path / pattern)) for pattern in ignore_set):
            continue
        yield path
