"""Top-level package for import-canonicalizer.

This package exposes the core API for parsing, normalizing and rendering the
leading import block of Python source files.
"""

from import_canonicalizer.core import canonicalize
from import_canonicalizer.core import canonicalize_bytes
from import_canonicalizer.core import InvalidSourceError
from import_canonicalizer.core import iter_python_files
from import_canonicalizer.core import process_file
from import_canonicalizer.core import seed_imports
from import_canonicalizer.parser import parse
from import_canonicalizer.parser import remainder
from import_canonicalizer.render import render_import
from import_canonicalizer.transforms import combine_relative_imports
from import_canonicalizer.transforms import separate_absolute_imports
from import_canonicalizer.transforms import sort_imports


__all__ = [
    "parse",
    "remainder",
    "combine_relative_imports",
    "separate_absolute_imports",
    "sort_imports",
    "render_import",
    "seed_imports",
    "canonicalize",
    "canonicalize_bytes",
    "InvalidSourceError",
    "process_file",
    "iter_python_files",
]
