"""Render parsed imports back to source text."""

from typing import Iterable

from import_canonicalizer.model import AbsoluteImport
from import_canonicalizer.model import Import
from import_canonicalizer.model import Module
from import_canonicalizer.model import ModulePath
from import_canonicalizer.model import NamedRelativeModule
from import_canonicalizer.model import RelativeImport
from import_canonicalizer.model import RelativeModule
from import_canonicalizer.model import WildcardImport
from import_canonicalizer.tokenizer import Token


def _join(tokens: Iterable[Token], sep: str) -> str:
    return sep.join(token.decode() for token in tokens)


def render_path(path: ModulePath) -> str:
    return _join(path, ".")


def render_module(module: Module) -> str:
    """Render ``a.b`` or ``a.b as c``."""
    text = render_path(module.path)
    if module.alias is not None:
        text += f" as {module.alias.decode()}"
    return text


def render_origin(origin: RelativeModule) -> str:
    """Render the leading dots and, for named origins, the dotted path."""
    dots = "." * origin.level
    if isinstance(origin, NamedRelativeModule):
        return dots + render_path(origin.path)
    return dots


def render_import(entry: Import) -> str:
    """Return the single-line canonical form of ``entry``."""
    if isinstance(entry, AbsoluteImport):
        line = "import " + ", ".join(render_module(m) for m in entry.modules)
    elif isinstance(entry, RelativeImport):
        line = f"from {render_origin(entry.origin)} import {_join(entry.identifiers, ', ')}"
    elif isinstance(entry, WildcardImport):
        line = f"from {render_origin(entry.origin)} import *"
    else:
        raise TypeError(f"Unsupported import type: {type(entry).__name__}")
    if entry.comment is not None:
        line += f"  {entry.comment.decode()}"
    return line
