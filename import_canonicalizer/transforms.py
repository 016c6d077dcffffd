"""Normalization passes applied to a parsed import list.

Each pass rewrites the whole list in place exactly once.
"""

import logging
from typing import Dict
from typing import List

from import_canonicalizer.model import AbsoluteImport
from import_canonicalizer.model import Import
from import_canonicalizer.model import RelativeImport
from import_canonicalizer.model import RelativeModule
from import_canonicalizer.model import SortedSet

LOG = logging.getLogger(__name__)


def combine_relative_imports(imports: List[Import]) -> None:
    """Merge relative imports that share an origin into the first of them.

    Identifiers are unioned into the first occurrence; the later entries are
    dropped together with their comments.
    """
    survivors: Dict[RelativeModule, RelativeImport] = {}
    kept: List[Import] = []
    for entry in imports:
        if isinstance(entry, RelativeImport):
            first = survivors.get(entry.origin)
            if first is not None:
                first.identifiers.update(entry.identifiers)
                continue
            survivors[entry.origin] = entry
        kept.append(entry)
    LOG.debug("Combined %d relative imports", len(imports) - len(kept))
    imports[:] = kept


def separate_absolute_imports(imports: List[Import]) -> None:
    """Split every multi-module absolute import into one import per module.

    The first module stays in place, the others are appended to the end of
    the list without a comment.
    """
    extra: List[Import] = []
    for entry in imports:
        if not isinstance(entry, AbsoluteImport) or len(entry.modules) <= 1:
            continue
        first, *rest = entry.modules
        entry.modules = SortedSet([first])
        extra.extend(AbsoluteImport(SortedSet([module])) for module in rest)
    LOG.debug("Separated %d absolute imports", len(extra))
    imports.extend(extra)


def sort_imports(imports: List[Import]) -> None:
    imports.sort()
