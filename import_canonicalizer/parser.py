"""Parser module for import-canonicalizer.

A backtracking recursive-descent grammar over the leading import block of a
source buffer. Rules return ``None`` when they do not match and always leave
the cursor where it was on entry in that case. Nothing here raises for bad
input: the first statement that does not parse simply ends the import block.
"""

import logging
from typing import List
from typing import Optional
from typing import Tuple

from import_canonicalizer.model import AbsoluteImport
from import_canonicalizer.model import Import
from import_canonicalizer.model import Module
from import_canonicalizer.model import ModulePath
from import_canonicalizer.model import NamedRelativeModule
from import_canonicalizer.model import RelativeImport
from import_canonicalizer.model import RelativeModule
from import_canonicalizer.model import SortedSet
from import_canonicalizer.model import UnnamedRelativeModule
from import_canonicalizer.model import WildcardImport
from import_canonicalizer.tokenizer import Scanner
from import_canonicalizer.tokenizer import Token

LOG = logging.getLogger(__name__)


class Parser(Scanner):
    """Grammar rules for import statements."""

    def __init__(self, src: bytes):
        super().__init__(src)
        self.block_end = 0

    def module_path(self) -> Optional[ModulePath]:
        def rule():
            path: List[Token] = []
            while True:
                identifier = self.identifier()
                if identifier is None:
                    break
                self.whitespace()
                path.append(identifier)
                if not self.literal(b"."):
                    break
                self.whitespace()
            return tuple(path) if path else None

        return self.backtrack(rule)

    def module(self) -> Optional[Module]:
        def rule():
            path = self.module_path()
            if path is None:
                return None
            self.whitespace()
            if not self.keyword(b"as"):
                return Module(path)
            self.whitespace()
            alias = self.identifier()
            if alias is None:
                return None
            return Module(path, alias)

        return self.backtrack(rule)

    def module_list(self) -> Optional[SortedSet[Module]]:
        return self._list(self.module)

    def identifier_list(self) -> Optional[SortedSet[Token]]:
        return self._list(self.identifier)

    def _list(self, item):
        """Comma separated ``item``s with optional parentheses.

        A trailing comma is tolerated before a closing parenthesis, and the
        closing parenthesis may be missing.
        """

        def rule():
            items = SortedSet()
            self.literal(b"(")
            while True:
                value = item()
                if value is None:
                    # Only ``(a, b,)`` may end on a comma.
                    if len(items) and self.src[self.pos:self.pos + 1] == b")":
                        break
                    return None
                self.whitespace()
                items.add(value)
                if not self.literal(b","):
                    break
                self.whitespace()
            if self.literal(b")"):
                self.whitespace()
            return items

        return self.backtrack(rule)

    def relative_module(self) -> Optional[RelativeModule]:
        def rule():
            level = 0
            while self.literal(b"."):
                level += 1
            path = self.module_path()
            if path is not None:
                return NamedRelativeModule(level, path)
            if level == 0:
                return None
            return UnnamedRelativeModule(level)

        return self.backtrack(rule)

    def _trailer(self) -> Optional[Token]:
        self.whitespace()
        comment = self.comment()
        self.whitespace()
        return comment

    def absolute_import(self) -> Optional[AbsoluteImport]:
        def rule():
            if not self.keyword(b"import"):
                return None
            self.whitespace()
            modules = self.module_list()
            if modules is None:
                return None
            return AbsoluteImport(modules, self._trailer())

        return self.backtrack(rule)

    def from_import(self) -> Optional[Import]:
        def rule():
            if not self.keyword(b"from"):
                return None
            self.whitespace()
            origin = self.relative_module()
            if origin is None:
                return None
            self.whitespace()
            if not self.keyword(b"import"):
                return None
            self.whitespace()
            if self.literal(b"*"):
                return WildcardImport(origin, self._trailer())
            identifiers = self.identifier_list()
            if identifiers is None:
                return None
            return RelativeImport(origin, identifiers, self._trailer())

        return self.backtrack(rule)

    def statement(self) -> Optional[Import]:
        result = self.absolute_import()
        if result is None:
            result = self.from_import()
        return result

    def program(self) -> List[Import]:
        """Parse statements until one fails, recording ``block_end``."""
        self.whitespace()
        imports: List[Import] = []
        while True:
            statement = self.statement()
            if statement is None:
                break
            self.block_end = self.pos
            self.whitespace()
            imports.append(statement)
        LOG.debug("Recognized %d import statements ending at byte %d", len(imports), self.block_end)
        return imports


def parse(buffer: bytes) -> Tuple[List[Import], int]:
    """Parse the leading import block of ``buffer``.

    Args:
        buffer: Raw source bytes.

    Returns:
        The imports in order of appearance and the byte offset where the
        unrecognized remainder starts.
    """
    parser = Parser(buffer)
    imports = parser.program()
    return imports, parser.block_end


def remainder(buffer: bytes, block_end: int) -> bytes:
    """Return everything after the import block, verbatim."""
    return buffer[block_end:]
