"""Data model for parsed import statements.

Three statement shapes are modelled:

* ``AbsoluteImport``  - ``import a.b, c as d``
* ``RelativeImport``  - ``from ..pkg import x, y``
* ``WildcardImport``  - ``from .pkg import *``

All of them are totally ordered through ``sort_key``. The order is not the
declaration order of the classes: ``from __future__`` imports come before
everything, then absolute, relative and wildcard imports in that order.
"""

from dataclasses import dataclass
from dataclasses import field
import functools
from typing import Generic
from typing import Iterable
from typing import Iterator
from typing import Optional
from typing import Set
from typing import Tuple
from typing import TypeVar
from typing import Union

from import_canonicalizer.tokenizer import Token

T = TypeVar("T")

ModulePath = Tuple[Token, ...]

FUTURE = b"__future__"


class SortedSet(Generic[T]):
    """Deduplicating set that iterates in sorted order.

    Equality ignores insertion order.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: Set[T] = set(items)

    def add(self, item: T) -> None:
        self._items.add(item)

    def update(self, items: Iterable[T]) -> None:
        self._items.update(items)

    def __iter__(self) -> Iterator[T]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"SortedSet({list(self)!r})"


@functools.total_ordering
@dataclass(frozen=True)
class Module:
    """A dotted module path with an optional alias."""

    path: ModulePath
    alias: Optional[Token] = None

    def sort_key(self):
        # A module without alias sorts before the same path with one.
        if self.alias is None:
            return (self.path, False, b"")
        return (self.path, True, self.alias.text)

    def __lt__(self, other: "Module") -> bool:
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class NamedRelativeModule:
    """``level`` leading dots followed by a non-empty dotted path."""

    level: int
    path: ModulePath

    def is_future(self) -> bool:
        return self.level == 0 and self.path[0].text == FUTURE

    def sort_key(self):
        return (0, self.level, self.path)


@dataclass(frozen=True)
class UnnamedRelativeModule:
    """One or more leading dots without a path, as in ``from .. import x``."""

    level: int

    def is_future(self) -> bool:
        return False

    def sort_key(self):
        # More dots sort first.
        return (1, -self.level, ())


RelativeModule = Union[NamedRelativeModule, UnnamedRelativeModule]


@functools.total_ordering
class _Ordered:
    """Mixin ordering imports by the ``sort_key`` each subclass defines."""

    def __lt__(self, other: "_Ordered") -> bool:
        if not isinstance(other, _Ordered):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(eq=True)
class AbsoluteImport(_Ordered):
    modules: SortedSet[Module]
    comment: Optional[Token] = None

    def sort_key(self):
        return (1, tuple(m.sort_key() for m in self.modules))


@dataclass(eq=True)
class RelativeImport(_Ordered):
    origin: RelativeModule
    identifiers: SortedSet[Token] = field(default_factory=SortedSet)
    comment: Optional[Token] = None

    def sort_key(self):
        if self.origin.is_future():
            return (0, self.origin.sort_key())
        return (2, self.origin.sort_key())


@dataclass(eq=True)
class WildcardImport(_Ordered):
    origin: RelativeModule
    comment: Optional[Token] = None

    def sort_key(self):
        return (3, self.origin.sort_key())


Import = Union[AbsoluteImport, RelativeImport, WildcardImport]
