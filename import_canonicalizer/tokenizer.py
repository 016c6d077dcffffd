"""Byte-level tokenizer for import-canonicalizer.

The scanner walks an immutable byte buffer with a single integer cursor. Each
primitive either matches and advances the cursor or leaves it untouched.
"""

from dataclasses import dataclass
from dataclasses import field
from typing import Callable
from typing import Optional
from typing import TypeVar

T = TypeVar("T")

_IDENTIFIER_BYTES = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)
_WHITESPACE_BYTES = frozenset(b" \n")


@dataclass(frozen=True, order=True)
class Token:
    """A slice of the source buffer.

    Equality, ordering and hashing only look at ``text``; the offset is kept
    for diagnostics.
    """

    text: bytes
    offset: int = field(default=0, compare=False)

    def decode(self) -> str:
        return self.text.decode("utf-8")

    def __repr__(self) -> str:
        return f"Token({self.text!r}@{self.offset})"


class Scanner:
    """Cursor over a byte buffer with backtracking primitives."""

    def __init__(self, src: bytes):
        self.src = src
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.src)

    def backtrack(self, rule: Callable[[], Optional[T]]) -> Optional[T]:
        """Run ``rule`` and restore the cursor if it does not match."""
        start = self.pos
        result = rule()
        if result is None:
            self.pos = start
        return result

    def literal(self, text: bytes) -> bool:
        end = self.pos + len(text)
        if self.src[self.pos:end] != text:
            return False
        self.pos = end
        return True

    def keyword(self, text: bytes) -> bool:
        """Match ``text`` only when no identifier byte follows it."""
        start = self.pos
        if not self.literal(text):
            return False
        if not self.at_end() and self.src[self.pos] in _IDENTIFIER_BYTES:
            self.pos = start
            return False
        return True

    def identifier(self) -> Optional[Token]:
        # Leading digits are accepted.
        end = self.pos
        while end < len(self.src) and self.src[end] in _IDENTIFIER_BYTES:
            end += 1
        if end == self.pos:
            return None
        token = Token(self.src[self.pos:end], self.pos)
        self.pos = end
        return token

    def comment(self) -> Optional[Token]:
        if self.at_end() or self.src[self.pos] != ord("#"):
            return None
        start = self.pos
        end = self.src.find(b"\n", start)
        if end == -1:
            self.pos = len(self.src)
            return Token(self.src[start:], start)
        self.pos = end + 1
        return Token(self.src[start:end], start)

    def whitespace(self) -> None:
        # Only spaces and newlines; tabs end a statement.
        while not self.at_end() and self.src[self.pos] in _WHITESPACE_BYTES:
            self.pos += 1
