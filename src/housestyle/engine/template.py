"""Replacement template parsing and per-match interpolation.

Template syntax:
  - ``\\N`` (one or more ASCII digits) is replaced by capture group N
    (group 0 is the whole match). A group that did not participate, or
    that does not exist, expands to the empty string.
  - ``\\t`` and ``\\n`` become a tab and a newline.
  - ``\\`` followed by any other character is kept as-is (both characters).
  - A trailing lone ``\\`` is kept as-is.

Every backslash consumes exactly one following character, so ``\\\\1`` is
the literal text ``\\\\1`` and not a group reference.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Tuple, Union

_DIGITS = frozenset("0123456789")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n"}


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class GroupRef:
    index: int


Token = Union[Literal, GroupRef]


def parse_template(source: str) -> Tuple[Token, ...]:
    """Parse *source* into a token tuple in one left-to-right pass.

    Adjacent literal text (including ``\\t``/``\\n`` escapes) is folded into
    a single ``Literal`` token.
    """
    tokens: List[Token] = []
    buf: List[str] = []
    i = 0
    n = len(source)

    def flush() -> None:
        if buf:
            tokens.append(Literal("".join(buf)))
            buf.clear()

    while i < n:
        ch = source[i]
        if ch != "\\":
            buf.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            buf.append(ch)
            break

        nxt = source[i + 1]
        if nxt in _DIGITS:
            j = i + 1
            while j < n and source[j] in _DIGITS:
                j += 1
            flush()
            tokens.append(GroupRef(int(source[i + 1:j])))
            i = j
        elif nxt in _SIMPLE_ESCAPES:
            buf.append(_SIMPLE_ESCAPES[nxt])
            i += 2
        else:
            buf.append(ch)
            buf.append(nxt)
            i += 2

    flush()
    return tuple(tokens)


class ReplacementTemplate:
    """A parsed replacement template, reusable across any number of matches."""

    def __init__(self, source: str = "") -> None:
        self.source = source
        self.tokens = parse_template(source)

    def __repr__(self) -> str:
        return f"ReplacementTemplate({self.source!r})"

    @property
    def is_empty(self) -> bool:
        return not self.source

    @property
    def is_literal(self) -> bool:
        """True if expansion never depends on the match."""
        return all(isinstance(t, Literal) for t in self.tokens)

    def expand(self, m: re.Match[str], capture: Callable[[re.Match[str], int], str]) -> str:
        """Expand the template against one match.

        *capture* resolves a group number to text; it must return ``""``
        rather than raise for unknown groups.
        """
        parts: List[str] = []
        for token in self.tokens:
            if isinstance(token, Literal):
                parts.append(token.text)
            else:
                parts.append(capture(m, token.index))
        return "".join(parts)
