"""Context extraction — the text shown either side of a match."""

from __future__ import annotations

import re
from typing import Protocol, Tuple

_WHITESPACE_RE = re.compile(r"\s+")


class ContextProvider(Protocol):
    """Callable returning ``(prelog, postlog)`` for a match.

    Implementations must not mutate *buffer* and must clamp their windows
    to the buffer bounds.
    """

    def __call__(
        self, start: int, length: int, buffer: str, window: int
    ) -> Tuple[str, str]: ...


def _flatten(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text)


def get_context(start: int, length: int, buffer: str, window: int) -> Tuple[str, str]:
    """Return up to *window* characters before and after a match.

    Whitespace runs (including line breaks) are collapsed to a single space
    so the snippet fits on one display line.
    """
    if window <= 0:
        return "", ""
    size = len(buffer)
    start = min(max(start, 0), size)
    end = min(start + max(length, 0), size)
    prelog = buffer[max(0, start - window):start]
    postlog = buffer[end:min(size, end + window)]
    return _flatten(prelog), _flatten(postlog)
