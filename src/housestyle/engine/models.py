"""Match record produced by the pattern engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Match(Generic[T]):
    """A single match over one buffer.

    ``offset`` indexes the ``str`` buffer; ``byte_offset`` is the same
    position in the buffer's UTF-8 encoding, for callers that hold the
    text as bytes.

    ``tag`` is an opaque caller-supplied value identifying which rule (or
    which region of a document) produced the match, so that match lists
    from several rules can be merged and still be traced back.
    """

    offset: int
    match: str
    replace: Optional[str] = None
    prelog: str = ""
    postlog: str = ""
    tag: Optional[T] = None
    byte_offset: int = 0

    @property
    def end(self) -> int:
        return self.offset + len(self.match)

    @property
    def byte_end(self) -> int:
        return self.byte_offset + len(self.match.encode("utf-8", "surrogatepass"))
