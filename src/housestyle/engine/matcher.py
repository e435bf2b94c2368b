"""Pattern engine — global match and global replace over a text buffer.

An engine is built once from a pattern, a case flag and an optional
replacement template. A pattern that is empty or exactly ``.*`` leaves the
engine disabled: nothing is compiled and every operation is a no-op. This
lets a rule stay in a rule set while being switched off by its pattern text.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterator, List, Optional, Tuple, TypeVar

from housestyle.engine.context import ContextProvider, get_context
from housestyle.engine.models import Match
from housestyle.engine.template import ReplacementTemplate

logger = logging.getLogger(__name__)

T = TypeVar("T")

DISABLED_PATTERNS = frozenset({"", ".*"})


class EngineState(str, Enum):
    ACTIVE = "active"
    DISABLED = "disabled"


class PatternCompileError(ValueError):
    """Raised when a pattern cannot be compiled."""

    def __init__(self, pattern: str, message: str, position: Optional[int] = None) -> None:
        self.pattern = pattern
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid pattern {pattern!r}{where}: {message}")


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def capture(m: re.Match[str], index: int) -> str:
    """Return capture group *index* of *m*, or ``""`` if it has no text.

    Out-of-range and non-participating groups both yield ``""``.
    """
    if index < 0 or index > m.re.groups:
        return ""
    return m.group(index) or ""


class PatternEngine:
    """Compiled pattern plus replacement template."""

    def __init__(
        self,
        pattern: str,
        match_case: bool,
        replace: str = "",
        *,
        context_provider: ContextProvider = get_context,
    ) -> None:
        self.pattern = pattern
        self.match_case = match_case
        self.template = ReplacementTemplate(replace)
        self._context_provider = context_provider
        self._compiled: Optional[re.Pattern[str]] = None

        if pattern in DISABLED_PATTERNS:
            self.state = EngineState.DISABLED
            logger.debug("Pattern %r disables engine", pattern)
            return

        flags = 0 if match_case else re.IGNORECASE
        try:
            self._compiled = re.compile(pattern, flags)
        except re.error as exc:
            raise PatternCompileError(pattern, exc.msg, exc.pos) from exc
        self.state = EngineState.ACTIVE

    def __repr__(self) -> str:
        return (
            f"PatternEngine({self.pattern!r}, match_case={self.match_case}, "
            f"replace={self.template.source!r}, state={self.state.value})"
        )

    @property
    def disabled(self) -> bool:
        return self.state is EngineState.DISABLED

    @property
    def replace(self) -> str:
        return self.template.source

    # ---- scanning ----

    def iter_matches(self, buffer: str) -> Iterator[re.Match[str]]:
        """Yield successive non-overlapping matches in a single scan.

        Each yielded match object carries its own captures. After an empty
        match the scan moves on by one character so it always terminates.
        """
        if self._compiled is None:
            return
        search = self._compiled.search
        pos = 0
        size = len(buffer)
        while pos <= size:
            m = search(buffer, pos)
            if m is None:
                return
            yield m
            start, end = m.span()
            pos = end if end > start else end + 1

    def interpolate(self, m: re.Match[str]) -> str:
        """Expand the replacement template against *m*."""
        return self.template.expand(m, capture)

    def match_all(
        self,
        buffer: str,
        tag: Optional[T] = None,
        context: int = 0,
    ) -> List[Match[T]]:
        """Return every match in *buffer* as a ``Match`` record.

        With ``context > 0`` each record carries the surrounding text; with a
        non-empty template each record carries its interpolated replacement.
        """
        if self.disabled:
            return []

        results: List[Match[T]] = []
        with_replace = not self.template.is_empty
        # byte_pos is the UTF-8 offset of char_pos
        char_pos = byte_pos = 0
        for m in self.iter_matches(buffer):
            start, end = m.span()
            byte_pos += _utf8_len(buffer[char_pos:start])
            char_pos = start
            prelog = postlog = ""
            if context > 0:
                prelog, postlog = self._context_provider(start, end - start, buffer, context)
            results.append(
                Match(
                    offset=start,
                    match=m.group(0),
                    replace=self.interpolate(m) if with_replace else None,
                    prelog=prelog,
                    postlog=postlog,
                    tag=tag,
                    byte_offset=byte_pos,
                )
            )

        logger.debug("Pattern %r: %d match(es)", self.pattern, len(results))
        return results

    def replace_all(self, buffer: str) -> Tuple[str, int]:
        """Replace every match; return ``(new_buffer, match_count)``."""
        if self.disabled:
            return buffer, 0

        parts: List[str] = []
        count = 0
        last = 0
        for m in self.iter_matches(buffer):
            count += 1
            start, end = m.span()
            parts.append(buffer[last:start])
            parts.append(self.interpolate(m))
            last = end
        if count == 0:
            return buffer, 0
        parts.append(buffer[last:])
        return "".join(parts), count


def replace_text(buffer: str, find: str, replace: str, match_case: bool) -> Tuple[str, int]:
    """One-shot find/replace of *find* in *buffer*; returns ``(text, count)``.

    Example::

        replace_text("when shall we three meet again", "THREE", "four", False)
        # -> ("when shall we four meet again", 1)
    """
    return PatternEngine(find, match_case, replace).replace_all(buffer)
