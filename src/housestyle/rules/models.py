"""Rule data model — one pattern engine plus editorial metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple

from housestyle.engine.matcher import PatternEngine
from housestyle.engine.models import Match

# Fields compiled into the engine; fixed once the rule is built
_ENGINE_FIELDS = frozenset({"pattern", "match_case", "replace"})

_RULE_ID = object()


@dataclass
class Rule:
    """A single house-style rule.

    The engine is compiled in ``__post_init__``, so constructing a rule with a
    malformed pattern raises ``PatternCompileError``. ``pattern``,
    ``match_case`` and ``replace`` are read-only afterwards; use
    ``dataclasses.replace`` to derive a rule with a different pattern.
    ``adjust_case``, ``tentative`` and ``report`` are policy metadata: the
    rule carries them, callers decide what to do with them.
    """

    id: str
    pattern: str
    match_case: bool = True
    replace: str = ""
    name: str = ""
    report: str = ""
    adjust_case: bool = False  # re-case suggestions to mirror the matched text
    tentative: bool = False  # matches are suggestions, not automatic edits
    enabled: bool = True

    _engine: PatternEngine = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.id
        self._engine = PatternEngine(self.pattern, self.match_case, self.replace)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _ENGINE_FIELDS and "_engine" in self.__dict__:
            raise AttributeError(f"Rule.{name} is read-only once the rule is built")
        super().__setattr__(name, value)

    @property
    def engine(self) -> PatternEngine:
        return self._engine

    @property
    def is_disabled_pattern(self) -> bool:
        """True if the pattern text itself switches the rule off (empty or ``.*``)."""
        return self._engine.disabled

    @property
    def is_report_only(self) -> bool:
        return self._engine.template.is_empty

    def match_all(
        self, buffer: str, tag: Any = _RULE_ID, context: int = 0
    ) -> List[Match[Any]]:
        """Match over *buffer*.

        The tag defaults to the rule id; any explicit value, ``None``
        included, is passed through unchanged.
        """
        return self._engine.match_all(buffer, self.id if tag is _RULE_ID else tag, context)

    def replace_all(self, buffer: str) -> Tuple[str, int]:
        return self._engine.replace_all(buffer)
