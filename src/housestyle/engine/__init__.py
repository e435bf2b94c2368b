"""Pattern engine — matcher/replacer, templates, context, case mirroring."""

from housestyle.engine.case import mirror_case
from housestyle.engine.context import ContextProvider, get_context
from housestyle.engine.matcher import (
    EngineState,
    PatternCompileError,
    PatternEngine,
    capture,
    replace_text,
)
from housestyle.engine.models import Match
from housestyle.engine.template import GroupRef, Literal, ReplacementTemplate, parse_template

__all__ = [
    "ContextProvider",
    "EngineState",
    "GroupRef",
    "Literal",
    "Match",
    "PatternCompileError",
    "PatternEngine",
    "ReplacementTemplate",
    "capture",
    "get_context",
    "mirror_case",
    "parse_template",
    "replace_text",
]
