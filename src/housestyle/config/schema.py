"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]
OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class CheckConfig:
    context_window: int = 30  # characters of context either side of a match; 0 = none
    include_tentative: bool = True
    fail_on_findings: bool = True  # exit 1 when definite (non-tentative) findings exist


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class RulesConfig:
    builtin: bool = True
    directory: str = ".housestyle-rules"
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)


@dataclass
class HouseStyleConfig:
    version: str = "1.0"
    check: CheckConfig = field(default_factory=CheckConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
