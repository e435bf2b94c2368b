"""Finding data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Finding:
    """One rule match, located and ready for display."""

    id: str  # e.g. FINDING-001
    rule_id: str
    rule_name: str
    offset: int
    byte_offset: int
    line_no: int  # 1-based
    column: int  # 1-based
    matched_value: str
    suggestion: Optional[str] = None
    prelog: str = ""
    postlog: str = ""
    report: str = ""
    tentative: bool = False


@dataclass
class CheckResult:
    """Complete result of checking one text."""

    source: str = "<text>"
    findings: List[Finding] = field(default_factory=list)
    rules_run: int = 0
    fail_on_findings: bool = True
    check_duration_ms: float = 0.0

    @property
    def total_findings(self) -> int:
        return len(self.findings)

    @property
    def definite_findings(self) -> List[Finding]:
        return [f for f in self.findings if not f.tentative]

    @property
    def tentative_findings(self) -> List[Finding]:
        return [f for f in self.findings if f.tentative]

    @property
    def blocked(self) -> bool:
        """True if definite findings exist and the config says to fail on them."""
        return self.fail_on_findings and bool(self.definite_findings)


@dataclass
class FixResult:
    """Rewritten text plus the number of substitutions made per rule."""

    text: str
    applied: Dict[str, int] = field(default_factory=dict)

    @property
    def total_replacements(self) -> int:
        return sum(self.applied.values())

    @property
    def changed(self) -> bool:
        return self.total_replacements > 0
