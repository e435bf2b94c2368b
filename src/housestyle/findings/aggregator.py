"""Merge per-rule match lists into one ordered, located list of findings."""

from __future__ import annotations

from bisect import bisect_right
from typing import Any, List, Sequence, Tuple

from housestyle.engine.case import mirror_case
from housestyle.engine.models import Match
from housestyle.findings.models import Finding
from housestyle.rules.models import Rule


class LineIndex:
    """Maps character offsets in a text to 1-based (line, column) pairs."""

    def __init__(self, text: str) -> None:
        self._starts = [0]
        pos = text.find("\n")
        while pos != -1:
            self._starts.append(pos + 1)
            pos = text.find("\n", pos + 1)

    def locate(self, offset: int) -> Tuple[int, int]:
        line = bisect_right(self._starts, offset)
        return line, offset - self._starts[line - 1] + 1


def collect_findings(
    text: str, per_rule: Sequence[Tuple[Rule, List[Match[Any]]]]
) -> List[Finding]:
    """Build findings from ``(rule, matches)`` pairs.

    Ordered by offset; at the same offset, the earlier pair in *per_rule*
    comes first. Suggestions from case-adjusting rules are re-cased to
    mirror the matched text.
    """
    ordered: List[Tuple[int, int, Rule, Match[Any]]] = []
    for rank, (rule, matches) in enumerate(per_rule):
        for m in matches:
            ordered.append((m.offset, rank, rule, m))
    ordered.sort(key=lambda item: (item[0], item[1]))

    index = LineIndex(text)
    findings: List[Finding] = []
    for counter, (offset, _rank, rule, m) in enumerate(ordered, 1):
        line_no, column = index.locate(offset)
        suggestion = m.replace
        if suggestion is not None and rule.adjust_case:
            suggestion = mirror_case(m.match, suggestion)
        findings.append(
            Finding(
                id=f"FINDING-{counter:03d}",
                rule_id=str(m.tag),
                rule_name=rule.name,
                offset=offset,
                byte_offset=m.byte_offset,
                line_no=line_no,
                column=column,
                matched_value=m.match,
                suggestion=suggestion,
                prelog=m.prelog,
                postlog=m.postlog,
                report=rule.report,
                tentative=rule.tentative,
            )
        )
    return findings
