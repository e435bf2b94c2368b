"""Check and fix pipelines over a rule registry.

``check`` never changes the text: it gathers every enabled rule's matches
(tagged with the rule id) and merges them into one list for review.
``fix`` rewrites the text rule by rule, each rule seeing the output of the
previous one.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Tuple

from housestyle.config.schema import HouseStyleConfig
from housestyle.engine.case import mirror_case
from housestyle.engine.models import Match
from housestyle.findings.aggregator import collect_findings
from housestyle.findings.models import CheckResult, FixResult
from housestyle.rules.models import Rule
from housestyle.rules.registry import RuleRegistry

logger = logging.getLogger(__name__)


def check(
    text: str,
    registry: RuleRegistry,
    config: HouseStyleConfig,
    *,
    source: str = "<text>",
) -> CheckResult:
    """Run every enabled rule over *text*. Returns a CheckResult."""
    start = time.perf_counter()
    window = config.check.context_window

    per_rule: List[Tuple[Rule, List[Match[Any]]]] = []
    for rule in registry.enabled_rules():
        if rule.tentative and not config.check.include_tentative:
            continue
        per_rule.append((rule, rule.match_all(text, tag=rule.id, context=window)))

    findings = collect_findings(text, per_rule)
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("%s: %d finding(s) from %d rule(s)", source, len(findings), len(per_rule))

    return CheckResult(
        source=source,
        findings=findings,
        rules_run=len(per_rule),
        fail_on_findings=config.check.fail_on_findings,
        check_duration_ms=round(elapsed, 2),
    )


def apply_rule(rule: Rule, text: str) -> Tuple[str, int]:
    """Apply one rule's replacement to *text*, honouring ``adjust_case``."""
    if not rule.adjust_case:
        return rule.replace_all(text)

    matches = rule.match_all(text)
    if not matches:
        return text, 0
    parts: List[str] = []
    last = 0
    for m in matches:
        parts.append(text[last:m.offset])
        parts.append(mirror_case(m.match, m.replace or ""))
        last = m.end
    parts.append(text[last:])
    return "".join(parts), len(matches)


def fix(
    text: str,
    registry: RuleRegistry,
    *,
    include_tentative: bool = False,
) -> FixResult:
    """Apply enabled rules in registry order.

    Report-only rules (no replacement template) are skipped, as are
    tentative rules unless *include_tentative* is set.
    """
    applied: Dict[str, int] = {}
    for rule in registry.enabled_rules():
        if rule.is_report_only:
            continue
        if rule.tentative and not include_tentative:
            continue
        text, count = apply_rule(rule, text)
        if count:
            applied[rule.id] = count
            logger.debug("Rule %s: %d replacement(s)", rule.id, count)
    return FixResult(text=text, applied=applied)
