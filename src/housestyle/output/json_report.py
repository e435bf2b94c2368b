"""JSON reporter for editors and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from housestyle.findings.models import CheckResult


def to_dict(result: CheckResult) -> Dict[str, Any]:
    """Convert CheckResult to a JSON-serialisable dict."""
    findings_list: List[Dict[str, Any]] = []
    for f in result.findings:
        findings_list.append({
            "id": f.id,
            "rule": f.rule_id,
            "rule_name": f.rule_name,
            "offset": f.offset,
            "byte_offset": f.byte_offset,
            "line": f.line_no,
            "column": f.column,
            "match": f.matched_value,
            "tentative": f.tentative,
            **({"suggestion": f.suggestion} if f.suggestion is not None else {}),
            **({"report": f.report} if f.report else {}),
            **({"context": {"before": f.prelog, "after": f.postlog}}
               if f.prelog or f.postlog else {}),
        })

    return {
        "version": "1.0",
        "source": result.source,
        "rules_run": result.rules_run,
        "total_findings": result.total_findings,
        "tentative_findings": len(result.tentative_findings),
        "blocked": result.blocked,
        "findings": findings_list,
        "check_duration_ms": result.check_duration_ms,
    }


def render(result: CheckResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2, ensure_ascii=False)


def render_many(results: Sequence[CheckResult]) -> str:
    """Return one JSON document for several checked sources."""
    return json.dumps(
        {
            "version": "1.0",
            "blocked": any(r.blocked for r in results),
            "results": [to_dict(r) for r in results],
        },
        indent=2,
        ensure_ascii=False,
    )
