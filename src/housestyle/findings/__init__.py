"""Finding models and aggregation."""

from housestyle.findings.aggregator import LineIndex, collect_findings
from housestyle.findings.models import CheckResult, Finding, FixResult

__all__ = ["CheckResult", "Finding", "FixResult", "LineIndex", "collect_findings"]
