"""Rich terminal reporter — findings table with highlighted context."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from housestyle.findings.models import CheckResult, Finding


def _snippet(finding: Finding) -> Text:
    text = Text(finding.prelog, style="dim")
    text.append(finding.matched_value or "∅", style="bold red")
    text.append(finding.postlog, style="dim")
    return text


def _suggestion(finding: Finding) -> Text:
    if finding.suggestion is None:
        return Text("-", style="dim")
    return Text(finding.suggestion or "∅", style="green")


def render(
    result: CheckResult,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print check results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not result.findings:
        console.print()
        console.print(f"[bold green]✅ {result.source}: no house-style issues.[/bold green]")
        if show_summary:
            _print_summary(console, result)
        return

    console.print()
    table = Table(
        title=f"House Style — {result.source}",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Line:Col", justify="right", style="green")
    table.add_column("Rule", style="cyan", min_width=16)
    table.add_column("Context", min_width=20)
    table.add_column("Suggestion")
    table.add_column("Report", style="dim")

    for finding in result.findings:
        rule = Text(finding.rule_name)
        if finding.tentative:
            rule.append(" (tentative)", style="yellow")
        table.add_row(
            f"{finding.line_no}:{finding.column}",
            rule,
            _snippet(finding),
            _suggestion(finding),
            finding.report,
        )

    console.print(table)

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: CheckResult) -> None:
    console.print()
    console.print(f"[dim]Rules run:[/dim]   {result.rules_run}")
    console.print(f"[dim]Findings:[/dim]    {result.total_findings}")
    console.print(f"[dim]Tentative:[/dim]   {len(result.tentative_findings)}")
    console.print(f"[dim]Duration:[/dim]    {result.check_duration_ms:.0f}ms")
