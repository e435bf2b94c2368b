"""housestyle CLI — Typer application with check, fix, replace, rules, and init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from housestyle import __version__

app = typer.Typer(
    name="housestyle",
    help="Check and fix text against house-style rules.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_source(path: str) -> str:
    """Read a text file (``-`` for stdin), exit 2 on failure."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {path}: {exc}")
        raise typer.Exit(code=2) from exc


def _load(config: Optional[str]):
    """Load config and rule registry from the working directory, exit 2 on failure."""
    from housestyle.config.loader import ConfigError, load_config
    from housestyle.rules.registry import RuleLoadError, build_registry

    root = Path.cwd()
    try:
        cfg = load_config(root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    try:
        registry = build_registry(cfg, root)
    except RuleLoadError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    for rule_id, reason in registry.rejected:
        console.print(f"[yellow]⚠[/yellow]  Rule {rule_id} rejected: {reason}")
    return cfg, registry


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    files: List[str] = typer.Argument(..., help="Files to check ('-' for stdin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .housestyle.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    context: Optional[int] = typer.Option(None, "--context", help="Context characters either side of a match"),
    no_tentative: bool = typer.Option(False, "--no-tentative", help="Skip tentative (advisory) rules"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Report house-style issues without changing the files."""
    from housestyle.checker.engine import check as run_check
    from housestyle.config.schema import OUTPUT_FORMATS
    from housestyle.output import json_report, terminal

    _configure_logging(debug)
    cfg, registry = _load(config)

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if context is not None:
        cfg.check.context_window = max(0, context)
    if no_tentative:
        cfg.check.include_tentative = False

    if verbose or debug:
        console.print(f"[dim]Rules enabled: {len(registry.enabled_rules())}[/dim]")

    results = [
        run_check(_read_source(path), registry, cfg, source=path)
        for path in files
    ]

    report = json_report.render(results[0]) if len(results) == 1 else json_report.render_many(results)

    if cfg.output.format == "terminal":
        for result in results:
            terminal.render(result, show_summary=cfg.output.show_summary, console=console)
    else:
        typer.echo(report)

    if output:
        Path(output).write_text(report, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    if any(r.blocked for r in results):
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── fix ───────────────────────────────────────────────────────────────────────


@app.command()
def fix(
    file: str = typer.Argument(..., help="File to fix ('-' for stdin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .housestyle.toml"),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite the file in place"),
    tentative: bool = typer.Option(False, "--tentative", help="Also apply tentative rules"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Apply rule replacements; prints the result unless --write is given."""
    from housestyle.checker.engine import fix as run_fix

    _configure_logging(debug)
    _cfg, registry = _load(config)

    result = run_fix(_read_source(file), registry, include_tentative=tentative)

    if write and file != "-":
        Path(file).write_text(result.text, encoding="utf-8")
    else:
        typer.echo(result.text, nl=False)

    for rule_id, count in result.applied.items():
        console.print(f"[dim]{rule_id}:[/dim] {count}")
    console.print(f"[green]✓[/green] {result.total_replacements} replacement(s)")


# ── replace ───────────────────────────────────────────────────────────────────


@app.command()
def replace(
    pattern: str = typer.Argument(..., help="Pattern to find"),
    template: str = typer.Argument(..., help=r"Replacement (\1 inserts group 1, \t tab, \n newline)"),
    file: str = typer.Argument(..., help="File to edit ('-' for stdin)"),
    match_case: bool = typer.Option(False, "--match-case", "-m", help="Case-sensitive matching"),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite the file in place"),
) -> None:
    """Find and replace a single pattern."""
    from housestyle.engine.matcher import PatternCompileError, replace_text

    text = _read_source(file)
    try:
        new_text, count = replace_text(text, pattern, template, match_case)
    except PatternCompileError as exc:
        console.print(f"[bold red]Pattern error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if write and file != "-":
        if count:
            Path(file).write_text(new_text, encoding="utf-8")
    else:
        typer.echo(new_text, nl=False)
    console.print(f"[green]✓[/green] {count} replacement(s)")


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command()
def rules(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .housestyle.toml"),
) -> None:
    """List the configured rules."""
    from rich.table import Table

    _cfg, registry = _load(config)

    table = Table(title="House-style rules", border_style="dim", title_style="bold")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Pattern")
    table.add_column("Replace", style="green")
    table.add_column("Flags")
    table.add_column("Enabled", justify="center")
    for rule in registry.all_rules:
        flags = [
            name
            for name, on in (
                ("match-case", rule.match_case),
                ("adjust-case", rule.adjust_case),
                ("tentative", rule.tentative),
                ("off-by-pattern", rule.is_disabled_pattern),
            )
            if on
        ]
        table.add_row(
            rule.id,
            rule.pattern,
            rule.replace or "-",
            ", ".join(flags) or "-",
            "✓" if rule.enabled else "✗",
        )
    console.print(table)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .housestyle.toml in the working directory."""
    from housestyle.config.defaults import DEFAULT_TOML
    from housestyle.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"housestyle {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """housestyle — check and fix text against house-style rules."""
