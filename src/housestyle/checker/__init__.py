"""Checker — run a rule set over a text, report or fix."""

from housestyle.checker.engine import apply_rule, check, fix

__all__ = ["apply_rule", "check", "fix"]
