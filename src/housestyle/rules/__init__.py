"""Rules — models, registry, built-in house-style rules."""

from housestyle.rules.models import Rule
from housestyle.rules.registry import RuleLoadError, RuleRegistry, build_registry

__all__ = ["Rule", "RuleLoadError", "RuleRegistry", "build_registry"]
