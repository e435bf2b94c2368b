"""Built-in rules — aggregate all categories."""

from housestyle.rules.builtin.typography import ALL_TYPOGRAPHY_RULES
from housestyle.rules.builtin.usage import ALL_USAGE_RULES
from housestyle.rules.models import Rule

ALL_BUILTIN_RULES: list[Rule] = [
    *ALL_TYPOGRAPHY_RULES,
    *ALL_USAGE_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
