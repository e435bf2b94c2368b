"""Rule registry — loads built-in and custom rules, applies config filters."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from housestyle.config.schema import HouseStyleConfig
from housestyle.engine.matcher import PatternCompileError
from housestyle.rules.models import Rule

logger = logging.getLogger(__name__)


class RuleLoadError(Exception):
    """Raised when a rule file is unreadable or structurally invalid."""


class RuleRegistry:
    """Ordered store for house-style rules.

    Registration order is significant: it is the order rules are applied by
    ``fix`` and the tie-break order for findings at the same offset.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}
        self.rejected: List[Tuple[str, str]] = []  # (rule id, reason)

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        self._rules[rule.id] = rule

    def register_many(self, rules: list[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(rule_id)

    def enabled_rules(self) -> List[Rule]:
        return [r for r in self._rules.values() if r.enabled]

    def __len__(self) -> int:
        return len(self._rules)

    # ---- config filtering ----

    def apply_config(self, config: HouseStyleConfig) -> None:
        """Enable / disable rules based on config.rules."""
        enable_list = config.rules.enable
        disable_list = config.rules.disable

        for rule in self._rules.values():
            # If an explicit enable-list exists, only those are enabled
            if enable_list:
                rule.enabled = rule.id in enable_list
            # Disable list always takes precedence
            if rule.id in disable_list:
                rule.enabled = False

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise RuleLoadError(f"Failed to read {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for index, entry in enumerate(data):
            rule = self._rule_from_entry(entry, path, index)
            if rule is None:
                continue
            self.register(rule)
            count += 1
        logger.debug("Loaded %d rule(s) from %s", count, path)
        return count

    def _rule_from_entry(self, entry: Any, path: Path, index: int) -> Optional[Rule]:
        if not isinstance(entry, dict) or "id" not in entry or "pattern" not in entry:
            raise RuleLoadError(f"{path}: entry {index} needs at least 'id' and 'pattern'")
        rule_id = str(entry["id"])
        try:
            return Rule(
                id=rule_id,
                pattern=str(entry["pattern"]),
                match_case=bool(entry.get("match_case", True)),
                replace=str(entry.get("replace", "")),
                name=str(entry.get("name", "")),
                report=str(entry.get("report", "")),
                adjust_case=bool(entry.get("adjust_case", False)),
                tentative=bool(entry.get("tentative", False)),
            )
        except PatternCompileError as exc:
            logger.warning("Rejected rule %s from %s: %s", rule_id, path, exc)
            self.rejected.append((rule_id, str(exc)))
            return None


def build_registry(config: HouseStyleConfig, root: Path) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    from housestyle.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    if config.rules.builtin:
        # Fresh copies so enable/disable never leaks into the module-level rules
        registry.register_many([dataclasses.replace(r) for r in ALL_BUILTIN_RULES])

    custom_dir = Path(config.rules.directory)
    if not custom_dir.is_absolute():
        custom_dir = root / custom_dir
    registry.load_custom_rules(custom_dir)

    registry.apply_config(config)
    logger.debug(
        "Registry built: %d rule(s), %d enabled", len(registry), len(registry.enabled_rules())
    )
    return registry
