"""Tests for rule models, registry, and built-in rules."""

import dataclasses
from pathlib import Path

import pytest
import yaml

from housestyle.config.schema import HouseStyleConfig, RulesConfig
from housestyle.engine.matcher import PatternCompileError
from housestyle.rules.builtin import ALL_BUILTIN_RULES
from housestyle.rules.models import Rule
from housestyle.rules.registry import RuleLoadError, RuleRegistry, build_registry


class TestRuleModel:
    def test_defaults(self):
        rule = Rule(id="R1", pattern="three", match_case=False, replace="four")
        assert rule.name == "R1"
        assert rule.adjust_case is False
        assert rule.tentative is False
        assert rule.report == ""

    def test_metadata_get_set(self):
        rule = Rule(id="R1", pattern="three")
        rule.adjust_case = True
        rule.tentative = True
        rule.report = "Prefer four."
        assert rule.adjust_case and rule.tentative
        assert rule.report == "Prefer four."

    def test_bad_pattern_fails_construction(self):
        with pytest.raises(PatternCompileError):
            Rule(id="BAD", pattern="(oops")

    def test_disabled_by_pattern(self):
        rule = Rule(id="OFF", pattern=".*", replace="x")
        assert rule.is_disabled_pattern is True
        assert rule.replace_all("text") == ("text", 0)
        assert rule.match_all("text") == []

    def test_match_all_tags_with_rule_id(self):
        rule = Rule(id="THREE", pattern="three", match_case=False, replace="four")
        matches = rule.match_all("Three and three")
        assert [m.tag for m in matches] == ["THREE", "THREE"]
        assert [m.replace for m in matches] == ["four", "four"]

    def test_match_all_explicit_tag(self):
        rule = Rule(id="THREE", pattern="three")
        assert rule.match_all("three", tag=7)[0].tag == 7

    def test_rule_does_not_recase(self):
        rule = Rule(id="T", pattern="three", match_case=False, replace="four", adjust_case=True)
        assert rule.replace_all("THREE") == ("four", 1)

    def test_report_only(self):
        assert Rule(id="R", pattern="x").is_report_only
        assert not Rule(id="R", pattern="x", replace="y").is_report_only

    def test_engine_fields_read_only(self):
        rule = Rule(id="R", pattern="three")
        for name, value in (("pattern", "four"), ("match_case", False), ("replace", "four")):
            with pytest.raises(AttributeError):
                setattr(rule, name, value)
        assert rule.replace_all("three") == ("", 1)
        assert rule.is_report_only

    def test_derive_with_dataclasses_replace(self):
        rule = Rule(id="R", pattern="three")
        derived = dataclasses.replace(rule, replace="four")
        assert not derived.is_report_only
        assert derived.replace_all("we three meet") == ("we four meet", 1)

    def test_explicit_none_tag_passed_through(self):
        rule = Rule(id="THREE", pattern="three")
        assert rule.match_all("three", tag=None)[0].tag is None
        assert rule.match_all("three")[0].tag == "THREE"


class TestRuleRegistry:
    def test_register_and_query(self):
        reg = RuleRegistry()
        rule = Rule(id="R1", pattern="a")
        reg.register(rule)
        assert reg.get("R1") is rule
        assert len(reg.all_rules) == 1

    def test_registration_order_kept(self):
        reg = RuleRegistry()
        reg.register_many([Rule(id="B", pattern="b"), Rule(id="A", pattern="a")])
        assert [r.id for r in reg.all_rules] == ["B", "A"]

    def test_enable_disable(self):
        reg = RuleRegistry()
        reg.register_many([Rule(id="R1", pattern="a"), Rule(id="R2", pattern="b")])

        cfg = HouseStyleConfig()
        cfg.rules = RulesConfig(enable=[], disable=["R2"])
        reg.apply_config(cfg)

        assert [r.id for r in reg.enabled_rules()] == ["R1"]

    def test_enable_list_restricts(self):
        reg = RuleRegistry()
        reg.register_many([Rule(id="R1", pattern="a"), Rule(id="R2", pattern="b")])

        cfg = HouseStyleConfig()
        cfg.rules = RulesConfig(enable=["R2"], disable=[])
        reg.apply_config(cfg)

        assert [r.id for r in reg.enabled_rules()] == ["R2"]

    def test_load_custom_yaml_rules(self, tmp_path, custom_rules_yaml):
        rules_dir = tmp_path / ".housestyle-rules"
        rules_dir.mkdir()
        (rules_dir / "custom.yaml").write_text(custom_rules_yaml, encoding="utf-8")

        reg = RuleRegistry()
        assert reg.load_custom_rules(rules_dir) == 2
        email = reg.get("EMAIL_AT")
        assert email is not None
        assert email.tentative is True
        assert email.replace_all("bob@example") == ("example at bob", 1)
        three = reg.get("THREE_FOUR")
        assert three is not None
        assert three.report == "Count to four."
        assert three.match_case is False

    def test_single_mapping_file(self, tmp_path):
        (tmp_path / "one.yml").write_text(yaml.dump({"id": "ONE", "pattern": "x"}))
        reg = RuleRegistry()
        assert reg.load_custom_rules(tmp_path) == 1

    def test_bad_pattern_rejected_not_fatal(self, tmp_path):
        (tmp_path / "rules.yaml").write_text(yaml.dump([
            {"id": "GOOD", "pattern": "ok"},
            {"id": "BAD", "pattern": "(broken"},
        ]))
        reg = RuleRegistry()
        assert reg.load_custom_rules(tmp_path) == 1
        assert reg.get("BAD") is None
        assert [rule_id for rule_id, _ in reg.rejected] == ["BAD"]

    def test_entry_without_pattern_raises(self, tmp_path):
        (tmp_path / "rules.yaml").write_text(yaml.dump([{"id": "NOPAT"}]))
        with pytest.raises(RuleLoadError):
            RuleRegistry().load_custom_rules(tmp_path)

    def test_invalid_yaml_raises(self, tmp_path):
        (tmp_path / "rules.yaml").write_text("- id: [unterminated\n")
        with pytest.raises(RuleLoadError):
            RuleRegistry().load_custom_rules(tmp_path)

    def test_missing_directory(self, tmp_path):
        assert RuleRegistry().load_custom_rules(tmp_path / "nope") == 0


class TestBuildRegistry:
    def test_builtins_loaded(self, tmp_path):
        reg = build_registry(HouseStyleConfig(), tmp_path)
        assert len(reg) == len(ALL_BUILTIN_RULES)

    def test_builtins_can_be_skipped(self, tmp_path):
        cfg = HouseStyleConfig()
        cfg.rules.builtin = False
        assert len(build_registry(cfg, tmp_path)) == 0

    def test_disable_does_not_leak_into_builtins(self, tmp_path):
        cfg = HouseStyleConfig()
        cfg.rules.disable = ["DOUBLE_SPACE"]
        reg = build_registry(cfg, tmp_path)
        assert reg.get("DOUBLE_SPACE").enabled is False
        assert all(r.enabled for r in ALL_BUILTIN_RULES)

    def test_custom_directory(self, tmp_path, custom_rules_yaml):
        rules_dir = tmp_path / ".housestyle-rules"
        rules_dir.mkdir()
        (rules_dir / "custom.yaml").write_text(custom_rules_yaml, encoding="utf-8")
        reg = build_registry(HouseStyleConfig(), tmp_path)
        assert reg.get("THREE_FOUR") is not None


class TestBuiltinRules:
    """Verify each built-in rule compiles and has valid metadata."""

    @pytest.mark.parametrize("rule", ALL_BUILTIN_RULES, ids=lambda r: r.id)
    def test_rule_has_required_fields(self, rule):
        assert rule.id
        assert rule.name
        assert rule.report
        assert not rule.is_disabled_pattern

    def test_double_space(self):
        from housestyle.rules.builtin.typography import DOUBLE_SPACE
        assert DOUBLE_SPACE.replace_all("a  b   c") == ("a b c", 2)
        assert DOUBLE_SPACE.replace_all("  indented") == ("  indented", 0)

    def test_space_before_punctuation(self):
        from housestyle.rules.builtin.typography import SPACE_BEFORE_PUNCTUATION
        assert SPACE_BEFORE_PUNCTUATION.replace_all("ready ? yes , no") == ("ready? yes, no", 2)

    def test_ellipsis(self):
        from housestyle.rules.builtin.typography import ELLIPSIS
        assert ELLIPSIS.replace_all("wait... ....") == ("wait… ....", 1)

    def test_repeated_word(self):
        from housestyle.rules.builtin.usage import REPEATED_WORD
        assert REPEATED_WORD.replace_all("the the end") == ("the end", 1)
        assert REPEATED_WORD.replace_all("the theme") == ("the theme", 0)

    def test_utilize(self):
        from housestyle.rules.builtin.usage import UTILIZE
        matches = UTILIZE.match_all("utilized, utilising")
        assert [m.replace for m in matches] == ["used", "using"]
