"""Tests for Rule, Match and RuleSeverity."""

from __future__ import annotations

import pytest

from s4migrate.rules.domain.enums import PatternKind, RuleSeverity
from s4migrate.rules.domain.models import Rule, module_of
from s4migrate.shared.domain.exceptions import CatalogLoadError


def _rule(**overrides) -> Rule:
    data = {
        "id": "SIMPL-FI-900",
        "category": "Finance - Test",
        "severity": "high",
        "title": "Test rule",
        "description": "Test description",
        "remediation": "Test remediation",
        "pattern": r"\bBSEG\b",
    }
    data.update(overrides)
    return Rule.from_json(data)


class TestRuleSeverity:
    def test_rank_orders_critical_first(self):
        ranks = [s.rank for s in (RuleSeverity.CRITICAL, RuleSeverity.HIGH, RuleSeverity.MEDIUM, RuleSeverity.LOW)]
        assert ranks == sorted(ranks)
        assert RuleSeverity.CRITICAL.rank == 0

    def test_parse_is_case_insensitive(self):
        assert RuleSeverity.parse("Critical") is RuleSeverity.CRITICAL
        assert RuleSeverity.parse(" LOW ") is RuleSeverity.LOW
        assert RuleSeverity.parse(RuleSeverity.HIGH) is RuleSeverity.HIGH

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            RuleSeverity.parse("blocker")


class TestRuleFromJson:
    def test_builds_rule_with_defaults(self):
        rule = _rule()
        assert rule.severity is RuleSeverity.HIGH
        assert rule.kind is PatternKind.SOURCE
        assert rule.reference is None
        assert rule.case_sensitive is False

    def test_accepts_json_pattern_type_key(self):
        rule = _rule(patternType="objectName")
        assert rule.kind is PatternKind.OBJECT_NAME

    def test_missing_fields_rejected(self):
        with pytest.raises(CatalogLoadError) as exc_info:
            Rule.from_json({"id": "SIMPL-X-001", "pattern": "x"})
        assert "category" in str(exc_info.value)
        assert exc_info.value.context["rule_id"] == "SIMPL-X-001"

    def test_unknown_severity_rejected(self):
        with pytest.raises(CatalogLoadError, match="unknown severity"):
            _rule(severity="blocker")

    def test_unknown_kind_rejected(self):
        with pytest.raises(CatalogLoadError, match="unknown pattern kind"):
            _rule(kind="packageName")

    def test_malformed_pattern_rejected_at_load(self):
        with pytest.raises(CatalogLoadError, match="malformed pattern"):
            _rule(pattern=r"(BSEG")

    def test_to_json_uses_camel_case_keys(self):
        data = _rule(reference="2431747").to_json()
        assert data["patternType"] == "source"
        assert data["caseSensitive"] is False
        assert data["severity"] == "high"
        assert data["reference"] == "2431747"
        assert "regex" not in data


class TestRuleCheck:
    def test_source_rule_reports_line_numbers_and_trimmed_content(self):
        rule = _rule()
        hit = rule.check("DATA lv TYPE i.\n   SELECT * FROM bseg.\nWRITE lv.", "ZCL_X")

        assert hit is not None
        assert hit.rule is rule
        assert len(hit.matches) == 1
        assert hit.matches[0].line == 2
        assert hit.matches[0].content == "SELECT * FROM bseg."

    def test_source_rule_reports_every_matching_line(self):
        hit = _rule().check("bseg\nfoo\nBSEG", "ZCL_X")
        assert [m.line for m in hit.matches] == [1, 3]

    def test_source_rule_ignores_empty_source(self):
        assert _rule().check("", "BSEG") is None

    def test_object_name_rule_reports_line_zero(self):
        rule = _rule(pattern=r"^Y\d{3}", kind="objectName")
        hit = rule.check("", "Y001_EXIT_HANDLER")

        assert hit is not None
        assert hit.matches[0].line == 0
        assert "Y001_EXIT_HANDLER" in hit.matches[0].content

    def test_object_name_rule_ignores_source(self):
        rule = _rule(pattern=r"^Y\d{3}", kind="objectName")
        assert rule.check("Y001 in source text", "ZCL_OTHER") is None

    def test_case_sensitive_rule(self):
        rule = _rule(pattern=r"\bCE1\w{4}\b", case_sensitive=True)
        assert rule.check("SELECT * FROM CE1IDEA.", "Z") is not None
        assert rule.check("DATA ce1abcd TYPE i.", "Z") is None


class TestModuleOf:
    def test_first_two_segments(self):
        assert module_of("SIMPL-FI-001") == "SIMPL-FI"
        assert module_of("SIMPL-TBL-KONV") == "SIMPL-TBL"
        assert module_of("SIMPL-FM-BAPI_PO_CREATE1") == "SIMPL-FM"

    def test_rule_module_property(self):
        assert _rule().module == "SIMPL-FI"
