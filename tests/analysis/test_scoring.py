"""Tests for readiness scoring, grading and effort estimation."""

import pytest

from s4migrate.analysis.application import scoring
from s4migrate.analysis.domain.models import Finding
from s4migrate.rules.domain.enums import RuleSeverity


def _findings(*severities):
    return [
        Finding(
            object=f"ZOBJ_{i}",
            object_type="CLAS",
            rule_id="SIMPL-T-001",
            category="Test",
            severity=RuleSeverity(severity),
            title="t",
            description="d",
            remediation="r",
        )
        for i, severity in enumerate(severities)
    ]


class TestReadinessScore:
    def test_empty_repository_scores_100(self):
        assert scoring.readiness_score([], 0) == 100

    def test_no_findings_scores_100(self):
        assert scoring.readiness_score([], 12) == 100

    def test_penalty_is_capped(self):
        assert scoring.readiness_score(_findings("critical"), 1) == 0
        assert scoring.readiness_score(_findings(*["critical"] * 50), 3) == 0

    def test_normalized_by_object_count(self):
        # 10 / (10 * 5) = 20% penalty
        assert scoring.readiness_score(_findings("critical"), 10) == 80

    def test_rounds_half_up(self):
        # 3 high = 15 over 8 objects: 100 - 37.5
        assert scoring.readiness_score(_findings("high", "high", "high"), 8) == 63

    def test_more_findings_never_raise_the_score(self):
        base = _findings("medium", "low")
        assert scoring.readiness_score(base + _findings("low"), 4) <= scoring.readiness_score(base, 4)


class TestReadinessGrade:
    @pytest.mark.parametrize(
        "score, grade",
        [(100, "A"), (90, "A"), (89, "B"), (75, "B"), (74, "C"), (60, "C"), (59, "D"), (40, "D"), (39, "F"), (0, "F")],
    )
    def test_boundaries(self, score, grade):
        assert scoring.readiness_grade(score) == grade


class TestEstimateEffort:
    def test_no_findings(self):
        effort = scoring.estimate_effort([])
        assert (effort.days, effort.level, effort.range) == (0, "Low", "1-5 days")

    def test_day_weights(self):
        effort = scoring.estimate_effort(_findings("critical", "high", "medium", "low"))
        assert effort.days == 9.5
        assert effort.level == "Medium"

    @pytest.mark.parametrize(
        "severities, level, days_range",
        [
            (["critical"], "Low", "1-5 days"),
            (["critical"] * 4, "Medium", "1-4 weeks"),
            (["critical"] * 4 + ["low"] * 2, "High", "1-3 months"),
            (["critical"] * 12, "High", "1-3 months"),
            (["critical"] * 12 + ["low"], "Very High", "3+ months"),
        ],
    )
    def test_bands(self, severities, level, days_range):
        effort = scoring.estimate_effort(_findings(*severities))
        assert effort.level == level
        assert effort.range == days_range


class TestEnrichmentPenalties:
    def test_interface_penalty(self):
        assert scoring.interface_penalty("Very High") == 10
        assert scoring.interface_penalty("High") == 5
        assert scoring.interface_penalty("Medium") == 2
        assert scoring.interface_penalty("Low") == 0
        assert scoring.interface_penalty("Unknown") == 0

    def test_atc_penalty_capped(self):
        assert scoring.atc_penalty(0) == 0
        assert scoring.atc_penalty(3) == 6
        assert scoring.atc_penalty(8) == 15
