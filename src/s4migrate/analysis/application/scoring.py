"""
Readiness scoring.

Centralizes the headline metric of an analysis: a 0-100 readiness score, its
letter grade and the remediation effort estimate.
"""

import math
from typing import Iterable

from s4migrate.analysis.domain.models import EffortEstimate, Finding
from s4migrate.rules.application.catalog import severity_weight
from s4migrate.rules.domain.enums import RuleSeverity

# Penalty budget per object: five low-severity findings.
PENALTY_PER_OBJECT = 5

EFFORT_DAYS = {
    RuleSeverity.CRITICAL: 5.0,
    RuleSeverity.HIGH: 3.0,
    RuleSeverity.MEDIUM: 1.0,
    RuleSeverity.LOW: 0.5,
}
DEFAULT_EFFORT_DAYS = 1.0

INTERFACE_COMPLEXITY_PENALTY = {
    "Very High": 10,
    "High": 5,
    "Medium": 2,
    "Low": 0,
}
ATC_PRIORITY_ONE_PENALTY = 2
ATC_PENALTY_CAP = 15


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def readiness_score(findings: Iterable[Finding], total_objects: int) -> int:
    """
    Calculate the readiness score.

    Formula: 100 - min(penalty / (objects * 5), 1) * 100
    where penalty is the summed severity weight of all findings
    (critical=10, high=5, medium=2, low=1).

    Args:
        findings: Findings of the analysis
        total_objects: Number of objects in the scan

    Returns:
        Integer score in [0, 100]; 100 for an empty repository.
    """
    if total_objects <= 0:
        return 100

    total_penalty = sum(severity_weight(f.severity) for f in findings)
    max_penalty = max(1, total_objects) * PENALTY_PER_OBJECT
    normalized = min(total_penalty / max_penalty, 1.0) * 100

    return max(0, round_half_up(100 - normalized))


def readiness_grade(score: int) -> str:
    """Letter grade for a score: >=90 A, >=75 B, >=60 C, >=40 D, else F."""
    if score >= 90:
        return "A"
    if score >= 75:
        return "B"
    if score >= 60:
        return "C"
    if score >= 40:
        return "D"
    return "F"


def estimate_effort(findings: Iterable[Finding]) -> EffortEstimate:
    """Sum per-finding effort days and map the total to a band."""
    days = sum(EFFORT_DAYS.get(f.severity, DEFAULT_EFFORT_DAYS) for f in findings)

    if days <= 5:
        return EffortEstimate(days=days, level="Low", range="1-5 days")
    if days <= 20:
        return EffortEstimate(days=days, level="Medium", range="1-4 weeks")
    if days <= 60:
        return EffortEstimate(days=days, level="High", range="1-3 months")
    return EffortEstimate(days=days, level="Very High", range="3+ months")


def interface_penalty(complexity: str) -> int:
    return INTERFACE_COMPLEXITY_PENALTY.get(complexity, 0)


def atc_penalty(priority_one_count: int) -> int:
    return min(priority_one_count * ATC_PRIORITY_ONE_PENALTY, ATC_PENALTY_CAP)
