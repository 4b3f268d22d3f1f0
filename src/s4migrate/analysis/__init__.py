"""Compatibility analysis: findings, readiness score and risk matrix."""

from s4migrate.analysis.application.analyzer import Analyzer
from s4migrate.analysis.domain.models import (
    Analysis,
    AtcSummary,
    EffortEstimate,
    Finding,
    InterfaceSummary,
    ObjectSummary,
    ReadinessSummary,
    RiskEntry,
    RiskMatrix,
    UsageSummary,
)

__all__ = [
    "Analysis",
    "Analyzer",
    "AtcSummary",
    "EffortEstimate",
    "Finding",
    "InterfaceSummary",
    "ObjectSummary",
    "ReadinessSummary",
    "RiskEntry",
    "RiskMatrix",
    "UsageSummary",
]
