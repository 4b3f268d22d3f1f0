"""
Analysis domain models.

An Analysis is owned by the caller that requested it. ``enrich_analysis``
mutates it in place; nothing else does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from s4migrate.rules.domain.enums import RuleSeverity
from s4migrate.rules.domain.models import Match, RuleHit
from s4migrate.shared.domain.base_model import BaseDomainModel

NO_SEVERITY = "none"


@dataclass
class Finding(BaseDomainModel):
    """
    A rule violation tied to one object.

    Severity, category and the texts are copied from the rule so that a
    finding stays readable after the catalog is gone.

    Attributes:
        object: Object name
        object_type: Type tag of the object (from its source bundle or ObjectRef)
        rule_id: Identity of the rule that fired
        matches: Ordered hits; a single line-0 match for object-name rules
    """

    object: str
    object_type: str
    rule_id: str
    category: str
    severity: RuleSeverity
    title: str
    description: str
    remediation: str
    matches: List[Match] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @classmethod
    def from_hit(cls, object_name: str, object_type: str, hit: RuleHit) -> "Finding":
        rule = hit.rule
        return cls(
            object=object_name,
            object_type=object_type,
            rule_id=rule.id,
            category=rule.category,
            severity=rule.severity,
            title=rule.title,
            description=rule.description,
            remediation=rule.remediation,
            matches=list(hit.matches),
        )

    def to_json(self) -> Dict[str, Any]:
        data = super().to_json()
        data["matchCount"] = self.match_count
        return data


@dataclass
class EffortEstimate(BaseDomainModel):
    """Remediation effort: raw day sum plus the band it falls in."""

    days: float
    level: str
    range: str


@dataclass
class ReadinessSummary(BaseDomainModel):
    """Headline numbers of an analysis."""

    total_objects: int
    objects_scanned: int
    total_findings: int
    readiness_score: int
    readiness_grade: str
    effort_estimate: EffortEstimate


@dataclass
class ObjectSummary(BaseDomainModel):
    """Per-object roll-up. ``max_severity`` is a severity value or ``"none"``."""

    name: str
    type: str
    lines: int
    finding_count: int
    max_severity: str = NO_SEVERITY


@dataclass
class RiskEntry(BaseDomainModel):
    name: str
    type: str
    lines: int
    findings: int


@dataclass
class RiskMatrix(BaseDomainModel):
    """Objects bucketed by their worst-severity finding."""

    critical: List[RiskEntry] = field(default_factory=list)
    high: List[RiskEntry] = field(default_factory=list)
    medium: List[RiskEntry] = field(default_factory=list)
    low: List[RiskEntry] = field(default_factory=list)
    clean: List[RiskEntry] = field(default_factory=list)

    def bucket(self, max_severity: str) -> List[RiskEntry]:
        """Bucket for a max severity value (``"none"`` maps to ``clean``)."""
        if max_severity == NO_SEVERITY:
            return self.clean
        return getattr(self, RuleSeverity.parse(max_severity).value)

    def entries(self) -> Iterator[RiskEntry]:
        for bucket in (self.critical, self.high, self.medium, self.low, self.clean):
            yield from bucket


@dataclass
class InterfaceSummary(BaseDomainModel):
    """Summary of the interface inventory sidecar dataset."""

    interface_complexity: str = "Low"
    total_rfc_destinations: int = 0
    active_rfc_destinations: int = 0
    total_idoc_flows: int = 0
    total_web_services: int = 0
    total_batch_jobs: int = 0
    estimated_daily_idoc_volume: int = 0


@dataclass
class AtcSummary(BaseDomainModel):
    """
    Summary of the ATC (static check) sidecar dataset.

    ``by_priority`` is keyed by priority 1..3; JSON documents may carry the
    keys as strings.
    """

    total_findings: int = 0
    objects_checked: int = 0
    objects_with_findings: int = 0
    check_variant: str = ""
    by_priority: Dict[int, int] = field(default_factory=dict)

    @property
    def priority_one(self) -> int:
        return self.by_priority.get(1, 0)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "AtcSummary":
        summary = super().from_json(data)
        summary.by_priority = {int(k): int(v or 0) for k, v in (data.get("byPriority") or {}).items()}
        return summary


@dataclass
class UsageSummary(BaseDomainModel):
    """Summary of the usage (SCMON-style call statistics) sidecar dataset."""

    total_objects: int = 0
    active_objects: int = 0
    low_usage_objects: int = 0
    dead_code_objects: int = 0
    dead_code_percentage: int = 0


@dataclass
class Analysis(BaseDomainModel):
    """
    Full compatibility analysis of one scan.

    Attributes:
        summary: Score, grade and effort
        severity_counts: Finding count per severity (all four keys present)
        category_counts: Finding count per rule category
        findings: Sorted critical first, then by object name
        object_summary: One entry per object, sorted by max severity
        risk_matrix: Objects bucketed by max severity
        rules_checked: Size of the catalog used
    """

    summary: ReadinessSummary
    severity_counts: Dict[str, int]
    category_counts: Dict[str, int]
    findings: List[Finding]
    object_summary: List[ObjectSummary]
    risk_matrix: RiskMatrix
    rules_checked: int
    interface_summary: Optional[InterfaceSummary] = None
    atc_summary: Optional[AtcSummary] = None
    usage_summary: Optional[UsageSummary] = None

    def findings_for(self, object_name: str) -> List[Finding]:
        return [f for f in self.findings if f.object == object_name]

    def to_json(self) -> Dict[str, Any]:
        """Analysis output document; enrichment summaries only when attached."""
        data = super().to_json()
        for key in ("interfaceSummary", "atcSummary", "usageSummary"):
            if data[key] is None:
                del data[key]
        return data
