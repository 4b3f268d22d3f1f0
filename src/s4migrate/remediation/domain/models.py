"""
Remediation domain models.

One Remediation is produced per analysis finding. Stats always add up:
``auto_fixed + manual_review + no_transform + errors == total_findings``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from s4migrate.analysis.domain.models import Analysis, Finding
from s4migrate.scanner.domain.models import ScanResult
from s4migrate.shared.domain.base_model import BaseDomainModel
from s4migrate.transforms.domain.models import ChangeRecord


class RemediationStatus(Enum):
    """Outcome for one finding."""

    FIXED = "fixed"  # Transform altered the source
    MANUAL_REVIEW = "manual-review"  # No transform, or transform made no edit
    SKIPPED = "skipped"  # Object has no source
    ERROR = "error"  # Transform raised


@dataclass
class Remediation(BaseDomainModel):
    """
    Outcome of remediating one finding.

    Attributes:
        object: Object name
        rule_id: Rule identity of the finding
        status: Outcome
        reason: Why the finding was not fixed (manual-review, skipped, error)
        changes: Change records of the transform (fixed, or flag-only manual-review)
        diff: Unified diff of the whole object (fixed, once the object changed)
        finding: The originating finding, for traceability
    """

    object: str
    rule_id: str
    title: str
    severity: str
    status: RemediationStatus
    reason: Optional[str] = None
    changes: List[ChangeRecord] = field(default_factory=list)
    diff: Optional[str] = None
    finding: Optional[Finding] = field(default=None, repr=False)

    @property
    def change_count(self) -> int:
        return len(self.changes)

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "object": self.object,
            "ruleId": self.rule_id,
            "title": self.title,
            "severity": self.severity,
            "status": self.status.value,
        }
        if self.reason is not None:
            data["reason"] = self.reason
        if self.changes:
            data["changes"] = [change.to_json() for change in self.changes]
            data["changeCount"] = self.change_count
        if self.diff is not None:
            data["diff"] = self.diff
        if self.finding is not None:
            data["category"] = self.finding.category
            data["remediation"] = self.finding.remediation
            data["matches"] = [match.to_json() for match in self.finding.matches]
        return data


@dataclass
class RemediationStats(BaseDomainModel):
    total_findings: int = 0
    auto_fixed: int = 0
    manual_review: int = 0
    no_transform: int = 0
    errors: int = 0

    def record(self, status: RemediationStatus) -> None:
        """Count one remediation outcome."""
        self.total_findings += 1
        if status is RemediationStatus.FIXED:
            self.auto_fixed += 1
        elif status is RemediationStatus.MANUAL_REVIEW:
            self.manual_review += 1
        elif status is RemediationStatus.SKIPPED:
            self.no_transform += 1
        else:
            self.errors += 1


@dataclass
class WriteFailure(BaseDomainModel):
    """A transformed source the gateway refused to save."""

    object: str
    error: str


@dataclass
class RemediationResult(BaseDomainModel):
    """
    Output of one remediation run.

    Attributes:
        remediations: One per finding, in analysis order grouped by object
        stats: Outcome counters
        scan_result: The scan the run was based on
        analysis: The analysis the run was based on
        final_sources: Transformed text per changed object
        written_objects: Objects saved through the gateway
        write_errors: Objects whose save failed
    """

    remediations: List[Remediation] = field(default_factory=list)
    stats: RemediationStats = field(default_factory=RemediationStats)
    scan_result: Optional[ScanResult] = None
    analysis: Optional[Analysis] = None
    final_sources: Dict[str, str] = field(default_factory=dict)
    written_objects: List[str] = field(default_factory=list)
    write_errors: List[WriteFailure] = field(default_factory=list)

    def for_object(self, object_name: str) -> List[Remediation]:
        return [r for r in self.remediations if r.object == object_name]

    def with_status(self, status: RemediationStatus) -> List[Remediation]:
        return [r for r in self.remediations if r.status is status]

    def to_json(self) -> Dict[str, Any]:
        return {
            "remediations": [r.to_json() for r in self.remediations],
            "stats": self.stats.to_json(),
            "scanResult": self.scan_result.to_json() if self.scan_result else None,
            "analysis": self.analysis.to_json() if self.analysis else None,
            "writtenObjects": list(self.written_objects),
            "writeErrors": [failure.to_json() for failure in self.write_errors],
        }
