"""
Compatibility analyzer.

Applies the rule catalog to every scanned object, aggregates the findings and
scores the repository. ``enrich_analysis`` folds optional sidecar datasets
(interface inventory, ATC results, usage statistics) into an existing
analysis.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from s4migrate.analysis.application import scoring
from s4migrate.analysis.domain.models import (
    NO_SEVERITY,
    Analysis,
    AtcSummary,
    Finding,
    InterfaceSummary,
    ObjectSummary,
    ReadinessSummary,
    RiskEntry,
    RiskMatrix,
    UsageSummary,
)
from s4migrate.rules import get_catalog
from s4migrate.rules.application.catalog import RuleCatalog
from s4migrate.rules.domain.enums import NO_SEVERITY_RANK, RuleSeverity
from s4migrate.scanner.domain.models import ScanResult
from s4migrate.shared.domain.base_model import BaseDomainModel
from s4migrate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

S = TypeVar("S", bound=BaseDomainModel)


def _severity_rank(max_severity: str) -> int:
    if max_severity == NO_SEVERITY:
        return NO_SEVERITY_RANK
    return RuleSeverity.parse(max_severity).rank


def _max_severity(findings: List[Finding]) -> str:
    if not findings:
        return NO_SEVERITY
    return min(findings, key=lambda f: f.severity.rank).severity.value


def _coerce_summary(data: Union[S, Dict[str, Any]], summary_type: Type[S]) -> S:
    """Accept a typed summary, a summary dict, or a dataset dict with a ``summary`` key."""
    if isinstance(data, summary_type):
        return data
    if isinstance(data, dict) and isinstance(data.get("summary"), dict):
        data = data["summary"]
    return summary_type.from_json(data)


class Analyzer:
    """
    Produces an Analysis from a ScanResult.

    Args:
        catalog: Rule catalog to evaluate (defaults to the process-wide catalog)
    """

    def __init__(self, catalog: Optional[RuleCatalog] = None):
        self._catalog = catalog

    @property
    def catalog(self) -> RuleCatalog:
        if self._catalog is None:
            self._catalog = get_catalog()
        return self._catalog

    def analyze(self, scan_result: ScanResult) -> Analysis:
        """
        Analyze scanned objects.

        Source bundles are checked against every rule; listed objects without
        a bundle are checked by name only.

        Args:
            scan_result: Output of Scanner.scan()

        Returns:
            Analysis with sorted findings, object summary and risk matrix
        """
        catalog = self.catalog
        logger.debug(
            "analysis_started",
            objects=len(scan_result.objects),
            sources=len(scan_result.sources),
            rules=len(catalog),
        )

        findings: List[Finding] = []
        by_object: Dict[str, List[Finding]] = {}

        for name, bundle in scan_result.sources.items():
            object_findings = [
                Finding.from_hit(name, bundle.type, hit) for hit in catalog.check_source(bundle.source, name)
            ]
            by_object[name] = object_findings
            findings.extend(object_findings)

        for obj in scan_result.objects:
            if obj.name in scan_result.sources or obj.name in by_object:
                continue
            object_findings = [Finding.from_hit(obj.name, obj.type, hit) for hit in catalog.check_source("", obj.name)]
            by_object[obj.name] = object_findings
            findings.extend(object_findings)

        object_summary = self._summarize_objects(scan_result, by_object)
        total_objects = len(object_summary)

        score = scoring.readiness_score(findings, total_objects)
        summary = ReadinessSummary(
            total_objects=total_objects,
            objects_scanned=len(scan_result.sources),
            total_findings=len(findings),
            readiness_score=score,
            readiness_grade=scoring.readiness_grade(score),
            effort_estimate=scoring.estimate_effort(findings),
        )

        analysis = Analysis(
            summary=summary,
            severity_counts=self._count_by_severity(findings),
            category_counts=self._count_by_category(findings),
            findings=sorted(findings, key=lambda f: (f.severity.rank, f.object)),
            object_summary=object_summary,
            risk_matrix=self._build_risk_matrix(object_summary),
            rules_checked=len(catalog),
        )

        logger.info(
            "analysis_complete",
            findings=summary.total_findings,
            objects=summary.total_objects,
            readiness_score=summary.readiness_score,
            readiness_grade=summary.readiness_grade,
        )
        return analysis

    def enrich_analysis(
        self,
        analysis: Analysis,
        interface_data: Union[InterfaceSummary, Dict[str, Any], None] = None,
        atc_data: Union[AtcSummary, Dict[str, Any], None] = None,
        usage_data: Union[UsageSummary, Dict[str, Any], None] = None,
    ) -> Analysis:
        """
        Fold sidecar datasets into an analysis (in place).

        Interface complexity and ATC priority-1 findings lower the score; the
        grade is recomputed after each adjustment. Usage data is attached only.
        Absent datasets leave the analysis untouched.

        Returns:
            The same analysis, for chaining
        """
        summary = analysis.summary

        if interface_data is not None:
            interface_summary = _coerce_summary(interface_data, InterfaceSummary)
            penalty = scoring.interface_penalty(interface_summary.interface_complexity)
            self._apply_penalty(analysis, penalty)
            analysis.interface_summary = interface_summary
            logger.debug(
                "analysis_enriched",
                dataset="interfaces",
                complexity=interface_summary.interface_complexity,
                penalty=penalty,
                readiness_score=summary.readiness_score,
            )

        if atc_data is not None:
            atc_summary = _coerce_summary(atc_data, AtcSummary)
            penalty = scoring.atc_penalty(atc_summary.priority_one)
            self._apply_penalty(analysis, penalty)
            analysis.atc_summary = atc_summary
            logger.debug(
                "analysis_enriched",
                dataset="atc",
                priority_one=atc_summary.priority_one,
                penalty=penalty,
                readiness_score=summary.readiness_score,
            )

        if usage_data is not None:
            analysis.usage_summary = _coerce_summary(usage_data, UsageSummary)
            logger.debug("analysis_enriched", dataset="usage")

        return analysis

    @staticmethod
    def _apply_penalty(analysis: Analysis, penalty: int) -> None:
        summary = analysis.summary
        summary.readiness_score = max(0, summary.readiness_score - penalty)
        summary.readiness_grade = scoring.readiness_grade(summary.readiness_score)

    @staticmethod
    def _summarize_objects(scan_result: ScanResult, by_object: Dict[str, List[Finding]]) -> List[ObjectSummary]:
        """One entry per distinct object: listed objects first, then unlisted bundles."""
        entries: Dict[str, ObjectSummary] = {}

        for obj in scan_result.objects:
            if obj.name in entries:
                continue
            bundle = scan_result.sources.get(obj.name)
            object_findings = by_object.get(obj.name, [])
            entries[obj.name] = ObjectSummary(
                name=obj.name,
                type=bundle.type if bundle else obj.type,
                lines=bundle.lines if bundle else 0,
                finding_count=len(object_findings),
                max_severity=_max_severity(object_findings),
            )

        for name, bundle in scan_result.sources.items():
            if name in entries:
                continue
            object_findings = by_object.get(name, [])
            entries[name] = ObjectSummary(
                name=name,
                type=bundle.type,
                lines=bundle.lines,
                finding_count=len(object_findings),
                max_severity=_max_severity(object_findings),
            )

        return sorted(entries.values(), key=lambda entry: _severity_rank(entry.max_severity))

    @staticmethod
    def _count_by_severity(findings: List[Finding]) -> Dict[str, int]:
        counts = {severity.value: 0 for severity in RuleSeverity}
        for finding in findings:
            counts[finding.severity.value] += 1
        return counts

    @staticmethod
    def _count_by_category(findings: List[Finding]) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for finding in findings:
            counts[finding.category] = counts.get(finding.category, 0) + 1
        return counts

    @staticmethod
    def _build_risk_matrix(object_summary: List[ObjectSummary]) -> RiskMatrix:
        matrix = RiskMatrix()
        for entry in object_summary:
            matrix.bucket(entry.max_severity).append(
                RiskEntry(name=entry.name, type=entry.type, lines=entry.lines, findings=entry.finding_count)
            )
        return matrix
