"""
Custom code remediator.

Runs the assessment (scan + analysis), then applies the registered transform
of every finding to the object's source. Transforms on one object are
chained in finding order, so each sees the edits of the previous ones. All
per-finding failures are recorded in the result; nothing but catalog load
errors escapes ``remediate()``.
"""

from typing import Dict, List, Optional

from s4migrate.analysis.application.analyzer import Analyzer
from s4migrate.analysis.domain.models import Finding
from s4migrate.gateway.base import IGateway
from s4migrate.remediation.application.diff import unified_diff
from s4migrate.remediation.domain.models import (
    Remediation,
    RemediationResult,
    RemediationStats,
    RemediationStatus,
    WriteFailure,
)
from s4migrate.rules.application.catalog import RuleCatalog
from s4migrate.scanner.application.scanner import Scanner
from s4migrate.scanner.domain.models import SourceBundle
from s4migrate.shared.infrastructure.config import settings
from s4migrate.shared.infrastructure.logging import get_logger, run_context
from s4migrate.transforms import TransformRegistry

logger = get_logger(__name__)

REASON_NO_SOURCE = "no source"
REASON_NO_TRANSFORM = "no automated transform"
REASON_NO_CHANGES = "transform matched but no changes"


class Remediator:
    """
    Drives Scanner -> Analyzer -> transforms for a whole repository.

    Args:
        gateway: Repository gateway (scan source, optional write-back)
        dry_run: Never write back (defaults to ``settings.remediation_dry_run``)
        catalog: Rule catalog for the analysis (defaults to the process-wide one)
        registry: Transform lookup, anything with ``get(rule_id)``
        scanner: Scanner override (defaults to ``Scanner(gateway)``)
        analyzer: Analyzer override (defaults to ``Analyzer(catalog)``)
    """

    def __init__(
        self,
        gateway: IGateway,
        *,
        dry_run: Optional[bool] = None,
        catalog: Optional[RuleCatalog] = None,
        registry=TransformRegistry,
        scanner: Optional[Scanner] = None,
        analyzer: Optional[Analyzer] = None,
    ):
        self.gateway = gateway
        self.dry_run = settings.remediation_dry_run if dry_run is None else dry_run
        self.registry = registry
        self.scanner = scanner or Scanner(gateway)
        self.analyzer = analyzer or Analyzer(catalog)

    async def remediate(self) -> RemediationResult:
        """
        Run the full remediation pipeline.

        Returns:
            RemediationResult with one remediation per finding
        """
        with run_context(gateway_mode=self.gateway.mode.value, dry_run=self.dry_run):
            return await self._run()

    async def _run(self) -> RemediationResult:
        scan_result = await self.scanner.scan()
        analysis = self.analyzer.analyze(scan_result)
        logger.info("remediation_started", findings=len(analysis.findings))

        result = RemediationResult(scan_result=scan_result, analysis=analysis, stats=RemediationStats())

        for object_name, findings in self._group_by_object(analysis.findings).items():
            bundle = scan_result.sources.get(object_name)
            if bundle is None:
                logger.debug("remediation_object_skipped", object_name=object_name, findings=len(findings))
                for finding in findings:
                    self._add(result, self._remediation(finding, RemediationStatus.SKIPPED, reason=REASON_NO_SOURCE))
                continue

            await self._remediate_object(result, object_name, bundle, findings)

        logger.info(
            "remediation_complete",
            total_findings=result.stats.total_findings,
            auto_fixed=result.stats.auto_fixed,
            manual_review=result.stats.manual_review,
            no_transform=result.stats.no_transform,
            errors=result.stats.errors,
            written=len(result.written_objects),
            write_errors=len(result.write_errors),
        )
        return result

    async def _remediate_object(
        self,
        result: RemediationResult,
        object_name: str,
        bundle: SourceBundle,
        findings: List[Finding],
    ) -> None:
        original = bundle.source
        current = original
        fixed: List[Remediation] = []

        for finding in findings:
            transform = self.registry.get(finding.rule_id)
            if transform is None:
                self._add(
                    result, self._remediation(finding, RemediationStatus.MANUAL_REVIEW, reason=REASON_NO_TRANSFORM)
                )
                continue

            try:
                outcome = transform.apply(current, finding)
            except Exception as e:
                logger.error(
                    "transform_failed",
                    object_name=object_name,
                    rule_id=finding.rule_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                self._add(result, self._remediation(finding, RemediationStatus.ERROR, reason=str(e) or type(e).__name__))
                continue

            if outcome.changed and outcome.source != current:
                current = outcome.source
                remediation = self._remediation(finding, RemediationStatus.FIXED, changes=outcome.changes)
                fixed.append(remediation)
                self._add(result, remediation)
            else:
                # No edit; flag records (if any) stay attached.
                self._add(
                    result,
                    self._remediation(
                        finding, RemediationStatus.MANUAL_REVIEW, reason=REASON_NO_CHANGES, changes=outcome.changes
                    ),
                )

        if current == original:
            return

        diff = unified_diff(original, current, object_name)
        for remediation in fixed:
            remediation.diff = diff
        result.final_sources[object_name] = current

        if not self.dry_run and self.gateway.supports_write:
            await self._write_back(result, object_name, bundle, current)

    async def _write_back(
        self, result: RemediationResult, object_name: str, bundle: SourceBundle, source: str
    ) -> None:
        obj = result.scan_result.get_object(object_name) if result.scan_result else None
        package = obj.package if obj and obj.package else None

        try:
            response = await self.gateway.write_source(object_name, source, bundle.type, package)
        except Exception as e:
            response = {"error": str(e) or type(e).__name__}

        if not isinstance(response, dict):
            response = {"error": f"unexpected write response: {response!r}"}

        if "error" in response:
            logger.error("remediation_write_failed", object_name=object_name, error=response["error"])
            result.write_errors.append(WriteFailure(object=object_name, error=str(response["error"])))
            return

        logger.info("remediation_written", object_name=object_name, lines=response.get("lines"))
        result.written_objects.append(object_name)

    @staticmethod
    def _group_by_object(findings: List[Finding]) -> Dict[str, List[Finding]]:
        groups: Dict[str, List[Finding]] = {}
        for finding in findings:
            groups.setdefault(finding.object, []).append(finding)
        return groups

    @staticmethod
    def _remediation(finding: Finding, status: RemediationStatus, reason: Optional[str] = None, changes=None) -> Remediation:
        return Remediation(
            object=finding.object,
            rule_id=finding.rule_id,
            title=finding.title,
            severity=finding.severity.value,
            status=status,
            reason=reason,
            changes=list(changes or []),
            finding=finding,
        )

    @staticmethod
    def _add(result: RemediationResult, remediation: Remediation) -> None:
        result.remediations.append(remediation)
        result.stats.record(remediation.status)
