"""Custom code remediation: apply transforms to findings and diff the result."""

from s4migrate.remediation.application.diff import unified_diff
from s4migrate.remediation.application.remediator import Remediator
from s4migrate.remediation.domain.models import (
    Remediation,
    RemediationResult,
    RemediationStats,
    RemediationStatus,
    WriteFailure,
)

__all__ = [
    "Remediation",
    "RemediationResult",
    "RemediationStats",
    "RemediationStatus",
    "Remediator",
    "WriteFailure",
    "unified_diff",
]
