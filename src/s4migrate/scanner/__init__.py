"""Repository scanner."""

from s4migrate.scanner.application.scanner import Scanner
from s4migrate.scanner.domain.models import ObjectRef, PackageInfo, ScanResult, ScanStats, SourceBundle

__all__ = ["ObjectRef", "PackageInfo", "ScanResult", "ScanStats", "Scanner", "SourceBundle"]
