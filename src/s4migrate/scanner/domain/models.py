"""
Scanner domain models.

A ScanResult is produced once per scan and treated as immutable by the
Analyzer and the Remediator. Its JSON form is also the scan fixture format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from s4migrate.shared.domain.base_model import BaseDomainModel


@dataclass
class PackageInfo(BaseDomainModel):
    """Development package holding custom objects."""

    name: str
    description: Optional[str] = None


@dataclass
class ObjectRef(BaseDomainModel):
    """
    A custom repository object.

    Attributes:
        name: Object name (case preserved)
        type: Type tag (CLAS, INTF, PROG, FUGR, INCL, ...)
        description: Short text
        package: Owning package name
    """

    name: str
    type: str = ""
    description: str = ""
    package: str = ""


@dataclass
class SourceBundle(BaseDomainModel):
    """Source text of one object with its precomputed line count."""

    type: str
    source: str
    lines: int = 0

    @classmethod
    def of(cls, object_type: str, source: str) -> "SourceBundle":
        return cls(type=object_type, source=source, lines=len(source.split("\n")))


@dataclass
class ScanStats(BaseDomainModel):
    """Scan counters."""

    objects: int = 0
    packages: int = 0
    sources_read: int = 0
    errors: int = 0


@dataclass
class ScanResult(BaseDomainModel):
    """
    Output of one repository scan.

    Attributes:
        packages: Packages in first-seen order, unique by name
        objects: Objects in first-seen order, unique by name
        sources: Source bundles keyed by object name
        stats: Counters
    """

    packages: List[PackageInfo] = field(default_factory=list)
    objects: List[ObjectRef] = field(default_factory=list)
    sources: Dict[str, SourceBundle] = field(default_factory=dict)
    stats: ScanStats = field(default_factory=ScanStats)

    def get_object(self, name: str) -> Optional[ObjectRef]:
        return next((obj for obj in self.objects if obj.name == name), None)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ScanResult":
        """Parse the scan fixture / ScanResult JSON document."""
        packages = [
            PackageInfo(name=p) if isinstance(p, str) else PackageInfo.from_json(p)
            for p in data.get("packages", [])
        ]
        objects = [ObjectRef.from_json(o) for o in data.get("objects", [])]
        sources = {}
        for name, bundle in data.get("sources", {}).items():
            source = bundle.get("source", "")
            sources[name] = SourceBundle(
                type=bundle.get("type", ""),
                source=source,
                lines=bundle.get("lines", len(source.split("\n"))),
            )
        stats = ScanStats.from_json(data["stats"]) if "stats" in data else ScanStats(
            objects=len(objects), packages=len(packages), sources_read=len(sources)
        )
        return cls(packages=packages, objects=objects, sources=sources, stats=stats)
