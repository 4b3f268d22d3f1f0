"""Domain models for simplification rules.

A rule is an immutable value: identity, taxonomy, severity, a compiled regular
expression and the remediation guidance shown to users. Rules are loaded from
the YAML category files under ``rules/defaults/catalog``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from s4migrate.rules.domain.enums import PatternKind, RuleSeverity
from s4migrate.shared.domain.base_model import BaseDomainModel
from s4migrate.shared.domain.exceptions import CatalogLoadError


@dataclass
class Match(BaseDomainModel):
    """A single pattern hit.

    Attributes:
        line: 1-based line number, or 0 for an object-name hit
        content: Trimmed content of the matched line
    """

    line: int
    content: str


@dataclass
class Rule(BaseDomainModel):
    """Simplification rule definition.

    Attributes:
        id: Stable identifier, ``PREFIX-MODULE-NNN`` (e.g. ``SIMPL-FI-001``)
        category: Free-form taxonomic string (e.g. ``Finance - New GL``)
        severity: Severity level
        title: Short human-readable title
        description: What changed on the target platform
        remediation: How to fix affected code
        pattern: Regular expression source text
        kind: Whether the pattern is evaluated per source line or on the object name
        reference: Optional simplification item or vendor note identifier
        case_sensitive: Compile without ``re.IGNORECASE``
    """

    id: str
    category: str
    severity: RuleSeverity
    title: str
    description: str
    remediation: str
    pattern: str
    kind: PatternKind = PatternKind.SOURCE
    reference: Optional[str] = None
    case_sensitive: bool = False
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = re.MULTILINE if self.case_sensitive else re.IGNORECASE | re.MULTILINE
        try:
            self.regex = re.compile(self.pattern, flags)
        except re.error as e:
            raise CatalogLoadError(
                f"Rule {self.id} has a malformed pattern: {e}",
                context={"rule_id": self.id, "pattern": self.pattern},
            ) from e

    @property
    def module(self) -> str:
        """Module prefix of the identity, e.g. ``SIMPL-FI`` for ``SIMPL-FI-001``."""
        return module_of(self.id)

    def check(self, source: str, object_name: str) -> Optional[RuleHit]:
        """Evaluate this rule against one object.

        Args:
            source: Full source text (may be empty)
            object_name: Object name, used by object-name rules

        Returns:
            RuleHit with ordered matches, or None if the rule did not fire
        """
        if self.kind is PatternKind.OBJECT_NAME:
            if object_name and self.regex.search(object_name):
                return RuleHit(rule=self, matches=[Match(line=0, content=f"Object name: {object_name}")])
            return None

        if not source:
            return None

        matches = [
            Match(line=number, content=line.strip())
            for number, line in enumerate(source.split("\n"), start=1)
            if self.regex.search(line)
        ]
        return RuleHit(rule=self, matches=matches) if matches else None

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "remediation": self.remediation,
            "pattern": self.pattern,
            "patternType": self.kind.value,
            "reference": self.reference,
            "caseSensitive": self.case_sensitive,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Rule":
        """Build a rule from a YAML/JSON mapping.

        Accepts both the YAML key ``kind`` and the JSON key ``patternType``.

        Raises:
            CatalogLoadError: On missing fields or unknown enum values
        """
        rule_id = data.get("id", "<unknown>")
        missing = [k for k in ("id", "category", "severity", "title", "description", "remediation", "pattern") if not data.get(k)]
        if missing:
            raise CatalogLoadError(f"Rule {rule_id} is missing fields: {', '.join(missing)}", context={"rule_id": rule_id})

        try:
            severity = RuleSeverity.parse(data["severity"])
        except ValueError as e:
            raise CatalogLoadError(f"Rule {rule_id} has unknown severity {data['severity']!r}", context={"rule_id": rule_id}) from e

        raw_kind = data.get("kind", data.get("patternType", PatternKind.SOURCE.value))
        try:
            kind = PatternKind(raw_kind)
        except ValueError as e:
            raise CatalogLoadError(f"Rule {rule_id} has unknown pattern kind {raw_kind!r}", context={"rule_id": rule_id}) from e

        return cls(
            id=str(data["id"]),
            category=str(data["category"]),
            severity=severity,
            title=str(data["title"]),
            description=str(data["description"]),
            remediation=str(data["remediation"]),
            pattern=str(data["pattern"]),
            kind=kind,
            reference=data.get("reference"),
            case_sensitive=bool(data.get("case_sensitive", data.get("caseSensitive", False))),
        )


@dataclass
class RuleHit:
    """A rule that fired on one object, with its ordered matches."""

    rule: Rule
    matches: List[Match] = field(default_factory=list)


def module_of(rule_id: str) -> str:
    """Return the module prefix of a rule identity (first two dash segments)."""
    parts = rule_id.split("-")
    return "-".join(parts[:2])
