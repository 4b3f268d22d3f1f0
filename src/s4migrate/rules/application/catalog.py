"""Rule catalog.

Ordered, deduplicated collection of simplification rules with the lookups the
analyzer and the report layer need. Registration order is the evaluation order
of ``check_source``.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, List, Optional

from s4migrate.rules.domain.enums import RuleSeverity
from s4migrate.rules.domain.models import Rule, RuleHit
from s4migrate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

SEVERITY_WEIGHTS = {
    RuleSeverity.CRITICAL: 10,
    RuleSeverity.HIGH: 5,
    RuleSeverity.MEDIUM: 2,
    RuleSeverity.LOW: 1,
}


def severity_weight(severity: "str | RuleSeverity | None") -> int:
    """Scoring weight of a severity: critical=10, high=5, medium=2, low=1, else 0."""
    if severity is None:
        return 0
    try:
        return SEVERITY_WEIGHTS[RuleSeverity.parse(severity)]
    except ValueError:
        return 0


class RuleCatalog:
    """Ordered collection of rules keyed by identity.

    Duplicate identities are dropped (first registration wins) and logged.

    Usage:
        catalog = RuleCatalog()
        catalog.register_all(rules)
        hits = catalog.check_source(source, "ZCL_BILLING")
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: List[Rule] = []
        self._by_id: dict[str, Rule] = {}
        self.register_all(rules)

    def register(self, rule: Rule) -> bool:
        """Insert a rule unless its identity is already present.

        Returns:
            True if the rule was added, False if it was a duplicate
        """
        if rule.id in self._by_id:
            logger.warning("duplicate_rule_dropped", rule_id=rule.id, category=rule.category)
            return False
        self._rules.append(rule)
        self._by_id[rule.id] = rule
        return True

    def register_all(self, rules: Iterable[Rule]) -> int:
        """Insert rules in input order. Returns the number actually added."""
        return sum(1 for rule in rules if self.register(rule))

    def get_all(self) -> List[Rule]:
        """All rules in registration order."""
        return list(self._rules)

    def get_by_id(self, rule_id: str) -> Optional[Rule]:
        return self._by_id.get(rule_id)

    def get_by_severity(self, severity: "str | RuleSeverity") -> List[Rule]:
        """Rules whose severity is exactly ``severity``. Unknown names yield []."""
        try:
            level = RuleSeverity.parse(severity)
        except ValueError:
            return []
        return [r for r in self._rules if r.severity is level]

    def get_by_category(self, category: str) -> List[Rule]:
        """Case-insensitive substring match on the category."""
        needle = category.lower()
        return [r for r in self._rules if needle in r.category.lower()]

    def get_by_module(self, module: str) -> List[Rule]:
        """Case-insensitive substring match on the identity (e.g. ``fi`` or ``SIMPL-MM-``)."""
        needle = module.lower()
        return [r for r in self._rules if needle in r.id.lower()]

    def check_source(self, source: str, object_name: str) -> List[RuleHit]:
        """Evaluate every rule, in catalog order, against one object.

        Source rules run per physical line; object-name rules run once on the
        whole name and produce a single line-0 match.

        Args:
            source: Object source text ("" when unavailable)
            object_name: Object name

        Returns:
            One RuleHit per rule that fired, in registration order
        """
        hits = []
        for rule in self._rules:
            hit = rule.check(source, object_name)
            if hit is not None:
                hits.append(hit)
        return hits

    def stats(self) -> dict:
        """Totals by severity and by module prefix."""
        by_severity = Counter(r.severity.value for r in self._rules)
        by_module = Counter(r.module for r in self._rules)
        return {
            "total": len(self._rules),
            "bySeverity": {s.value: by_severity.get(s.value, 0) for s in RuleSeverity},
            "byModule": dict(by_module),
        }

    def clear(self) -> None:
        """Remove all rules. Useful for testing."""
        self._rules = []
        self._by_id = {}

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id
