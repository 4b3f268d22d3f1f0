"""
Simplification rules.

Exports the process-wide rule catalog. The catalog is built on first use from
the packaged YAML category files plus ``settings.extra_rule_paths`` and is
treated as immutable afterwards.
"""

from typing import Optional

from s4migrate.rules.application.catalog import RuleCatalog, severity_weight
from s4migrate.rules.defaults.loader import DefaultRulesLoader
from s4migrate.rules.domain.enums import PatternKind, RuleSeverity
from s4migrate.rules.domain.models import Match, Rule, RuleHit
from s4migrate.shared.infrastructure.config import settings

_catalog: Optional[RuleCatalog] = None


def get_catalog() -> RuleCatalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = DefaultRulesLoader().build_catalog(settings.extra_rule_paths)
    return _catalog


def reset_catalog() -> None:
    """Discard the process-wide catalog (test harnesses only)."""
    global _catalog
    _catalog = None


__all__ = [
    "Match",
    "PatternKind",
    "Rule",
    "RuleCatalog",
    "RuleHit",
    "RuleSeverity",
    "get_catalog",
    "reset_catalog",
    "severity_weight",
]
