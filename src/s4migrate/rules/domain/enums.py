"""
Rule domain enums.

Defines severity levels and the substrate a rule pattern is evaluated against.
"""

from enum import Enum


class RuleSeverity(Enum):
    """
    Rule severity level.

    Ordered critical first; `rank` is the sort key used for findings,
    object summaries and the risk matrix.
    """

    CRITICAL = "critical"  # Will not compile/run on the target. Must fix before migration.
    HIGH = "high"  # Major functional change. Likely breaks at runtime.
    MEDIUM = "medium"  # Deprecated but still works. Should remediate.
    LOW = "low"  # Style or obsolete syntax. Remediate opportunistically.

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def parse(cls, value: "str | RuleSeverity") -> "RuleSeverity":
        """Parse a severity name case-insensitively."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


_SEVERITY_RANK = {
    RuleSeverity.CRITICAL: 0,
    RuleSeverity.HIGH: 1,
    RuleSeverity.MEDIUM: 2,
    RuleSeverity.LOW: 3,
}

# Rank for objects and findings without a severity ("none").
NO_SEVERITY_RANK = 4


class PatternKind(Enum):
    """What a rule pattern is evaluated against."""

    SOURCE = "source"  # Each physical line of the object source
    OBJECT_NAME = "objectName"  # The object name as a whole
