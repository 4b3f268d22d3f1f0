"""Domain models for source transforms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from s4migrate.shared.domain.base_model import BaseDomainModel


class ChangeType(Enum):
    """Kind of edit a transform performed."""

    REPLACE = "replace"  # Text substituted
    COMMENT = "comment"  # TODO line inserted above the target
    FLAG = "flag"  # Construct reported, text untouched


@dataclass
class ChangeRecord(BaseDomainModel):
    """
    One edit narrated by a transform.

    Attributes:
        type: Change kind
        from_text: Replaced text (replace)
        to_text: Replacement text (replace), or the suggested API (comment)
        target: Construct the comment or flag refers to
        note: Human-readable note (comment, flag)
        line: 1-based line in the text the transform received
    """

    type: ChangeType
    from_text: Optional[str] = None
    to_text: Optional[str] = None
    target: Optional[str] = None
    note: Optional[str] = None
    line: Optional[int] = None

    @classmethod
    def replace(cls, from_text: str, to_text: str, line: Optional[int] = None) -> "ChangeRecord":
        return cls(type=ChangeType.REPLACE, from_text=from_text, to_text=to_text, line=line)

    @classmethod
    def comment(
        cls, note: str, target: str, line: Optional[int] = None, to_text: Optional[str] = None
    ) -> "ChangeRecord":
        return cls(type=ChangeType.COMMENT, note=note, target=target, line=line, to_text=to_text)

    @classmethod
    def flag(cls, target: str, note: str, line: Optional[int] = None) -> "ChangeRecord":
        return cls(type=ChangeType.FLAG, target=target, note=note, line=line)

    @property
    def alters_source(self) -> bool:
        return self.type is not ChangeType.FLAG

    def to_json(self) -> Dict[str, Any]:
        data = {
            "type": self.type.value,
            "from": self.from_text,
            "to": self.to_text,
            "target": self.target,
            "note": self.note,
            "line": self.line,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class TransformResult(BaseDomainModel):
    """Output of one transform application."""

    source: str
    changes: List[ChangeRecord] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True when any record altered the text (flags never do)."""
        return any(change.alters_source for change in self.changes)
