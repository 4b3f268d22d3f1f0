"""Abstract base class for source transforms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from s4migrate.rules.domain.models import module_of

if TYPE_CHECKING:
    from s4migrate.analysis.domain.models import Finding
    from s4migrate.transforms.domain.models import TransformResult


class ITransform(ABC):
    """
    Source-to-source rewriter bound to one rule identity.

    Implementations must be pure: no side effects, safe to call repeatedly,
    and idempotent on their own output (a second application reports no
    changes). A result carries at least one change record if and only if the
    text was altered, apart from flag records which never alter it.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """Rule identity this transform addresses, e.g. 'SIMPL-FIN-001'."""

    @property
    def description(self) -> str:
        return ""

    @property
    def module(self) -> str:
        return module_of(self.id)

    @abstractmethod
    def apply(self, source: str, finding: Optional[Finding] = None) -> TransformResult:
        """Transform ``source``. ``finding`` is the finding being remediated, if any."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
