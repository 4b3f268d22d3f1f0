"""Transform registry keyed by rule identity."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from s4migrate.shared.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from s4migrate.transforms.base import ITransform

logger = get_logger(__name__)


class TransformRegistry:
    """Central registry mapping rule identities to transforms."""

    _transforms: dict[str, ITransform] = {}

    @classmethod
    def register(cls, transform: ITransform) -> bool:
        """Register a transform by its id. First registration wins."""
        if transform.id in cls._transforms:
            logger.warning("duplicate_transform_dropped", transform_id=transform.id)
            return False
        cls._transforms[transform.id] = transform
        return True

    @classmethod
    def get(cls, rule_id: str) -> ITransform | None:
        """Look up the transform for a rule identity."""
        return cls._transforms.get(rule_id)

    @classmethod
    def has(cls, rule_id: str) -> bool:
        return rule_id in cls._transforms

    @classmethod
    def all(cls) -> list[ITransform]:
        """Return all registered transforms in registration order."""
        return list(cls._transforms.values())

    @classmethod
    def stats(cls) -> dict:
        """Total count plus a breakdown by module prefix."""
        by_module = Counter(t.module for t in cls._transforms.values())
        return {"total": len(cls._transforms), "byModule": dict(by_module)}

    @classmethod
    def clear(cls) -> None:
        """Remove all registered transforms. Useful for testing."""
        cls._transforms = {}
