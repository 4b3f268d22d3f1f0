"""
Source transforms.

Every transform is bound to the rule identity it remediates. Importing this
package populates TransformRegistry with all transform families.
"""

from s4migrate.transforms.base import ITransform
from s4migrate.transforms.domain.models import ChangeRecord, ChangeType, TransformResult
from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies import ensure_transforms_registered

__all__ = [
    "ChangeRecord",
    "ChangeType",
    "ITransform",
    "TransformRegistry",
    "TransformResult",
    "ensure_transforms_registered",
]
