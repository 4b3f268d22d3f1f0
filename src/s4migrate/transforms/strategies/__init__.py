"""
Transform families.

Importing this package registers every transform with TransformRegistry.
"""

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies import (
    abap,
    business_partner,
    finance,
    function_modules,
    materials,
    removed,
    table_rename,
)

FAMILIES = (finance, business_partner, materials, abap, removed, table_rename, function_modules)


def ensure_transforms_registered() -> int:
    """Register any transform missing from the registry (e.g. after clear()).

    Returns:
        Number of transforms registered by this call
    """
    added = 0
    for family in FAMILIES:
        for transform in family.TRANSFORMS:
            if not TransformRegistry.has(transform.id):
                TransformRegistry.register(transform)
                added += 1
    return added


__all__ = ["FAMILIES", "ensure_transforms_registered"]
