"""Material master transforms (SIMPL-MM-*)."""

from __future__ import annotations

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies.base import PatternTransform, Rewrite

TRANSFORMS = [
    PatternTransform(
        "SIMPL-MM-001",
        "Replace hardcoded MATNR length 18 with TYPE matnr",
        Rewrite(r"\bTYPE\s+C\s+LENGTH\s+18\b", "TYPE matnr"),
    ),
]

for _transform in TRANSFORMS:
    TransformRegistry.register(_transform)
