"""
Removed functionality transforms (SIMPL-REM-*).

There is no safe mechanical rewrite for warehouse management, classic credit
management or NAST output control. These transforms only report the affected
constructs; WM function module calls additionally get a TODO comment.
"""

from __future__ import annotations

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies.base import Flag, InsertComment, PatternTransform

TRANSFORMS = [
    PatternTransform(
        "SIMPL-REM-001",
        "Flag WM tables and function modules for EWM migration",
        Flag(r"\b(?:lagp|lqua|ltap|ltbp)\b", "Migrate to EWM tables/APIs"),
        InsertComment(r"^\s*CALL\s+FUNCTION\s+'L_TO_CREATE\w*'", "Replace WM function module with EWM API"),
    ),
    PatternTransform(
        "SIMPL-REM-002",
        "Flag classic credit management for FSCM migration",
        Flag(r"\b(?:UKMBP_CMS|UKM_\w+|FD32)\b", "Migrate to FSCM credit management"),
    ),
    PatternTransform(
        "SIMPL-REM-003",
        "Flag NAST-based output management for BRF+ migration",
        Flag(r"\b(?:nast|tnapr|nach)\b", "Migrate to BRF+ output management"),
    ),
]

for _transform in TRANSFORMS:
    TransformRegistry.register(_transform)
