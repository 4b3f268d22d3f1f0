"""
ABAP language modernization transforms (SIMPL-ABAP-*).

Obsolete statements are rewritten to the 7.40+ expression syntax where the
rewrite is mechanical. Constructs that need a developer (BDC recordings,
TABLES work areas, keyed reads) get a TODO comment instead.
"""

from __future__ import annotations

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies.base import InsertComment, PatternTransform, Rewrite

# Operands: variables, structure components and object/class references.
_OPERAND = r"[\w\-~>=/]+"


def _translate(match) -> str:
    target, case = match.group(1), match.group(2).lower()
    return f"{target} = to_{case}( {target} )."


TRANSFORMS = [
    PatternTransform(
        "SIMPL-ABAP-001",
        "Replace OCCURS with TYPE TABLE OF",
        # Only the TYPE/LIKE forms have a known row type.
        Rewrite(r"\b(TYPE|LIKE)(\s+)(\w+)\s+OCCURS\s+\d+", r"\1\2TABLE OF \3"),
    ),
    PatternTransform(
        "SIMPL-ABAP-002",
        "Flag BDC CALL TRANSACTION for manual BAPI replacement",
        InsertComment(
            r"^\s*CALL\s+TRANSACTION\s+'(\w+)'\s+USING\s+\w+\s+MODE\s+'[A-Z]'",
            lambda m: f"Replace CALL TRANSACTION '{m.group(1)}' with BAPI/API",
        ),
    ),
    PatternTransform(
        "SIMPL-ABAP-005",
        "Remove WITH HEADER LINE",
        Rewrite(r"\s+WITH\s+HEADER\s+LINE\b", ""),
    ),
    PatternTransform(
        "SIMPL-ABAP-006",
        "Replace RANGES with DATA ... TYPE RANGE OF",
        Rewrite(r"\bRANGES\s+(\w+)\s+FOR\s+([\w\-]+)\s*\.", r"DATA \1 TYPE RANGE OF \2."),
    ),
    PatternTransform(
        "SIMPL-ABAP-010",
        "Replace MOVE-CORRESPONDING with CORRESPONDING #( )",
        Rewrite(
            rf"\bMOVE-CORRESPONDING\s+({_OPERAND})\s+TO\s+({_OPERAND})\s*\.",
            r"\2 = CORRESPONDING #( \1 ).",
        ),
    ),
    PatternTransform(
        "SIMPL-ABAP-011",
        "Replace CREATE OBJECT ... TYPE with NEW",
        Rewrite(rf"\bCREATE\s+OBJECT\s+({_OPERAND})\s+TYPE\s+([\w/]+)\s*\.", r"\1 = NEW \2( )."),
    ),
    PatternTransform(
        "SIMPL-ABAP-012",
        "Replace parameterless CALL METHOD with functional call",
        Rewrite(rf"\bCALL\s+METHOD\s+({_OPERAND})\s*\.", r"\1( )."),
    ),
    PatternTransform(
        "SIMPL-ABAP-013",
        "Suggest table expressions for READ TABLE ... WITH KEY",
        InsertComment(r"^\s*READ\s+TABLE\s+\S+\s+WITH\s+KEY\b", "Consider table expression syntax"),
    ),
    PatternTransform(
        "SIMPL-ABAP-014",
        "Replace TRANSLATE ... TO UPPER/LOWER CASE with to_upper( )/to_lower( )",
        Rewrite(r"\bTRANSLATE\s+([\w\-]+)\s+TO\s+(UPPER|LOWER)\s+CASE\s*\.", _translate),
    ),
    PatternTransform(
        "SIMPL-ABAP-015",
        "Flag TABLES work area declarations",
        InsertComment(r"^\s*TABLES\s*:", "Replace TABLES declaration with DATA work area"),
    ),
    PatternTransform(
        "SIMPL-ABAP-016",
        "Replace REFRESH with CLEAR",
        Rewrite(r"\bREFRESH\s+(?!CONTROL\b)(\w+)", r"CLEAR \1"),
    ),
    PatternTransform(
        "SIMPL-ABAP-017",
        "Replace DESCRIBE TABLE ... LINES with lines( )",
        Rewrite(r"\bDESCRIBE\s+TABLE\s+(\w+)\s+LINES\s+(\w+)", r"\2 = lines( \1 )"),
    ),
]

for _transform in TRANSFORMS:
    TransformRegistry.register(_transform)
