"""
Table replacement transforms (SIMPL-TBL-*).

Each obsolete table identifier is renamed to its S/4HANA successor: pricing
condition tables to the PRCD_* model, aggregate and CO/ML line item tables
to the Universal Journal, payment run tables to their CDS views.
"""

from __future__ import annotations

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies.base import PatternTransform, Rewrite

TABLE_REPLACEMENTS = {
    # Pricing conditions
    "KONV": "PRCD_ELEMENTS",
    "KONH": "PRCD_COND_HEAD",
    "KONP": "PRCD_COND_ITEM",
    "KONM": "PRCD_ELEMENTS",
    "KONW": "PRCD_ELEMENTS",
    "KOTE": "PRCD_ELEMENTS",
    # Document flow
    "VBFA": "I_SalesDocumentFlow",
    # New GL totals and indexes
    "FAGLFLEXT": "ACDOCA",
    "FAGLFLEXA": "ACDOCA",
    "FAGLFLEXP": "ACDOCP",
    "FAGLBSIA": "ACDOCA",
    "GLT0": "ACDOCA",
    "GLT3": "ACDOCA",
    # Controlling
    "COEP": "ACDOCA",
    "COSP": "ACDOCA",
    "COSS": "ACDOCA",
    "COBK": "ACDOCA",
    # Material ledger
    "MLCD": "ACDOCA",
    "MLCR": "ACDOCA",
    "MLHD": "ACDOCA",
    "MLIT": "ACDOCA",
    # Payment run
    "REGUH": "I_PaymentDocument",
    "REGUP": "I_PaymentDocumentItem",
    # Asset accounting
    "ANLP": "ANEK",
    "ANLC": "ANLA",
}

# Costing-based CO-PA tables are generated per operating concern (CE1xxxx ... CE4xxxx).
COPA_TABLE_PREFIXES = ("CE1", "CE2", "CE3", "CE4")


class TableRenameTransform(PatternTransform):
    """Rename every whole-word occurrence of an obsolete table (case-insensitive)."""

    def __init__(self, old_table: str, new_table: str, pattern: str = None):
        self.old_table = old_table
        self.new_table = new_table
        super().__init__(
            f"SIMPL-TBL-{old_table}",
            f"Replace {old_table} with {new_table}",
            Rewrite(pattern or rf"\b{old_table}\b", new_table),
        )


TRANSFORMS = [TableRenameTransform(old, new) for old, new in TABLE_REPLACEMENTS.items()] + [
    TableRenameTransform(f"{prefix}XXXX", "ACDOCA", pattern=rf"\b{prefix}\w{{4}}\b")
    for prefix in COPA_TABLE_PREFIXES
]

for _transform in TRANSFORMS:
    TransformRegistry.register(_transform)
