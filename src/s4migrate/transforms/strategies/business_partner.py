"""
Business partner transforms (SIMPL-BP-*).

Customer and vendor master tables are renamed to their Business Partner
counterparts (CVI). Classic customer/vendor BAPIs are annotated for
migration to the API_BUSINESS_PARTNER OData service.
"""

from __future__ import annotations

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies.base import InsertComment, PatternTransform, Rewrite

CUSTOMER_TABLES = {"kna1": "but000", "knb1": "but020", "knvv": "but050"}
VENDOR_TABLES = {"lfa1": "but000", "lfb1": "but020", "lfbk": "but100"}

TRANSFORMS = [
    PatternTransform(
        "SIMPL-BP-001",
        "Replace customer master tables with Business Partner",
        *[Rewrite(rf"\b{old}\b", new) for old, new in CUSTOMER_TABLES.items()],
    ),
    PatternTransform(
        "SIMPL-BP-002",
        "Replace vendor master tables with Business Partner",
        *[Rewrite(rf"\b{old}\b", new) for old, new in VENDOR_TABLES.items()],
    ),
    PatternTransform(
        "SIMPL-BP-003",
        "Flag deprecated customer/vendor BAPIs for manual review",
        InsertComment(
            r"^\s*CALL\s+FUNCTION\s+'(?:BAPI_CUSTOMER_|BAPI_VENDOR_)\w+'",
            "Replace with API_BUSINESS_PARTNER OData service",
            suggestion="API_BUSINESS_PARTNER",
        ),
    ),
]

for _transform in TRANSFORMS:
    TransformRegistry.register(_transform)
