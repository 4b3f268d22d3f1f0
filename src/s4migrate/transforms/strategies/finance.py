"""
Finance transforms (SIMPL-FIN-*).

Table level: BSEG and the secondary index tables (BSID/BSIK/BSAD/BSAK,
BSIS/BSAS) move to the Universal Journal ACDOCA; cost element tables move to
the GL account master. Field level: ``TABLE-FIELD`` references are mapped to
their S/4HANA counterparts.
"""

from __future__ import annotations

import re
from typing import Dict

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies.base import PatternTransform, Rewrite

BSEG_FIELD_MAP = {
    "HKONT": "ACDOCA-GLACCOUNT",
    "WRBTR": "ACDOCA-AMOUNTINTRANSACTIONCURRENCY",
    "DMBTR": "ACDOCA-AMOUNTINCOMPANYCODECURRENCY",
    "SHKZG": "ACDOCA-DEBITCREDITCODE",
    "BELNR": "ACDOCA-ACCOUNTINGDOCUMENT",
    "GJAHR": "ACDOCA-FISCALYEAR",
    "BUKRS": "ACDOCA-COMPANYCODE",
    "LIFNR": "ACDOCA-SUPPLIER",
    "KUNNR": "ACDOCA-CUSTOMER",
    "KOSTL": "ACDOCA-COSTCENTER",
    "PRCTR": "ACDOCA-PROFITCENTER",
}

CVI_FIELD_MAP = {
    "KNA1-NAME1": "BUT000-NAME_ORG1",
    "KNA1-ORT01": "BUT020-CITY",
    "KNA1-PSTLZ": "BUT020-POSTL_COD1",
    "KNA1-LAND1": "BUT020-COUNTRY",
    "LFA1-NAME1": "BUT000-NAME_ORG1",
    "LFA1-ORT01": "BUT020-CITY",
    "LFA1-STRAS": "BUT020-STREET",
}

ASSET_FIELD_MAP = {
    "ANLP-NAFAZ": "ANEK-NAFAZ",
    "ANLP-ANSWL": "ANEK-ANSWL",
    "ANLC-KANSW": "ANLA-KANSW",
    "ANLC-KNAFA": "ANLA-KNAFA",
}


def _field_rewrite(tables: str, field_map: Dict[str, str]) -> Rewrite:
    """Rewrite ``TABLE-FIELD`` references found in ``field_map``; unmapped fields stay."""

    def replace(match) -> str:
        return field_map.get(match.group(0).upper(), match.group(0))

    return Rewrite(rf"\b(?:{tables})-\w+\b", replace)


_BSEG = re.compile(r"\bbseg\b", re.IGNORECASE)


def _tables_statement(match) -> str:
    """Replace every BSEG in one TABLES statement line."""
    return _BSEG.sub("acdoca", match.group(0))


def _bseg_fields(match) -> str:
    return BSEG_FIELD_MAP.get(match.group(1).upper(), match.group(0))


_OPEN_ITEM_TABLES = "bsid|bsik|bsad|bsak"

TRANSFORMS = [
    PatternTransform(
        "SIMPL-FIN-001",
        "Replace BSEG access with ACDOCA",
        Rewrite(r"\b(SELECT\s+\*\s+FROM\s+)bseg\b", r"\1acdoca"),
        Rewrite(r"\b(TYPE\s+TABLE\s+OF\s+)bseg\b", r"\1acdoca"),
        Rewrite(r"\b(TYPE\s+)bseg\b(?!\s+OCCURS)", r"\1acdoca"),
        Rewrite(r"\bTABLES\s*:[^\n]*", _tables_statement),
    ),
    PatternTransform(
        "SIMPL-FIN-002",
        "Replace customer/vendor line item tables with ACDOCA",
        Rewrite(rf"\b(SELECT\s+[^\n]*?\s+FROM\s+)(?:{_OPEN_ITEM_TABLES})\b", r"\1acdoca"),
        Rewrite(rf"\b(TYPE\s+TABLE\s+OF\s+)(?:{_OPEN_ITEM_TABLES})\b", r"\1acdoca"),
    ),
    PatternTransform(
        "SIMPL-FIN-003",
        "Replace GL line item tables with ACDOCA",
        Rewrite(r"\b(?:bsis|bsas)\b", "acdoca"),
    ),
    PatternTransform(
        "SIMPL-FIN-004",
        "Replace cost element tables with GL account master",
        Rewrite(r"\bCSKA\b", "SKA1"),
        Rewrite(r"\bCSKB\b", "SKB1"),
    ),
    PatternTransform(
        "SIMPL-FIN-010",
        "Map BSEG field references to ACDOCA",
        Rewrite(r"\bBSEG-(\w+)\b", _bseg_fields),
    ),
    PatternTransform(
        "SIMPL-FIN-011",
        "Map customer/vendor master fields to Business Partner",
        _field_rewrite("KNA1|LFA1", CVI_FIELD_MAP),
    ),
    PatternTransform(
        "SIMPL-FIN-012",
        "Map asset value fields to ANEK/ANLA",
        _field_rewrite("ANLP|ANLC", ASSET_FIELD_MAP),
    ),
]

for _transform in TRANSFORMS:
    TransformRegistry.register(_transform)
