"""
Deprecated function module transforms (SIMPL-FM-*).

Calls to classic BAPIs stay in place; a TODO line naming the released API is
inserted above each ``CALL FUNCTION``. Porting the parameter interface is
left to the developer.
"""

from __future__ import annotations

from s4migrate.transforms.registry import TransformRegistry
from s4migrate.transforms.strategies.base import InsertComment, PatternTransform

FM_REPLACEMENTS = {
    # Business partner
    "BAPI_CUSTOMER_GETLIST": "API_BUSINESS_PARTNER",
    "BAPI_CUSTOMER_CREATEFROMDATA1": "API_BUSINESS_PARTNER",
    "BAPI_CUSTOMER_GETDETAIL2": "API_BUSINESS_PARTNER",
    "BAPI_VENDOR_GETLIST": "API_BUSINESS_PARTNER",
    "BAPI_VENDOR_CREATE": "API_BUSINESS_PARTNER",
    "BAPI_VENDOR_GETDETAIL": "API_BUSINESS_PARTNER",
    # Product master
    "BAPI_MATERIAL_GET_ALL": "API_PRODUCT_SRV",
    "BAPI_MATERIAL_GET_DETAIL": "API_PRODUCT_SRV",
    "BAPI_MATERIAL_SAVEDATA": "API_PRODUCT_SRV",
    # Finance
    "BAPI_ACC_GL_POSTING_POST": "API_JOURNALENTRY_SRV",
    "BAPI_ACC_DOCUMENT_POST": "API_JOURNALENTRY_SRV",
    # Sales
    "BAPI_SALESORDER_CREATEFROMDAT2": "API_SALES_ORDER_SRV",
    "BAPI_SALESORDER_CHANGE": "API_SALES_ORDER_SRV",
    "BAPI_OUTB_DELIVERY_CREATE_SLS": "API_OUTBOUND_DELIVERY_SRV",
    "BAPI_BILLINGDOC_CREATEMULTIPLE": "API_BILLING_DOCUMENT_SRV",
    # Purchasing and inventory
    "BAPI_PO_CREATE1": "API_PURCHASEORDER_PROCESS_SRV",
    "BAPI_PO_CHANGE": "API_PURCHASEORDER_PROCESS_SRV",
    "BAPI_PR_CREATE": "API_PURCHASEREQ_PROCESS_SRV",
    "BAPI_CONTRACT_CREATE": "API_PURCHASECONTRACT_PROCESS_SRV",
    "BAPI_GOODSMVT_CREATE": "API_MATERIAL_DOCUMENT_SRV",
    "BAPI_INCOMINGINVOICE_CREATE": "API_SUPPLIERINVOICE_PROCESS_SRV",
    # Production and maintenance
    "BAPI_PRODORD_CREATE": "API_PRODUCTION_ORDER_2_SRV",
    "BAPI_PRODORD_RELEASE": "API_PRODUCTION_ORDER_2_SRV",
    "BAPI_ALM_ORDER_MAINTAIN": "API_MAINTENANCEORDER",
    "BAPI_EQUI_CREATE": "API_EQUIPMENT",
    # Asset accounting and controlling
    "BAPI_FIXEDASSET_CREATE1": "API_FIXEDASSET_SRV",
    "BAPI_COSTCENTER_GETLIST": "API_COSTCENTER_SRV",
    "BAPI_COSTCENTER_CREATEMULTIPLE": "API_COSTCENTER_SRV",
    "BAPI_PROFITCENTER_CREATE": "API_PROFITCENTER_SRV",
    "BAPI_INTERNALORDER_CREATE": "API_INTERNALORDER_SRV",
}

# Rule identities carry at most 20 characters of the function module name.
FM_ID_LENGTH = 20


def fm_rule_id(function_module: str) -> str:
    return f"SIMPL-FM-{function_module[:FM_ID_LENGTH]}"


class FunctionModuleTransform(PatternTransform):
    """Annotate calls of one deprecated function module with its successor API."""

    def __init__(self, function_module: str, api: str):
        self.function_module = function_module
        self.api = api
        super().__init__(
            fm_rule_id(function_module),
            f"Flag {function_module} for replacement with {api}",
            InsertComment(
                rf"^\s*CALL\s+FUNCTION\s+'{function_module}'",
                f"Replace {function_module} with {api}",
                suggestion=api,
            ),
        )


TRANSFORMS = [FunctionModuleTransform(fm, api) for fm, api in FM_REPLACEMENTS.items()]

for _transform in TRANSFORMS:
    TransformRegistry.register(_transform)
