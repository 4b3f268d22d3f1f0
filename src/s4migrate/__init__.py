"""
s4migrate - ECC to S/4HANA rule and transform engine.

Scans custom code, scores migration readiness against a catalog of
simplification rules and remediates findings with regex transforms.
"""

__version__ = "0.1.0"
