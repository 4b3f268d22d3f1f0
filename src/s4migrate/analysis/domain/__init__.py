"""
Analysis domain layer.

Contains findings, readiness summary and risk matrix models.
"""
