"""
Domain exceptions for s4migrate.

Catalog load failures are fatal. Gateway and transform failures are caught
at the Scanner and Remediator boundaries and turned into structured records.
All application errors inherit from S4MigrateError.
"""


class S4MigrateError(Exception):
    """Base class for all s4migrate exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class CatalogLoadError(S4MigrateError):
    """Raised when a rule definition cannot be loaded (bad pattern, bad field)."""

    pass


class GatewayError(S4MigrateError):
    """Raised by gateway implementations when the repository is unreachable."""

    pass


class TransformError(S4MigrateError):
    """Raised by a transform that cannot process its input."""

    pass


class ConfigurationError(S4MigrateError):
    """Raised when configuration or a fixture file is invalid."""

    pass
