"""
Gateway collaborator.

Async facade over the custom-code repository. The engine depends only on
the IGateway contract.
"""

from s4migrate.gateway.base import GatewayMode, IGateway
from s4migrate.gateway.mock import MockGateway

__all__ = ["GatewayMode", "IGateway", "MockGateway"]
