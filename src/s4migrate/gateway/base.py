"""
Gateway interface.

The gateway is the only boundary where the engine suspends on I/O. Every
method is async and answers with a plain dict shaped like the repository
tooling responses; failures come back as ``{"error": message}`` or as a
raised GatewayError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional


class GatewayMode(str, Enum):
    """Connection mode of a gateway."""

    MOCK = "mock"  # Packaged scan fixture, writes recorded in memory
    LIVE = "live"  # Direct RFC connection
    VSP = "vsp"  # ADT bridge with write support


class IGateway(ABC):
    """
    Repository access used by the Scanner and the Remediator.

    Implementations: MockGateway (fixture-backed). Live connectors implement
    the same contract outside this package.
    """

    @property
    @abstractmethod
    def mode(self) -> GatewayMode:
        """Connection mode tag."""
        ...

    @property
    def supports_write(self) -> bool:
        """Whether write_source persists anything meaningful."""
        return self.mode is GatewayMode.VSP

    def scan_fixture(self) -> Optional[Dict[str, Any]]:
        """Prebuilt scan result for mock mode, or None when unavailable."""
        return None

    @abstractmethod
    async def read_source(self, object_name: str, object_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Read the source of one object.

        Returns:
            ``{object_name, object_type, source}`` or ``{error}``
        """
        ...

    @abstractmethod
    async def write_source(
        self,
        object_name: str,
        source: str,
        object_type: Optional[str] = None,
        package: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Write the source of one object.

        Returns:
            ``{status: "SAVED", lines, ...}`` or ``{error}``
        """
        ...

    @abstractmethod
    async def search(self, query: str, object_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Search the repository by name pattern.

        Returns:
            ``{query, result_count, results: [{name, type, description, package}]}`` or ``{error}``
        """
        ...
