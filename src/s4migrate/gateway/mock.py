"""
Fixture-backed gateway.

Answers reads and searches from the scan fixture JSON and records writes in
memory so a remediation run can be observed end to end without a system.
"""

import json
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Dict, Optional

from s4migrate.gateway.base import GatewayMode, IGateway
from s4migrate.shared.domain.exceptions import ConfigurationError
from s4migrate.shared.infrastructure.config import settings
from s4migrate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FIXTURE = Path(__file__).parent / "fixtures" / "mock_scan.json"


class MockGateway(IGateway):
    """
    Gateway over a scan fixture document.

    Args:
        fixture_path: Fixture JSON (defaults to ``settings.scan_fixture_path``
            or the packaged fixture)
        fixture: Already-parsed fixture, takes precedence over ``fixture_path``
    """

    def __init__(self, fixture_path: Optional[Path] = None, fixture: Optional[Dict[str, Any]] = None):
        configured = fixture_path or settings.scan_fixture_path
        self.fixture_path = Path(configured) if configured else DEFAULT_FIXTURE
        self._data = fixture
        self.writes: Dict[str, str] = {}

    @property
    def mode(self) -> GatewayMode:
        return GatewayMode.MOCK

    @property
    def supports_write(self) -> bool:
        return True

    def _load(self) -> Dict[str, Any]:
        """Read the fixture once and cache it."""
        if self._data is None:
            try:
                with open(self.fixture_path, encoding="utf-8") as f:
                    self._data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigurationError(
                    f"Cannot load scan fixture {self.fixture_path}: {e}",
                    context={"fixture": str(self.fixture_path)},
                ) from e
            logger.debug("scan_fixture_loaded", fixture=str(self.fixture_path))
        return self._data

    def scan_fixture(self) -> Optional[Dict[str, Any]]:
        return self._load()

    async def read_source(self, object_name: str, object_type: Optional[str] = None) -> Dict[str, Any]:
        logger.debug("gateway_read_source", object_name=object_name, object_type=object_type)
        bundle = self._load().get("sources", {}).get(object_name)
        if not bundle:
            return {"error": f"Object {object_name} not found in repository"}

        ref = next((o for o in self._load().get("objects", []) if o.get("name") == object_name), {})
        return {
            "object_name": object_name,
            "object_type": bundle.get("type") or object_type,
            "package": ref.get("package"),
            "description": ref.get("description"),
            "source": bundle.get("source", ""),
        }

    async def write_source(
        self,
        object_name: str,
        source: str,
        object_type: Optional[str] = None,
        package: Optional[str] = None,
    ) -> Dict[str, Any]:
        logger.info("gateway_write_source", object_name=object_name, package=package or "$TMP")
        self.writes[object_name] = source
        return {
            "object_name": object_name,
            "object_type": object_type or "CLAS",
            "package": package or "$TMP",
            "status": "SAVED",
            "lines": len(source.split("\n")) if source else 0,
        }

    async def search(self, query: str, object_type: Optional[str] = None) -> Dict[str, Any]:
        logger.debug("gateway_search", query=query, object_type=object_type)
        pattern = query.upper()
        results = [
            {
                "name": obj["name"],
                "type": obj.get("type", ""),
                "description": obj.get("description", ""),
                "package": obj.get("package"),
            }
            for obj in self._load().get("objects", [])
            if fnmatchcase(obj["name"].upper(), pattern) and (not object_type or obj.get("type") == object_type)
        ]
        return {"query": query, "result_count": len(results), "results": results}
