"""
Repository scanner.

Collects custom objects and their source through the gateway. In mock mode
the packaged scan fixture is returned as-is. The live path probes each
configured namespace, deduplicates by name and reads source for code-bearing
object types. Gateway failures are counted, never raised.
"""

from typing import Dict, Iterable, List, Optional

from s4migrate.gateway.base import GatewayMode, IGateway
from s4migrate.scanner.domain.models import ObjectRef, PackageInfo, ScanResult, ScanStats, SourceBundle
from s4migrate.shared.domain.exceptions import ConfigurationError
from s4migrate.shared.infrastructure.config import settings
from s4migrate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Scanner:
    """
    Produces a ScanResult from a gateway.

    Args:
        gateway: Repository gateway
        namespaces: Search probes (defaults to ``settings.scan_namespaces``)
        code_bearing_types: Object types whose source is read
            (defaults to ``settings.code_bearing_types``)
    """

    def __init__(
        self,
        gateway: IGateway,
        namespaces: Optional[Iterable[str]] = None,
        code_bearing_types: Optional[Iterable[str]] = None,
    ):
        self.gateway = gateway
        self.namespaces: List[str] = list(namespaces if namespaces is not None else settings.scan_namespaces)
        self.code_bearing_types = {
            t.upper() for t in (code_bearing_types if code_bearing_types is not None else settings.code_bearing_types)
        }

    async def scan(self) -> ScanResult:
        """Scan the repository. Always returns a well-formed result."""
        logger.info("scan_started", mode=self.gateway.mode.value, namespaces=self.namespaces)

        if self.gateway.mode is GatewayMode.MOCK:
            result = self._scan_fixture()
            if result is not None:
                self._log_completed(result)
                return result

        result = await self._scan_repository()
        self._log_completed(result)
        return result

    def _scan_fixture(self) -> Optional[ScanResult]:
        try:
            fixture = self.gateway.scan_fixture()
            if fixture is None:
                return None
            return ScanResult.from_json(fixture)
        except (ConfigurationError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("scan_fixture_invalid", error=str(e))
            return ScanResult(stats=ScanStats(errors=1))

    async def _scan_repository(self) -> ScanResult:
        objects: Dict[str, ObjectRef] = {}
        packages: Dict[str, PackageInfo] = {}
        sources: Dict[str, SourceBundle] = {}
        errors = 0

        for query in self.namespaces:
            try:
                response = await self.gateway.search(query)
            except Exception as e:
                logger.warning("scan_search_failed", query=query, error=str(e))
                errors += 1
                continue

            if "error" in response:
                logger.warning("scan_search_failed", query=query, error=response["error"])
                errors += 1
                continue

            for item in response.get("results", []):
                name = item.get("name")
                if not name or name in objects:
                    continue
                package = item.get("package") or ""
                objects[name] = ObjectRef(
                    name=name,
                    type=item.get("type") or "",
                    description=item.get("description") or "",
                    package=package,
                )
                if package and package not in packages:
                    packages[package] = PackageInfo(name=package)

        for obj in objects.values():
            if obj.type.upper() not in self.code_bearing_types:
                continue
            try:
                response = await self.gateway.read_source(obj.name, obj.type)
            except Exception as e:
                logger.warning("scan_read_failed", object_name=obj.name, error=str(e))
                errors += 1
                continue

            source = response.get("source")
            if "error" in response or source is None:
                logger.warning("scan_read_failed", object_name=obj.name, error=response.get("error", "no source"))
                errors += 1
                continue

            sources[obj.name] = SourceBundle.of(response.get("object_type") or obj.type, source)

        return ScanResult(
            packages=list(packages.values()),
            objects=list(objects.values()),
            sources=sources,
            stats=ScanStats(
                objects=len(objects),
                packages=len(packages),
                sources_read=len(sources),
                errors=errors,
            ),
        )

    @staticmethod
    def _log_completed(result: ScanResult) -> None:
        logger.info(
            "scan_completed",
            objects=result.stats.objects,
            packages=result.stats.packages,
            sources_read=result.stats.sources_read,
            errors=result.stats.errors,
        )
