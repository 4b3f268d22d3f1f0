"""Tests for the repository scanner."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from s4migrate.gateway import GatewayMode, IGateway, MockGateway
from s4migrate.scanner import Scanner
from s4migrate.scanner.domain.models import ScanResult
from s4migrate.shared.domain.exceptions import GatewayError


def _live_gateway(search_results, sources=None):
    """Gateway double in VSP mode answering from in-memory dicts."""
    sources = sources or {}
    gateway = MagicMock(spec=IGateway)
    gateway.mode = GatewayMode.VSP

    async def search(query, object_type=None):
        return search_results[query]

    async def read_source(name, object_type=None):
        if name not in sources:
            return {"error": f"{name} not found"}
        return {"object_name": name, "object_type": object_type, "source": sources[name]}

    gateway.search = AsyncMock(side_effect=search)
    gateway.read_source = AsyncMock(side_effect=read_source)
    return gateway


class TestFixtureScan:
    @pytest.mark.asyncio
    async def test_returns_fixture_as_is(self, mock_gateway, fixture_document):
        result = await Scanner(mock_gateway).scan()

        assert isinstance(result, ScanResult)
        assert [o.name for o in result.objects] == [o["name"] for o in fixture_document["objects"]]
        assert result.stats.sources_read == 6
        assert result.sources["ZCL_SD_PRICING"].lines == 8
        assert result.get_object("Y001_EXIT_HANDLER").package == "YEXIT"
        assert "Y001_EXIT_HANDLER" not in result.sources

    @pytest.mark.asyncio
    async def test_fixture_without_stats(self, fixture_document):
        del fixture_document["stats"]
        result = await Scanner(MockGateway(fixture=fixture_document)).scan()
        assert result.stats.objects == 7
        assert result.stats.sources_read == 6

    @pytest.mark.asyncio
    async def test_invalid_fixture_yields_empty_result(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[", encoding="utf-8")

        result = await Scanner(MockGateway(fixture_path=path)).scan()
        assert result.objects == []
        assert result.stats.errors == 1

    @pytest.mark.asyncio
    async def test_round_trips_through_json(self, mock_gateway):
        result = await Scanner(mock_gateway).scan()
        assert ScanResult.from_json(result.to_json()) == result


class TestRepositoryScan:
    @pytest.mark.asyncio
    async def test_dedupes_objects_across_probes(self):
        gateway = _live_gateway(
            {
                "Z*": {"results": [{"name": "ZCL_A", "type": "CLAS", "package": "ZP"}]},
                "Y*": {"results": [{"name": "ZCL_A", "type": "CLAS", "package": "ZP"}, {"name": "YR", "type": "PROG", "package": "YP"}]},
            },
            sources={"ZCL_A": "CLASS zcl_a.\nENDCLASS.", "YR": "REPORT yr."},
        )
        result = await Scanner(gateway).scan()

        assert [o.name for o in result.objects] == ["ZCL_A", "YR"]
        assert [p.name for p in result.packages] == ["ZP", "YP"]
        assert result.sources["ZCL_A"].lines == 2
        assert result.stats.objects == 2
        assert result.stats.sources_read == 2
        assert result.stats.errors == 0

    @pytest.mark.asyncio
    async def test_only_code_bearing_types_are_read(self):
        gateway = _live_gateway(
            {"Z*": {"results": [{"name": "ZTABLE", "type": "TABL", "package": "ZP"}, {"name": "ZR", "type": "PROG", "package": "ZP"}]}},
            sources={"ZR": "REPORT zr.", "ZTABLE": "irrelevant"},
        )
        result = await Scanner(gateway, namespaces=["Z*"]).scan()

        assert set(result.sources) == {"ZR"}
        gateway.read_source.assert_awaited_once_with("ZR", "PROG")

    @pytest.mark.asyncio
    async def test_failed_probe_is_counted(self):
        gateway = _live_gateway({"Z*": {"error": "RFC timeout"}, "Y*": {"results": []}})
        result = await Scanner(gateway).scan()

        assert result.objects == []
        assert result.stats.errors == 1

    @pytest.mark.asyncio
    async def test_raising_probe_is_counted(self):
        gateway = _live_gateway({"Y*": {"results": [{"name": "YR", "type": "PROG"}]}}, sources={"YR": "REPORT yr."})
        result = await Scanner(gateway).scan()

        assert [o.name for o in result.objects] == ["YR"]
        assert result.packages == []
        assert result.stats.errors == 1

    @pytest.mark.asyncio
    async def test_failed_read_keeps_object_without_source(self):
        gateway = _live_gateway({"Z*": {"results": [{"name": "ZR", "type": "PROG", "package": "ZP"}]}})
        result = await Scanner(gateway, namespaces=["Z*"]).scan()

        assert [o.name for o in result.objects] == ["ZR"]
        assert result.sources == {}
        assert result.stats.errors == 1

    @pytest.mark.asyncio
    async def test_raising_read_is_counted(self):
        gateway = _live_gateway({"Z*": {"results": [{"name": "ZR", "type": "PROG"}]}})
        gateway.read_source = AsyncMock(side_effect=GatewayError("RFC_COMMUNICATION_FAILURE"))
        result = await Scanner(gateway, namespaces=["Z*"]).scan()

        assert result.stats.errors == 1
        assert result.stats.sources_read == 0
