"""Shared test fixtures for s4migrate-core test suite."""

from __future__ import annotations

import copy
from typing import Dict, Optional

import pytest

from s4migrate.gateway.mock import MockGateway
from s4migrate.rules import get_catalog, reset_catalog
from s4migrate.rules.application.catalog import RuleCatalog
from s4migrate.scanner.domain.models import ObjectRef, ScanResult, ScanStats, SourceBundle
from s4migrate.transforms import TransformRegistry, ensure_transforms_registered


@pytest.fixture(autouse=True)
def _restore_transform_registry():
    """Snapshot the transform registry and restore it after each test."""
    ensure_transforms_registered()
    saved = dict(TransformRegistry._transforms)
    yield
    TransformRegistry._transforms = saved


@pytest.fixture
def catalog() -> RuleCatalog:
    """The packaged default catalog (process-wide instance)."""
    return get_catalog()


@pytest.fixture
def fresh_catalog():
    """Force the process-wide catalog to be rebuilt, and rebuilt again afterwards."""
    reset_catalog()
    yield
    reset_catalog()


def make_scan(
    sources: Optional[Dict[str, str]] = None,
    object_type: str = "CLAS",
    extra_objects: tuple = (),
) -> ScanResult:
    """Build a ScanResult with one listed object per source plus name-only objects."""
    sources = sources or {}
    objects = [ObjectRef(name=name, type=object_type, package="ZTEST") for name in sources]
    objects += [ObjectRef(name=name, type="PROG", package="ZTEST") for name in extra_objects]
    bundles = {name: SourceBundle.of(object_type, text) for name, text in sources.items()}
    return ScanResult(
        objects=objects,
        sources=bundles,
        stats=ScanStats(objects=len(objects), packages=1 if objects else 0, sources_read=len(bundles)),
    )


@pytest.fixture
def scan_factory():
    """Factory for in-memory scan results."""
    return make_scan


@pytest.fixture
def fixture_document() -> dict:
    """A deep copy of the packaged scan fixture."""
    return copy.deepcopy(MockGateway().scan_fixture())


@pytest.fixture
def mock_gateway() -> MockGateway:
    """Gateway over the packaged scan fixture."""
    return MockGateway()
