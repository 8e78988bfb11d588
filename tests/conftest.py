"""Pytest configuration and shared fixtures for strawbuild tests."""

from __future__ import annotations

import pytest

from strawbuild.domain import MaterialCatalog, WallConstructionArea
from strawbuild.domain.materials import MaterialResolver


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests running the CLI end-to-end"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def catalog() -> MaterialCatalog:
    """Built-in material catalog."""
    return MaterialCatalog.default()


@pytest.fixture
def resolve(catalog: MaterialCatalog) -> MaterialResolver:
    """Material lookup over the built-in catalog."""
    return catalog.resolve


@pytest.fixture
def straw_wall() -> WallConstructionArea:
    """A 2m long, 1m high wall exactly one bale thick."""
    return WallConstructionArea.from_values((0, 0, 0), (2000, 360, 1000))
