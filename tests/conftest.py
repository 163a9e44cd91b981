"""Shared test fixtures for all tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from resolve.config import ResolveSettings, get_settings
from resolve.registry import ResolutionRegistry, reset_registry
from samples import MockSensor, Sensor


# ============================================================================
# Process Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_process_registry(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with no process registry and default settings."""
    for key in list(os.environ):
        if key.upper().startswith("RESOLVE_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    reset_registry()
    yield
    reset_registry()
    get_settings.cache_clear()


# ============================================================================
# Settings and Registry Fixtures
# ============================================================================


@pytest.fixture
def runtime_settings() -> ResolveSettings:
    """Runtime mode with no compiled mappings."""
    return ResolveSettings(compile=False, mappings=[])


@pytest.fixture
def runtime_settings_mapped() -> ResolveSettings:
    """Runtime mode with Sensor compiled to MockSensor."""
    return ResolveSettings(compile=False, mappings=[(Sensor, MockSensor)])


@pytest.fixture
def compiled_settings() -> ResolveSettings:
    """Compiled mode with Sensor fixed to MockSensor."""
    return ResolveSettings(compile=True, mappings=[(Sensor, MockSensor)])


@pytest.fixture
def runtime_registry(runtime_settings: ResolveSettings) -> ResolutionRegistry:
    """Registry in runtime mode with nothing mapped."""
    return ResolutionRegistry(runtime_settings)


@pytest.fixture
def mapped_registry(runtime_settings_mapped: ResolveSettings) -> ResolutionRegistry:
    """Registry in runtime mode with a compiled fallback."""
    return ResolutionRegistry(runtime_settings_mapped)


@pytest.fixture
def compiled_registry(compiled_settings: ResolveSettings) -> ResolutionRegistry:
    """Registry fixed in compiled mode."""
    return ResolutionRegistry(compiled_settings)
