"""Tests for the process-wide registry accessor."""

from __future__ import annotations

import logging
import threading

import pytest

from resolve.config import ResolveSettings
from resolve.core.exceptions import RegistryConfiguredError
from resolve.core.types import ResolutionMode
from resolve.registry import accessor, configure, get_registry, reset_registry
from samples import FakeLogger, Logger, MockSensor, Sensor


class TestGetRegistry:
    """Tests for lazy construction of the process registry."""

    def test_singleton(self):
        """Every access returns the same registry."""
        assert get_registry() is get_registry()

    def test_built_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        """The first access reads settings from the environment."""
        monkeypatch.setenv("RESOLVE_COMPILE", "1")

        registry = get_registry()

        assert registry.mode == ResolutionMode.COMPILED

    def test_defaults_to_runtime(self):
        """Without configuration the process registry is in runtime mode."""
        assert get_registry().mode == ResolutionMode.RUNTIME

    def test_concurrent_first_access(self, monkeypatch: pytest.MonkeyPatch):
        """Racing first accesses construct exactly one registry."""
        constructed = []
        original = accessor.ResolutionRegistry

        def counting(*args, **kwargs):
            constructed.append(1)
            return original(*args, **kwargs)

        monkeypatch.setattr(accessor, "ResolutionRegistry", counting)

        results = []
        results_lock = threading.Lock()
        barrier = threading.Barrier(16)

        def worker():
            barrier.wait()
            registry = get_registry()
            with results_lock:
                results.append(registry)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(constructed) == 1
        assert len({id(r) for r in results}) == 1


class TestConfigure:
    """Tests for explicit configuration of the process registry."""

    def test_configure_installs(self):
        """Configured settings are what get_registry returns."""
        registry = configure(ResolveSettings(compile=True, mappings=[(Sensor, MockSensor)]))

        assert get_registry() is registry
        assert get_registry().resolve(Sensor) is MockSensor

    def test_configure_twice_rejected(self):
        """The mode cannot be changed once a registry exists."""
        configure(ResolveSettings())

        with pytest.raises(RegistryConfiguredError) as exc_info:
            configure(ResolveSettings(compile=True))

        assert exc_info.value.details["mode"] == "runtime"
        assert get_registry().mode == ResolutionMode.RUNTIME

    def test_configure_after_access_rejected(self):
        """Implicit construction also fixes the registry."""
        get_registry()
        with pytest.raises(RegistryConfiguredError):
            configure(ResolveSettings(compile=True))

    def test_configure_sets_log_level(self):
        """The package logger follows the configured level."""
        package_logger = logging.getLogger("resolve")
        previous = package_logger.level
        try:
            configure(ResolveSettings(log_level="debug"))
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)

    def test_bad_log_level_installs_nothing(self):
        """A rejected configure leaves the process free to be configured."""
        settings = ResolveSettings(compile=True)
        settings.log_level = "verbose"

        with pytest.raises(ValueError, match="Unknown log level"):
            configure(settings)

        registry = configure(ResolveSettings(compile=True, mappings=[(Sensor, MockSensor)]))
        assert get_registry() is registry
        assert registry.resolve(Sensor) is MockSensor


class TestResetRegistry:
    """Tests for dropping the process registry."""

    def test_reset_builds_fresh_registry(self):
        """After reset a new registry without old bindings is built."""
        first = get_registry()
        first.inject(Logger, FakeLogger)

        reset_registry()
        second = get_registry()

        assert second is not first
        assert second.resolve(Logger) is Logger

    def test_reset_allows_reconfigure(self):
        """A reset registry may be configured in another mode."""
        configure(ResolveSettings())
        reset_registry()

        registry = configure(ResolveSettings(compile=True))

        assert registry.compiled
