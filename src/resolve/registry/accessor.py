"""Process-wide registry accessor."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from resolve.core.exceptions import RegistryConfiguredError
from resolve.registry.registry import ResolutionRegistry

if TYPE_CHECKING:
    from resolve.config import ResolveSettings

logger = logging.getLogger(__name__)

_registry: ResolutionRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> ResolutionRegistry:
    """
    Get the process registry, building it from settings on first access.

    Concurrent first calls construct exactly one registry.
    """
    registry = _registry
    if registry is not None:
        return registry
    return _install(None, replace_ok=True)


def configure(settings: ResolveSettings) -> ResolutionRegistry:
    """
    Build the process registry from explicit settings.

    Must run before anything else touches the registry; the mode is fixed
    for the life of the process once a registry exists.

    Raises:
        ValueError: If the log level is unknown; nothing is installed
        RegistryConfiguredError: If the process registry already exists
    """
    level = logging.getLevelNamesMapping().get(settings.log_level.upper())
    if level is None:
        raise ValueError(f"Unknown log level {settings.log_level!r}")

    registry = _install(settings, replace_ok=False)
    logging.getLogger("resolve").setLevel(level)
    return registry


def reset_registry() -> None:
    """
    Drop the process registry so the next access builds a fresh one.

    For test isolation only. Code still holding the old registry keeps
    using it.
    """
    global _registry
    with _registry_lock:
        _registry = None
    logger.debug("Process registry reset")


def _install(settings: ResolveSettings | None, *, replace_ok: bool) -> ResolutionRegistry:
    global _registry
    with _registry_lock:
        if _registry is not None:
            if replace_ok:
                return _registry
            raise RegistryConfiguredError(
                "Process registry is already configured",
                details={"mode": str(_registry.mode)},
            )
        _registry = ResolutionRegistry(settings)
        return _registry
