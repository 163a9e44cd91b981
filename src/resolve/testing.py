"""Test helpers and pytest plugin for resolve.

Loaded automatically by pytest through the ``pytest11`` entry point, which
makes the ``resolve_registry`` fixture available in every test session.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import pytest

from resolve.registry.accessor import get_registry

if TYPE_CHECKING:
    from resolve.registry.registry import ResolutionRegistry


@contextmanager
def injected(
    logical: Hashable,
    implementation: Any,
    registry: ResolutionRegistry | None = None,
) -> Iterator[Any]:
    """
    Inject ``implementation`` for the duration of a ``with`` block.

    Yields the bound implementation (the synthesized class when given a
    body) and reverts ``logical`` on exit, even if the block raises.

    Usage:
        with injected(Clock, {"now": lambda: 0.0}) as fake:
            assert resolve(Clock) is fake
    """
    registry = registry or get_registry()
    bound = registry.inject(logical, implementation)
    try:
        yield bound
    finally:
        registry.revert(logical)


@pytest.fixture
def resolve_registry() -> Iterator[ResolutionRegistry]:
    """Provide the process registry and drop every injection afterwards."""
    registry = get_registry()
    yield registry
    if not registry.compiled:
        registry.revert_all()
