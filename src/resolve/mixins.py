"""Ergonomic hooks for code that participates in resolution."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Any, ClassVar

from resolve.registry.accessor import get_registry
from resolve.registry.table import MISSING

if TYPE_CHECKING:
    from resolve.registry.registry import ResolutionRegistry


class Resolvable:
    """
    Mixin giving a class a ``resolve()`` hook with itself as default target.

    Usage:
        class Clock(Resolvable):
            @classmethod
            def now(cls) -> float:
                return cls.resolve().now()

    Set ``resolution_registry`` on the class to use a specific registry
    instead of the process one.
    """

    resolution_registry: ClassVar[ResolutionRegistry | None] = None

    @classmethod
    def resolve(cls, logical: Hashable = MISSING) -> Any:
        registry = cls.resolution_registry or get_registry()
        return registry.resolve(cls if logical is MISSING else logical)


def bind_resolver(
    default: Hashable,
    registry: ResolutionRegistry | None = None,
) -> Callable[[], Any]:
    """
    Build a zero-argument resolver for ``default``.

    The module-level counterpart of ``Resolvable``:

        transport = bind_resolver(HttpTransport)

        def send(payload):
            return transport().send(payload)

    The registry is looked up on every call, never captured early.
    """

    def resolver() -> Any:
        return (registry or get_registry()).resolve(default)

    resolver.__name__ = f"resolve_{getattr(default, '__name__', 'target')}"
    return resolver
