"""Resolve - Runtime and compile-time dependency resolution."""

from collections.abc import Hashable
from typing import Any

from resolve.config import ResolveSettings, get_settings
from resolve.core.exceptions import (
    CompiledModeError,
    RegistryConfiguredError,
    ResolveError,
    SynthesisCollisionError,
)
from resolve.core.models import Binding
from resolve.core.types import BindingSource, ResolutionMode
from resolve.mixins import Resolvable, bind_resolver
from resolve.registry import (
    ImplementationSynthesizer,
    ResolutionRegistry,
    RuntimeTable,
    configure,
    get_registry,
    reset_registry,
)


def resolve(logical: Hashable) -> Any:
    """Get the implementation currently bound to ``logical``."""
    return get_registry().resolve(logical)


def inject(logical: Hashable, implementation: Any) -> Any:
    """Bind ``implementation`` (or a class built from a mapping body) for ``logical``."""
    return get_registry().inject(logical, implementation)


def revert(logical: Hashable) -> None:
    """Restore ``logical`` to its compiled mapping or to itself."""
    get_registry().revert(logical)


def revert_all() -> None:
    """Drop every injected binding."""
    get_registry().revert_all()


__version__ = "0.1.0"
__all__ = [
    # Operations
    "inject",
    "resolve",
    "revert",
    "revert_all",
    # Registry
    "ImplementationSynthesizer",
    "ResolutionRegistry",
    "RuntimeTable",
    "configure",
    "get_registry",
    "reset_registry",
    # Integration
    "Resolvable",
    "bind_resolver",
    # Config
    "ResolveSettings",
    "get_settings",
    # Types
    "BindingSource",
    "ResolutionMode",
    # Models
    "Binding",
    # Exceptions
    "CompiledModeError",
    "RegistryConfiguredError",
    "ResolveError",
    "SynthesisCollisionError",
    # Version
    "__version__",
]
