"""Core types, models, and exceptions."""

from .exceptions import (
    CompiledModeError,
    RegistryConfiguredError,
    ResolveError,
    SynthesisCollisionError,
)
from .models import Binding
from .types import BindingSource, ResolutionMode

__all__ = [
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
]
