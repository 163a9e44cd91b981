"""Core enums and type definitions."""

from enum import StrEnum


class ResolutionMode(StrEnum):
    """How a registry answers resolution queries."""

    COMPILED = "compiled"  # Fixed mappings only, no mutation
    RUNTIME = "runtime"  # Injected bindings, then fixed mappings


class BindingSource(StrEnum):
    """Where a resolved implementation came from."""

    INJECTED = "injected"
    COMPILED = "compiled"
    DEFAULT = "default"  # The identifier resolved to itself
