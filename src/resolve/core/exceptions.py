"""Custom exception hierarchy for resolve."""

from typing import Any


class ResolveError(Exception):
    """Base exception for all resolve errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CompiledModeError(ResolveError):
    """A mutation was attempted while the registry is fixed in compiled mode."""

    def __init__(
        self,
        message: str,
        operation: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation


class SynthesisCollisionError(ResolveError):
    """A synthesized implementation name was issued twice."""

    def __init__(
        self,
        message: str,
        name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.name = name


class RegistryConfiguredError(ResolveError):
    """The process registry already exists."""

    pass
