"""Resolution registry, runtime table, and process-wide accessor."""

from resolve.registry.accessor import configure, get_registry, reset_registry
from resolve.registry.registry import ResolutionRegistry
from resolve.registry.synthesis import ImplementationSynthesizer
from resolve.registry.table import RuntimeTable

__all__ = [
    # Registry
    "ResolutionRegistry",
    "RuntimeTable",
    "ImplementationSynthesizer",
    # Accessor
    "configure",
    "get_registry",
    "reset_registry",
]
