"""Resolution registry binding logical identifiers to implementations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from resolve.core.exceptions import CompiledModeError
from resolve.core.models import Binding
from resolve.core.types import BindingSource, ResolutionMode
from resolve.registry.synthesis import ImplementationSynthesizer
from resolve.registry.table import MISSING, RuntimeTable

if TYPE_CHECKING:
    from resolve.config import ResolveSettings

logger = logging.getLogger(__name__)


class ResolutionRegistry:
    """
    Answers "which implementation is bound to this identifier right now?".

    The mode is read from settings once, at construction:

    - compiled: only the fixed mappings are consulted. Nothing is locked and
      nothing can be injected.
    - runtime: injected bindings are consulted first, then the fixed
      mappings. The runtime table is created on first use.

    An identifier with no binding in either layer resolves to itself.

    Usage:
        registry = ResolutionRegistry(ResolveSettings(mappings=[(Clock, SystemClock)]))
        registry.resolve(Clock)            # SystemClock
        registry.inject(Clock, FakeClock)
        registry.resolve(Clock)            # FakeClock
        registry.revert(Clock)
        registry.resolve(Clock)            # SystemClock
    """

    def __init__(
        self,
        settings: ResolveSettings | None = None,
        *,
        table_factory: Callable[[], RuntimeTable] = RuntimeTable,
        synthesizer: ImplementationSynthesizer | None = None,
    ) -> None:
        if settings is None:
            from resolve.config import get_settings

            settings = get_settings()

        self._mode = ResolutionMode.COMPILED if settings.compile else ResolutionMode.RUNTIME
        self._compiled: Mapping[Hashable, Any] = MappingProxyType(dict(settings.mappings))
        self._table_factory = table_factory
        self._table: RuntimeTable | None = None
        self._table_lock = threading.Lock()
        self._synthesizer = synthesizer or ImplementationSynthesizer()

        logger.info(
            f"Resolution registry ready in {self._mode} mode "
            f"with {len(self._compiled)} compiled mapping(s)"
        )

    @property
    def mode(self) -> ResolutionMode:
        return self._mode

    @property
    def compiled(self) -> bool:
        """Whether the registry is fixed in compiled mode."""
        return self._mode == ResolutionMode.COMPILED

    @property
    def compiled_mappings(self) -> Mapping[Hashable, Any]:
        """Read-only view of the mappings fixed at construction."""
        return self._compiled

    def resolve(self, logical: Hashable) -> Any:
        """Get the implementation currently bound to ``logical``."""
        if self._mode == ResolutionMode.RUNTIME:
            injected = self._ensure_table().get(logical, MISSING)
            if injected is not MISSING:
                return injected
        return self._compiled.get(logical, logical)

    def lookup(self, logical: Hashable) -> Binding:
        """Resolve ``logical`` and report which layer supplied the result."""
        if self._mode == ResolutionMode.RUNTIME:
            injected = self._ensure_table().get(logical, MISSING)
            if injected is not MISSING:
                return Binding(
                    logical=logical, implementation=injected, source=BindingSource.INJECTED
                )
        if logical in self._compiled:
            return Binding(
                logical=logical,
                implementation=self._compiled[logical],
                source=BindingSource.COMPILED,
            )
        return Binding(logical=logical, implementation=logical, source=BindingSource.DEFAULT)

    def inject(self, logical: Hashable, implementation: Any) -> Any:
        """
        Bind ``implementation`` in place of ``logical``.

        A mapping is taken as an implementation body: a new, uniquely named
        class is synthesized from it and bound instead.

        Args:
            logical: Identifier to rebind
            implementation: Replacement, or a mapping of attributes to build one from

        Returns:
            The implementation now bound to ``logical``

        Raises:
            CompiledModeError: If the registry is in compiled mode
        """
        self._ensure_runtime("inject")

        if isinstance(implementation, Mapping):
            implementation = self._synthesizer.synthesize(implementation)

        self._ensure_table().put(logical, implementation)
        logger.debug(f"Injected {implementation!r} for {logical!r}")
        return implementation

    def revert(self, logical: Hashable) -> None:
        """
        Restore ``logical`` to its compiled mapping or to itself.

        Reverting an identifier that has nothing injected is a no-op.

        Raises:
            CompiledModeError: If the registry is in compiled mode
        """
        self._ensure_runtime("revert")

        if self._ensure_table().delete(logical):
            logger.debug(f"Reverted {logical!r}")

    def revert_all(self) -> None:
        """
        Drop every injected binding in one step.

        Raises:
            CompiledModeError: If the registry is in compiled mode
        """
        self._ensure_runtime("revert_all")

        removed = self._ensure_table().clear()
        if removed:
            logger.debug(f"Reverted {removed} injected binding(s)")

    def is_injected(self, logical: Hashable) -> bool:
        """Whether ``logical`` currently has an injected binding."""
        if self._mode == ResolutionMode.COMPILED:
            return False
        return logical in self._ensure_table()

    def bindings(self) -> dict[Hashable, Any]:
        """Copy of the injected bindings."""
        if self._mode == ResolutionMode.COMPILED:
            return {}
        return self._ensure_table().snapshot()

    def _ensure_runtime(self, operation: str) -> None:
        if self._mode == ResolutionMode.COMPILED:
            logger.error(f"{operation}() called on a registry in compiled mode")
            raise CompiledModeError(
                f"Cannot {operation}: registry is in compiled mode",
                operation=operation,
            )

    def _ensure_table(self) -> RuntimeTable:
        table = self._table
        if table is not None:
            return table

        with self._table_lock:
            if self._table is None:
                self._table = self._table_factory()
                logger.debug("Created runtime mapping table")
            return self._table
