"""Concurrent runtime mapping table."""

from __future__ import annotations

import threading
from collections.abc import Hashable
from typing import Any

# Bindings to None are legal, so absence needs its own marker
MISSING = object()


class RuntimeTable:
    """
    Read-optimized mapping of logical identifiers to injected implementations.

    Writers serialize on a lock, copy the current snapshot, modify the copy
    and publish it with a single reference assignment. Readers only ever
    dereference the published snapshot, so they take no lock and always see
    a complete table: either before or after any given write, never between.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}
        self._write_lock = threading.Lock()

    def get(self, logical: Hashable, default: Any = None) -> Any:
        """Get the implementation bound to ``logical``."""
        return self._entries.get(logical, default)

    def __contains__(self, logical: object) -> bool:
        return logical in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def put(self, logical: Hashable, implementation: Any) -> None:
        """Bind ``logical``, replacing any previous binding."""
        with self._write_lock:
            entries = dict(self._entries)
            entries[logical] = implementation
            self._entries = entries

    def delete(self, logical: Hashable) -> bool:
        """Remove the binding for ``logical``. Returns whether one existed."""
        with self._write_lock:
            if logical not in self._entries:
                return False
            entries = dict(self._entries)
            del entries[logical]
            self._entries = entries
            return True

    def clear(self) -> int:
        """Remove every binding at once. Returns how many were removed."""
        with self._write_lock:
            removed = len(self._entries)
            self._entries = {}
            return removed

    def snapshot(self) -> dict[Hashable, Any]:
        """Copy of the current bindings."""
        return dict(self._entries)
