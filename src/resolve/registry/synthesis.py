"""Anonymous implementation synthesis from attribute bodies."""

from __future__ import annotations

import inspect
import itertools
import logging
import threading
from collections.abc import Mapping
from typing import Any, ClassVar

from resolve.core.exceptions import SynthesisCollisionError

logger = logging.getLogger(__name__)

SYNTHESIZED_MODULE = "resolve.synthesized"


class ImplementationSynthesizer:
    """
    Builds uniquely named classes from a mapping of attributes.

    The body maps attribute names to values. Plain functions become static
    methods, so a synthesized stand-in is called exactly like the object it
    replaces:

        Port = synthesizer.synthesize({
            "open": lambda name, opts: "port",
            "close": lambda port: None,
        })
        Port.open("tty", {})

    Names come from a counter shared by every synthesizer in the process and
    are never reused.
    """

    PREFIX: ClassVar[str] = "Mock"

    _counter: ClassVar[itertools.count] = itertools.count(1)
    _last_issued: ClassVar[int] = 0
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def synthesize(
        self,
        body: Mapping[str, Any],
        *,
        bases: tuple[type, ...] = (),
    ) -> type:
        """Create a new class from ``body``."""
        name = self._next_name()
        namespace = {key: self._as_attribute(key, value) for key, value in body.items()}
        namespace.setdefault("__module__", SYNTHESIZED_MODULE)
        namespace.setdefault("__qualname__", name)

        implementation = type(name, bases, namespace)
        logger.debug(f"Synthesized {name} with attributes {sorted(body)}")
        return implementation

    def _next_name(self) -> str:
        with self._lock:
            number = next(self._counter)
            name = f"{self.PREFIX}{number}"
            # Every number up to the last one issued is taken
            if number <= ImplementationSynthesizer._last_issued:
                logger.error(f"Synthesized name {name} was already issued")
                raise SynthesisCollisionError(
                    f"Synthesized implementation name collision: {name}",
                    name=name,
                    details={"last_issued": ImplementationSynthesizer._last_issued},
                )
            ImplementationSynthesizer._last_issued = number
            return name

    @staticmethod
    def _as_attribute(key: str, value: Any) -> Any:
        # Dunders keep instance-method binding
        if key.startswith("__") and key.endswith("__"):
            return value
        if inspect.isfunction(value) or inspect.isbuiltin(value):
            return staticmethod(value)
        return value

    @classmethod
    def last_issued(cls) -> str | None:
        """Name of the most recent synthesis in this process, if any."""
        with cls._lock:
            number = ImplementationSynthesizer._last_issued
        return f"{cls.PREFIX}{number}" if number else None
