"""Domain models for resolution results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .types import BindingSource


class Binding(BaseModel):
    """A logical identifier and the implementation it currently resolves to."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    logical: Any = Field(..., description="Identifier the caller asked for")
    implementation: Any = Field(..., description="Implementation it resolves to")
    source: BindingSource = Field(..., description="Which layer supplied the implementation")

    @property
    def is_default(self) -> bool:
        """Whether the identifier resolved to itself."""
        return self.source == BindingSource.DEFAULT
