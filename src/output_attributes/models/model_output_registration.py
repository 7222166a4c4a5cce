# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Registration Configuration Model.

Bundles the parameters of a single ``output(key, source=None)`` call so the
registry receives one validated value instead of loose arguments.

The source is deliberately typed as ``object``: registration never inspects
it. Unrecognized sources are rejected lazily with InvalidSourceError when
the entry is resolved.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelOutputRegistration(BaseModel):
    """Configuration model for one output attribute registration.

    Attributes:
        key: Output key under which the value appears in the projection.
        source: Method name or single-argument callable. None means the
            method named ``key``.

    Example:
        >>> registration = ModelOutputRegistration(key="description", source="describe")
        >>> registration.declared_source
        'describe'
        >>> ModelOutputRegistration(key="name").declared_source
        'name'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    key: str = Field(
        ...,
        min_length=1,
        description="Output key under which the value appears in the projection",
    )
    source: object | None = Field(
        default=None,
        description="Method name or callable taking the instance; defaults to key",
    )

    @property
    def declared_source(self) -> object:
        """Return the source to store, falling back to the key itself."""
        return self.key if self.source is None else self.source


__all__ = ["ModelOutputRegistration"]
