# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Value Source Model.

Tagged variant describing how one output value is produced:

    METHOD   -> getattr(instance, method_name)()
    COMPUTED -> compute(instance)

Declared sources (whatever was passed at registration) are converted with
``ModelOutputSource.from_declared`` during resolution. Resolution then
dispatches on ``kind`` only.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from output_attributes.enums import EnumOutputSourceKind
from output_attributes.errors import InvalidSourceError


class ModelOutputSource(BaseModel):
    """Resolved value source for a single output key.

    Exactly one of ``method_name`` / ``compute`` is set, matching ``kind``.

    Example:
        >>> source = ModelOutputSource.from_declared("cost", "price")
        >>> source.kind
        <EnumOutputSourceKind.METHOD: 'method'>
        >>> source.resolve(item)  # same as item.price()
        'free'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kind: EnumOutputSourceKind = Field(
        ...,
        description="Which invocation form this source uses",
    )
    method_name: str | None = Field(
        default=None,
        description="Name of the zero-argument method (METHOD only)",
    )
    compute: Callable[[object], object] | None = Field(
        default=None,
        description="Callable invoked with the instance (COMPUTED only)",
    )

    @model_validator(mode="after")
    def _check_variant(self) -> ModelOutputSource:
        if self.kind is EnumOutputSourceKind.METHOD:
            if self.method_name is None or self.compute is not None:
                raise ValueError("METHOD sources require method_name and no compute")
        elif self.compute is None or self.method_name is not None:
            raise ValueError("COMPUTED sources require compute and no method_name")
        return self

    @classmethod
    def method(cls, method_name: str) -> ModelOutputSource:
        """Build a method-reference source."""
        return cls(kind=EnumOutputSourceKind.METHOD, method_name=method_name)

    @classmethod
    def computed(cls, compute: Callable[[object], object]) -> ModelOutputSource:
        """Build a computed source."""
        return cls(kind=EnumOutputSourceKind.COMPUTED, compute=compute)

    @classmethod
    def from_declared(
        cls,
        key: str,
        declared: object,
        owner: str | None = None,
    ) -> ModelOutputSource:
        """Convert a registered source into its tagged form.

        Args:
            key: Output key the source was registered under.
            declared: The registered source (method name or callable).
            owner: Name of the registering class, for error context.

        Returns:
            The METHOD or COMPUTED variant.

        Raises:
            InvalidSourceError: If ``declared`` is neither a non-empty str
                nor a callable.
        """
        if isinstance(declared, str) and declared:
            return cls.method(declared)
        if callable(declared):
            return cls.computed(declared)
        raise InvalidSourceError(key=key, source=declared, owner=owner)

    def resolve(self, instance: object) -> object:
        """Compute this source's value for ``instance``.

        AttributeError from a missing method and any exception raised by the
        method or callable propagate unchanged.
        """
        if self.kind is EnumOutputSourceKind.METHOD:
            return getattr(instance, str(self.method_name))()
        assert self.compute is not None
        return self.compute(instance)


__all__ = ["ModelOutputSource"]
