# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Attributes Error Classes.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── OutputAttributesError (base output attributes error)
        └── InvalidSourceError

All errors:
    - Extend ModelOnexError from omnibase_core
    - Use EnumCoreErrorCode for error classification
    - Carry the owning class name in structured context when known

Only InvalidSourceError is raised by the library itself. A missing target
method surfaces as the AttributeError raised by attribute lookup, and
exceptions raised inside a source propagate unchanged.
"""

from __future__ import annotations

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError


class OutputAttributesError(ModelOnexError):
    """Base error class for output attribute registration and resolution.

    Example:
        >>> raise OutputAttributesError("Projection failed", owner="Dog")
    """

    def __init__(
        self,
        message: str,
        error_code: EnumCoreErrorCode | None = None,
        owner: str | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize OutputAttributesError.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            owner: Name of the class whose registry was involved
            **extra_context: Additional context information
        """
        if owner is not None:
            extra_context["owner"] = owner

        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            **extra_context,
        )
        self.owner = owner


class InvalidSourceError(OutputAttributesError):
    """Raised when a registered source is neither a method name nor a callable.

    Registration never validates sources, so this surfaces the first time
    the offending entry is resolved.

    Attributes:
        key: The output key whose source could not be interpreted.
        source: The declared source value as registered.

    Example:
        >>> raise InvalidSourceError(key="price", source=42, owner="Item")
    """

    def __init__(
        self,
        key: str,
        source: object,
        owner: str | None = None,
        message: str | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize InvalidSourceError.

        Args:
            key: The output key whose source is unrecognized
            source: The declared source value
            owner: Name of the class that registered the key
            message: Override for the default message
            **extra_context: Additional context information
        """
        extra_context["key"] = key
        extra_context["source_repr"] = repr(source)
        extra_context["source_type"] = type(source).__name__

        super().__init__(
            message
            or f"Could not determine how to output {source!r} for key {key!r}",
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            owner=owner,
            **extra_context,
        )
        self.key = key
        self.source = source


__all__ = [
    "InvalidSourceError",
    "OutputAttributesError",
]
