# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for objects whose class exposes an output attribute registry.

resolve_output_attributes() only needs the class-level
``registered_output_attributes()`` query, so any class providing it can be
projected, whether or not it inherits from MixinOutputAttributes.

Example:
    >>> class Legacy:
    ...     @classmethod
    ...     def registered_output_attributes(cls):
    ...         return {"id": "identifier"}
    ...
    ...     def output_attributes(self):
    ...         return resolve_output_attributes(self)
    ...
    ...     def identifier(self):
    ...         return 7
    >>> isinstance(Legacy(), ProtocolOutputAttributes)
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolOutputAttributes(Protocol):
    """Structural contract for output attribute projections.

    Methods:
        registered_output_attributes: Class-level key -> declared source view
        output_attributes: Instance-level key -> value projection
    """

    @classmethod
    def registered_output_attributes(cls) -> Mapping[str, object]:
        """Return the class's key -> declared source mapping, in order."""
        ...

    def output_attributes(self) -> dict[str, object]:
        """Return the key -> value projection for this instance."""
        ...


__all__ = ["ProtocolOutputAttributes"]
