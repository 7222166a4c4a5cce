# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output attribute resolution.

Computes the key -> value projection of one instance from its class's
registry. Every call recomputes every value; nothing is cached.

Resolution is all-or-nothing: the first failing entry aborts the call and
no partial projection is returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from output_attributes.models import ModelOutputSource

if TYPE_CHECKING:
    from output_attributes.protocols import ProtocolOutputAttributes

logger = logging.getLogger(__name__)


def resolve_output_attributes(
    instance: ProtocolOutputAttributes,
) -> dict[str, object]:
    """Resolve every registered output of ``instance``'s class.

    Args:
        instance: Object whose class exposes ``registered_output_attributes()``.

    Returns:
        Mapping of output key to computed value, in registration order.

    Raises:
        InvalidSourceError: If a registered source is neither a method name
            nor a callable.
        AttributeError: If a referenced method does not exist.
    """
    owner = type(instance)
    declared_sources = owner.registered_output_attributes()

    logger.debug(
        "Resolving output attributes",
        extra={
            "owner": owner.__qualname__,
            "key_count": len(declared_sources),
        },
    )

    resolved: dict[str, object] = {}
    for key, declared in declared_sources.items():
        source = ModelOutputSource.from_declared(
            key, declared, owner=owner.__qualname__
        )
        resolved[key] = source.resolve(instance)
    return resolved


__all__ = ["resolve_output_attributes"]
