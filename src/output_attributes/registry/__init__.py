# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output attributes registry."""

from output_attributes.registry.registry_output_attributes import (
    RegistryOutputAttributes,
)

__all__: list[str] = [
    "RegistryOutputAttributes",
]
