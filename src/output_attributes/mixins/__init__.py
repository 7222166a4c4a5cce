# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Attributes Mixins.

Exports:
    MixinOutputAttributes: Per-class output registry and instance projection
    output_attribute: Decorator registering a method as an output attribute
"""

from output_attributes.mixins.mixin_output_attributes import (
    MixinOutputAttributes,
    output_attribute,
)

__all__: list[str] = [
    "MixinOutputAttributes",
    "output_attribute",
]
