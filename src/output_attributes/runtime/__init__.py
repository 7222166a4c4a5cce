# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output attributes runtime."""

from output_attributes.runtime.util_output_resolution import (
    resolve_output_attributes,
)

__all__: list[str] = [
    "resolve_output_attributes",
]
