# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output attributes enumerations."""

from output_attributes.enums.enum_output_source_kind import EnumOutputSourceKind

__all__: list[str] = [
    "EnumOutputSourceKind",
]
