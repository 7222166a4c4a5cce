# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output attributes protocols."""

from output_attributes.protocols.protocol_output_attributes import (
    ProtocolOutputAttributes,
)

__all__: list[str] = [
    "ProtocolOutputAttributes",
]
