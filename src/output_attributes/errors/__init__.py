# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output Attributes Errors Module.

All errors extend ModelOnexError from omnibase_core so callers can handle
them alongside other ONEX errors (error_code, correlation_id, structured
context).

Exports:
    OutputAttributesError: Base error class
    InvalidSourceError: Registered source is neither a method name nor a callable
"""

from output_attributes.errors.error_output_attributes import (
    InvalidSourceError,
    OutputAttributesError,
)

__all__: list[str] = [
    "InvalidSourceError",
    "OutputAttributesError",
]
